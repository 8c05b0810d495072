"""Reserved Istio names and protocol conventions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IstioConventions:
    """Names Istio reserves for its control plane and sidecars."""

    control_plane_namespace: str = "istio-system"
    proxy_container_name: str = "istio-proxy"
    injection_status_annotation: str = "sidecar.istio.io/status"

    # The API server's own service, present in every cluster
    internal_service_name: str = "kubernetes"

    injector_config_map: str = "istio-inject"
    injector_config_map_key: str = "config"


ISTIO_DEFAULTS = IstioConventions()

# Protocols Istio recognises from a service port name
SUPPORTED_PORT_PROTOCOLS: tuple[str, ...] = ("http", "http2", "grpc", "mongo", "redis", "tcp")


def service_port_prefixed(port_name: str) -> bool:
    """Check if a service port name is prefixed with an Istio supported protocol.

    A name matches either exactly (``http``) or as ``<protocol>-<suffix>``
    (``http-web``).
    """
    return any(
        port_name == protocol or port_name.startswith(f"{protocol}-") for protocol in SUPPORTED_PORT_PROTOCOLS
    )
