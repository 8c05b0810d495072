"""Unit tests for Istio conventions."""

import pytest

from meshvet.mesh.istio.conventions import ISTIO_DEFAULTS, service_port_prefixed


def test_defaults():
    assert ISTIO_DEFAULTS.control_plane_namespace == "istio-system"
    assert ISTIO_DEFAULTS.proxy_container_name == "istio-proxy"
    assert ISTIO_DEFAULTS.injection_status_annotation == "sidecar.istio.io/status"
    assert ISTIO_DEFAULTS.internal_service_name == "kubernetes"


@pytest.mark.parametrize("name", ["http", "http-web", "http2", "grpc-api", "mongo", "redis-cache", "tcp-db"])
def test_prefixed_port_names(name):
    assert service_port_prefixed(name) is True


@pytest.mark.parametrize("name", ["", "web", "httpx", "grpcweb", "udp-dns", "HTTP"])
def test_unprefixed_port_names(name):
    assert service_port_prefixed(name) is False
