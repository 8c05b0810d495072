"""Kubernetes client implementation."""

import logging
from typing import Any

from kubernetes import client, config
from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError

from meshvet.core.interfaces import ClusterClient
from meshvet.core.models import Container, Endpoints, Namespace, Pod, ProviderError, Service, ServicePort

logger = logging.getLogger(__name__)

# API errors and transport failures (unreachable server, timeouts)
API_ERRORS = (ApiException, HTTPError)


class K8sClient(ClusterClient):
    """Kubernetes client implementation."""

    def __init__(self, kubeconfig_path: str | None = None):
        """Initialize Kubernetes client."""
        self.kubeconfig_path = kubeconfig_path
        self._api_client: client.ApiClient | None = None
        self._core_v1: client.CoreV1Api | None = None

    def _ensure_connected(self) -> client.CoreV1Api:
        """Ensure client is connected."""
        if self._api_client is None:
            try:
                if self.kubeconfig_path:
                    config.load_kube_config(config_file=self.kubeconfig_path)
                else:
                    # Try in-cluster config first, then default kubeconfig
                    try:
                        config.load_incluster_config()
                    except config.ConfigException:
                        config.load_kube_config()

                self._api_client = client.ApiClient()
                self._core_v1 = client.CoreV1Api(self._api_client)

            except Exception as e:
                raise ProviderError(f"Failed to connect to Kubernetes cluster: {e}") from e

        assert self._core_v1 is not None
        return self._core_v1

    def is_connected(self) -> bool:
        """Check if client is connected to cluster."""
        return self._api_client is not None

    def list_namespaces(self) -> list[Namespace]:
        """Get all namespaces in the cluster."""
        core_v1 = self._ensure_connected()

        try:
            response = core_v1.list_namespace()
        except API_ERRORS as e:
            logger.error(f"Failed to retrieve namespaces: {e}")
            raise ProviderError(f"Failed to get namespaces: {e}", resource="namespaces") from e

        return [
            Namespace(
                name=ns.metadata.name,
                labels=ns.metadata.labels or {},
                annotations=ns.metadata.annotations or {},
            )
            for ns in response.items
        ]

    def list_pods(self, namespace: str) -> list[Pod]:
        """Get all pods in a namespace."""
        response = self._list_namespaced("pods", namespace)
        return [self._convert_pod(item) for item in response.items]

    def list_services(self, namespace: str) -> list[Service]:
        """Get all services in a namespace."""
        response = self._list_namespaced("services", namespace)
        return [self._convert_service(item) for item in response.items]

    def list_endpoints(self, namespace: str) -> list[Endpoints]:
        """Get all endpoints objects in a namespace."""
        response = self._list_namespaced("endpoints", namespace)
        return [self._convert_endpoints(item) for item in response.items]

    def read_config_map(self, name: str, namespace: str) -> dict[str, str] | None:
        """
        Read the data of a ConfigMap.

        Returns:
            The ConfigMap data, or None if the ConfigMap does not exist.
        """
        core_v1 = self._ensure_connected()

        try:
            config_map = core_v1.read_namespaced_config_map(name=name, namespace=namespace)
        except API_ERRORS as e:
            if isinstance(e, ApiException) and e.status == 404:
                return None
            raise ProviderError(
                f"Failed to read configmap {namespace}/{name}: {e}", resource="configmaps", namespace=namespace
            ) from e

        return config_map.data or {}

    def _list_namespaced(self, resource: str, namespace: str) -> Any:
        """List a namespaced core resource."""
        core_v1 = self._ensure_connected()
        list_calls = {
            "pods": core_v1.list_namespaced_pod,
            "services": core_v1.list_namespaced_service,
            "endpoints": core_v1.list_namespaced_endpoints,
        }

        try:
            return list_calls[resource](namespace=namespace)
        except API_ERRORS as e:
            logger.error(f"Failed to retrieve {resource} for namespace: {namespace} error: {e}")
            raise ProviderError(
                f"Failed to get {resource} in namespace {namespace}: {e}", resource=resource, namespace=namespace
            ) from e

    def _convert_pod(self, pod: Any) -> Pod:
        """Convert a V1Pod to a Pod."""
        spec_containers = (pod.spec.containers if pod.spec else None) or []
        return Pod(
            name=pod.metadata.name,
            namespace=pod.metadata.namespace,
            annotations=pod.metadata.annotations or {},
            labels=pod.metadata.labels or {},
            containers=[Container(name=c.name, image=c.image or "") for c in spec_containers],
        )

    def _convert_service(self, service: Any) -> Service:
        """Convert a V1Service to a Service."""
        spec_ports = (service.spec.ports if service.spec else None) or []
        return Service(
            name=service.metadata.name,
            namespace=service.metadata.namespace,
            ports=[ServicePort(port=p.port, name=p.name or "", protocol=p.protocol or "TCP") for p in spec_ports],
        )

    def _convert_endpoints(self, endpoints: Any) -> Endpoints:
        """Convert a V1Endpoints to an Endpoints."""
        addresses = []
        for subset in endpoints.subsets or []:
            addresses.extend(address.ip for address in subset.addresses or [])

        return Endpoints(
            name=endpoints.metadata.name,
            namespace=endpoints.metadata.namespace,
            addresses=addresses,
        )

    def close(self) -> None:
        """Close the client connection."""
        if self._api_client is not None:
            self._api_client.close()
        self._api_client = None
        self._core_v1 = None
