"""Resolve which cluster resources are in the mesh."""

import logging
from collections.abc import Callable
from typing import TypeVar

from meshvet.core.interfaces import ClusterClient, PolicySource
from meshvet.core.models import Endpoints, Namespace, Pod, Service
from meshvet.core.services.policy_evaluator import PolicyEvaluator
from meshvet.mesh.istio.conventions import ISTIO_DEFAULTS, IstioConventions
from meshvet.mesh.istio.detector import SidecarDetector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MeshResolver:
    """
    Resolve mesh membership of namespaces, pods, services and endpoints.

    Every call re-reads the cluster and the policy; nothing is cached between
    calls. Any listing or policy failure propagates, so a caller never sees a
    partial membership list.
    """

    def __init__(
        self,
        cluster_client: ClusterClient,
        policy_source: PolicySource,
        evaluator: PolicyEvaluator | None = None,
        detector: SidecarDetector | None = None,
        conventions: IstioConventions = ISTIO_DEFAULTS,
    ):
        self.cluster_client = cluster_client
        self.policy_source = policy_source
        self.evaluator = evaluator or PolicyEvaluator()
        self.detector = detector or SidecarDetector(conventions)
        self.conventions = conventions

    def in_mesh_namespaces(self) -> list[Namespace]:
        """Get namespaces in the mesh."""
        namespaces = self.cluster_client.list_namespaces()
        policy = self.policy_source.get_membership_policy()
        in_mesh = self.evaluator.resolve_namespaces(namespaces, policy)
        logger.debug(f"{len(in_mesh)} of {len(namespaces)} namespaces are in the mesh")
        return in_mesh

    def in_mesh_pods(self) -> list[Pod]:
        """Get pods in the mesh: injected pods of in-mesh namespaces."""
        return self._collect(self.cluster_client.list_pods, self.detector.is_injected)

    def in_mesh_services(self) -> list[Service]:
        """Get services of in-mesh namespaces, except the API server service."""
        return self._collect(self.cluster_client.list_services, self._is_user_resource)

    def in_mesh_endpoints(self) -> list[Endpoints]:
        """Get endpoints of in-mesh namespaces, except the API server endpoints."""
        return self._collect(self.cluster_client.list_endpoints, self._is_user_resource)

    def _collect(self, list_resources: Callable[[str], list[T]], keep: Callable[[T], bool]) -> list[T]:
        """List a resource kind across in-mesh namespaces, stopping at the first failure."""
        resources: list[T] = []
        for namespace in self.in_mesh_namespaces():
            resources.extend(item for item in list_resources(namespace.name) if keep(item))
        return resources

    def _is_user_resource(self, resource: Service | Endpoints) -> bool:
        return resource.name != self.conventions.internal_service_name
