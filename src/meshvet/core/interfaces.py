"""Core interfaces for meshvet."""

from abc import ABC, abstractmethod

from .models import Endpoints, MembershipPolicy, Namespace, Pod, Service


class ClusterClient(ABC):
    """Interface for Kubernetes cluster resource providers.

    Every listing method raises ProviderError when the cluster cannot be read.
    """

    @abstractmethod
    def list_namespaces(self) -> list[Namespace]:
        """Get all namespaces in the cluster."""
        pass

    @abstractmethod
    def list_pods(self, namespace: str) -> list[Pod]:
        """Get all pods in a namespace."""
        pass

    @abstractmethod
    def list_services(self, namespace: str) -> list[Service]:
        """Get all services in a namespace."""
        pass

    @abstractmethod
    def list_endpoints(self, namespace: str) -> list[Endpoints]:
        """Get all endpoints objects in a namespace."""
        pass


class PolicySource(ABC):
    """Interface for sidecar injection policy sources."""

    @abstractmethod
    def get_membership_policy(self) -> MembershipPolicy:
        """
        Get the current membership policy.

        Raises:
            PolicySourceAbsent: No policy document is configured.
            PolicyError: The policy document is malformed.
        """
        pass
