"""Shared fixtures and in-memory fakes."""

import pytest

from meshvet.core.interfaces import ClusterClient, PolicySource
from meshvet.core.models import Container, Endpoints, MembershipPolicy, Namespace, Pod, ProviderError, Service


class FakeClusterClient(ClusterClient):
    """In-memory cluster snapshot."""

    def __init__(self, namespaces=None, pods=None, services=None, endpoints=None, failing=None):
        self.namespaces = [Namespace(name=n) for n in namespaces or []]
        self.pods = pods or {}
        self.services = services or {}
        self.endpoints = endpoints or {}
        # (resource, namespace) pairs whose listing fails; namespace None fails namespace listing
        self.failing = set(failing or [])
        self.calls: list[tuple[str, str | None]] = []

    def _check(self, resource, namespace=None):
        self.calls.append((resource, namespace))
        if (resource, namespace) in self.failing:
            raise ProviderError(f"{resource} unavailable", resource=resource, namespace=namespace)

    def list_namespaces(self):
        self._check("namespaces")
        return list(self.namespaces)

    def list_pods(self, namespace):
        self._check("pods", namespace)
        return list(self.pods.get(namespace, []))

    def list_services(self, namespace):
        self._check("services", namespace)
        return [Service(name=n, namespace=namespace) for n in self.services.get(namespace, [])]

    def list_endpoints(self, namespace):
        self._check("endpoints", namespace)
        return [Endpoints(name=n, namespace=namespace) for n in self.endpoints.get(namespace, [])]


class FakePolicySource(PolicySource):
    """Serve a policy or raise a preset error."""

    def __init__(self, policy=None, error=None):
        self.policy = policy or MembershipPolicy()
        self.error = error

    def get_membership_policy(self):
        if self.error is not None:
            raise self.error
        return self.policy


def make_pod(name, namespace="team-a", annotations=None, containers=()):
    """Helper to create a Pod."""
    return Pod(
        name=name,
        namespace=namespace,
        annotations=annotations or {},
        containers=[Container(name=c, image=f"{c}:1.0") for c in containers],
    )


@pytest.fixture
def injected_pod():
    return make_pod(
        "p1",
        annotations={"sidecar.istio.io/status": "x"},
        containers=["istio-proxy", "app"],
    )
