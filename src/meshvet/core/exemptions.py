"""Namespaces exempted from automatic sidecar injection."""

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_EXEMPTED_NAMESPACES: frozenset[str] = frozenset(
    {
        "kube-system",
        "kube-public",
        "istio-system",
    }
)


@dataclass(frozen=True)
class ExemptionSet:
    """Fixed table of namespaces that are never part of the mesh."""

    names: frozenset[str] = DEFAULT_EXEMPTED_NAMESPACES

    def is_exempted(self, namespace: str) -> bool:
        """Check if a namespace is exempted from sidecar injection."""
        return namespace in self.names

    def exempted_names(self) -> frozenset[str]:
        """Return the exempted namespace names."""
        return self.names

    def with_names(self, extra: Iterable[str]) -> "ExemptionSet":
        """Return a new table extended with extra namespace names."""
        return ExemptionSet(self.names | frozenset(extra))


DEFAULT_EXEMPTIONS = ExemptionSet()


def is_exempted(namespace: str) -> bool:
    """Check a namespace against the default exemption table."""
    return DEFAULT_EXEMPTIONS.is_exempted(namespace)


def exempted_names() -> frozenset[str]:
    """Return the default exempted namespaces (kube-system, kube-public, istio-system)."""
    return DEFAULT_EXEMPTIONS.exempted_names()
