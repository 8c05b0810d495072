"""Sidecar injection membership policy models."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

# Kubernetes encodes "all namespaces" as the empty string.
NAMESPACE_ALL = ""


class InclusionMode(Enum):
    """How the include list constrains namespaces."""

    UNCONSTRAINED = "unconstrained"  # Include list empty or absent
    ALL_NAMESPACES = "all"  # Include list carried the all-namespaces sentinel
    NAMED = "named"


@dataclass(frozen=True)
class NamespaceInclusion:
    """Include side of a membership policy."""

    mode: InclusionMode = InclusionMode.UNCONSTRAINED
    names: frozenset[str] = frozenset()

    @classmethod
    def from_names(cls, names: Iterable[str] | None) -> "NamespaceInclusion":
        """Decode a raw include list, turning the sentinel into a mode."""
        raw = list(names or [])
        if not raw:
            return cls()
        if NAMESPACE_ALL in raw:
            return cls(mode=InclusionMode.ALL_NAMESPACES)
        return cls(mode=InclusionMode.NAMED, names=frozenset(raw))

    def admits(self, namespace: str) -> bool:
        """Check if the include side lets a namespace through."""
        if self.mode == InclusionMode.NAMED:
            return namespace in self.names
        return True

    def is_constrained(self) -> bool:
        return self.mode == InclusionMode.NAMED


@dataclass(frozen=True)
class MembershipPolicy:
    """Include/exclude namespace policy of the sidecar injector."""

    include: NamespaceInclusion = field(default_factory=NamespaceInclusion)
    exclude_namespaces: frozenset[str] = frozenset()

    # Informational injector settings read from the same document
    injection_policy: str | None = None
    initializer_name: str | None = None

    @classmethod
    def from_lists(
        cls,
        include_namespaces: Iterable[str] | None = None,
        exclude_namespaces: Iterable[str] | None = None,
        injection_policy: str | None = None,
        initializer_name: str | None = None,
    ) -> "MembershipPolicy":
        """Build a policy from raw include/exclude lists."""
        return cls(
            include=NamespaceInclusion.from_names(include_namespaces),
            exclude_namespaces=frozenset(exclude_namespaces or ()),
            injection_policy=injection_policy,
            initializer_name=initializer_name,
        )

    def excludes(self, namespace: str) -> bool:
        """Check if a namespace is named in the exclude list."""
        return namespace in self.exclude_namespaces
