"""Core domain models and interfaces for meshvet."""

from meshvet.core.interfaces import ClusterClient, PolicySource
from meshvet.core.models import MembershipPolicy, Namespace, Pod

__all__ = ["ClusterClient", "MembershipPolicy", "Namespace", "Pod", "PolicySource"]
