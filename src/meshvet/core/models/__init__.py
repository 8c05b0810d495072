"""Core domain models for meshvet."""

from meshvet.core.models.cluster import Container, Endpoints, Namespace, Pod, Service, ServicePort
from meshvet.core.models.errors import MeshVetError, PolicyError, PolicySourceAbsent, ProviderError
from meshvet.core.models.notes import Note, NoteLevel
from meshvet.core.models.policy import NAMESPACE_ALL, InclusionMode, MembershipPolicy, NamespaceInclusion

__all__ = [
    "NAMESPACE_ALL",
    "Container",
    "Endpoints",
    "InclusionMode",
    "MembershipPolicy",
    "MeshVetError",
    "Namespace",
    "NamespaceInclusion",
    "Note",
    "NoteLevel",
    "Pod",
    "PolicyError",
    "PolicySourceAbsent",
    "ProviderError",
    "Service",
    "ServicePort",
]
