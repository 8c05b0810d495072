"""Error types raised while resolving mesh membership."""


class MeshVetError(Exception):
    """Base class for meshvet errors."""


class ProviderError(MeshVetError):
    """Listing cluster resources failed."""

    def __init__(self, message: str, resource: str | None = None, namespace: str | None = None):
        super().__init__(message)
        self.resource = resource
        self.namespace = namespace


class PolicyError(MeshVetError):
    """The injection policy document is malformed or incomplete."""


class PolicySourceAbsent(PolicyError):
    """The injection policy document does not exist.

    Callers usually treat this as "sidecar injection is not configured yet"
    rather than as a hard failure.
    """
