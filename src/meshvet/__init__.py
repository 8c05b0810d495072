"""meshvet - Istio sidecar mesh membership resolution for Kubernetes."""

from meshvet.core.exemptions import exempted_names, is_exempted
from meshvet.core.services import MeshResolver, PolicyEvaluator

__version__ = "0.1.0"
__all__ = ["MeshResolver", "PolicyEvaluator", "exempted_names", "is_exempted"]
