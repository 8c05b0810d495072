"""Core services for meshvet."""

from meshvet.core.services.mesh_resolver import MeshResolver
from meshvet.core.services.policy_evaluator import PolicyEvaluator

__all__ = ["MeshResolver", "PolicyEvaluator"]
