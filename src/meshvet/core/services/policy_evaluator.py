"""Evaluate sidecar injection policy against cluster namespaces."""

import logging
from collections.abc import Iterable

from meshvet.core.exemptions import DEFAULT_EXEMPTIONS, ExemptionSet
from meshvet.core.models import MembershipPolicy, Namespace

logger = logging.getLogger(__name__)


class PolicyEvaluator:
    """Decide which namespaces are in the mesh under a membership policy."""

    def __init__(self, exemptions: ExemptionSet = DEFAULT_EXEMPTIONS):
        self.exemptions = exemptions

    def resolve_namespaces(self, namespaces: Iterable[Namespace], policy: MembershipPolicy) -> list[Namespace]:
        """
        Filter namespaces down to those in the mesh.

        Rules, in order:
        1. Exempted namespaces are never in the mesh.
        2. Namespaces in the exclude list are dropped.
        3. With a named include list, namespaces not named are dropped.

        Args:
            namespaces: All namespaces of the cluster
            policy: Membership policy of the sidecar injector

        Returns:
            In-mesh namespaces, in input order
        """
        return [ns for ns in namespaces if self.is_in_mesh(ns.name, policy)]

    def is_in_mesh(self, namespace: str, policy: MembershipPolicy) -> bool:
        """Check a single namespace name against the policy."""
        if self.exemptions.is_exempted(namespace):
            logger.debug(f"Namespace {namespace} is exempted from injection")
            return False

        if policy.excludes(namespace):
            logger.debug(f"Namespace {namespace} is excluded by policy")
            return False

        if not policy.include.admits(namespace):
            logger.debug(f"Namespace {namespace} is not included by policy")
            return False

        return True
