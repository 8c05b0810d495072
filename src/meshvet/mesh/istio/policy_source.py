"""Istio sidecar injector policy sources."""

import logging
from pathlib import Path
from typing import Any

import yaml

from ...core.interfaces import PolicySource
from ...core.models import MembershipPolicy, Note, NoteLevel, PolicyError, PolicySourceAbsent, ProviderError
from ...k8s.client import K8sClient
from .conventions import ISTIO_DEFAULTS, IstioConventions

logger = logging.getLogger(__name__)

INITIALIZER_DISABLED_SUMMARY = (
    "Istio initializer is not configured. Enable initializer and automatic sidecar injection to use "
)


def parse_injector_config(document: str) -> MembershipPolicy:
    """
    Parse the injector configuration document into a membership policy.

    The document is the YAML stored under the injector ConfigMap key, e.g.::

        policy: enabled
        namespaces: [team-a]
        excludeNamespaces: [legacy]

    Raises:
        PolicyError: The document is not valid YAML or has wrongly typed fields.
    """
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse yaml initializer config: {e}")
        raise PolicyError(f"Failed to parse injector config: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PolicyError(f"Injector config must be a mapping, got {type(data).__name__}")

    return MembershipPolicy.from_lists(
        include_namespaces=_namespace_list(data, "namespaces"),
        exclude_namespaces=_namespace_list(data, "excludeNamespaces"),
        injection_policy=_optional_str(data, "policy"),
        initializer_name=_optional_str(data, "initializerName"),
    )


def _namespace_list(data: dict[str, Any], key: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise PolicyError(f"Injector config field '{key}' must be a list of namespace names")
    return value


def _optional_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else str(value)


class ConfigMapPolicySource(PolicySource):
    """Read the membership policy from the injector ConfigMap."""

    def __init__(self, k8s_client: K8sClient, conventions: IstioConventions = ISTIO_DEFAULTS):
        self.k8s_client = k8s_client
        self.conventions = conventions

    def get_membership_policy(self) -> MembershipPolicy:
        """Fetch and parse the injector ConfigMap."""
        name = self.conventions.injector_config_map
        namespace = self.conventions.control_plane_namespace
        key = self.conventions.injector_config_map_key

        try:
            data = self.k8s_client.read_config_map(name, namespace)
        except ProviderError as e:
            logger.debug(f"Failed to retrieve configmap: {name} error: {e}")
            raise PolicyError(f"Failed to retrieve configmap {namespace}/{name}: {e}") from e

        if data is None:
            raise PolicySourceAbsent(f'configmaps "{name}" not found in namespace {namespace}')

        if key not in data:
            message = f"Missing configuration map key: {key} in configmap: {name}"
            logger.error(message)
            raise PolicyError(message)

        return parse_injector_config(data[key])


class StaticPolicySource(PolicySource):
    """Serve a fixed membership policy."""

    def __init__(self, policy: MembershipPolicy):
        self.policy = policy

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticPolicySource":
        """Load an injector config document from a local file."""
        try:
            document = Path(path).read_text()
        except FileNotFoundError as e:
            raise PolicySourceAbsent(f"Policy file not found: {path}") from e
        return cls(parse_injector_config(document))

    def get_membership_policy(self) -> MembershipPolicy:
        return self.policy


def initializer_disabled_note(error: Exception, vetter_id: str, vetter_type: str) -> Note | None:
    """
    Build an INFO note when the injector is not configured.

    Returns None for any error other than PolicySourceAbsent, which callers
    should keep treating as a failure.
    """
    if not isinstance(error, PolicySourceAbsent):
        return None
    return Note(
        type=vetter_type,
        summary=f'{INITIALIZER_DISABLED_SUMMARY}"{vetter_id}" vetter.',
        level=NoteLevel.INFO,
    )
