"""Configuration loading."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from meshvet.core.exemptions import DEFAULT_EXEMPTIONS, ExemptionSet
from meshvet.mesh.istio.conventions import ISTIO_DEFAULTS, IstioConventions

CONFIG_ENV_VAR = "MESHVET_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/meshvet/config.yaml")


@dataclass
class MeshVetConfig:
    """User configuration for meshvet."""

    kubeconfig: str | None = None
    control_plane_namespace: str = ISTIO_DEFAULTS.control_plane_namespace
    extra_exempted_namespaces: list[str] = field(default_factory=list)
    log_level: str = "WARNING"
    log_file: str | None = None

    def exemptions(self) -> ExemptionSet:
        """Build the exemption table, including the configured control plane namespace."""
        return DEFAULT_EXEMPTIONS.with_names([self.control_plane_namespace, *self.extra_exempted_namespaces])

    def conventions(self) -> IstioConventions:
        """Build Istio conventions for the configured control plane namespace."""
        return IstioConventions(control_plane_namespace=self.control_plane_namespace)


def load_config(path: str | Path | None = None) -> MeshVetConfig:
    """
    Load configuration from a YAML file.

    Lookup order: explicit path, $MESHVET_CONFIG, ~/.config/meshvet/config.yaml.
    A missing default file yields the defaults; a missing explicit file is an error.

    Raises:
        FileNotFoundError: An explicitly requested file does not exist.
        ValueError: The file is not a valid configuration.
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit).expanduser() if explicit else DEFAULT_CONFIG_PATH.expanduser()

    if not config_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return MeshVetConfig()

    try:
        data = yaml.safe_load(config_path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    return _build_config(data, config_path)


def _build_config(data: dict[str, Any], source: Path) -> MeshVetConfig:
    known = {"kubeconfig", "control_plane_namespace", "extra_exempted_namespaces", "log_level", "log_file"}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys in {source}: {', '.join(sorted(unknown))}")

    extra = data.get("extra_exempted_namespaces") or []
    if not isinstance(extra, list):
        raise ValueError("extra_exempted_namespaces must be a list")

    control_plane_namespace = data.get("control_plane_namespace", ISTIO_DEFAULTS.control_plane_namespace)
    if not isinstance(control_plane_namespace, str) or not control_plane_namespace:
        raise ValueError("control_plane_namespace must be a non-empty namespace name")

    log_level = str(data.get("log_level", "WARNING"))
    if not isinstance(logging.getLevelName(log_level.upper()), int):
        raise ValueError(f"Unknown log level: {log_level}")

    return MeshVetConfig(
        kubeconfig=data.get("kubeconfig"),
        control_plane_namespace=control_plane_namespace,
        extra_exempted_namespaces=[str(ns) for ns in extra],
        log_level=log_level,
        log_file=data.get("log_file"),
    )
