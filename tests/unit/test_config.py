"""Unit tests for configuration loading."""

import logging

import pytest

from meshvet.utils.config import CONFIG_ENV_VAR, MeshVetConfig, load_config
from meshvet.utils.logging import setup_logging


class TestLoadConfig:
    """Test load_config."""

    def test_missing_default_file_gives_defaults(self, monkeypatch, tmp_path):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))

        assert load_config() == MeshVetConfig()

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_reads_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "kubeconfig: /etc/kube/config\n"
            "control_plane_namespace: mesh-system\n"
            "extra_exempted_namespaces: [monitoring]\n"
            "log_level: debug\n"
        )

        config = load_config(path)

        assert config.kubeconfig == "/etc/kube/config"
        assert config.log_level == "debug"
        assert config.conventions().control_plane_namespace == "mesh-system"
        exemptions = config.exemptions()
        assert exemptions.is_exempted("mesh-system")
        assert exemptions.is_exempted("monitoring")
        assert exemptions.is_exempted("kube-system")

    def test_env_var(self, monkeypatch, tmp_path):
        path = tmp_path / "env.yaml"
        path.write_text("log_level: INFO\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_config().log_level == "INFO"

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("colour: blue\n")

        with pytest.raises(ValueError, match="colour"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: [\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_bad_exempted_list(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("extra_exempted_namespaces: monitoring\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_unknown_log_level(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("log_level: loud\n")

        with pytest.raises(ValueError, match="Unknown log level: loud"):
            load_config(path)

    @pytest.mark.parametrize("value", ["", "~", "[istio-system]", "42"])
    def test_bad_control_plane_namespace(self, tmp_path, value):
        """A null, empty or non-string control plane namespace is rejected."""
        path = tmp_path / "config.yaml"
        path.write_text(f"control_plane_namespace: {value}\n")

        with pytest.raises(ValueError, match="control_plane_namespace"):
            load_config(path)


class TestSetupLogging:
    """Test setup_logging."""

    def test_level_by_name(self):
        setup_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            setup_logging("chatty")
