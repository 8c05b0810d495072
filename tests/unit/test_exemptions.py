"""Unit tests for namespace exemptions."""

import pytest

from meshvet.core.exemptions import DEFAULT_EXEMPTIONS, ExemptionSet, exempted_names, is_exempted


class TestExemptionSet:
    """Test the exemption table."""

    @pytest.mark.parametrize("namespace", ["kube-system", "kube-public", "istio-system"])
    def test_default_namespaces_exempted(self, namespace):
        assert is_exempted(namespace) is True

    @pytest.mark.parametrize("namespace", ["default", "team-a", "kube-node-lease", ""])
    def test_other_namespaces_not_exempted(self, namespace):
        assert is_exempted(namespace) is False

    def test_exempted_names(self):
        assert exempted_names() == frozenset({"kube-system", "kube-public", "istio-system"})

    def test_with_names_does_not_mutate_defaults(self):
        """Extending the table returns a new table."""
        extended = DEFAULT_EXEMPTIONS.with_names(["monitoring"])

        assert extended.is_exempted("monitoring") is True
        assert DEFAULT_EXEMPTIONS.is_exempted("monitoring") is False

    def test_substitute_table(self):
        """An alternate table replaces the defaults entirely."""
        exemptions = ExemptionSet(frozenset({"ops"}))

        assert exemptions.is_exempted("ops") is True
        assert exemptions.is_exempted("kube-system") is False
