"""Unit tests for sidecar injection detection."""

from conftest import make_pod

from meshvet.mesh.istio.conventions import IstioConventions
from meshvet.mesh.istio.detector import SidecarDetector

STATUS = {"sidecar.istio.io/status": "{}"}


class TestSidecarDetector:
    """Test SidecarDetector."""

    def setup_method(self):
        self.detector = SidecarDetector()

    def test_annotation_and_proxy_container(self, injected_pod):
        """Both markers present means injected."""
        assert self.detector.is_injected(injected_pod) is True

    def test_annotation_without_proxy(self):
        pod = make_pod("p", annotations=STATUS, containers=["app"])
        assert self.detector.is_injected(pod) is False

    def test_proxy_without_annotation(self):
        pod = make_pod("p", containers=["istio-proxy", "app"])
        assert self.detector.is_injected(pod) is False

    def test_empty_pod(self):
        """Missing fields yield false, not an error."""
        assert self.detector.is_injected(make_pod("p")) is False

    def test_annotation_value_irrelevant(self):
        pod = make_pod("p", annotations={"sidecar.istio.io/status": ""}, containers=["istio-proxy"])
        assert self.detector.is_injected(pod) is True

    def test_custom_conventions(self):
        """Reserved names come from the injected conventions."""
        detector = SidecarDetector(
            IstioConventions(proxy_container_name="envoy", injection_status_annotation="mesh/status")
        )

        assert detector.is_injected(make_pod("p", annotations={"mesh/status": "ok"}, containers=["envoy"])) is True
        assert detector.is_injected(make_pod("p", annotations=STATUS, containers=["istio-proxy"])) is False
