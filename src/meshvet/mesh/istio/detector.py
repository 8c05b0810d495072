"""Istio sidecar injection detector."""

from ...core.models import Pod
from .conventions import ISTIO_DEFAULTS, IstioConventions


class SidecarDetector:
    """Detect whether the Istio sidecar proxy was actually injected into a pod."""

    def __init__(self, conventions: IstioConventions = ISTIO_DEFAULTS):
        self.conventions = conventions

    def is_injected(self, pod: Pod) -> bool:
        """
        Check if the sidecar is injected in a pod.

        The injector stamps a status annotation and adds the proxy container.
        Both must be present; either one alone means the pod was only
        eligible, or was patched by hand.
        """
        if not pod.has_annotation(self.conventions.injection_status_annotation):
            return False
        return pod.has_container(self.conventions.proxy_container_name)
