"""Istio sidecar injection conventions, detection and policy sources."""
