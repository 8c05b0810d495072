"""Cluster resource models."""

from dataclasses import dataclass, field


@dataclass
class Namespace:
    """Represents a Kubernetes namespace."""

    name: str
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)

    def has_label(self, key: str, value: str | None = None) -> bool:
        """Check if namespace has a specific label."""
        if value is None:
            return key in self.labels
        return self.labels.get(key) == value


@dataclass
class Container:
    """A container entry of a pod spec."""

    name: str
    image: str = ""


@dataclass
class Pod:
    """Represents a Kubernetes pod."""

    name: str
    namespace: str
    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    containers: list[Container] = field(default_factory=list)

    def get_full_name(self) -> str:
        """Get fully qualified pod name."""
        return f"{self.namespace}/{self.name}"

    def has_annotation(self, key: str) -> bool:
        """Check if pod carries an annotation key."""
        return key in self.annotations

    def has_container(self, name: str) -> bool:
        """Check if pod spec declares a container with this name."""
        return any(container.name == name for container in self.containers)


@dataclass
class ServicePort:
    """A port exposed by a service."""

    port: int
    name: str = ""
    protocol: str = "TCP"


@dataclass
class Service:
    """Represents a Kubernetes service."""

    name: str
    namespace: str
    ports: list[ServicePort] = field(default_factory=list)

    def get_full_name(self) -> str:
        """Get fully qualified service name."""
        return f"{self.namespace}/{self.name}"


@dataclass
class Endpoints:
    """Represents a Kubernetes endpoints object."""

    name: str
    namespace: str
    addresses: list[str] = field(default_factory=list)

    def get_full_name(self) -> str:
        """Get fully qualified endpoints name."""
        return f"{self.namespace}/{self.name}"
