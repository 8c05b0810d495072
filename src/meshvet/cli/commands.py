"""CLI command implementations."""

import json
from typing import Any

from rich.console import Console
from rich.table import Table

from meshvet.core.exemptions import ExemptionSet
from meshvet.core.models import Endpoints, MeshVetError, Namespace, Pod, Service
from meshvet.core.services import MeshResolver, PolicyEvaluator
from meshvet.k8s.client import K8sClient
from meshvet.mesh.istio.conventions import service_port_prefixed
from meshvet.mesh.istio.detector import SidecarDetector
from meshvet.mesh.istio.policy_source import ConfigMapPolicySource, StaticPolicySource, initializer_disabled_note
from meshvet.utils.config import MeshVetConfig

console = Console()

RESOURCE_KINDS = ("namespaces", "pods", "services", "endpoints")


def build_resolver(config: MeshVetConfig, policy_file: str | None = None) -> MeshResolver:
    """Wire a resolver against the live cluster."""
    conventions = config.conventions()
    k8s_client = K8sClient(config.kubeconfig)

    if policy_file:
        policy_source = StaticPolicySource.from_file(policy_file)
    else:
        policy_source = ConfigMapPolicySource(k8s_client, conventions)

    return MeshResolver(
        k8s_client,
        policy_source,
        evaluator=PolicyEvaluator(config.exemptions()),
        detector=SidecarDetector(conventions),
        conventions=conventions,
    )


def list_in_mesh(kind: str, output: str, config: MeshVetConfig, policy_file: str | None = None) -> int:
    """
    List in-mesh resources of one kind.

    Returns:
        Process exit code
    """
    try:
        resolver = build_resolver(config, policy_file)
        resources: list[Any] = {
            "namespaces": resolver.in_mesh_namespaces,
            "pods": resolver.in_mesh_pods,
            "services": resolver.in_mesh_services,
            "endpoints": resolver.in_mesh_endpoints,
        }[kind]()

    except MeshVetError as e:
        # An unconfigured injector is informational, anything else is a failure
        note = initializer_disabled_note(e, vetter_id=f"meshvet {kind}", vetter_type="MeshMembership")
        if note is not None:
            console.print(note.to_display_string())
            return 0

        console.print(f"Error: {e}")
        return 1

    if output == "json":
        _output_json(kind, resources)
    else:
        _output_table(kind, resources)
    return 0


def show_exempted(exemptions: ExemptionSet, output: str) -> None:
    """Show namespaces exempted from sidecar injection."""
    names = sorted(exemptions.exempted_names())

    if output == "json":
        print(json.dumps(names, indent=2))
        return

    table = Table()
    table.add_column("EXEMPTED NAMESPACE")
    for name in names:
        table.add_row(name)
    console.print(table)


def _output_table(kind: str, resources: list[Any]) -> None:
    """Output resources as a table."""
    if not resources:
        console.print(f"No {kind} in the mesh")
        return

    table = Table()
    if kind == "namespaces":
        table.add_column("NAME")
    else:
        table.add_column("NAMESPACE")
        table.add_column("NAME")

    if kind == "pods":
        table.add_column("CONTAINERS")
    elif kind == "services":
        table.add_column("PORTS")
        table.add_column("PROTOCOL PREFIXED")
    elif kind == "endpoints":
        table.add_column("ADDRESSES")

    for resource in resources:
        table.add_row(*_row(resource))

    console.print(table)


def _row(resource: Any) -> list[str]:
    if isinstance(resource, Namespace):
        return [resource.name]
    if isinstance(resource, Pod):
        return [resource.namespace, resource.name, ", ".join(c.name for c in resource.containers)]
    if isinstance(resource, Service):
        prefixed = sum(1 for p in resource.ports if service_port_prefixed(p.name))
        return [
            resource.namespace,
            resource.name,
            ", ".join(f"{p.name or '-'}:{p.port}" for p in resource.ports),
            f"{prefixed}/{len(resource.ports)}",
        ]
    if isinstance(resource, Endpoints):
        return [resource.namespace, resource.name, ", ".join(resource.addresses)]
    raise TypeError(f"Unsupported resource: {type(resource).__name__}")


def _output_json(kind: str, resources: list[Any]) -> None:
    """Output resources as JSON."""
    data = []
    for resource in resources:
        if isinstance(resource, Namespace):
            data.append({"name": resource.name})
        elif isinstance(resource, Pod):
            data.append(
                {
                    "name": resource.name,
                    "namespace": resource.namespace,
                    "containers": [c.name for c in resource.containers],
                }
            )
        elif isinstance(resource, Service):
            data.append(
                {
                    "name": resource.name,
                    "namespace": resource.namespace,
                    "ports": [{"name": p.name, "port": p.port, "protocol": p.protocol} for p in resource.ports],
                }
            )
        elif isinstance(resource, Endpoints):
            data.append({"name": resource.name, "namespace": resource.namespace, "addresses": resource.addresses})

    print(json.dumps({kind: data}, indent=2))
