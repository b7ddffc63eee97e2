"""Resource models for the ExternalProxy and PortForwarding kinds."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

PROTOCOL_TCP = "TCP"
PROTOCOL_UDP = "UDP"
PROTOCOL_SCTP = "SCTP"

SERVICE_TYPE_CLUSTER_IP = "ClusterIP"


class PathType(str, Enum):
    """How an ingress path is matched against request paths."""

    EXACT = "Exact"
    PREFIX = "Prefix"
    IMPLEMENTATION_SPECIFIC = "ImplementationSpecific"


@dataclass(frozen=True)
class IntOrString:
    """A value that holds either a port number or a port name."""

    value: Union[int, str] = 0

    @classmethod
    def from_int(cls, value: int) -> IntOrString:
        """Wrap a number."""
        return cls(int(value))

    @classmethod
    def from_str(cls, value: str) -> IntOrString:
        """Wrap a name."""
        return cls(str(value))

    @property
    def is_str(self) -> bool:
        """Whether the value is a name rather than a number."""
        return isinstance(self.value, str)

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class EndpointPort:
    """A port exposed by a backend endpoint."""

    name: str | None = None
    port: int | None = None
    protocol: str | None = None
    app_protocol: str | None = None


@dataclass
class ServicePort:
    """A port exposed by the generated service."""

    name: str = ""
    protocol: str = ""
    app_protocol: str | None = None
    port: int = 0
    target_port: IntOrString = field(default_factory=IntOrString)


@dataclass
class ExternalProxyBackendAddress:
    """A single backend address."""

    ip: str = ""


@dataclass
class ExternalProxyBackend:
    """A group of addresses sharing the same set of ports."""

    addresses: list[ExternalProxyBackendAddress] = field(default_factory=list)
    ports: list[EndpointPort] = field(default_factory=list)


@dataclass
class ExternalProxyService:
    """The service generated for an ExternalProxy."""

    name: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    type: str = ""
    ports: list[ServicePort] = field(default_factory=list)


@dataclass
class ServiceBackendPort:
    """A service port referenced by name or by number."""

    name: str = ""
    number: int = 0


@dataclass
class IngressBackend:
    """The service port that ingress traffic is sent to."""

    port: ServiceBackendPort = field(default_factory=ServiceBackendPort)


@dataclass
class IngressHttpPath:
    """A path matched by an ingress rule."""

    path: str = ""
    path_type: PathType | str | None = None
    backend: IngressBackend | None = None


@dataclass
class IngressHttpRuleValue:
    """The HTTP paths of an ingress rule."""

    paths: list[IngressHttpPath] = field(default_factory=list)


@dataclass
class IngressRule:
    """A host together with its HTTP paths."""

    host: str = ""
    http: IngressHttpRuleValue | None = None


@dataclass
class IngressTLS:
    """TLS settings for a set of hosts."""

    hosts: list[str] = field(default_factory=list)
    secret_name: str = ""


@dataclass
class ExternalProxyIngress:
    """The ingress generated for an ExternalProxy."""

    name: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    labels: dict[str, str] = field(default_factory=dict)
    ingress_class_name: str | None = None
    default_backend: IngressBackend | None = None
    tls: list[IngressTLS] = field(default_factory=list)
    rules: list[IngressRule] = field(default_factory=list)


def _meta(data: Mapping[str, Any]) -> Mapping[str, Any]:
    meta = data.get("metadata")
    return meta if isinstance(meta, Mapping) else data


def _int_or_string(value: Any) -> IntOrString:
    if value is None:
        return IntOrString()
    if isinstance(value, str):
        return IntOrString.from_str(value)
    return IntOrString.from_int(value)


def _path_type(value: Any) -> PathType | str | None:
    if value is None:
        return None
    try:
        return PathType(value)
    except ValueError:
        return value


def _endpoint_port(data: Mapping[str, Any]) -> EndpointPort:
    return EndpointPort(
        name=data.get("name"),
        port=data.get("port"),
        protocol=data.get("protocol"),
        app_protocol=data.get("appProtocol"),
    )


def _backend(data: Mapping[str, Any]) -> ExternalProxyBackend:
    return ExternalProxyBackend(
        addresses=[ExternalProxyBackendAddress(ip=a.get("ip", "")) for a in data.get("addresses") or []],
        ports=[_endpoint_port(p) for p in data.get("ports") or []],
    )


def _service_port(data: Mapping[str, Any]) -> ServicePort:
    return ServicePort(
        name=data.get("name", ""),
        protocol=data.get("protocol", ""),
        app_protocol=data.get("appProtocol"),
        port=data.get("port", 0),
        target_port=_int_or_string(data.get("targetPort")),
    )


def _service(data: Mapping[str, Any]) -> ExternalProxyService:
    meta = _meta(data)
    return ExternalProxyService(
        name=meta.get("name", ""),
        annotations=dict(meta.get("annotations") or {}),
        labels=dict(meta.get("labels") or {}),
        type=data.get("type", ""),
        ports=[_service_port(p) for p in data.get("ports") or []],
    )


def _ingress_backend(data: Mapping[str, Any] | None) -> IngressBackend | None:
    if data is None:
        return None
    port = data.get("port") or {}
    return IngressBackend(port=ServiceBackendPort(name=port.get("name", ""), number=port.get("number", 0)))


def _http_path(data: Mapping[str, Any]) -> IngressHttpPath:
    return IngressHttpPath(
        path=data.get("path", ""),
        path_type=_path_type(data.get("pathType")),
        backend=_ingress_backend(data.get("backend")),
    )


def _rule(data: Mapping[str, Any]) -> IngressRule:
    http = data.get("http")
    return IngressRule(
        host=data.get("host", ""),
        http=None if http is None else IngressHttpRuleValue(paths=[_http_path(p) for p in http.get("paths") or []]),
    )


def _ingress(data: Mapping[str, Any] | None) -> ExternalProxyIngress | None:
    if data is None:
        return None
    meta = _meta(data)
    return ExternalProxyIngress(
        name=meta.get("name", ""),
        annotations=dict(meta.get("annotations") or {}),
        labels=dict(meta.get("labels") or {}),
        ingress_class_name=data.get("ingressClassName"),
        default_backend=_ingress_backend(data.get("defaultBackend")),
        tls=[IngressTLS(hosts=list(t.get("hosts") or []), secret_name=t.get("secretName", "")) for t in data.get("tls") or []],
        rules=[_rule(r) for r in data.get("rules") or []],
    )


@dataclass
class ExternalProxySpec:
    """Desired state of an ExternalProxy."""

    backends: list[ExternalProxyBackend] = field(default_factory=list)
    service: ExternalProxyService = field(default_factory=ExternalProxyService)
    ingress: ExternalProxyIngress | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ExternalProxySpec:
        """Build a spec from its JSON form with camelCase keys."""
        data = data or {}
        return cls(
            backends=[_backend(b) for b in data.get("backends") or []],
            service=_service(data.get("service") or {}),
            ingress=_ingress(data.get("ingress")),
        )


@dataclass
class ExternalProxy:
    """A proxy from inside the cluster to addresses outside it."""

    name: str = ""
    namespace: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    spec: ExternalProxySpec = field(default_factory=ExternalProxySpec)


@dataclass
class PortForwardingPort:
    """A service port to forward."""

    target: IntOrString = field(default_factory=IntOrString)


@dataclass
class PortForwardingSpec:
    """Desired state of a PortForwarding."""

    service_ref: str = ""
    ports: list[PortForwardingPort] = field(default_factory=list)


@dataclass
class PortForwarding:
    """Forwards host ports to a service in the cluster."""

    name: str = ""
    namespace: str = ""
    annotations: dict[str, str] = field(default_factory=dict)
    spec: PortForwardingSpec = field(default_factory=PortForwardingSpec)