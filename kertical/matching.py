"""Finding the webhook configurations served by the pods that mount a secret."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Mapping


@dataclass
class Volume:
    """A pod volume; secret_name is set when it is backed by a secret."""

    name: str = ""
    secret_name: str | None = None


@dataclass
class Pod:
    """The parts of a pod that matter for matching."""

    name: str = ""
    namespace: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    volumes: list[Volume] = field(default_factory=list)


@dataclass
class Service:
    """A service and the label selector it uses to pick pods."""

    name: str = ""
    namespace: str = ""
    selector: dict[str, str] = field(default_factory=dict)


@dataclass
class ServiceReference:
    """The service a webhook is reached through."""

    namespace: str = ""
    name: str = ""


@dataclass
class WebhookClientConfig:
    """How the API server reaches a webhook."""

    service: ServiceReference | None = None
    ca_bundle: bytes = b""


@dataclass
class Webhook:
    """A single webhook inside a configuration."""

    name: str = ""
    client_config: WebhookClientConfig = field(default_factory=WebhookClientConfig)


@dataclass
class WebhookConfiguration:
    """A mutating or validating webhook configuration."""

    name: str = ""
    webhooks: list[Webhook] = field(default_factory=list)


def has_secret_volume(volumes: Iterable[Volume], secret_name: str) -> bool:
    """Whether any of the volumes is backed by the named secret."""
    return any(volume.secret_name is not None and volume.secret_name == secret_name for volume in volumes)


def _selector_matches(selector: Mapping[str, str], labels: Mapping[str, str]) -> bool:
    return all(key in labels and labels[key] == value for key, value in selector.items())


def iter_matched_services(services: Iterable[Service], pod_labels: Mapping[str, str] | None) -> Iterator[Service]:
    """Yield the services whose selector matches the pod labels."""
    labels = pod_labels or {}
    for service in services:
        if _selector_matches(service.selector or {}, labels):
            yield service


def is_matched_webhook_service(config: WebhookClientConfig, service: Service) -> bool:
    """Whether the client config points at the given service."""
    ref = config.service
    return ref is not None and ref.namespace == service.namespace and ref.name == service.name


def list_webhooks_by_service(
    configurations: Iterable[WebhookConfiguration], service: Service
) -> list[WebhookConfiguration]:
    """The configurations with at least one webhook served by the service."""
    return [
        configuration
        for configuration in configurations
        if any(is_matched_webhook_service(webhook.client_config, service) for webhook in configuration.webhooks)
    ]


def namespace_predicate(namespace: str) -> Callable[[Any], bool]:
    """A filter accepting only objects in the given namespace."""

    def predicate(obj: Any) -> bool:
        return getattr(obj, "namespace", None) == namespace

    return predicate