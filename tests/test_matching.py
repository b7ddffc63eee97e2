from kertical.matching import (
    Pod,
    Service,
    ServiceReference,
    Volume,
    Webhook,
    WebhookClientConfig,
    WebhookConfiguration,
    has_secret_volume,
    is_matched_webhook_service,
    iter_matched_services,
    list_webhooks_by_service,
    namespace_predicate,
)


def test_has_secret_volume_found():
    volumes = [Volume(name="data"), Volume(name="certs", secret_name="webhook-cert")]
    assert has_secret_volume(volumes, "webhook-cert") is True


def test_has_secret_volume_not_found():
    volumes = [Volume(name="data"), Volume(name="certs", secret_name="other")]
    assert has_secret_volume(volumes, "webhook-cert") is False


def test_has_secret_volume_ignores_non_secret_volume_names():
    assert has_secret_volume([Volume(name="webhook-cert")], "webhook-cert") is False


def test_has_secret_volume_empty():
    assert has_secret_volume([], "webhook-cert") is False


def test_iter_matched_services_selects_by_labels():
    web = Service(name="web", namespace="ns", selector={"app": "web"})
    db = Service(name="db", namespace="ns", selector={"app": "db"})
    matched = list(iter_matched_services([web, db], {"app": "web", "tier": "front"}))
    assert matched == [web]


def test_iter_matched_services_requires_all_selector_labels():
    svc = Service(name="web", selector={"app": "web", "tier": "front"})
    assert list(iter_matched_services([svc], {"app": "web"})) == []


def test_iter_matched_services_empty_selector_matches_everything():
    svc = Service(name="any", selector={})
    assert list(iter_matched_services([svc], {"app": "web"})) == [svc]
    assert list(iter_matched_services([svc], None)) == [svc]


def test_iter_matched_services_is_lazy():
    services = [Service(name="a"), Service(name="b")]
    iterator = iter_matched_services(services, {})
    assert next(iterator) is services[0]


def test_is_matched_webhook_service():
    service = Service(name="webhook", namespace="kertical-system")
    config = WebhookClientConfig(service=ServiceReference(namespace="kertical-system", name="webhook"))
    assert is_matched_webhook_service(config, service) is True


def test_is_matched_webhook_service_mismatch():
    service = Service(name="webhook", namespace="kertical-system")
    other_ns = WebhookClientConfig(service=ServiceReference(namespace="default", name="webhook"))
    other_name = WebhookClientConfig(service=ServiceReference(namespace="kertical-system", name="other"))
    no_service = WebhookClientConfig()
    assert is_matched_webhook_service(other_ns, service) is False
    assert is_matched_webhook_service(other_name, service) is False
    assert is_matched_webhook_service(no_service, service) is False


def test_list_webhooks_by_service():
    service = Service(name="webhook", namespace="kertical-system")
    ref = ServiceReference(namespace="kertical-system", name="webhook")
    matching = WebhookConfiguration(
        name="match",
        webhooks=[
            Webhook(name="a", client_config=WebhookClientConfig()),
            Webhook(name="b", client_config=WebhookClientConfig(service=ref)),
        ],
    )
    unrelated = WebhookConfiguration(
        name="other",
        webhooks=[Webhook(name="c", client_config=WebhookClientConfig(service=ServiceReference("x", "y")))],
    )
    assert list_webhooks_by_service([matching, unrelated], service) == [matching]


def test_list_webhooks_by_service_listed_once_per_configuration():
    service = Service(name="webhook", namespace="ns")
    ref = ServiceReference(namespace="ns", name="webhook")
    config = WebhookConfiguration(
        name="double",
        webhooks=[
            Webhook(name="a", client_config=WebhookClientConfig(service=ref)),
            Webhook(name="b", client_config=WebhookClientConfig(service=ref)),
        ],
    )
    assert list_webhooks_by_service([config], service) == [config]


def test_namespace_predicate():
    predicate = namespace_predicate("kertical-system")
    assert predicate(Pod(name="p", namespace="kertical-system")) is True
    assert predicate(Pod(name="p", namespace="default")) is False
    assert predicate(object()) is False