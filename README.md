# kertical

Data models for two networking resources, `ExternalProxy` and
`PortForwarding`, and helpers that work out which webhook configurations are
served by the pods mounting a given certificate secret.

The package uses only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Resource models

`kertical.models` holds plain dataclasses for the resources:

- `ExternalProxy` with an `ExternalProxySpec` made of `backends`
  (`ExternalProxyBackend`: `ExternalProxyBackendAddress` and `EndpointPort`
  lists), a `service` (`ExternalProxyService` with `ServicePort`s) and an
  optional `ingress` (`ExternalProxyIngress` with `IngressRule`,
  `IngressHttpRuleValue`, `IngressHttpPath`, `IngressBackend`,
  `ServiceBackendPort` and `IngressTLS`).
- `PortForwarding` with a `PortForwardingSpec` holding a `service_ref` name
  and a list of `PortForwardingPort`s.
- `PathType`, an enum of `Exact`, `Prefix` and `ImplementationSpecific`.
- `IntOrString`, a port given by number or by name, built with
  `IntOrString.from_int` or `IntOrString.from_str`.

`ExternalProxySpec.from_dict` builds a spec from its JSON form with camelCase
keys (`appProtocol`, `targetPort`, `pathType`, `ingressClassName`,
`defaultBackend`, `secretName`). The name, annotations and labels of the
service and ingress may be given under a `metadata` key or at the top level.
A `pathType` that is not one of the known values is kept as a plain string.

```python
from kertical.models import ExternalProxy, ExternalProxySpec, PathType

spec = ExternalProxySpec.from_dict({
    "backends": [{
        "addresses": [{"ip": "10.0.0.1"}],
        "ports": [{"name": "http", "port": 80, "protocol": "TCP"}],
    }],
    "ingress": {
        "rules": [{
            "host": "example.com",
            "http": {"paths": [{"path": "/", "pathType": "Prefix"}]},
        }],
    },
})
proxy = ExternalProxy(name="web", spec=spec)

assert spec.backends[0].ports[0].name == "http"
assert spec.ingress.rules[0].http.paths[0].path_type is PathType.PREFIX
```

## Matching webhooks to services

`kertical.matching` has small models for pods, services and webhook
configurations (`Pod`, `Volume`, `Service`, `ServiceReference`,
`WebhookClientConfig`, `Webhook`, `WebhookConfiguration`) and these helpers:

- `has_secret_volume(volumes, secret_name)`: whether any volume is backed by
  the named secret.
- `iter_matched_services(services, pod_labels)`: yields the services whose
  selector is contained in the pod's labels.
- `is_matched_webhook_service(config, service)`: whether a client config
  points at the service, by namespace and name.
- `list_webhooks_by_service(configurations, service)`: the configurations
  with at least one webhook reached through the service.
- `namespace_predicate(namespace)`: a filter accepting objects whose
  `namespace` attribute equals the given one.

```python
from kertical.matching import (
    Pod, Service, ServiceReference, Volume, Webhook, WebhookClientConfig,
    WebhookConfiguration, has_secret_volume, iter_matched_services,
    list_webhooks_by_service,
)

pod = Pod(name="webhook-0", namespace="kertical-system",
          labels={"app": "webhook"},
          volumes=[Volume(name="certs", secret_name="webhook-server-cert")])
services = [Service(name="webhook", namespace="kertical-system",
                    selector={"app": "webhook"})]
configs = [WebhookConfiguration(name="validating", webhooks=[
    Webhook(name="v.example.com", client_config=WebhookClientConfig(
        service=ServiceReference(namespace="kertical-system", name="webhook")))
])]

if has_secret_volume(pod.volumes, "webhook-server-cert"):
    for service in iter_matched_services(services, pod.labels):
        print([c.name for c in list_webhooks_by_service(configs, service)])
```

## Other helpers

`kertical.webhookutils`:

- `get_last_applied_configuration(obj)` returns the
  `kubectl.kubernetes.io/last-applied-configuration` annotation of an object
  with an `annotations` mapping, or `None` when it is missing or empty.
- `get_cert_dir()` returns `$WEBHOOK_CERT_DIR`, or
  `/tmp/kertical-webhook-certs` when that is unset or empty.

## What this package does not do

It does not fill in defaults for these resources or validate them, and it
does not run an admission webhook server. It does not talk to a cluster: it
neither lists pods, services or webhook configurations nor writes CA bundles
into them. The matching helpers work on objects you build and pass in.