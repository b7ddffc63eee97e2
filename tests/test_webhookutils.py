from types import SimpleNamespace

from kertical.webhookutils import (
    LAST_APPLIED_CONFIG_ANNOTATION,
    get_cert_dir,
    get_last_applied_configuration,
)


def test_last_applied_configuration_present():
    obj = SimpleNamespace(annotations={LAST_APPLIED_CONFIG_ANNOTATION: '{"spec":{}}'})
    assert get_last_applied_configuration(obj) == '{"spec":{}}'


def test_last_applied_configuration_key():
    obj = SimpleNamespace(annotations={"kubectl.kubernetes.io/last-applied-configuration": "{}"})
    assert get_last_applied_configuration(obj) == "{}"


def test_last_applied_configuration_missing():
    assert get_last_applied_configuration(SimpleNamespace(annotations={"other": "x"})) is None


def test_last_applied_configuration_empty_value():
    obj = SimpleNamespace(annotations={LAST_APPLIED_CONFIG_ANNOTATION: ""})
    assert get_last_applied_configuration(obj) is None


def test_last_applied_configuration_without_annotations():
    assert get_last_applied_configuration(SimpleNamespace(annotations=None)) is None
    assert get_last_applied_configuration(SimpleNamespace()) is None


def test_cert_dir_default(monkeypatch):
    monkeypatch.delenv("WEBHOOK_CERT_DIR", raising=False)
    assert get_cert_dir() == "/tmp/kertical-webhook-certs"


def test_cert_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("WEBHOOK_CERT_DIR", str(tmp_path))
    assert get_cert_dir() == str(tmp_path)


def test_cert_dir_empty_environment_falls_back(monkeypatch):
    monkeypatch.setenv("WEBHOOK_CERT_DIR", "")
    assert get_cert_dir() == "/tmp/kertical-webhook-certs"