"""Small helpers shared by the admission webhooks."""

from __future__ import annotations

import os
from typing import Any

LAST_APPLIED_CONFIG_ANNOTATION = "kubectl.kubernetes.io/last-applied-configuration"
DEFAULT_CERT_DIR = "/tmp/kertical-webhook-certs"


def get_last_applied_configuration(obj: Any) -> str | None:
    """Return the last applied configuration annotation of obj, or None if absent or empty."""
    annotations = getattr(obj, "annotations", None) or {}
    return annotations.get(LAST_APPLIED_CONFIG_ANNOTATION) or None


def get_cert_dir() -> str:
    """Directory holding the webhook serving certificates."""
    return os.environ.get("WEBHOOK_CERT_DIR") or DEFAULT_CERT_DIR