"""
tests.test_logging

Credential masking in the structlog pipeline.
"""

from __future__ import annotations

import structlog

from jwt_service.observability.logging import REDACTED, configure_logging, redact_credentials


def test_redacts_credential_fields() -> None:
    event = {"event": "x", "token": "eyJ...", "authorization": "Bearer eyJ...", "sender": "peerA"}

    out = redact_credentials(None, "info", event)

    assert out["token"] == REDACTED
    assert out["authorization"] == REDACTED
    assert out["sender"] == "peerA"


def test_leaves_clean_events_untouched() -> None:
    event = {"event": "inbound_token_rejected", "reason": "audience_mismatch"}

    assert redact_credentials(None, "info", dict(event)) == event


def test_configured_pipeline_redacts_before_rendering() -> None:
    configure_logging(service_name="jwt-service", level="INFO")

    processors = structlog.get_config()["processors"]
    renderer = next(i for i, p in enumerate(processors) if isinstance(p, structlog.processors.JSONRenderer))

    assert processors.index(redact_credentials) < renderer
