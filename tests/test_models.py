from datetime import datetime, timezone

import pytest

from tenant_schema.models import (
    DEMO_TENANT_ID,
    STATUS_EXTRACTED,
    demo_tenant_document,
    extracted_event_document,
    sample_tenant_documents,
    tenant_document,
)

NOW = datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc)


def test_tenant_document_defaults():
    doc = tenant_document("acme", "Acme", "key", "https://example.test", now=NOW)

    assert doc["active"] is True
    assert doc["extractionIntervalMinutes"] == 5
    assert doc["maxRetryAttempts"] == 3
    assert doc["timeoutSeconds"] == 30
    assert doc["extractCustomEvents"] is True
    assert doc["extractStandardEvents"] is True
    assert doc["createdAt"] == doc["updatedAt"] == NOW
    for unset in ("lastAttemptedExtraction", "lastSuccessfulExtraction", "lastExtractionError", "lastProcessedScrollId"):
        assert unset not in doc


def test_tenant_document_keeps_tracking_fields_when_given():
    doc = tenant_document(
        "acme", "Acme", "key", "https://example.test",
        last_attempted_extraction=NOW,
        last_extraction_error="timeout",
        now=NOW,
    )
    assert doc["lastAttemptedExtraction"] == NOW
    assert doc["lastExtractionError"] == "timeout"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"extraction_interval_minutes": 0},
        {"max_retry_attempts": -1},
        {"timeout_seconds": 0},
    ],
)
def test_tenant_document_rejects_non_positive_tuning(kwargs):
    with pytest.raises(ValueError):
        tenant_document("acme", "Acme", "key", "https://example.test", **kwargs)


def test_tenant_document_requires_id():
    with pytest.raises(ValueError):
        tenant_document("", "Acme", "key", "https://example.test")


def test_demo_tenant_is_inactive_placeholder():
    doc = demo_tenant_document(now=NOW)

    assert doc["tenantId"] == DEMO_TENANT_ID == "demo-tenant"
    assert doc["companyName"] == "Demo Company"
    assert doc["apiKey"] == "demo-api-key-replace-with-real"
    assert doc["apiUrl"] == "https://api.aptrinsic.com"
    assert doc["active"] is False
    assert doc["createdAt"] == NOW


def test_sample_tenants():
    docs = sample_tenant_documents("real-key", "https://px.example.test", now=NOW)

    assert [(d["tenantId"], d["active"], d["extractionIntervalMinutes"]) for d in docs] == [
        ("tenant-001", True, 5),
        ("tenant-002", False, 10),
        ("tenant-003", True, 3),
    ]
    assert docs[1]["extractStandardEvents"] is False
    assert docs[2]["extractCustomEvents"] is False
    assert all(d["apiKey"] == "real-key" for d in docs)


def test_extracted_event_defaults():
    doc = extracted_event_document("t1", "evt-1", "CUSTOM", "signup", extracted_at=NOW)

    assert doc["status"] == STATUS_EXTRACTED
    assert doc["retryCount"] == 0
    assert doc["extractedAt"] == NOW
    assert "processingError" not in doc
    assert "eventData" not in doc


def test_extracted_event_rejects_negative_retry_count():
    with pytest.raises(ValueError):
        extracted_event_document("t1", "evt-1", "CUSTOM", "signup", retry_count=-1)
