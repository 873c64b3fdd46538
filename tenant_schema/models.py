# tenant_schema/models.py
"""
Document shapes stored by the extraction application.

tenant_configurations
  {tenantId, companyName, apiKey, apiUrl, active,
   extractionIntervalMinutes, extractCustomEvents, extractStandardEvents,
   maxRetryAttempts, timeoutSeconds,
   lastSuccessfulExtraction?, lastAttemptedExtraction?, lastExtractionError?,
   lastProcessedScrollId?, createdAt, updatedAt}

extracted_events
  {tenantId, eventId, eventType, eventName, eventData?, eventTimestamp?,
   extractedAt, status, processingError?, retryCount}

Fields marked '?' are left out of the document while unset. The sparse index on
lastExtractionError depends on that: a null value would still be indexed.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

DEMO_TENANT_ID = "demo-tenant"
DEMO_API_KEY = "demo-api-key-replace-with-real"
DEMO_API_URL = "https://api.aptrinsic.com"

# Processing states written by the extraction pipeline. The schema does not
# restrict the field to these values.
STATUS_EXTRACTED = "EXTRACTED"
STATUS_PROCESSING = "PROCESSING"
STATUS_PROCESSED = "PROCESSED"
STATUS_FAILED = "FAILED"
PROCESSING_STATUSES = (STATUS_EXTRACTED, STATUS_PROCESSING, STATUS_PROCESSED, STATUS_FAILED)

EVENT_TYPE_CUSTOM = "CUSTOM"
EVENT_TYPE_STANDARD = "STANDARD"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _put_optional(doc: Dict[str, Any], **fields: Any) -> Dict[str, Any]:
    for key, value in fields.items():
        if value is not None:
            doc[key] = value
    return doc


def tenant_document(
    tenant_id: str,
    company_name: str,
    api_key: str,
    api_url: str,
    *,
    active: bool = True,
    extraction_interval_minutes: int = 5,
    extract_custom_events: bool = True,
    extract_standard_events: bool = True,
    max_retry_attempts: int = 3,
    timeout_seconds: int = 30,
    last_attempted_extraction: Optional[datetime] = None,
    last_successful_extraction: Optional[datetime] = None,
    last_extraction_error: Optional[str] = None,
    last_processed_scroll_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build a tenant_configurations document with the application's defaults."""
    if not tenant_id:
        raise ValueError("tenant_id must not be empty")
    for label, value in (
        ("extraction_interval_minutes", extraction_interval_minutes),
        ("max_retry_attempts", max_retry_attempts),
        ("timeout_seconds", timeout_seconds),
    ):
        if value <= 0:
            raise ValueError(f"{label} must be positive, got {value}")

    now = now or utcnow()
    doc = {
        "tenantId": tenant_id,
        "companyName": company_name,
        "apiKey": api_key,
        "apiUrl": api_url,
        "active": active,
        "extractionIntervalMinutes": extraction_interval_minutes,
        "extractCustomEvents": extract_custom_events,
        "extractStandardEvents": extract_standard_events,
        "maxRetryAttempts": max_retry_attempts,
        "timeoutSeconds": timeout_seconds,
    }
    _put_optional(
        doc,
        lastSuccessfulExtraction=last_successful_extraction,
        lastAttemptedExtraction=last_attempted_extraction,
        lastExtractionError=last_extraction_error,
        lastProcessedScrollId=last_processed_scroll_id,
    )
    doc["createdAt"] = now
    doc["updatedAt"] = now
    return doc


def demo_tenant_document(now: Optional[datetime] = None) -> Dict[str, Any]:
    # Inactive so a live scheduler never picks it up
    return tenant_document(
        DEMO_TENANT_ID,
        "Demo Company",
        DEMO_API_KEY,
        DEMO_API_URL,
        active=False,
        now=now,
    )


def sample_tenant_documents(api_key: str, api_url: str, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    """The three tenants the host application seeds on an empty database."""
    now = now or utcnow()
    return [
        tenant_document(
            "tenant-001", "Acme Corporation", api_key, api_url,
            active=True, extraction_interval_minutes=5,
            extract_custom_events=True, extract_standard_events=True, now=now,
        ),
        tenant_document(
            "tenant-002", "TechStart Inc", api_key, api_url,
            active=False, extraction_interval_minutes=10,
            extract_custom_events=True, extract_standard_events=False, now=now,
        ),
        tenant_document(
            "tenant-003", "Global Enterprise Ltd", api_key, api_url,
            active=True, extraction_interval_minutes=3,
            extract_custom_events=False, extract_standard_events=True, now=now,
        ),
    ]


def extracted_event_document(
    tenant_id: str,
    event_id: str,
    event_type: str,
    event_name: str,
    *,
    event_data: Optional[str] = None,
    event_timestamp: Optional[datetime] = None,
    status: str = STATUS_EXTRACTED,
    retry_count: int = 0,
    processing_error: Optional[str] = None,
    extracted_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    if retry_count < 0:
        raise ValueError(f"retry_count must be >= 0, got {retry_count}")
    doc = {
        "tenantId": tenant_id,
        "eventId": event_id,
        "eventType": event_type,
        "eventName": event_name,
        "extractedAt": extracted_at or utcnow(),
        "status": status,
        "retryCount": retry_count,
    }
    return _put_optional(
        doc,
        eventData=event_data,
        eventTimestamp=event_timestamp,
        processingError=processing_error,
    )
