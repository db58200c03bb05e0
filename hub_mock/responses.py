"""Response envelope helpers.

The real HUB returns a flat JSON object per endpoint:
  - status ("Success" / "Failure")
  - message
  - timestamp
plus counts or records that vary by endpoint. Failure is reported inside the
payload; the HTTP status stays 200.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .stamps import new_job_id, new_request_id, now_fds


JsonObject = dict[str, Any]

SUCCESS = "Success"
FAILURE = "Failure"


def _capitalize(value: str) -> str:
    return value[:1].upper() + value[1:]


def import_message(entity: str, *, ok: bool) -> str:
    label = _capitalize(entity or "")
    if ok:
        return f"{label} master data imported successfully"
    return f"{label} master data import failed"


@dataclass(slots=True)
class ImportResponse:
    """Import-result envelope before serialization.

    Counts are kept as given; callers are responsible for keeping
    success + fail == processed <= received.
    """

    entity: str = "data"
    ok: bool = True
    received: int = 1
    processed: int = 1
    success: int = 1
    fail: int = 0
    errors: list[JsonObject] = field(default_factory=list)
    timestamp: str = field(default_factory=now_fds)
    request_id: str = field(default_factory=new_request_id)
    job_id: str = field(default_factory=new_job_id)

    def to_dict(self) -> JsonObject:
        return {
            "status": SUCCESS if self.ok else FAILURE,
            "message": import_message(self.entity, ok=self.ok),
            "timestamp": self.timestamp,
            "requestId": self.request_id,
            "jobId": self.job_id,
            "receivedCount": self.received,
            "processedCount": self.processed,
            "successCount": self.success,
            "failCount": self.fail,
            "errors": list(self.errors),
        }


def search_response(
    subject: str,
    records: Iterable[Mapping[str, Any]] = (),
    *,
    records_key: str,
    ok: bool = True,
    error_message: str | None = None,
) -> JsonObject:
    """Build a search envelope; recordCount always mirrors the record list."""

    items = [dict(r) for r in records]
    out: JsonObject = {
        "status": SUCCESS if ok else FAILURE,
        "message": f"{subject} data search completed" if ok else f"{subject} data search failed",
        "timestamp": now_fds(),
        "recordCount": len(items),
        records_key: items,
    }
    if error_message is not None:
        out["errorMessage"] = error_message
    return out


def failure(message: str, *, error_message: str | None = None) -> JsonObject:
    """Envelope for platform-level failures (unknown path, oversized body, crash)."""

    out: JsonObject = {
        "status": FAILURE,
        "message": message,
        "timestamp": now_fds(),
    }
    if error_message is not None:
        out["errorMessage"] = error_message
    return out
