"""Master-data import handlers.

Implements (one generic handler per entity, see known_routes.IMPORT_ROUTES):
- POST /api/v1/<entity>/import?mode=ok|empty|partial|error[&fail=n]

Mock goals:
- Counts are derived from the size of the posted array, nothing else.
- Any body shape is accepted; unknown shapes count as 0 items.
- Simulated failures are reported in the envelope, never via HTTP status.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from fastapi import Request
from fastapi.responses import JSONResponse

from ..errors import IMPORT_FAILURE_MESSAGE, SIMULATED_SERVER_ERROR, VALIDATION_ERROR
from ..modes import Mode, mode_from_query, parse_fail
from ..responses import ImportResponse, JsonObject
from ..stamps import new_request_id, now_fds


log = logging.getLogger("hub_mock.handlers.imports")

Handler = Callable[[Request], Awaitable[JSONResponse]]


def compute_counts(body: Any, array_name: str) -> int:
    """Count items under ``array_name`` in the request body.

    Looks at ``body[array_name]`` first, then ``body["items"][array_name]``.
    Returns 0 for anything else.
    """

    if not isinstance(body, dict):
        return 0

    direct = body.get(array_name)
    if isinstance(direct, list):
        return len(direct)

    # Some callers nest the arrays one level down.
    items = body.get("items")
    if isinstance(items, dict) and isinstance(items.get(array_name), list):
        return len(items[array_name])

    return 0


@dataclass(slots=True)
class ImportOutcome:
    ok: bool
    received: int
    processed: int
    success: int
    fail: int
    errors: list[JsonObject] = field(default_factory=list)
    error_line_number: int | None = None
    error_message: str | None = None


def resolve_outcome(mode: Mode, count: int, fail: int | None = None) -> ImportOutcome:
    """Pure mapping from (mode, item count, ?fail) to envelope counts."""

    if mode is Mode.EMPTY:
        return ImportOutcome(ok=True, received=0, processed=0, success=0, fail=0)

    if mode is Mode.PARTIAL:
        processed = count
        requested = fail if fail is not None else (1 if processed > 0 else 0)
        failed = min(processed, requested)
        return ImportOutcome(
            ok=True,
            received=count,
            processed=processed,
            success=max(0, processed - failed),
            fail=failed,
            errors=[VALIDATION_ERROR.as_dict()] if failed > 0 else [],
        )

    if mode is Mode.ERROR:
        # Entire batch fails.
        return ImportOutcome(
            ok=False,
            received=count,
            processed=0,
            success=0,
            fail=count,
            errors=[SIMULATED_SERVER_ERROR.as_dict()],
            error_line_number=SIMULATED_SERVER_ERROR.line_no,
            error_message=IMPORT_FAILURE_MESSAGE,
        )

    return ImportOutcome(ok=True, received=count, processed=count, success=count, fail=0)


def build_import_payload(entity_label: str, outcome: ImportOutcome) -> JsonObject:
    """Serialize an outcome, restamping timestamp/requestId last."""

    base = ImportResponse(
        entity=entity_label,
        ok=outcome.ok,
        received=outcome.received,
        processed=outcome.processed,
        success=outcome.success,
        fail=outcome.fail,
        errors=outcome.errors,
    ).to_dict()

    payload = {**base, "timestamp": now_fds(), "requestId": new_request_id()}
    if outcome.error_line_number is not None:
        payload["errorLineNumber"] = outcome.error_line_number
    if outcome.error_message is not None:
        payload["errorMessage"] = outcome.error_message
    return payload


async def _safe_json_body(request: Request) -> Any | None:
    """Parse the JSON request body.

    Policy: never raise; return None on any parse/IO error or when the
    request is not declared as JSON.
    """

    content_type = (request.headers.get("content-type") or "").lower()
    if "application/json" not in content_type:
        return None

    try:
        raw = await request.body()
    except Exception:  # noqa: BLE001
        return None
    if not raw:
        return None
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        log.debug("ignoring non-JSON body on %s", request.url.path)
        return None


def import_handler(array_name: str, entity_label: str) -> Handler:
    """Return a request handler bound to one import endpoint."""

    async def handle(request: Request) -> JSONResponse:
        mode = mode_from_query(request.query_params)
        body = await _safe_json_body(request)
        count = compute_counts(body, array_name)

        fail = parse_fail(request.query_params.get("fail")) if mode is Mode.PARTIAL else None
        outcome = resolve_outcome(mode, count, fail)
        payload = build_import_payload(entity_label, outcome)

        log.debug(
            "import %s mode=%s received=%d fail=%d status=%s",
            array_name,
            mode.value,
            outcome.received,
            outcome.fail,
            payload["status"],
        )
        return JSONResponse(payload, status_code=200)

    handle.__name__ = f"import_{array_name}"
    return handle
