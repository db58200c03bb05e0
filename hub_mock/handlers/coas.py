"""Chart-of-accounts search.

Implements:
- GET /api/v1/coas/search?mode=ok|empty|error

Only ``mode`` influences the result; the body is ignored.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from fastapi import Request
from fastapi.responses import JSONResponse

from ..errors import SEARCH_FAILURE_MESSAGE
from ..modes import Mode, mode_from_query
from ..responses import JsonObject, search_response


SUBJECT = "COA"

CASH_ACCOUNT: Mapping[str, Any] = MappingProxyType(
    {
        "lineNo": 1,
        "accountNumber": "100100",
        "description": "Cash Account",
        "debitCreditFlag": "D",
        "accountType": "AP",
        "fxPositionType": "CASH",
        "balanceControlFlag": "N",
        "revaluationFlag": "N",
        "activeFlag": "Y",
        "lastUpdateProgramId": "GLA+",
        "lastUpdateUserId": "ADMIN",
        "lastUpdateDatetime": "2025-11-04 23:23:23.000",
        "errorMessage": None,
    }
)


def build_search_payload(mode: Mode) -> JsonObject:
    if mode is Mode.EMPTY:
        return search_response(SUBJECT, records_key="coas")
    if mode is Mode.ERROR:
        return search_response(SUBJECT, records_key="coas", ok=False, error_message=SEARCH_FAILURE_MESSAGE)
    # Default = success with one record (partial has no meaning for search).
    return search_response(SUBJECT, [CASH_ACCOUNT], records_key="coas")


async def get_coas_search(request: Request) -> JSONResponse:
    payload = build_search_payload(mode_from_query(request.query_params))
    return JSONResponse(payload, status_code=200)
