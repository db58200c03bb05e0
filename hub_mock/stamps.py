"""Timestamp and ID helpers for mock envelopes.

Values are fresh on every call; callers use them for traceability only.
"""

from __future__ import annotations

import time
from datetime import datetime
from uuid import uuid4


def now_fds(now: datetime | None = None) -> str:
    """Local time as ``YYYY-MM-DD HH:MM:SS.mmm``."""

    dt = now or datetime.now()
    return dt.strftime("%Y-%m-%d %H:%M:%S.") + f"{dt.microsecond // 1000:03d}"


def new_request_id() -> str:
    return str(uuid4())


def new_job_id() -> str:
    return f"mock-{int(time.time() * 1000)}"
