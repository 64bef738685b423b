"""Pagination helpers for list endpoints."""

from __future__ import annotations

import math
from typing import Any, Dict, Iterable

from flask import request


def page_args(default_per_page: int = 50) -> tuple[int, int]:
    """Read ``page``/``per_page`` from the query string, clamped to sane bounds."""
    page = request.args.get("page", 1, type=int) or 1
    per_page = request.args.get("per_page", default_per_page, type=int) or default_per_page
    return max(page, 1), max(min(per_page, 100), 1)


def page_payload(items: Iterable[dict], total: int, page: int, per_page: int) -> Dict[str, Any]:
    pages = math.ceil(total / per_page) if total else 1
    return {"ok": True, "items": list(items), "page": page, "per_page": per_page, "pages": pages, "total": total}
