from __future__ import annotations
from dataclasses import fields as dc_fields
from typing import Any, Dict, Iterable

from .model import Document, ResolutionFailedError


def document_asdict(doc: Document, *, fields: Iterable[str] | None = None) -> Dict[str, Any]:
    """Return a JSON-serialisable dict (skip None/empty) optionally filtered."""
    payload: Dict[str, Any] = {}
    for f in dc_fields(doc):
        value = getattr(doc, f.name)
        if value is None or value == ():
            continue
        if isinstance(value, tuple):
            value = list(value)
        elif f.name == "expires":
            value = value.isoformat()
        payload[f.name] = value
    if fields:
        wanted = set(fields)
        payload = {k: v for k, v in payload.items() if k in wanted}
    return payload


def failure_asdict(error: Exception) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"success": False, "error": str(error)}
    if isinstance(error, ResolutionFailedError):
        payload["errors"] = [{"location": a.location, "error": str(a.error)} for a in error.attempts]
    return payload
