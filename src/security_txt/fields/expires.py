from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import ClassVar

from ..core.model import DocumentDraft, DuplicateFieldError, InvalidExpiresError
from ..core.field_base import FieldRule

# date-time from RFC 3339 section 5.6; 'T' and 'Z' upper case only
_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:(Z)|([+-])(\d{2}):(\d{2}))",
    re.ASCII,
)


def parse_rfc3339(value: str) -> datetime:
    """Parse a strict RFC 3339 timestamp into an aware datetime.

    Raises ValueError when ``value`` does not match the profile or names an
    impossible date/time.
    """
    m = _RFC3339.fullmatch(value)
    if m is None:
        raise ValueError(f"{value!r} does not match RFC 3339")
    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    frac, zulu, sign, off_h, off_m = m.groups()[6:]

    if zulu:
        tz = timezone.utc
    else:
        off_h, off_m = int(off_h), int(off_m)
        if off_h > 23 or off_m > 59:
            raise ValueError(f"offset out of range in {value!r}")
        offset = timedelta(hours=off_h, minutes=off_m)
        tz = timezone(-offset if sign == "-" else offset)

    # anything beyond microseconds is truncated
    micro = int((frac or "0")[:6].ljust(6, "0"))
    return datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)


class ExpiresField(FieldRule):
    """Required, exactly once."""

    name: ClassVar = "Expires"
    priority: ClassVar = 60

    @classmethod
    def apply(cls, draft: DocumentDraft, value: str) -> None:
        if draft.expires is not None:
            raise DuplicateFieldError(cls.name)
        try:
            draft.expires = parse_rfc3339(value)
        except ValueError:
            raise InvalidExpiresError(value) from None
