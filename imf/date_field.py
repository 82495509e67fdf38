"""RFC 5322 date-time formatting.

WHY: Content-Disposition carries creation, modification and read dates
as quoted RFC 5322 date-time strings (RFC 2183 section 2.4).

HOW: Delegates to ``email.utils.format_datetime`` after pinning naive
datetimes to UTC.

RULES:
- Naive datetimes are interpreted as UTC and rendered with ``+0000``
- Aware datetimes keep their own offset
- Output example: ``Fri, 21 Nov 1997 09:55:06 +0000``
"""

from __future__ import annotations

from datetime import datetime, timezone
from email.utils import format_datetime


def format_date(dt: datetime) -> str:
    """Return ``dt`` as an RFC 5322 date-time string, naive values as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt)
