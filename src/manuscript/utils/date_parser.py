"""Utility for turning front matter dates into timezone-aware datetimes."""

import datetime
import re
from datetime import timezone
from typing import Any, Optional, Protocol

from dateutil import parser


class DateParserProtocol(Protocol):
    """Protocol defining the interface for date parsing."""

    def parse_date(self, value: Any) -> Optional[datetime.datetime]:
        """Parse a front matter date value into a timezone-aware datetime object (UTC).

        Args:
            value: A string, ``datetime.date`` or ``datetime.datetime``. YAML hands
                unquoted ISO dates over as ``date`` objects, quoted ones as strings.

        Returns:
            A timezone-aware datetime object (UTC) or None if parsing fails.
        """
        ...


class FrontMatterDateParser(DateParserProtocol):
    """Normalises the loosely written dates found in article front matter."""

    # Timezone abbreviations dateutil does not resolve on its own
    _timezone_replacements = {
        "PDT": "-0700",
        "PST": "-0800",
        "EDT": "-0400",
        "EST": "-0500",
        "CEST": "+0200",
        "CET": "+0100",
        "GMT": "+0000",
        "UTC": "+0000",
    }

    def parse_date(self, value: Any) -> Optional[datetime.datetime]:
        """Parse a front matter date value into a timezone-aware datetime object (UTC)."""
        if value is None or value == "":
            return None

        parsed_date = None
        if isinstance(value, datetime.datetime):
            parsed_date = value
        elif isinstance(value, datetime.date):
            parsed_date = datetime.datetime.combine(value, datetime.time.min)
        elif isinstance(value, str):
            parsed_date = self._parse_string(value)

        if parsed_date is None:
            return None

        # Naive dates are taken as UTC
        if parsed_date.tzinfo is None:
            parsed_date = parsed_date.replace(tzinfo=timezone.utc)
        return parsed_date.astimezone(timezone.utc)

    def _parse_string(self, date_str: str) -> Optional[datetime.datetime]:
        # dateutil drops unknown abbreviations silently, so swap them for offsets first
        normalized_date_str = date_str
        for tz, offset in self._timezone_replacements.items():
            pattern = r"\b" + re.escape(tz) + r"\b"
            normalized_date_str = re.sub(pattern, offset, normalized_date_str)

        # Attempt 1: standard parsing (ISO 8601, RFC 822, offsets)
        try:
            return parser.parse(normalized_date_str)
        except (ValueError, OverflowError):
            pass

        # Attempt 2: the unmodified string, in case the replacement broke it
        if normalized_date_str != date_str:
            try:
                return parser.parse(date_str)
            except (ValueError, OverflowError):
                pass

        # Attempt 3: fuzzy parsing finds a date inside surrounding text
        try:
            return parser.parse(date_str, fuzzy=True)
        except (ValueError, OverflowError):
            return None


def to_iso_string(value: Any) -> str:
    """Render a front matter date value the way it is exposed on article records."""
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)
