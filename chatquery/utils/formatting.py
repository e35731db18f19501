"""Shared helpers for rendering IRC-style status lines."""

from __future__ import annotations

import re
from typing import Optional

BOLD = "\x02"

_ISO_DURATION_RE = re.compile(
    r"^P(?:(?P<days>\d+)D)?"
    r"(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+(?:\.\d+)?)S)?)?$"
)


def bold(text: str) -> str:
    """Wrap text in a pair of bold control bytes."""
    return f"{BOLD}{text}{BOLD}"


def label(name: str, detail: Optional[str] = None) -> str:
    """Render a provider label prefix, e.g. ``\\x02Bing (\\x02x\\x02):\\x02``."""
    if detail is None:
        return f"{BOLD}{name}:{BOLD}"
    return f"{BOLD}{name} ({BOLD}{detail}{BOLD}):{BOLD}"


def strip_iso_prefix(duration: str) -> str:
    """Drop the ISO-8601 ``PT`` prefix and lower-case: ``PT2M51S`` -> ``2m51s``."""
    if duration.startswith("PT"):
        duration = duration[2:]
    return duration.lower()


def parse_iso_duration(duration: str) -> Optional[int]:
    """Parse an ISO-8601 duration into whole seconds, or None if malformed."""
    match = _ISO_DURATION_RE.match(duration.strip().upper())
    if not match:
        return None
    parts = match.groupdict()
    if all(value is None for value in parts.values()):
        return None
    total = float(parts["seconds"] or 0)
    total += int(parts["minutes"] or 0) * 60
    total += int(parts["hours"] or 0) * 3600
    total += int(parts["days"] or 0) * 86400
    return int(round(total))


def humanize_seconds(seconds: int) -> str:
    """Render seconds the way Go's time.Duration prints them: ``1h2m3s``, ``2m51s``, ``45s``."""
    hours, rest = divmod(max(seconds, 0), 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def humanize_duration(duration: str) -> Optional[str]:
    """Parse and humanize an ISO-8601 duration; None when it cannot be parsed."""
    seconds = parse_iso_duration(duration)
    if seconds is None:
        return None
    return humanize_seconds(seconds)
