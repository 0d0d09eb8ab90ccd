"""
Format checks used by the default registry.

Every check receives a value that already matched the format's type and
returns a bool; none of them raise.
"""

import ipaddress
import re
from datetime import date, datetime, time
from typing import Any

# re.ASCII keeps \d from matching non-ASCII digits
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_RE = re.compile(r"(\d{2}):(\d{2}):(\d{2})", re.ASCII)
_DATE_TIME_RE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(?:\.\d+)?"
    r"(?:Z|[+-](?P<offset_hour>\d{2}):(?P<offset_minute>\d{2}))",
    re.ASCII,
)


def is_date(value: Any) -> bool:
    """Strict YYYY-MM-DD, zero padded, calendar valid, nothing trailing."""
    match = _DATE_RE.fullmatch(value)
    if not match:
        return False
    year, month, day = (int(part) for part in match.groups())
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def is_time(value: Any) -> bool:
    """Strict HH:MM:SS on a 24 hour clock."""
    match = _TIME_RE.fullmatch(value)
    if not match:
        return False
    hour, minute, second = (int(part) for part in match.groups())
    try:
        time(hour, minute, second)
    except ValueError:
        return False
    return True


def is_date_time(value: Any) -> bool:
    """Date, 'T', time with optional fraction, then 'Z' or a +HH:MM/-HH:MM offset."""
    match = _DATE_TIME_RE.fullmatch(value)
    if not match:
        return False
    try:
        datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
        )
    except ValueError:
        return False
    if match["offset_hour"] is not None:
        if int(match["offset_hour"]) > 23 or int(match["offset_minute"]) > 59:
            return False
    return True


def is_regex(value: Any) -> bool:
    """
    True when Python's ``re`` compiles the string.

    A compile-time warning (FutureWarning on nested sets) raised under an
    "error" warnings filter does not make the pattern invalid; nesting too
    deep for the compiler does.
    """
    try:
        re.compile(value)
    except (re.error, OverflowError, RecursionError):
        return False
    except Warning:
        return True
    return True


def is_utc_millisec(value: Any) -> bool:
    return True


# -----------------------------------------------------------------------------
# URI references (RFC 3986)
# -----------------------------------------------------------------------------

_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"
_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_PCHAR = rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:@]|{_PCT_ENCODED})"

# RFC 3986 appendix B
_URI_PARTS_RE = re.compile(r"(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?", re.DOTALL)
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_USERINFO_RE = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}:]|{_PCT_ENCODED})*")
_REG_NAME_RE = re.compile(rf"(?:[{_UNRESERVED}{_SUB_DELIMS}]|{_PCT_ENCODED})*")
_IP_FUTURE_RE = re.compile(rf"[vV][0-9A-Fa-f]+\.[{_UNRESERVED}{_SUB_DELIMS}:]+")
_PORT_RE = re.compile(r"[0-9]*")
_PATH_RE = re.compile(rf"(?:{_PCHAR}|/)*")
_QUERY_RE = re.compile(rf"(?:{_PCHAR}|[/?])*")


def _is_authority(authority: str) -> bool:
    userinfo, at, host_port = authority.rpartition("@")
    if at and not _USERINFO_RE.fullmatch(userinfo):
        return False

    if host_port.startswith("["):
        literal, bracket, rest = host_port[1:].partition("]")
        if not bracket:
            return False
        if rest and not (rest.startswith(":") and _PORT_RE.fullmatch(rest[1:])):
            return False
        if _IP_FUTURE_RE.fullmatch(literal):
            return True
        if "%" in literal:
            return False
        try:
            ipaddress.IPv6Address(literal)
        except ValueError:
            return False
        return True

    # reg-name and IPv4 never contain ':', so anything after it is the port
    host, _, port = host_port.partition(":")
    return bool(_REG_NAME_RE.fullmatch(host) and _PORT_RE.fullmatch(port))


def is_uri(value: Any) -> bool:
    """Syntactically well-formed URI reference (absolute or relative)."""
    match = _URI_PARTS_RE.fullmatch(value)
    if not match:
        return False
    scheme, authority, path, query, fragment = match.groups()

    # A first segment containing ':' lands in the scheme group; it must then be a real scheme
    if scheme is not None and not _SCHEME_RE.fullmatch(scheme):
        return False
    # With no scheme, the first path segment of a relative reference must not contain ':'
    if scheme is None and authority is None and ":" in path.split("/", 1)[0]:
        return False
    if authority is not None and not _is_authority(authority):
        return False
    if not _PATH_RE.fullmatch(path):
        return False
    if query is not None and not _QUERY_RE.fullmatch(query):
        return False
    if fragment is not None and not _QUERY_RE.fullmatch(fragment):
        return False
    return True


__all__ = [
    "is_date",
    "is_date_time",
    "is_regex",
    "is_time",
    "is_uri",
    "is_utc_millisec",
]
