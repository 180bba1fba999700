"""
Field-level parsing helpers shared by all converters.

Covers enum and flag-set decoding, lenient integer parsing, and splitting
render-service icon URLs into file signature and file identifier. None of
these raise on malformed input; they return ``None`` (or a fallback) and let
the caller leave the entity field unset.
"""

import logging
from collections.abc import Iterable
from datetime import datetime
from enum import Enum, Flag
from functools import cache
from typing import Any, NamedTuple, TypeVar
from urllib.parse import urlsplit
from uuid import UUID

log = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)
F = TypeVar("F", bound=Flag)


def _normalize(name: str) -> str:
    return name.replace("_", "").lower()


@cache
def _enum_lookup(enum_cls: type[Enum]) -> dict[str, Enum]:
    lookup: dict[str, Enum] = {}
    for member in enum_cls.__members__.values():
        lookup[_normalize(member.name)] = member
        if isinstance(member.value, str):
            lookup[_normalize(member.value)] = member
    return lookup


def parse_enum(enum_cls: type[E], value: Any, default: E) -> E:
    """Case-insensitive match on member name or value, ``default`` when nothing matches."""
    if not value or not isinstance(value, str):
        return default
    return _enum_lookup(enum_cls).get(_normalize(value), default)  # type: ignore[return-value]


def parse_flags(flag_cls: type[F], names: Iterable[str]) -> F:
    """Combine flag names into one flag value; unrecognized names are ignored."""
    lookup = _enum_lookup(flag_cls)
    result = flag_cls(0)
    for name in names:
        member = lookup.get(_normalize(name)) if isinstance(name, str) else None
        if member is not None:
            result |= member  # type: ignore[assignment]
    return result


def parse_optional_flags(flag_cls: type[F], names: Iterable[str] | None) -> F | None:
    """Absent collections stay ``None``; present-but-empty becomes ``flag_cls(0)``."""
    if names is None:
        return None
    return parse_flags(flag_cls, names)


def try_parse_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def try_parse_uuid(value: Any) -> UUID | None:
    if not value or not isinstance(value, str):
        return None
    try:
        return UUID(value)
    except ValueError:
        log.debug("Ignoring malformed guild identifier %r", value)
        return None


def try_parse_datetime(value: Any) -> datetime | None:
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        log.debug("Ignoring malformed timestamp %r", value)
        return None


class IconFile(NamedTuple):
    url: str | None
    signature: str | None
    file_id: int | None


def parse_icon_url(icon: str | None) -> IconFile | None:
    """
    Split a render-service URL into its file signature and identifier.

    Format: {scheme}://{host}/file/{signature}/{identifier}.{extension}

    Returns None when the value is not an absolute URL. Signature and
    identifier are only set when the path has the expected shape.
    """
    if not icon:
        return None
    try:
        parts = urlsplit(icon)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None

    segments = parts.path.split(".")[0].split("/")

    signature = None
    if len(segments) >= 3 and segments[2]:
        signature = segments[2]

    file_id = None
    if len(segments) >= 4:
        file_id = try_parse_int(segments[3])

    return IconFile(url=icon, signature=signature, file_id=file_id)


def two_letter_language(culture: str) -> str:
    """``"de-DE"`` -> ``"de"``."""
    return culture.replace("_", "-").split("-")[0].strip().lower()
