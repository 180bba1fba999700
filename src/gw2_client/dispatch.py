"""
Discriminator dispatch for polymorphic API payloads.

A table maps a wire discriminator (the ``type`` field of a contract or of its
nested ``details``) to the converter that builds the matching variant.
Lookups are exact and case-sensitive. Anything the table does not know,
including a missing discriminator, resolves to the family's fallback, so new
server-side types degrade to an Unknown variant instead of failing.

Tables are built once at import time and are read-only afterwards.
"""

from collections.abc import Callable, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

T = TypeVar("T")
V = TypeVar("V", bound=StrEnum)

Converter = Callable[[Mapping[str, Any]], T]


class DispatchTable(Generic[T]):
    def __init__(self, converters: Mapping[str, Converter[T]], fallback: Callable[[], T]):
        self._converters: Mapping[str, Converter[T]] = MappingProxyType(dict(converters))
        self._fallback = fallback

    def __contains__(self, discriminator: object) -> bool:
        return discriminator in self._converters

    def __len__(self) -> int:
        return len(self._converters)

    @property
    def discriminators(self) -> frozenset[str]:
        return frozenset(self._converters)

    def resolve(self, discriminator: str | None, details: Mapping[str, Any] | None) -> T:
        converter = self._converters.get(discriminator) if discriminator is not None else None
        if converter is None:
            return self._fallback()
        if details is None:
            raise TypeError(f"Details for '{discriminator}' must not be None")
        return converter(details)


def variant_table(
    variants: type[V],
    build: Callable[[V, Mapping[str, Any]], T],
    unknown: V | None = None,
) -> DispatchTable[T]:
    """
    Build a table from a closed variant enum whose values are wire discriminators.

    Every member except ``unknown`` (defaults to ``variants.UNKNOWN``) becomes an
    entry; ``unknown`` is the fallback and is built from an empty payload.
    """
    fallback_variant: V = unknown if unknown is not None else variants["UNKNOWN"]
    converters = {
        member.value: _bind(build, member) for member in variants if member is not fallback_variant
    }
    return DispatchTable(converters, lambda: build(fallback_variant, {}))


def _bind(build: Callable[[V, Mapping[str, Any]], T], member: V) -> Converter[T]:
    def convert(details: Mapping[str, Any]) -> T:
        return build(member, details)

    return convert
