"""Tests for discriminator dispatch tables."""

import pytest

from gw2_client.dispatch import DispatchTable, variant_table
from gw2_client.models import GatheringToolType, UnlockType


class _ExplodingDetails(dict):
    def get(self, key, default=None):
        raise AssertionError("fallback must not inspect details")

    def __getitem__(self, key):
        raise AssertionError("fallback must not inspect details")


@pytest.fixture
def table() -> DispatchTable[tuple[str, object]]:
    return DispatchTable(
        {"Known": lambda details: ("known", details.get("value"))},
        fallback=lambda: ("unknown", None),
    )


def test_resolve_known_discriminator(table):
    assert table.resolve("Known", {"value": 5}) == ("known", 5)


def test_resolve_is_case_sensitive(table):
    assert table.resolve("known", {"value": 5}) == ("unknown", None)
    assert table.resolve("KNOWN", {"value": 5}) == ("unknown", None)


def test_resolve_missing_discriminator_uses_fallback(table):
    assert table.resolve(None, None) == ("unknown", None)
    assert table.resolve("", {}) == ("unknown", None)


def test_fallback_does_not_inspect_details(table):
    assert table.resolve("Brand New", _ExplodingDetails()) == ("unknown", None)


def test_known_discriminator_with_null_details_fails_fast(table):
    with pytest.raises(TypeError, match="must not be None"):
        table.resolve("Known", None)


def test_table_is_fixed_at_construction():
    converters = {"A": lambda details: "a"}
    table = DispatchTable(converters, fallback=lambda: "fallback")

    converters["B"] = lambda details: "b"

    assert "B" not in table
    assert table.resolve("B", {}) == "fallback"
    assert len(table) == 1


def test_variant_table_covers_every_member_but_unknown():
    table = variant_table(GatheringToolType, lambda variant, details: variant)

    assert table.discriminators == {"Foraging", "Logging", "Mining"}
    assert table.resolve("Mining", {}) is GatheringToolType.MINING
    assert table.resolve("Unknown", {}) is GatheringToolType.UNKNOWN
    assert table.resolve("Smelting", {}) is GatheringToolType.UNKNOWN


def test_variant_table_passes_details_to_builder():
    table = variant_table(UnlockType, lambda variant, details: (variant, details.get("color_id")))

    assert table.resolve("Dye", {"color_id": 12}) == (UnlockType.DYE, 12)
    assert table.resolve("GliderSkin", {"color_id": 12}) == (UnlockType.UNKNOWN, None)


def test_nested_tables_resolve_recursively():
    inner = variant_table(GatheringToolType, lambda variant, details: variant)
    outer = DispatchTable(
        {"Gathering": lambda details: ("gathering", inner.resolve(details.get("type"), details))},
        fallback=lambda: ("unknown", None),
    )

    assert outer.resolve("Gathering", {"type": "Logging"}) == (
        "gathering",
        GatheringToolType.LOGGING,
    )
    assert outer.resolve("Gathering", {"type": "Smelting"}) == (
        "gathering",
        GatheringToolType.UNKNOWN,
    )
    assert outer.resolve("Weapon", {"type": "Logging"}) == ("unknown", None)
