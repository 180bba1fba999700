"""Tests for guild and emblem conversion."""

from uuid import UUID

import pytest

from gw2_client import guilds
from gw2_client.exceptions import ConversionError
from gw2_client.models import EmblemTransformations

GUILD = {
    "guild_id": "75FD83CF-0C45-4834-BC4C-097F93A487AF",
    "guild_name": "Veterans Of Lions Arch",
    "tag": "LA",
    "emblem": {
        "background_id": 27,
        "foreground_id": 114,
        "flags": ["FlipBackgroundHorizontal", "FlipForegroundVertical", "Spin"],
        "background_color_id": 11,
        "foreground_primary_color_id": 584,
        "foreground_secondary_color_id": 64,
    },
}


def test_convert_guild():
    guild = guilds.convert_guild(GUILD)

    assert guild.guild_id == UUID("75fd83cf-0c45-4834-bc4c-097f93a487af")
    assert guild.guild_name == "Veterans Of Lions Arch"
    assert guild.tag == "LA"


def test_emblem_fields():
    emblem = guilds.convert_guild(GUILD).emblem

    assert emblem.background_id == 27
    assert emblem.foreground_id == 114
    assert emblem.background_color_id == 11
    assert emblem.foreground_primary_color_id == 584
    assert emblem.foreground_secondary_color_id == 64
    assert emblem.flags == (
        EmblemTransformations.FLIP_BACKGROUND_HORIZONTAL
        | EmblemTransformations.FLIP_FOREGROUND_VERTICAL
    )


def test_emblem_flags_absent_vs_empty():
    base = {k: v for k, v in GUILD["emblem"].items() if k != "flags"}

    assert guilds.convert_emblem(base).flags is None
    assert guilds.convert_emblem({**base, "flags": []}).flags == EmblemTransformations(0)


def test_guild_without_emblem():
    guild = guilds.convert_guild({**GUILD, "emblem": None})

    assert guild.emblem is None


@pytest.mark.parametrize("guild_id", ["LA", 12345, None, ["75FD83CF-0C45-4834-BC4C-097F93A487AF"]])
def test_malformed_guild_id(guild_id):
    with pytest.raises(ConversionError, match="guild_id"):
        guilds.convert_guild({**GUILD, "guild_id": guild_id})


def test_null_emblem_contract_fails_fast():
    with pytest.raises(TypeError):
        guilds.convert_emblem(None)
