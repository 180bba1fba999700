"""Guild converters for /v1/guild_details, including the emblem."""

from gw2_client.contracts import EmblemContract, GuildContract
from gw2_client.exceptions import ConversionError
from gw2_client.fields import parse_optional_flags, try_parse_int, try_parse_uuid
from gw2_client.models import Emblem, EmblemTransformations, Guild


def convert_emblem(contract: EmblemContract) -> Emblem:
    if contract is None:
        raise TypeError("Emblem contract must not be None")

    return Emblem(
        background_id=try_parse_int(contract.get("background_id")) or 0,
        foreground_id=try_parse_int(contract.get("foreground_id")) or 0,
        background_color_id=try_parse_int(contract.get("background_color_id")) or 0,
        foreground_primary_color_id=try_parse_int(contract.get("foreground_primary_color_id"))
        or 0,
        foreground_secondary_color_id=try_parse_int(
            contract.get("foreground_secondary_color_id")
        )
        or 0,
        flags=parse_optional_flags(EmblemTransformations, contract.get("flags")),
    )


def convert_guild(contract: GuildContract) -> Guild:
    """Convert a /v1/guild_details response."""
    if contract is None:
        raise TypeError("Guild contract must not be None")

    guild_id = try_parse_uuid(contract.get("guild_id"))
    if guild_id is None:
        raise ConversionError(contract, "missing or malformed 'guild_id'")

    emblem = contract.get("emblem")
    return Guild(
        guild_id=guild_id,
        guild_name=contract.get("guild_name"),
        tag=contract.get("tag"),
        emblem=convert_emblem(emblem) if emblem is not None else None,
    )
