"""
World vs World converters for /v1/wvw/matches, /v1/wvw/match_details and
/v1/wvw/objective_names.

Collections that consumers look up by identifier are assembled into dicts.
The key always comes from the converted entity, so any parsing of the wire
identifier happens before keying. A missing collection yields an empty dict.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from gw2_client.contracts import (
    CompetitiveMapContract,
    MapBonusContract,
    MatchContract,
    MatchupCollectionContract,
    MatchupContract,
    ObjectiveContract,
    ObjectiveNameContract,
)
from gw2_client.dispatch import variant_table
from gw2_client.exceptions import ConversionError
from gw2_client.fields import (
    parse_enum,
    try_parse_datetime,
    try_parse_int,
    try_parse_uuid,
    two_letter_language,
)
from gw2_client.models import (
    CompetitiveMap,
    CompetitiveMapType,
    MapBonus,
    MapBonusType,
    Match,
    Matchup,
    Objective,
    ObjectiveName,
    Scoreboard,
    TeamColor,
)

log = logging.getLogger(__name__)

C = TypeVar("C")
K = TypeVar("K")
T = TypeVar("T")

MAP_BONUS_TYPES = variant_table(MapBonusType, lambda variant, details: variant)
COMPETITIVE_MAP_TYPES = variant_table(CompetitiveMapType, lambda variant, details: variant)


def assemble_by_key(
    contracts: Iterable[C] | None,
    convert: Callable[[C], T],
    key: Callable[[T], K],
    kind: str,
    strict: bool = False,
) -> dict[K, T]:
    """
    Convert each record and key the result by an entity field.

    Records raising ConversionError are skipped with a warning unless
    ``strict`` is set. Duplicate keys keep the last record.
    """
    values: dict[K, T] = {}
    for contract in contracts or ():
        try:
            value = convert(contract)
        except ConversionError as e:
            if strict:
                raise
            log.warning("Skipping %s: %s", kind, e.reason)
            continue

        value_key = key(value)
        if value_key in values:
            log.warning("Duplicate %s %r, keeping the last one", kind, value_key)
        values[value_key] = value
    return values


def convert_team_color(value: str | None) -> TeamColor | None:
    if value is None:
        return None
    return parse_enum(TeamColor, value, TeamColor.UNKNOWN)


def convert_scoreboard(scores: list[int] | None) -> Scoreboard | None:
    if scores is None or len(scores) != 3:
        return None
    red, blue, green = (try_parse_int(score) or 0 for score in scores)
    return Scoreboard(red=red, blue=blue, green=green)


# --- Match details ---


def convert_objective(contract: ObjectiveContract) -> Objective:
    if contract is None:
        raise TypeError("Objective contract must not be None")

    objective_id = try_parse_int(contract.get("id"))
    if objective_id is None:
        raise ConversionError(contract, "missing or non-numeric objective 'id'")

    return Objective(
        objective_id=objective_id,
        owner=convert_team_color(contract.get("owner")),
        owner_guild_id=try_parse_uuid(contract.get("owner_guild")),
    )


def assemble_objectives(
    contracts: Iterable[ObjectiveContract] | None, strict: bool = False
) -> dict[int, Objective]:
    return assemble_by_key(
        contracts, convert_objective, lambda o: o.objective_id, "objective", strict
    )


def convert_map_bonus(contract: MapBonusContract) -> MapBonus:
    if contract is None:
        raise TypeError("Map bonus contract must not be None")

    bonus_type = MAP_BONUS_TYPES.resolve(contract.get("type"), contract)
    return MapBonus(bonus_type=bonus_type, owner=convert_team_color(contract.get("owner")))


def convert_competitive_map(
    contract: CompetitiveMapContract, strict: bool = False
) -> CompetitiveMap:
    if contract is None:
        raise TypeError("Competitive map contract must not be None")

    return CompetitiveMap(
        map_type=COMPETITIVE_MAP_TYPES.resolve(contract.get("type"), contract),
        scores=convert_scoreboard(contract.get("scores")),
        objectives=assemble_objectives(contract.get("objectives"), strict),
        bonuses=[convert_map_bonus(b) for b in contract.get("bonuses") or ()],
    )


def convert_match(contract: MatchContract, strict: bool = False) -> Match:
    """Convert a /v1/wvw/match_details response."""
    if contract is None:
        raise TypeError("Match contract must not be None")

    return Match(
        match_id=contract.get("match_id"),
        scores=convert_scoreboard(contract.get("scores")),
        maps=[convert_competitive_map(m, strict) for m in contract.get("maps") or ()],
    )


# --- Matches ---


def convert_matchup(contract: MatchupContract) -> Matchup:
    if contract is None:
        raise TypeError("Matchup contract must not be None")

    match_id = contract.get("wvw_match_id")
    if not match_id or not isinstance(match_id, str):
        raise ConversionError(contract, "missing or malformed 'wvw_match_id'")

    return Matchup(
        match_id=match_id,
        red_world_id=try_parse_int(contract.get("red_world_id")) or 0,
        blue_world_id=try_parse_int(contract.get("blue_world_id")) or 0,
        green_world_id=try_parse_int(contract.get("green_world_id")) or 0,
        start_time=try_parse_datetime(contract.get("start_time")),
        end_time=try_parse_datetime(contract.get("end_time")),
    )


def assemble_matchups(
    content: MatchupCollectionContract | Mapping[str, Any] | None, strict: bool = False
) -> dict[str, Matchup]:
    """Convert a /v1/wvw/matches response into matchups keyed by match id."""
    matchups = content.get("wvw_matches") if content is not None else None
    return assemble_by_key(matchups, convert_matchup, lambda m: m.match_id, "matchup", strict)


# --- Objective names ---


def convert_objective_name(contract: ObjectiveNameContract) -> ObjectiveName:
    if contract is None:
        raise TypeError("Objective name contract must not be None")

    objective_id = try_parse_int(contract.get("id"))
    if objective_id is None:
        raise ConversionError(contract, "missing or non-numeric objective 'id'")
    return ObjectiveName(objective_id=objective_id, name=contract.get("name"))


def assemble_objective_names(
    contracts: Iterable[ObjectiveNameContract] | None,
    language: str,
    strict: bool = False,
) -> dict[int, ObjectiveName]:
    """
    Convert a /v1/wvw/objective_names response keyed by objective id.

    The records carry no language of their own; ``language`` is the culture
    the server answered in and is stamped onto every name after conversion.
    """
    names = assemble_by_key(
        contracts, convert_objective_name, lambda n: n.objective_id, "objective name", strict
    )
    language = two_letter_language(language)
    return {
        objective_id: name.model_copy(update={"language": language})
        for objective_id, name in names.items()
    }
