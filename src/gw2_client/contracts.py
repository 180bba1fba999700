"""
Type definitions for GW2 API responses.

Provides TypedDict structures matching the GW2 API schema. Field names mirror
the wire JSON exactly; optional fields may be absent or null. Converters take
these as plain dicts and never assume more than the shapes below.
"""

from typing import NotRequired, TypedDict

# --- /v2/items ---


class ItemDetailsContract(TypedDict, total=False):
    type: str
    unlock_type: str
    weight_class: str
    defense: int
    damage_type: str
    min_power: int
    max_power: int
    charges: int
    size: int
    no_sell_or_sort: bool
    duration_ms: int
    description: str
    recipe_id: int
    color_id: int
    suffix: str


class ItemContract(TypedDict):
    id: int
    name: str
    type: str
    level: int
    rarity: str
    vendor_value: int
    description: NotRequired[str | None]
    icon: NotRequired[str | None]
    default_skin: NotRequired[str | int | None]
    game_types: NotRequired[list[str] | None]
    flags: NotRequired[list[str] | None]
    restrictions: NotRequired[list[str] | None]
    details: NotRequired[ItemDetailsContract | None]


# --- /v1/item_details ---


class ItemContractV1(TypedDict):
    item_id: str
    name: str
    type: str
    level: str
    rarity: str
    vendor_value: str
    description: NotRequired[str | None]
    icon_file_id: NotRequired[str | None]
    icon_file_signature: NotRequired[str | None]
    default_skin: NotRequired[str | None]
    game_types: NotRequired[list[str] | None]
    flags: NotRequired[list[str] | None]
    restrictions: NotRequired[list[str] | None]
    # plus one type-specific object keyed by the lower-cased type, e.g. "weapon"


# --- /v2/recipes ---


class IngredientContract(TypedDict):
    item_id: int
    count: int


class RecipeContract(TypedDict):
    id: int
    type: str
    output_item_id: int
    output_item_count: int
    min_rating: NotRequired[int]
    time_to_craft_ms: NotRequired[int]
    disciplines: NotRequired[list[str] | None]
    flags: NotRequired[list[str] | None]
    ingredients: NotRequired[list[IngredientContract] | None]


# --- /v1/wvw/match_details ---


class ObjectiveContract(TypedDict):
    id: int
    owner: NotRequired[str | None]
    owner_guild: NotRequired[str | None]


class MapBonusContract(TypedDict):
    type: str
    owner: NotRequired[str | None]


class CompetitiveMapContract(TypedDict):
    type: str
    scores: NotRequired[list[int] | None]
    objectives: NotRequired[list[ObjectiveContract] | None]
    bonuses: NotRequired[list[MapBonusContract] | None]


class MatchContract(TypedDict):
    match_id: str
    scores: NotRequired[list[int] | None]
    maps: NotRequired[list[CompetitiveMapContract] | None]


# --- /v1/wvw/matches ---


class MatchupContract(TypedDict):
    wvw_match_id: str
    red_world_id: int
    blue_world_id: int
    green_world_id: int
    start_time: NotRequired[str | None]
    end_time: NotRequired[str | None]


class MatchupCollectionContract(TypedDict):
    wvw_matches: NotRequired[list[MatchupContract] | None]


# --- /v1/wvw/objective_names ---


class ObjectiveNameContract(TypedDict):
    id: str
    name: NotRequired[str | None]


# --- /v1/guild_details ---


class EmblemContract(TypedDict):
    background_id: int
    foreground_id: int
    background_color_id: int
    foreground_primary_color_id: int
    foreground_secondary_color_id: int
    flags: NotRequired[list[str] | None]


class GuildContract(TypedDict):
    guild_id: str
    guild_name: str
    tag: str
    emblem: NotRequired[EmblemContract | None]

