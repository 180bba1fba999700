"""
GW2 API client for items, recipes, WvW matches, guilds and renders.

Each call sends one request to the official API (api.guildwars2.com), parses
one JSON body and hands it to the matching converter. Transport failures are
raised as APIError; there is no retry or caching at this layer.
"""

import logging
from typing import Any
from uuid import UUID

import httpx

from gw2_client.config import get_settings
from gw2_client.exceptions import APIError
from gw2_client.guilds import convert_guild
from gw2_client.items import convert_item, convert_item_v1, convert_items
from gw2_client.models import Guild, Item, Match, Matchup, ObjectiveName, Recipe
from gw2_client.recipes import convert_recipe
from gw2_client.rendering import Renderable, build_render_url
from gw2_client.wvw import assemble_matchups, assemble_objective_names, convert_match

log = logging.getLogger(__name__)

_BULK_LIMIT = 200


def _get(url: str, what: str, params: dict[str, Any] | None = None) -> httpx.Response:
    settings = get_settings()
    try:
        response = httpx.get(url, params=params, timeout=settings.api_timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise APIError(f"Failed to fetch {what}: HTTP {e.response.status_code}") from e
    except httpx.RequestError as e:
        raise APIError(f"Network error fetching {what}: {e}") from e
    return response


def _api_url(path: str) -> str:
    return f"{get_settings().base_url.rstrip('/')}{path}"


def _language(language: str | None) -> str:
    return language or get_settings().default_language


def get_item(item_id: int, language: str | None = None) -> Item:
    if item_id <= 0:
        raise APIError(f"Invalid item ID: {item_id}")

    log.info("Item %d: fetching from GW2 API", item_id)
    response = _get(
        _api_url(f"/v2/items/{item_id}"), f"item {item_id}", {"lang": _language(language)}
    )
    return convert_item(response.json())


def get_items(
    item_ids: list[int], language: str | None = None, *, strict: bool = False
) -> list[Item]:
    if not item_ids:
        return []
    if len(item_ids) > _BULK_LIMIT:
        raise APIError(f"Bulk fetch limited to {_BULK_LIMIT} items, got {len(item_ids)}")

    log.debug("Batch of %d items: fetching from API", len(item_ids))
    ids_param = ",".join(str(i) for i in item_ids)
    response = _get(
        _api_url("/v2/items"), "item batch", {"ids": ids_param, "lang": _language(language)}
    )
    return convert_items(response.json(), strict=strict)


def get_item_details_v1(item_id: int, language: str | None = None) -> Item:
    if item_id <= 0:
        raise APIError(f"Invalid item ID: {item_id}")

    log.info("Item %d: fetching v1 item details", item_id)
    response = _get(
        _api_url("/v1/item_details.json"),
        f"item details {item_id}",
        {"item_id": item_id, "lang": _language(language)},
    )
    return convert_item_v1(response.json())


def get_recipe(recipe_id: int) -> Recipe:
    if recipe_id <= 0:
        raise APIError(f"Invalid recipe ID: {recipe_id}")

    log.info("Recipe %d: fetching from GW2 API", recipe_id)
    response = _get(_api_url(f"/v2/recipes/{recipe_id}"), f"recipe {recipe_id}")
    return convert_recipe(response.json())


def get_matches(*, strict: bool = False) -> dict[str, Matchup]:
    log.info("Fetching WvW matches")
    response = _get(_api_url("/v1/wvw/matches.json"), "WvW matches")
    matchups = assemble_matchups(response.json(), strict=strict)
    log.info("Got %d WvW matches", len(matchups))
    return matchups


def get_match_details(match_id: str, *, strict: bool = False) -> Match:
    if not match_id:
        raise APIError("Invalid match ID: empty")

    log.info("Match %s: fetching details", match_id)
    response = _get(
        _api_url("/v1/wvw/match_details.json"),
        f"match details {match_id}",
        {"match_id": match_id},
    )
    return convert_match(response.json(), strict=strict)


def get_objective_names(
    language: str | None = None, *, strict: bool = False
) -> dict[int, ObjectiveName]:
    requested = _language(language)
    log.info("Fetching WvW objective names (lang=%s)", requested)
    response = _get(
        _api_url("/v1/wvw/objective_names.json"), "WvW objective names", {"lang": requested}
    )
    negotiated = response.headers.get("Content-Language") or requested
    return assemble_objective_names(response.json(), negotiated, strict=strict)


def get_guild_details(guild_id: str | UUID) -> Guild:
    if not guild_id:
        raise APIError("Invalid guild ID: empty")

    log.info("Guild %s: fetching details", guild_id)
    response = _get(
        _api_url("/v1/guild_details.json"), f"guild {guild_id}", {"guild_id": str(guild_id)}
    )
    return convert_guild(response.json())


def get_render(file: Renderable, image_format: str = "png") -> bytes:
    try:
        url = build_render_url(file, image_format)
    except ValueError as e:
        raise APIError(f"Cannot render file: {e}") from e

    log.info("Fetching render %s", url)
    return _get(url, f"render {url}").content
