"""Tests for API module."""

import pytest
from httpx import HTTPStatusError, Request, RequestError, Response

from gw2_client import api
from gw2_client.exceptions import APIError, ConversionError
from gw2_client.models import GatheringToolType, ItemKind, TeamColor


@pytest.fixture
def mock_get(mocker):
    mock_get = mocker.patch("httpx.get")
    mock_get.return_value.raise_for_status = lambda: None
    return mock_get


def test_get_item_success(mock_get):
    mock_get.return_value.json.return_value = {
        "id": 23029,
        "name": "Orichalcum Mining Pick",
        "type": "Gathering",
        "rarity": "Fine",
        "level": 0,
        "details": {"type": "Mining"},
    }

    result = api.get_item(23029)

    assert result.item_id == 23029
    assert result.kind is ItemKind.GATHERING_TOOL
    assert result.variant is GatheringToolType.MINING
    mock_get.assert_called_once()
    url = mock_get.call_args.args[0]
    assert url == "https://api.guildwars2.com/v2/items/23029"
    assert mock_get.call_args.kwargs["params"] == {"lang": "en"}


def test_get_item_language(mock_get):
    mock_get.return_value.json.return_value = {"id": 1, "type": "Trophy"}

    api.get_item(1, "fr")

    assert mock_get.call_args.kwargs["params"] == {"lang": "fr"}


def test_get_item_invalid_id():
    with pytest.raises(APIError, match="Invalid item ID"):
        api.get_item(0)

    with pytest.raises(APIError, match="Invalid item ID"):
        api.get_item(-1)


def test_get_item_http_error(mocker):
    mock_get = mocker.patch("httpx.get")
    mock_response = Response(404, request=Request("GET", "http://test.com"))
    mock_get.return_value.raise_for_status.side_effect = HTTPStatusError(
        "Not found", request=mock_response.request, response=mock_response
    )

    with pytest.raises(APIError, match="Failed to fetch item 123: HTTP 404"):
        api.get_item(123)


def test_get_item_network_error(mocker):
    mock_get = mocker.patch("httpx.get")
    mock_get.side_effect = RequestError("Connection failed")

    with pytest.raises(APIError, match="Network error fetching item 123"):
        api.get_item(123)


def test_get_item_malformed_record(mock_get):
    mock_get.return_value.json.return_value = {"name": "No id"}

    with pytest.raises(ConversionError):
        api.get_item(5)


def test_get_items_batch(mock_get):
    mock_get.return_value.json.return_value = [
        {"id": 1, "type": "Trophy"},
        {"id": "broken", "type": "Trophy"},
        {"id": 3, "type": "Bag", "details": {"size": 20}},
    ]

    result = api.get_items([1, 2, 3])

    assert [item.item_id for item in result] == [1, 3]
    assert mock_get.call_args.kwargs["params"]["ids"] == "1,2,3"


def test_get_items_batch_strict(mock_get):
    mock_get.return_value.json.return_value = [{"id": "broken", "type": "Trophy"}]

    with pytest.raises(ConversionError):
        api.get_items([1], strict=True)


def test_get_items_empty(mock_get):
    assert api.get_items([]) == []
    mock_get.assert_not_called()


def test_get_items_too_many():
    with pytest.raises(APIError, match="limited to 200"):
        api.get_items(list(range(1, 202)))


def test_get_item_details_v1(mock_get):
    mock_get.return_value.json.return_value = {
        "item_id": "19684",
        "name": "Mithril Ingot",
        "type": "CraftingMaterial",
        "rarity": "Basic",
        "icon_file_id": "220461",
        "icon_file_signature": "43C2B2D9D3B6D4D5E1E8D7F0C2F5E4E1A2B3C4D5",
    }

    result = api.get_item_details_v1(19684)

    assert result.item_id == 19684
    assert result.kind is ItemKind.CRAFTING_MATERIAL
    assert result.icon_file_id == 220461
    assert mock_get.call_args.kwargs["params"]["item_id"] == 19684


def test_get_recipe(mock_get):
    mock_get.return_value.json.return_value = {
        "id": 7319,
        "type": "Refinement",
        "output_item_id": 19684,
        "ingredients": [{"item_id": 19700, "count": 2}],
    }

    result = api.get_recipe(7319)

    assert result.recipe_id == 7319
    assert result.ingredients[0].count == 2


def test_get_recipe_invalid_id():
    with pytest.raises(APIError, match="Invalid recipe ID"):
        api.get_recipe(0)


def test_get_matches(mock_get):
    mock_get.return_value.json.return_value = {
        "wvw_matches": [
            {"wvw_match_id": "1-1", "red_world_id": 1011},
            {"wvw_match_id": "2-1", "red_world_id": 2104},
        ]
    }

    result = api.get_matches()

    assert set(result) == {"1-1", "2-1"}
    assert result["2-1"].red_world_id == 2104


def test_get_match_details(mock_get):
    mock_get.return_value.json.return_value = {
        "match_id": "1-1",
        "scores": [1, 2, 3],
        "maps": [{"type": "Center", "objectives": [{"id": 1, "owner": "Blue"}]}],
    }

    result = api.get_match_details("1-1")

    assert result.maps[0].objectives[1].owner is TeamColor.BLUE
    assert mock_get.call_args.kwargs["params"] == {"match_id": "1-1"}


def test_get_match_details_empty_id():
    with pytest.raises(APIError, match="Invalid match ID"):
        api.get_match_details("")


def test_get_objective_names_uses_response_language(mock_get):
    mock_get.return_value.headers = {"Content-Language": "de-DE"}
    mock_get.return_value.json.return_value = [{"id": "1", "name": "Aussichtspunkt"}]

    result = api.get_objective_names("de")

    assert result[1].language == "de"
    assert mock_get.call_args.kwargs["params"] == {"lang": "de"}


def test_get_objective_names_falls_back_to_requested_language(mock_get):
    mock_get.return_value.headers = {}
    mock_get.return_value.json.return_value = [{"id": "1", "name": "Overlook"}]

    result = api.get_objective_names("es")

    assert result[1].language == "es"


def test_get_guild_details(mock_get):
    mock_get.return_value.json.return_value = {
        "guild_id": "75FD83CF-0C45-4834-BC4C-097F93A487AF",
        "guild_name": "Veterans Of Lions Arch",
        "tag": "LA",
    }

    result = api.get_guild_details("75FD83CF-0C45-4834-BC4C-097F93A487AF")

    assert result.tag == "LA"
    assert result.emblem is None


def test_get_render(mock_get):
    mock_get.return_value.content = b"\x89PNG"
    mock_get.return_value.json.return_value = {
        "id": 1,
        "type": "Trophy",
        "icon": "https://render.guildwars2.com/file/ABC/123.png",
    }
    item = api.get_item(1)

    result = api.get_render(item)

    assert result == b"\x89PNG"
    assert mock_get.call_args.args[0] == "https://render.guildwars2.com/file/ABC/123.png"


def test_get_render_without_icon(mock_get):
    mock_get.return_value.json.return_value = {"id": 1, "type": "Trophy"}
    item = api.get_item(1)

    with pytest.raises(APIError, match="Cannot render file"):
        api.get_render(item)
