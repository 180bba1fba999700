"""
Recipe converters for /v2/recipes.

Disciplines and flags are decoded into flag sets. A recipe whose ingredient
has no usable item id fails as a whole.
"""

import logging
from collections.abc import Iterable

from gw2_client.contracts import IngredientContract, RecipeContract
from gw2_client.exceptions import ConversionError
from gw2_client.fields import parse_optional_flags, try_parse_int
from gw2_client.models import CraftingDisciplines, Ingredient, Recipe, RecipeFlags

log = logging.getLogger(__name__)


def convert_ingredient(contract: IngredientContract) -> Ingredient:
    if contract is None:
        raise TypeError("Ingredient contract must not be None")

    item_id = try_parse_int(contract.get("item_id"))
    if item_id is None:
        raise ConversionError(contract, "missing or non-numeric 'item_id'")
    return Ingredient(item_id=item_id, count=try_parse_int(contract.get("count")) or 0)


def convert_recipe(contract: RecipeContract) -> Recipe:
    if contract is None:
        raise TypeError("Recipe contract must not be None")

    recipe_id = try_parse_int(contract.get("id"))
    if recipe_id is None:
        raise ConversionError(contract, "missing or non-numeric 'id'")

    return Recipe(
        recipe_id=recipe_id,
        recipe_type=contract.get("type"),
        output_item_id=try_parse_int(contract.get("output_item_id")) or 0,
        output_item_count=try_parse_int(contract.get("output_item_count")) or 0,
        min_rating=try_parse_int(contract.get("min_rating")) or 0,
        time_to_craft_ms=try_parse_int(contract.get("time_to_craft_ms")),
        disciplines=parse_optional_flags(CraftingDisciplines, contract.get("disciplines")),
        flags=parse_optional_flags(RecipeFlags, contract.get("flags")),
        ingredients=[convert_ingredient(i) for i in contract.get("ingredients") or ()],
    )


def convert_recipes(
    contracts: Iterable[RecipeContract] | None, strict: bool = False
) -> list[Recipe]:
    recipes: list[Recipe] = []
    for contract in contracts or ():
        try:
            recipes.append(convert_recipe(contract))
        except ConversionError as e:
            if strict:
                raise
            log.warning("Skipping recipe: %s", e.reason)
    return recipes
