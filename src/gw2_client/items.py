"""
Item converters for /v2/items and /v1/item_details.

The item ``type`` selects the family; families with sub-categories dispatch
again on ``details.type`` (and consumables a third time on
``details.unlock_type``). Leaf tables only pick the variant, so family fields
such as weapon power or armor weight are mapped even for unknown leaves.
Scalar fields are then copied by one shared mapping routine.
"""

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from gw2_client.contracts import ItemContract, ItemContractV1
from gw2_client.dispatch import DispatchTable, variant_table
from gw2_client.exceptions import ConversionError
from gw2_client.fields import (
    IconFile,
    parse_enum,
    parse_icon_url,
    parse_optional_flags,
    try_parse_int,
)
from gw2_client.models import (
    SKINNABLE_KINDS,
    ArmorDetails,
    ArmorType,
    BagDetails,
    ConsumableDetails,
    ConsumableType,
    ContainerDetails,
    ContainerType,
    DamageType,
    GameTypes,
    GatheringToolDetails,
    GatheringToolType,
    GizmoDetails,
    GizmoType,
    Item,
    ItemDetails,
    ItemFlags,
    ItemKind,
    ItemRarity,
    ItemRestrictions,
    ToolDetails,
    ToolType,
    TrinketDetails,
    TrinketType,
    UnlockType,
    UpgradeComponentDetails,
    UpgradeComponentType,
    WeaponDetails,
    WeaponType,
    WeightClass,
)

log = logging.getLogger(__name__)

ItemVariant = tuple[ItemKind, ItemDetails | None]

# --- Leaf tables ---


def _leaf(variant: Any, details: Mapping[str, Any]) -> Any:
    return variant


ARMOR_TYPES = variant_table(ArmorType, _leaf)
WEAPON_TYPES = variant_table(WeaponType, _leaf)
CONSUMABLE_TYPES = variant_table(ConsumableType, _leaf)
UNLOCK_TYPES = variant_table(UnlockType, _leaf)
GATHERING_TOOL_TYPES = variant_table(GatheringToolType, _leaf)
TOOL_TYPES = variant_table(ToolType, _leaf)
CONTAINER_TYPES = variant_table(ContainerType, _leaf)
GIZMO_TYPES = variant_table(GizmoType, _leaf)
TRINKET_TYPES = variant_table(TrinketType, _leaf)
UPGRADE_COMPONENT_TYPES = variant_table(UpgradeComponentType, _leaf)

# --- Family details ---


def _armor(details: Mapping[str, Any]) -> ArmorDetails:
    weight_class = details.get("weight_class")
    return ArmorDetails(
        armor_type=ARMOR_TYPES.resolve(details.get("type"), details),
        weight_class=parse_enum(WeightClass, weight_class, WeightClass.UNKNOWN)
        if weight_class
        else None,
        defense=try_parse_int(details.get("defense")),
    )


def _weapon(details: Mapping[str, Any]) -> WeaponDetails:
    damage_type = details.get("damage_type")
    return WeaponDetails(
        weapon_type=WEAPON_TYPES.resolve(details.get("type"), details),
        damage_type=parse_enum(DamageType, damage_type, DamageType.UNKNOWN)
        if damage_type
        else None,
        min_power=try_parse_int(details.get("min_power")),
        max_power=try_parse_int(details.get("max_power")),
        defense=try_parse_int(details.get("defense")),
    )


def _unlock(details: Mapping[str, Any]) -> ConsumableDetails:
    unlock_type = UNLOCK_TYPES.resolve(details.get("unlock_type"), details)
    return ConsumableDetails(
        consumable_type=ConsumableType.UNLOCK,
        unlock_type=unlock_type,
        description=details.get("description"),
        recipe_id=try_parse_int(details.get("recipe_id"))
        if unlock_type is UnlockType.CRAFTING_RECIPE
        else None,
        color_id=try_parse_int(details.get("color_id")) if unlock_type is UnlockType.DYE else None,
    )


def _consumable(details: Mapping[str, Any]) -> ConsumableDetails:
    consumable_type = CONSUMABLE_TYPES.resolve(details.get("type"), details)
    if consumable_type is ConsumableType.UNLOCK:
        return _unlock(details)
    return ConsumableDetails(
        consumable_type=consumable_type,
        duration_ms=try_parse_int(details.get("duration_ms")),
        description=details.get("description"),
    )


def _tool(details: Mapping[str, Any]) -> ToolDetails:
    return ToolDetails(
        tool_type=TOOL_TYPES.resolve(details.get("type"), details),
        charges=try_parse_int(details.get("charges")),
    )


def _upgrade_component(details: Mapping[str, Any]) -> UpgradeComponentDetails:
    return UpgradeComponentDetails(
        upgrade_type=UPGRADE_COMPONENT_TYPES.resolve(details.get("type"), details),
        suffix=details.get("suffix") or None,
    )


def _bag(details: Mapping[str, Any]) -> BagDetails:
    no_sell_or_sort = details.get("no_sell_or_sort")
    if isinstance(no_sell_or_sort, str):
        no_sell_or_sort = try_parse_int(no_sell_or_sort)
    return BagDetails(
        size=try_parse_int(details.get("size")),
        no_sell_or_sort=bool(no_sell_or_sort),
    )


# --- Family table ---


def _plain(kind: ItemKind) -> Callable[[Mapping[str, Any]], ItemVariant]:
    def convert(details: Mapping[str, Any]) -> ItemVariant:
        return kind, None

    return convert


def _family(
    kind: ItemKind, build: Callable[[Mapping[str, Any]], ItemDetails]
) -> Callable[[Mapping[str, Any]], ItemVariant]:
    def convert(details: Mapping[str, Any]) -> ItemVariant:
        return kind, build(details)

    return convert


ITEM_TYPES: DispatchTable[ItemVariant] = DispatchTable(
    {
        "Armor": _family(ItemKind.ARMOR, _armor),
        "Back": _plain(ItemKind.BACK),
        "Bag": _family(ItemKind.BAG, _bag),
        "Consumable": _family(ItemKind.CONSUMABLE, _consumable),
        "Container": _family(
            ItemKind.CONTAINER,
            lambda d: ContainerDetails(container_type=CONTAINER_TYPES.resolve(d.get("type"), d)),
        ),
        "CraftingMaterial": _plain(ItemKind.CRAFTING_MATERIAL),
        "Gathering": _family(
            ItemKind.GATHERING_TOOL,
            lambda d: GatheringToolDetails(
                tool_type=GATHERING_TOOL_TYPES.resolve(d.get("type"), d)
            ),
        ),
        "Gizmo": _family(
            ItemKind.GIZMO,
            lambda d: GizmoDetails(gizmo_type=GIZMO_TYPES.resolve(d.get("type"), d)),
        ),
        "MiniPet": _plain(ItemKind.MINIATURE),
        "Tool": _family(ItemKind.TOOL, _tool),
        "Trait": _plain(ItemKind.TRAIT_GUIDE),
        "Trinket": _family(
            ItemKind.TRINKET,
            lambda d: TrinketDetails(trinket_type=TRINKET_TYPES.resolve(d.get("type"), d)),
        ),
        "Trophy": _plain(ItemKind.TROPHY),
        "UpgradeComponent": _family(ItemKind.UPGRADE_COMPONENT, _upgrade_component),
        "Weapon": _family(ItemKind.WEAPON, _weapon),
    },
    fallback=lambda: (ItemKind.UNKNOWN, None),
)

# --- Field mapping ---


def _map_item(
    contract: Mapping[str, Any],
    variant: ItemVariant,
    item_id: int,
    icon: IconFile | None,
) -> Item:
    kind, details = variant

    default_skin_id = None
    if kind in SKINNABLE_KINDS:
        default_skin_id = try_parse_int(contract.get("default_skin"))

    return Item(
        kind=kind,
        details=details,
        item_id=item_id,
        name=contract.get("name"),
        description=contract.get("description"),
        level=try_parse_int(contract.get("level")) or 0,
        rarity=parse_enum(ItemRarity, contract.get("rarity"), ItemRarity.UNKNOWN),
        vendor_value=try_parse_int(contract.get("vendor_value")) or 0,
        default_skin_id=default_skin_id,
        game_types=parse_optional_flags(GameTypes, contract.get("game_types")),
        flags=parse_optional_flags(ItemFlags, contract.get("flags")),
        restrictions=parse_optional_flags(ItemRestrictions, contract.get("restrictions")),
        icon_file_url=icon.url if icon else None,
        icon_file_signature=icon.signature if icon else None,
        icon_file_id=icon.file_id if icon else None,
    )


def convert_item(contract: ItemContract) -> Item:
    """Convert one /v2/items record."""
    if contract is None:
        raise TypeError("Item contract must not be None")

    item_id = try_parse_int(contract.get("id"))
    if item_id is None:
        raise ConversionError(contract, "missing or non-numeric 'id'")

    variant = ITEM_TYPES.resolve(contract.get("type"), contract.get("details") or {})
    return _map_item(contract, variant, item_id, parse_icon_url(contract.get("icon")))


def _v1_details_key(item_type: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", item_type).lower()


def convert_item_v1(contract: ItemContractV1) -> Item:
    """
    Convert one /v1/item_details record.

    v1 sends numbers as strings, the icon as separate file id and signature
    fields, and the details object under a key named after the type
    (``"weapon"``, ``"upgrade_component"``, ...).
    """
    if contract is None:
        raise TypeError("Item contract must not be None")

    item_id = try_parse_int(contract.get("item_id"))
    if item_id is None:
        raise ConversionError(contract, "missing or non-numeric 'item_id'")

    item_type = contract.get("type")
    details = contract.get(_v1_details_key(item_type)) if item_type else None
    variant = ITEM_TYPES.resolve(item_type, details or {})

    signature = contract.get("icon_file_signature") or None
    icon = IconFile(
        url=None,
        signature=signature,
        file_id=try_parse_int(contract.get("icon_file_id")),
    )
    return _map_item(contract, variant, item_id, icon)


def convert_items(
    contracts: Iterable[ItemContract] | None,
    strict: bool = False,
    converter: Callable[[Any], Item] = convert_item,
) -> list[Item]:
    """
    Convert a batch of item records, preserving order.

    A record with a malformed identifier is skipped with a warning; with
    ``strict=True`` the ConversionError propagates and the batch fails.
    """
    items: list[Item] = []
    for contract in contracts or ():
        try:
            items.append(converter(contract))
        except ConversionError as e:
            if strict:
                raise
            log.warning("Skipping item: %s", e.reason)
    return items
