"""Pydantic entities for GW2 API data.

Each family is a closed set of variants. The ``StrEnum`` values are the wire
discriminators; every variant enum carries an ``UNKNOWN`` member that new
server-side types degrade to.
"""

from __future__ import annotations

from datetime import datetime
from enum import Flag, StrEnum, auto
from typing import Annotated, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class _Entity(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Shared enums ---


class ItemRarity(StrEnum):
    UNKNOWN = "Unknown"
    JUNK = "Junk"
    BASIC = "Basic"
    FINE = "Fine"
    MASTERWORK = "Masterwork"
    RARE = "Rare"
    EXOTIC = "Exotic"
    ASCENDED = "Ascended"
    LEGENDARY = "Legendary"


class ItemFlags(Flag):
    ACCOUNT_BIND_ON_USE = auto()
    ACCOUNT_BOUND = auto()
    ATTUNED = auto()
    BULK_CONSUME = auto()
    DELETE_WARNING = auto()
    HIDE_SUFFIX = auto()
    INFUSED = auto()
    MONSTER_ONLY = auto()
    NO_MYSTIC_FORGE = auto()
    NO_SALVAGE = auto()
    NO_SELL = auto()
    NOT_UPGRADEABLE = auto()
    NO_UNDERWATER = auto()
    SOULBIND_ON_ACQUIRE = auto()
    SOUL_BIND_ON_USE = auto()
    TONIC = auto()
    UNIQUE = auto()


class ItemRestrictions(Flag):
    ASURA = auto()
    CHARR = auto()
    HUMAN = auto()
    NORN = auto()
    SYLVARI = auto()
    ELEMENTALIST = auto()
    ENGINEER = auto()
    GUARDIAN = auto()
    MESMER = auto()
    NECROMANCER = auto()
    RANGER = auto()
    REVENANT = auto()
    THIEF = auto()
    WARRIOR = auto()


class GameTypes(Flag):
    ACTIVITY = auto()
    DUNGEON = auto()
    PVE = auto()
    PVP = auto()
    PVP_LOBBY = auto()
    WVW = auto()


# --- Item kinds and nested variants ---


class ItemKind(StrEnum):
    UNKNOWN = "Unknown"
    ARMOR = "Armor"
    BACK = "Back"
    BAG = "Bag"
    CONSUMABLE = "Consumable"
    CONTAINER = "Container"
    CRAFTING_MATERIAL = "CraftingMaterial"
    GATHERING_TOOL = "Gathering"
    GIZMO = "Gizmo"
    MINIATURE = "MiniPet"
    TOOL = "Tool"
    TRAIT_GUIDE = "Trait"
    TRINKET = "Trinket"
    TROPHY = "Trophy"
    UPGRADE_COMPONENT = "UpgradeComponent"
    WEAPON = "Weapon"


SKINNABLE_KINDS = frozenset(
    {ItemKind.ARMOR, ItemKind.BACK, ItemKind.GATHERING_TOOL, ItemKind.WEAPON}
)


class ArmorType(StrEnum):
    UNKNOWN = "Unknown"
    BOOTS = "Boots"
    COAT = "Coat"
    GLOVES = "Gloves"
    HELM = "Helm"
    HELM_AQUATIC = "HelmAquatic"
    LEGGINGS = "Leggings"
    SHOULDERS = "Shoulders"


class WeightClass(StrEnum):
    UNKNOWN = "Unknown"
    HEAVY = "Heavy"
    MEDIUM = "Medium"
    LIGHT = "Light"
    CLOTHING = "Clothing"


class WeaponType(StrEnum):
    UNKNOWN = "Unknown"
    AXE = "Axe"
    DAGGER = "Dagger"
    FOCUS = "Focus"
    GREATSWORD = "Greatsword"
    HAMMER = "Hammer"
    HARPOON = "Harpoon"
    LARGE_BUNDLE = "LargeBundle"
    LONG_BOW = "LongBow"
    MACE = "Mace"
    PISTOL = "Pistol"
    RIFLE = "Rifle"
    SCEPTER = "Scepter"
    SHIELD = "Shield"
    SHORT_BOW = "ShortBow"
    SMALL_BUNDLE = "SmallBundle"
    SPEARGUN = "Speargun"
    STAFF = "Staff"
    SWORD = "Sword"
    TORCH = "Torch"
    TOY = "Toy"
    TOY_TWO_HANDED = "ToyTwoHanded"
    TRIDENT = "Trident"
    WARHORN = "Warhorn"


class DamageType(StrEnum):
    UNKNOWN = "Unknown"
    PHYSICAL = "Physical"
    FIRE = "Fire"
    ICE = "Ice"
    LIGHTNING = "Lightning"
    CHOKING = "Choking"


class GatheringToolType(StrEnum):
    UNKNOWN = "Unknown"
    FORAGING = "Foraging"
    LOGGING = "Logging"
    MINING = "Mining"


class ToolType(StrEnum):
    UNKNOWN = "Unknown"
    SALVAGE = "Salvage"


class ConsumableType(StrEnum):
    UNKNOWN = "Unknown"
    APPEARANCE_CHANGE = "AppearanceChange"
    BOOZE = "Booze"
    CONTRACT_NPC = "ContractNpc"
    FOOD = "Food"
    GENERIC = "Generic"
    HALLOWEEN = "Halloween"
    IMMEDIATE = "Immediate"
    TELEPORT_TO_FRIEND = "TeleportToFriend"
    TRANSMUTATION = "Transmutation"
    UNLOCK = "Unlock"
    UN_TRANSMUTATION = "UnTransmutation"
    UPGRADE_REMOVAL = "UpgradeRemoval"
    UTILITY = "Utility"


class UnlockType(StrEnum):
    UNKNOWN = "Unknown"
    BAG_SLOT = "BagSlot"
    BANK_TAB = "BankTab"
    COLLECTIBLE_CAPACITY = "CollectibleCapacity"
    CONTENT = "Content"
    CRAFTING_RECIPE = "CraftingRecipe"
    DYE = "Dye"


class ContainerType(StrEnum):
    UNKNOWN = "Unknown"
    DEFAULT = "Default"
    GIFT_BOX = "GiftBox"
    IMMEDIATE = "Immediate"
    OPEN_UI = "OpenUI"


class GizmoType(StrEnum):
    UNKNOWN = "Unknown"
    DEFAULT = "Default"
    CONTAINER_KEY = "ContainerKey"
    RENTABLE_CONTRACT_NPC = "RentableContractNpc"
    UNLIMITED_CONSUMABLE = "UnlimitedConsumable"


class TrinketType(StrEnum):
    UNKNOWN = "Unknown"
    ACCESSORY = "Accessory"
    AMULET = "Amulet"
    RING = "Ring"


class UpgradeComponentType(StrEnum):
    UNKNOWN = "Unknown"
    DEFAULT = "Default"
    GEM = "Gem"
    RUNE = "Rune"
    SIGIL = "Sigil"


# --- Item details ---


class ArmorDetails(_Entity):
    family: Literal["armor"] = "armor"
    armor_type: ArmorType
    weight_class: WeightClass | None = None
    defense: int | None = None

    @property
    def variant(self) -> ArmorType:
        return self.armor_type


class BagDetails(_Entity):
    family: Literal["bag"] = "bag"
    size: int | None = None
    no_sell_or_sort: bool = False

    @property
    def variant(self) -> None:
        return None


class ConsumableDetails(_Entity):
    family: Literal["consumable"] = "consumable"
    consumable_type: ConsumableType
    unlock_type: UnlockType | None = None
    duration_ms: int | None = None
    description: str | None = None
    recipe_id: int | None = None
    color_id: int | None = None

    @property
    def variant(self) -> ConsumableType | UnlockType:
        if self.unlock_type is not None:
            return self.unlock_type
        return self.consumable_type


class ContainerDetails(_Entity):
    family: Literal["container"] = "container"
    container_type: ContainerType

    @property
    def variant(self) -> ContainerType:
        return self.container_type


class GatheringToolDetails(_Entity):
    family: Literal["gathering"] = "gathering"
    tool_type: GatheringToolType

    @property
    def variant(self) -> GatheringToolType:
        return self.tool_type


class GizmoDetails(_Entity):
    family: Literal["gizmo"] = "gizmo"
    gizmo_type: GizmoType

    @property
    def variant(self) -> GizmoType:
        return self.gizmo_type


class ToolDetails(_Entity):
    family: Literal["tool"] = "tool"
    tool_type: ToolType
    charges: int | None = None

    @property
    def variant(self) -> ToolType:
        return self.tool_type


class TrinketDetails(_Entity):
    family: Literal["trinket"] = "trinket"
    trinket_type: TrinketType

    @property
    def variant(self) -> TrinketType:
        return self.trinket_type


class UpgradeComponentDetails(_Entity):
    family: Literal["upgrade_component"] = "upgrade_component"
    upgrade_type: UpgradeComponentType
    suffix: str | None = None

    @property
    def variant(self) -> UpgradeComponentType:
        return self.upgrade_type


class WeaponDetails(_Entity):
    family: Literal["weapon"] = "weapon"
    weapon_type: WeaponType
    damage_type: DamageType | None = None
    min_power: int | None = None
    max_power: int | None = None
    defense: int | None = None

    @property
    def variant(self) -> WeaponType:
        return self.weapon_type


ItemDetails = Annotated[
    ArmorDetails
    | BagDetails
    | ConsumableDetails
    | ContainerDetails
    | GatheringToolDetails
    | GizmoDetails
    | ToolDetails
    | TrinketDetails
    | UpgradeComponentDetails
    | WeaponDetails,
    Field(discriminator="family"),
]


# --- Item ---


class Item(_Entity):
    kind: ItemKind
    details: ItemDetails | None = None
    item_id: int = 0
    name: str | None = None
    description: str | None = None
    level: int = 0
    rarity: ItemRarity = ItemRarity.UNKNOWN
    vendor_value: int = 0
    default_skin_id: int | None = None
    game_types: GameTypes | None = None
    flags: ItemFlags | None = None
    restrictions: ItemRestrictions | None = None
    icon_file_url: str | None = None
    icon_file_signature: str | None = None
    icon_file_id: int | None = None

    @property
    def is_skinnable(self) -> bool:
        return self.kind in SKINNABLE_KINDS

    @property
    def variant(self) -> StrEnum | None:
        """Innermost resolved variant, e.g. ``GatheringToolType.MINING``."""
        if self.details is None:
            return None
        return self.details.variant


# --- Recipes ---


class CraftingDisciplines(Flag):
    ARMORSMITH = auto()
    ARTIFICER = auto()
    CHEF = auto()
    HUNTSMAN = auto()
    JEWELER = auto()
    LEATHERWORKER = auto()
    SCRIBE = auto()
    TAILOR = auto()
    WEAPONSMITH = auto()


class RecipeFlags(Flag):
    AUTO_LEARNED = auto()
    LEARNED_FROM_ITEM = auto()


class Ingredient(_Entity):
    item_id: int
    count: int = Field(ge=0)


class Recipe(_Entity):
    recipe_id: int
    recipe_type: str | None = None
    output_item_id: int = 0
    output_item_count: int = 0
    min_rating: int = 0
    time_to_craft_ms: int | None = None
    disciplines: CraftingDisciplines | None = None
    flags: RecipeFlags | None = None
    ingredients: list[Ingredient] = Field(default_factory=list)


# --- World vs World ---


class TeamColor(StrEnum):
    UNKNOWN = "Unknown"
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    NEUTRAL = "Neutral"


class MapBonusType(StrEnum):
    UNKNOWN = "Unknown"
    BLOODLUST = "bloodlust"


class CompetitiveMapType(StrEnum):
    UNKNOWN = "Unknown"
    RED_BORDERLANDS = "RedHome"
    GREEN_BORDERLANDS = "GreenHome"
    BLUE_BORDERLANDS = "BlueHome"
    ETERNAL_BATTLEGROUNDS = "Center"


class Scoreboard(_Entity):
    red: int
    blue: int
    green: int


class Objective(_Entity):
    objective_id: int
    owner: TeamColor | None = None
    owner_guild_id: UUID | None = None


class MapBonus(_Entity):
    bonus_type: MapBonusType
    owner: TeamColor | None = None


class CompetitiveMap(_Entity):
    map_type: CompetitiveMapType
    scores: Scoreboard | None = None
    objectives: dict[int, Objective] = Field(default_factory=dict)
    bonuses: list[MapBonus] = Field(default_factory=list)


class Match(_Entity):
    match_id: str | None = None
    scores: Scoreboard | None = None
    maps: list[CompetitiveMap] = Field(default_factory=list)


class Matchup(_Entity):
    match_id: str
    red_world_id: int = 0
    blue_world_id: int = 0
    green_world_id: int = 0
    start_time: datetime | None = None
    end_time: datetime | None = None


class ObjectiveName(_Entity):
    objective_id: int
    name: str | None = None
    language: str | None = None


# --- Guilds ---


class EmblemTransformations(Flag):
    FLIP_BACKGROUND_HORIZONTAL = auto()
    FLIP_BACKGROUND_VERTICAL = auto()
    FLIP_FOREGROUND_HORIZONTAL = auto()
    FLIP_FOREGROUND_VERTICAL = auto()


class Emblem(_Entity):
    background_id: int = 0
    foreground_id: int = 0
    background_color_id: int = 0
    foreground_primary_color_id: int = 0
    foreground_secondary_color_id: int = 0
    flags: EmblemTransformations | None = None


class Guild(_Entity):
    guild_id: UUID
    guild_name: str | None = None
    tag: str | None = None
    emblem: Emblem | None = None
