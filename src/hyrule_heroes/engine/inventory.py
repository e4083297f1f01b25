"""Item catalog and inventory operations.

The catalog maps item ids to immutable definitions:

- weapons 1-5
- armors 101-105
- consumables 201-205

Unknown ids resolve to a zero-valued treasure placeholder with id 0.
Inventory operations never fail: a full bag, an empty bag or missing gold
leave the inventory unchanged.
"""

from __future__ import annotations

from hyrule_heroes.core.constants import BOOST_AMOUNT, DEFAULT_INVENTORY_CAPACITY
from hyrule_heroes.core.logging import get_logger
from hyrule_heroes.engine.leveling import calculate_healed_health
from hyrule_heroes.models import (
    ArmorKind,
    ConsumableKind,
    InventoryState,
    Item,
    ItemCategory,
    UseResult,
    WeaponKind,
)


logger = get_logger(__name__)

FULL_HEAL = 9999
"""Catalog heal amount of the full health potion; use always fills to max."""

HEALTH_POTION_HEAL = 50

# id, name, attack bonus
WEAPONS: dict[WeaponKind, tuple[int, str, int]] = {
    WeaponKind.WOODEN_SWORD: (1, "Wooden Sword", 5),
    WeaponKind.STEEL_SWORD: (2, "Steel Sword", 10),
    WeaponKind.MASTER_SWORD: (3, "Master Sword", 25),
    WeaponKind.BOW: (4, "Bow", 8),
    WeaponKind.FIRE_ROD: (5, "Fire Rod", 15),
}

# id, name, defense bonus
ARMORS: dict[ArmorKind, tuple[int, str, int]] = {
    ArmorKind.CLOTH_TUNIC: (101, "Cloth Tunic", 2),
    ArmorKind.LEATHER_ARMOR: (102, "Leather Armor", 5),
    ArmorKind.CHAIN_MAIL: (103, "Chain Mail", 10),
    ArmorKind.SHIELD: (104, "Shield", 8),
    ArmorKind.MAGIC_ROBE: (105, "Magic Robe", 4),
}

# id, name, heal amount
CONSUMABLES: dict[ConsumableKind, tuple[int, str, int]] = {
    ConsumableKind.HEALTH_POTION: (201, "Health Potion", HEALTH_POTION_HEAL),
    ConsumableKind.FULL_HEALTH_POTION: (202, "Full Health Potion", FULL_HEAL),
    ConsumableKind.ATTACK_BOOST: (203, "Attack Boost", 0),
    ConsumableKind.DEFENSE_BOOST: (204, "Defense Boost", 0),
    ConsumableKind.ANTIDOTE: (205, "Antidote", 0),
}

UNKNOWN_ITEM = Item(
    id=0,
    name="Unknown",
    category=ItemCategory.TREASURE,
    quantity=0,
)


# =============================================================================
# Catalog
# =============================================================================


def create_weapon(weapon: WeaponKind) -> Item:
    item_id, name, attack_bonus = WEAPONS[weapon]
    return Item(id=item_id, name=name, category=ItemCategory.WEAPON, attack_bonus=attack_bonus)


def create_armor(armor: ArmorKind) -> Item:
    item_id, name, defense_bonus = ARMORS[armor]
    return Item(id=item_id, name=name, category=ItemCategory.ARMOR, defense_bonus=defense_bonus)


def create_consumable(consumable: ConsumableKind, quantity: int = 1) -> Item:
    item_id, name, heal_amount = CONSUMABLES[consumable]
    return Item(
        id=item_id,
        name=name,
        category=ItemCategory.CONSUMABLE,
        heal_amount=heal_amount,
        quantity=quantity,
    )


def _build_catalog() -> dict[int, Item]:
    catalog: dict[int, Item] = {}
    for weapon in WeaponKind:
        item = create_weapon(weapon)
        catalog[item.id] = item
    for armor in ArmorKind:
        item = create_armor(armor)
        catalog[item.id] = item
    for consumable in ConsumableKind:
        item = create_consumable(consumable)
        catalog[item.id] = item
    return catalog


CATALOG: dict[int, Item] = _build_catalog()


def get_item(item_id: int) -> Item:
    """Look up an item definition.

    Returns:
        The catalog item, or the Unknown placeholder for unlisted ids.
    """
    return CATALOG.get(item_id, UNKNOWN_ITEM)


def total_attack_bonus(weapon_id: int) -> int:
    return get_item(weapon_id).attack_bonus


def total_defense_bonus(armor_id: int) -> int:
    return get_item(armor_id).defense_bonus


# =============================================================================
# Inventory management
# =============================================================================


def create_inventory(max_capacity: int = DEFAULT_INVENTORY_CAPACITY) -> InventoryState:
    return InventoryState(max_capacity=max_capacity)


def is_full(inv: InventoryState) -> bool:
    return inv.item_count >= inv.max_capacity


def add_item(inv: InventoryState, item_id: int) -> InventoryState:
    """Take up one slot. A full inventory is returned unchanged."""
    if is_full(inv):
        logger.debug("Inventory full", item_id=item_id, capacity=inv.max_capacity)
        return inv
    return inv.model_copy(update={"item_count": inv.item_count + 1})


def remove_item(inv: InventoryState, item_id: int) -> InventoryState:
    """Free one slot. An empty inventory is returned unchanged."""
    if inv.item_count == 0:
        return inv
    return inv.model_copy(update={"item_count": inv.item_count - 1})


def equip_weapon(inv: InventoryState, item_id: int) -> InventoryState:
    # The id is not checked against the weapon range
    return inv.model_copy(update={"equipped_weapon": item_id})


def equip_armor(inv: InventoryState, item_id: int) -> InventoryState:
    return inv.model_copy(update={"equipped_armor": item_id})


def add_gold(inv: InventoryState, amount: int) -> InventoryState:
    return inv.model_copy(update={"gold": inv.gold + amount})


def spend_gold(inv: InventoryState, amount: int) -> InventoryState:
    """Pay ``amount`` gold. Unaffordable purchases leave the inventory unchanged."""
    if inv.gold < amount:
        logger.debug("Not enough gold", gold=inv.gold, amount=amount)
        return inv
    return inv.model_copy(update={"gold": inv.gold - amount})


# =============================================================================
# Item use
# =============================================================================


def _heal_result(current_health: int, max_health: int, heal_amount: int) -> UseResult:
    restored = max(calculate_healed_health(current_health, heal_amount, max_health) - current_health, 0)
    return UseResult(
        success=True,
        health_restored=restored,
        message=f"Restored {restored} health!",
    )


def use_item(item_id: int, current_health: int, max_health: int) -> UseResult:
    """Use a consumable.

    Args:
        item_id: Catalog id of the consumable.
        current_health: Health before use.
        max_health: Health cap.

    Returns:
        UseResult describing the effect; ``success`` is False for ids that
        are not usable consumables.

    Example:
        >>> use_item(202, current_health=10, max_health=100).health_restored
        90
    """
    match item_id:
        case 201:
            result = _heal_result(current_health, max_health, HEALTH_POTION_HEAL)
        case 202:
            result = _heal_result(current_health, max_health, max_health)
        case 203:
            result = UseResult(
                success=True,
                attack_boost=BOOST_AMOUNT,
                message=f"Attack increased by {BOOST_AMOUNT}!",
            )
        case 204:
            result = UseResult(
                success=True,
                defense_boost=BOOST_AMOUNT,
                message=f"Defense increased by {BOOST_AMOUNT}!",
            )
        case 205:
            result = UseResult(success=True, message="Cured poison!")
        case _:
            result = UseResult(success=False, message="Unknown item!")

    logger.debug("Item used", item_id=item_id, success=result.success)
    return result


__all__ = [
    "FULL_HEAL",
    "HEALTH_POTION_HEAL",
    "WEAPONS",
    "ARMORS",
    "CONSUMABLES",
    "UNKNOWN_ITEM",
    "CATALOG",
    "create_weapon",
    "create_armor",
    "create_consumable",
    "get_item",
    "total_attack_bonus",
    "total_defense_bonus",
    "create_inventory",
    "is_full",
    "add_item",
    "remove_item",
    "equip_weapon",
    "equip_armor",
    "add_gold",
    "spend_gold",
    "use_item",
]
