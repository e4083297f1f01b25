"""Item, inventory and item-use models."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, computed_field

from hyrule_heroes.core.constants import DEFAULT_INVENTORY_CAPACITY
from hyrule_heroes.models.enums import ItemCategory
from hyrule_heroes.models.stats import StatValue


class Item(BaseModel):
    """An item definition drawn from the catalog.

    Attributes:
        id: Catalog identifier (0 for the unknown placeholder).
        name: Display name.
        category: Weapon, armor, consumable or treasure.
        attack_bonus: Attack granted while equipped.
        defense_bonus: Defense granted while equipped.
        heal_amount: Health restored on use.
        quantity: Stack size.
        is_equipped: Whether the item is currently equipped.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    id: StatValue
    name: str
    category: ItemCategory
    attack_bonus: StatValue = 0
    defense_bonus: StatValue = 0
    heal_amount: StatValue = 0
    quantity: StatValue = 1
    is_equipped: bool = False


class InventoryState(BaseModel):
    """The hero's inventory counters.

    Items themselves are not stored; only the slot count, equipped ids and
    gold are tracked.

    Attributes:
        equipped_weapon: Catalog id of the equipped weapon (0 = none).
        equipped_armor: Catalog id of the equipped armor (0 = none).
        item_count: Occupied slots.
        max_capacity: Slot limit.
        gold: Gold carried.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    equipped_weapon: StatValue = 0
    equipped_armor: StatValue = 0
    item_count: StatValue = 0
    max_capacity: Annotated[int, Field(ge=0)] = DEFAULT_INVENTORY_CAPACITY
    gold: StatValue = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def free_slots(self) -> int:
        """Number of slots still available."""
        return max(self.max_capacity - self.item_count, 0)


class UseResult(BaseModel):
    """Outcome of using an item.

    Attributes:
        success: False only for unknown items.
        health_restored: Health actually restored.
        attack_boost: Attack bonus granted.
        defense_boost: Defense bonus granted.
        message: Text for the player.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    success: bool
    health_restored: StatValue = 0
    attack_boost: StatValue = 0
    defense_boost: StatValue = 0
    message: str = ""


__all__ = [
    "Item",
    "InventoryState",
    "UseResult",
]
