"""Plain-text screens for the command driver.

Every function returns a string; the game loop decides where it goes.
"""

from __future__ import annotations

from hyrule_heroes.cli import overworld
from hyrule_heroes.cli.session import Session
from hyrule_heroes.engine import inventory, leveling
from hyrule_heroes.models import EnemyKind


ENEMY_SYMBOLS: dict[EnemyKind, str] = {
    EnemyKind.SLIME: "s",
    EnemyKind.SKELETON: "k",
    EnemyKind.BAT: "b",
    EnemyKind.GOBLIN: "g",
    EnemyKind.DARK_KNIGHT: "D",
    EnemyKind.BOSS: "B",
}

PLAYER_SYMBOL = "@"
LEGEND = "@ You | s/k/b/g/D/B Enemies | * Potion | $ Gold | C Chest | + Sword"

_BOX_WIDTH = 40


def _box(*lines: str) -> str:
    border = "═" * _BOX_WIDTH
    rows = [f"╔{border}╗"]
    for index, line in enumerate(lines):
        if index:
            rows.append(f"╠{border}╣")
        rows.append(f"║{line.center(_BOX_WIDTH)}║")
    rows.append(f"╚{border}╝")
    return "\n".join(rows)


def title(app_name: str = "Legend of Hyrule: Hyrule Heroes") -> str:
    """Title banner shown when the game starts."""
    return "\n".join(
        [
            "",
            _box(app_name.upper(), "A Turn-Based Hyrule Adventure"),
            "",
            "Welcome, Hero! Your quest begins...",
            "Defeat all enemies to save Hyrule!",
            "Collect items (* potions, $ gold, + swords) to grow stronger.",
        ]
    )


def map_symbol(session: Session, x: int, y: int) -> str:
    """Symbol drawn at a tile: hero, then enemies, then pickups, then terrain."""
    if session.position.x == x and session.position.y == y:
        return PLAYER_SYMBOL
    for enemy in session.enemies:
        if enemy.position.x == x and enemy.position.y == y:
            return ENEMY_SYMBOLS[enemy.kind]
    for pickup in session.pickups:
        if pickup.position.x == x and pickup.position.y == y:
            return pickup.kind.value
    return session.terrain[y][x].value


def game_map(session: Session) -> str:
    rows = [
        " ".join(map_symbol(session, x, y) for x in range(overworld.MAP_WIDTH))
        for y in range(overworld.MAP_HEIGHT)
    ]
    return "\n".join(["", "=== MAP ===", *rows, LEGEND])


def hud(session: Session) -> str:
    player = session.player
    return (
        f"HP: {player.health}/{player.max_health}  Lvl: {player.level}  "
        f"Score: {session.score}  Turn: {session.game.turn_number}"
    )


def status(session: Session) -> str:
    player = session.player
    weapon = inventory.get_item(session.bag.equipped_weapon)
    lines = [
        "",
        "=== STATUS ===",
        f"HP: {player.health}/{player.max_health}",
        f"Level: {player.level} (EXP: {player.experience}/"
        f"{leveling.exp_requirement(player.level)})",
        f"Attack: {player.attack + session.attack_bonus()}  "
        f"Defense: {player.defense + session.defense_bonus()}",
        f"Weapon: {weapon.name if weapon.id else 'None'}",
        f"Gold: {session.bag.gold}  Potions: {session.potions}",
        f"Score: {session.score}",
        f"Area: {session.game.current_area}",
        f"Turn: {session.game.turn_number}",
        f"Enemies remaining: {len(session.enemies)}",
    ]
    return "\n".join(lines)


def inventory_screen(session: Session) -> str:
    lines = [
        "",
        "=== INVENTORY ===",
        f"Potions: {session.potions}",
        f"Gold: {session.bag.gold}",
        f"Slots: {session.bag.item_count}/{session.bag.max_capacity}",
    ]
    if session.potions > 0:
        lines += ["", "Use 'u' to drink a potion."]
    return "\n".join(lines)


def help_screen() -> str:
    return "\n".join(
        [
            "",
            "=== COMMANDS ===",
            "n/s/e/w - Move in direction",
            "a - Attack adjacent enemy",
            "u - Use health potion",
            "x - Interact",
            "i - Inventory",
            "stat - Status",
            ". - Wait a turn",
            "h - Help",
            "q - Quit",
        ]
    )


def unknown_command() -> str:
    return "Unknown command. Type 'h' for help."


def turn_report(session: Session) -> str:
    """Events from the world's turn followed by the command outcome."""
    lines = [*session.events]
    if session.message:
        lines.append(session.message)
    return "\n".join(lines)


def game_over(session: Session) -> str:
    """Closing banner and final tally."""
    banner = _box("VICTORY! HYRULE IS SAVED!") if session.is_victory else _box("GAME OVER")
    return "\n".join(
        [
            "",
            banner,
            "",
            f"Final Score: {session.score}",
            f"Level: {session.player.level}  Gold: {session.bag.gold}",
            f"Enemies defeated: {session.game.enemies_defeated}",
            f"Turns: {session.game.turn_number}",
        ]
    )


__all__ = [
    "ENEMY_SYMBOLS",
    "LEGEND",
    "title",
    "map_symbol",
    "game_map",
    "hud",
    "status",
    "inventory_screen",
    "help_screen",
    "unknown_command",
    "turn_report",
    "game_over",
]
