"""Play session: the caller-owned world state and the turn loop rules.

A Session is the only mutable object in the game. Each command replaces
the frozen snapshots it holds (game state, inventory, enemies, battle)
with the results of engine calls, then the world takes its turn:

1. the hero picks up whatever lies on the current tile
2. every enemy moves according to its behavior
3. every enemy in reach attacks
4. victory or defeat is checked
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hyrule_heroes.core.config import GameSettings
from hyrule_heroes.core.exceptions import InvalidGameStateError
from hyrule_heroes.core.logging import get_logger
from hyrule_heroes.cli import overworld
from hyrule_heroes.cli.commands import Command
from hyrule_heroes.cli.overworld import Grid, Pickup, PickupKind
from hyrule_heroes.engine import battle, damage, enemy_ai, inventory, leveling, world
from hyrule_heroes.models import (
    AttackKind,
    BattleState,
    ConsumableKind,
    EnemyKind,
    EnemyState,
    GamePhase,
    GameState,
    InventoryState,
    PlayerStats,
    Position,
    WeaponKind,
)


logger = get_logger(__name__)

GOLD_PICKUP = 25
GOLD_PICKUP_SCORE = 50
CHEST_GOLD = 100
CHEST_SCORE = 200
VICTORY_SCORE = 500
SCORE_PER_EXP = 10

HEALTH_POTION_ID = inventory.create_consumable(ConsumableKind.HEALTH_POTION).id
FOUND_SWORD_ID = inventory.create_weapon(WeaponKind.STEEL_SWORD).id

_ADJACENT = ((0, -1), (0, 1), (-1, 0), (1, 0))


@dataclass
class Session:
    """Everything a running game needs, owned by the driver.

    Attributes:
        game: Orchestrator-level snapshot (phase, position, player, counters).
        bag: Inventory counters, equipment and gold.
        potions: Health potions carried.
        enemies: Living enemies on the map.
        pickups: Items still lying on the map.
        terrain: Overworld terrain grid.
        battle: Current or last battle, if any.
        opponent: Index in ``enemies`` of the enemy being fought.
        score: Points earned.
        message: Outcome of the last command.
        events: Extra lines produced during the world's turn.
        is_running: False once the game has ended.
    """

    game: GameState
    bag: InventoryState
    potions: int
    enemies: list[EnemyState]
    pickups: list[Pickup]
    terrain: Grid
    battle: BattleState | None = None
    opponent: int | None = None
    score: int = 0
    message: str = ""
    events: list[str] = field(default_factory=list)
    is_running: bool = True

    @property
    def player(self) -> PlayerStats:
        return self.game.player

    @property
    def position(self) -> Position:
        return self.game.position

    @property
    def is_victory(self) -> bool:
        return not self.enemies and self.player.health > 0

    def attack_bonus(self) -> int:
        return inventory.total_attack_bonus(self.bag.equipped_weapon)

    def defense_bonus(self) -> int:
        return inventory.total_defense_bonus(self.bag.equipped_armor)

    def set_player(self, player: PlayerStats) -> None:
        self.game = self.game.model_copy(update={"player": player})

    def set_phase(self, phase: GamePhase) -> None:
        self.game = self.game.model_copy(update={"phase": phase})


def new_session(settings: GameSettings | None = None) -> Session:
    """Start a fresh game on the overworld.

    Args:
        settings: Session settings; defaults are used when omitted.

    Returns:
        A new Session with the hero at the start tile.
    """
    settings = settings or GameSettings()

    bag = inventory.create_inventory(settings.inventory_capacity)
    bag = inventory.add_gold(bag, settings.starting_gold)
    for _ in range(settings.starting_potions):
        bag = inventory.add_item(bag, HEALTH_POTION_ID)

    start = overworld.PLAYER_START
    game = world.new_game().model_copy(
        update={
            "position": start,
            "player": leveling.create_player(),
            "current_area": overworld.area_name(start),
        }
    )
    enemies = [
        enemy_ai.spawn(kind, Position(x=x, y=y)) for kind, x, y in overworld.ENEMY_SPAWNS
    ]
    logger.info("Session started", enemies=len(enemies), potions=settings.starting_potions)
    return Session(
        game=game,
        bag=bag,
        potions=settings.starting_potions,
        enemies=enemies,
        pickups=overworld.spawn_pickups(),
        terrain=overworld.generate_terrain(),
    )


# =============================================================================
# Player commands
# =============================================================================


def _move(session: Session, command: Command) -> None:
    action = command.game_action
    if action is None:
        return
    result = world.process_action(session.game, action)
    direction = {
        Command.MOVE_NORTH: (0, -1),
        Command.MOVE_SOUTH: (0, 1),
        Command.MOVE_EAST: (1, 0),
        Command.MOVE_WEST: (-1, 0),
    }[command]
    target = session.position.offset(*direction)
    if overworld.is_walkable(session.terrain, target):
        session.game = session.game.model_copy(
            update={
                "position": target,
                "current_area": overworld.area_name(target),
                "phase": result.new_phase,
            }
        )
        session.message = result.message
    else:
        session.message = "You can't go that way!"


def find_adjacent_enemy(session: Session) -> int | None:
    """Index of the first enemy next to the hero (N, S, W, E order)."""
    for dx, dy in _ADJACENT:
        spot = session.position.offset(dx, dy)
        for index, enemy in enumerate(session.enemies):
            if enemy.position == spot:
                return index
    return None


def _engage(session: Session, index: int) -> BattleState:
    """Return the battle against ``enemies[index]``, starting one if needed."""
    current = session.battle
    if current is not None and current.is_active and session.opponent == index:
        return current
    if current is not None and current.is_active:
        session.battle = battle.end_battle(current)
    session.opponent = index
    return battle.start_battle(session.player.health, session.enemies[index].health)


def _defeat_enemy(session: Session, index: int) -> None:
    enemy = session.enemies.pop(index)
    if session.battle is not None and session.battle.is_active:
        session.battle = battle.end_battle(session.battle)
    session.opponent = None

    before = session.player.level
    session.set_player(leveling.gain_experience(session.player, enemy.exp_reward))
    points = enemy.exp_reward * SCORE_PER_EXP
    session.score += points
    session.game = session.game.model_copy(
        update={
            "enemies_defeated": session.game.enemies_defeated + 1,
            "boss_defeated": session.game.boss_defeated or enemy.kind == EnemyKind.BOSS,
        }
    )
    session.message = (
        f"You defeated the {enemy.kind.display_name}! "
        f"+{enemy.exp_reward} EXP, +{points} score"
    )
    if session.player.level > before:
        session.events.append(f"*** LEVEL UP! You are now level {session.player.level}! ***")


def _attack(session: Session) -> None:
    result = world.process_action(session.game, Command.ATTACK.game_action)
    index = find_adjacent_enemy(session)
    if index is None:
        session.message = "No enemy nearby to attack!"
        return

    session.set_phase(result.new_phase)
    current = _engage(session, index)
    enemy = session.enemies[index]
    outcome = damage.player_attack(
        AttackKind.SWORD_SLASH,
        session.player.to_combatant(session.attack_bonus()),
        enemy.to_combatant(),
        enemy.exp_reward,
    )
    enemy = enemy_ai.apply_damage(enemy, outcome.damage_dealt)
    enemy = enemy_ai.with_behavior(enemy, enemy_ai.update_behavior(enemy))
    session.enemies[index] = enemy

    current = battle.update_health(current, session.player.health, enemy.health)
    session.battle = battle.next_turn(current)

    if not enemy.is_alive:
        _defeat_enemy(session, index)
    else:
        session.message = (
            f"{outcome.message} The {enemy.kind.display_name} has {enemy.health} HP left."
        )


def _drink_potion(session: Session) -> None:
    if session.potions <= 0:
        session.message = "You don't have any potions!"
        return
    used = inventory.use_item(HEALTH_POTION_ID, session.player.health, session.player.max_health)
    session.potions -= 1
    session.bag = inventory.remove_item(session.bag, HEALTH_POTION_ID)
    session.set_player(leveling.heal(session.player, used.health_restored))
    session.message = (
        f"You drink a potion and heal {used.health_restored} HP! "
        f"({session.potions} potions left)"
    )


def _interact(session: Session) -> None:
    result = world.process_action(session.game, Command.INTERACT.game_action)
    session.set_phase(result.new_phase)
    session.message = "Nothing to interact with here."


def _quit(session: Session) -> None:
    result = world.process_action(session.game, Command.QUIT.game_action)
    session.set_phase(result.new_phase)
    session.message = result.message
    session.is_running = result.game_continues


def process_command(session: Session, command: Command) -> None:
    """Apply a turn-taking command and let the world respond.

    Display-only commands (help, status, inventory, unknown) are ignored
    here; the driver renders them without touching the session.

    Raises:
        InvalidGameStateError: If the resulting state breaks its invariants.
    """
    session.message = ""
    session.events.clear()

    match command:
        case Command.MOVE_NORTH | Command.MOVE_SOUTH | Command.MOVE_EAST | Command.MOVE_WEST:
            _move(session, command)
        case Command.ATTACK:
            _attack(session)
        case Command.USE_ITEM:
            _drink_potion(session)
        case Command.WAIT:
            session.message = "You wait..."
        case Command.INTERACT:
            _interact(session)
        case Command.QUIT:
            _quit(session)
            return
        case _:
            return

    end_turn(session)


# =============================================================================
# World turn
# =============================================================================


def collect_pickup(session: Session) -> None:
    """Pick up the item on the hero's tile, if any."""
    for index, pickup in enumerate(session.pickups):
        if pickup.position == session.position:
            break
    else:
        return

    match pickup.kind:
        case PickupKind.POTION:
            if inventory.is_full(session.bag):
                session.events.append("Your bag is full! You leave the potion behind.")
                return
            session.bag = inventory.add_item(session.bag, HEALTH_POTION_ID)
            session.potions += 1
            session.events.append("You found a health potion!")
        case PickupKind.GOLD:
            session.bag = inventory.add_gold(session.bag, GOLD_PICKUP)
            session.score += GOLD_PICKUP_SCORE
            session.events.append(
                f"You found {GOLD_PICKUP} gold coins! +{GOLD_PICKUP_SCORE} score"
            )
        case PickupKind.CHEST:
            session.bag = inventory.add_gold(session.bag, CHEST_GOLD)
            session.score += CHEST_SCORE
            session.events.append(
                f"You opened a treasure chest! +{CHEST_GOLD} gold, +{CHEST_SCORE} score"
            )
        case PickupKind.SWORD:
            sword = inventory.get_item(FOUND_SWORD_ID)
            session.bag = inventory.equip_weapon(
                inventory.add_item(session.bag, FOUND_SWORD_ID), FOUND_SWORD_ID
            )
            session.events.append(
                f"You found a {sword.name}! +{sword.attack_bonus} attack"
            )
    session.pickups.pop(index)


def _is_occupied(session: Session, spot: Position, skip: int) -> bool:
    if spot == session.position:
        return True
    return any(
        index != skip and enemy.position == spot
        for index, enemy in enumerate(session.enemies)
    )


def move_enemies(session: Session) -> None:
    """Move every enemy one step if its target tile is free grass."""
    for index, enemy in enumerate(session.enemies):
        target = enemy_ai.calculate_move(enemy, session.position)
        if target == enemy.position:
            continue
        if overworld.is_walkable(session.terrain, target) and not _is_occupied(
            session, target, index
        ):
            session.enemies[index] = enemy_ai.move_to(enemy, target)


def enemy_attacks(session: Session) -> None:
    """Every enemy in reach strikes the hero."""
    defense = session.player.defense + session.defense_bonus()
    for index, enemy in enumerate(session.enemies):
        if not enemy_ai.should_attack(enemy, session.position):
            continue
        target = session.player.to_combatant().model_copy(update={"defense": defense})
        outcome = damage.enemy_attack(enemy.to_combatant(), target)
        session.set_player(leveling.apply_damage(session.player, outcome.damage_dealt))
        prefix = "Critical hit! " if outcome.is_critical else ""
        session.events.append(
            f"{prefix}The {enemy.kind.display_name} hits you for {outcome.damage_dealt} damage!"
        )

        if session.battle is not None and session.battle.is_active and session.opponent == index:
            updated = battle.update_health(session.battle, session.player.health, enemy.health)
            session.battle = battle.next_turn(updated)

        if leveling.is_defeated(session.player):
            break


def disengage(session: Session) -> None:
    """Close the battle once its opponent is out of reach."""
    current = session.battle
    if current is None or not current.is_active or session.opponent is None:
        return
    if enemy_ai.should_attack(session.enemies[session.opponent], session.position):
        return
    session.battle = battle.end_battle(current)
    session.opponent = None


def end_turn(session: Session) -> None:
    """Let the world take its turn after the hero acted."""
    session.game = session.game.model_copy(
        update={"turn_number": session.game.turn_number + 1}
    )
    collect_pickup(session)
    move_enemies(session)
    enemy_attacks(session)
    disengage(session)

    in_battle = session.battle is not None and not battle.is_battle_over(session.battle)
    session.set_phase(GamePhase.COMBAT if in_battle else GamePhase.EXPLORATION)

    if not session.enemies:
        session.message = "Victory! All enemies defeated!"
        session.score += VICTORY_SCORE
        session.is_running = False
    if leveling.is_defeated(session.player):
        if session.battle is not None and session.battle.is_active:
            session.battle = battle.end_battle(session.battle)
        session.message = "You have been defeated..."
        session.is_running = False
    if not session.is_running:
        session.set_phase(GamePhase.GAME_OVER)

    require_valid(session)


def require_valid(session: Session) -> None:
    """Raise if the session's game state breaks its invariants."""
    if not world.validate_state(session.game) or not overworld.in_map(session.position):
        raise InvalidGameStateError(
            "Game state failed validation",
            current_state=session.game.phase,
            details={
                "x": session.position.x,
                "y": session.position.y,
                "health": session.player.health,
                "max_health": session.player.max_health,
            },
        )


__all__ = [
    "Session",
    "new_session",
    "find_adjacent_enemy",
    "process_command",
    "collect_pickup",
    "move_enemies",
    "enemy_attacks",
    "disengage",
    "end_turn",
    "require_valid",
]
