# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple
import logging
import random

from .config import GRID_SIZE, UP, DOWN, LEFT, RIGHT
from .errors import GameNotRunningError

log = logging.getLogger(__name__)

Cell = Tuple[int, int]
Direction = Tuple[int, int]

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


class Phase(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    ENDED = "ended"


class Outcome(Enum):
    CONTINUED = "continued"
    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"


# ---------- Helpers ----------
def spawn_food(rng: random.Random) -> Cell:
    """Pick a cell inside the interior bounds. Occupancy is not checked."""
    fx = rng.randint(1, GRID_SIZE - 2)
    fy = rng.randint(1, GRID_SIZE - 2)
    return (fx, fy)

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE


# ---------- Snapshots ----------
@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a GameState handed to observers."""
    snake: Tuple[Cell, ...]
    direction: Direction
    food: Cell
    score: int
    phase: Phase
    outcome: Optional[Outcome]

Listener = Callable[[Snapshot], None]


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Cell]              # head at index 0
    direction: Direction           # committed by the last step
    pending: Direction             # used by the next step
    food: Cell
    score: int
    rng: random.Random
    phase: Phase = Phase.NOT_STARTED
    outcome: Optional[Outcome] = None
    listeners: List[Listener] = field(default_factory=list)

def new_game_state(seed: Optional[int] = None, rng: Optional[random.Random] = None) -> GameState:
    """Fresh length-1 snake in the middle of the grid, heading right."""
    if rng is None:
        rng = random.Random(seed)
    snake = [(GRID_SIZE // 2, GRID_SIZE // 2)]
    return GameState(
        snake=snake,
        direction=RIGHT,
        pending=RIGHT,
        food=spawn_food(rng),
        score=0,
        rng=rng,
    )

def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        snake=tuple(state.snake),
        direction=state.direction,
        food=state.food,
        score=state.score,
        phase=state.phase,
        outcome=state.outcome,
    )

def subscribe(state: GameState, listener: Listener) -> None:
    state.listeners.append(listener)

def _notify(state: GameState) -> None:
    snap = snapshot(state)
    for listener in list(state.listeners):
        listener(snap)


# ---------- Input / Update ----------
def set_direction(state: GameState, requested: Direction) -> bool:
    """
    Queue a direction for the next step. Any call on a fresh game starts it,
    even when the requested direction itself is rejected.
    A 180° turn is rejected while the snake is longer than one cell.
    Returns True if the request became the pending direction.
    """
    if requested not in DIRECTIONS:
        raise ValueError(f"Unknown direction: {requested!r}")
    if state.phase is Phase.ENDED:
        return False
    if state.phase is Phase.NOT_STARTED:
        state.phase = Phase.RUNNING
        log.info("Game started")

    if len(state.snake) > 1 and is_opposite(requested, state.direction):
        log.debug("Rejected reversal %s while heading %s", requested, state.direction)
        return False
    state.pending = requested
    return True

def step_game(state: GameState) -> Outcome:
    """
    Advance the game by one tick and return what happened.
    Collisions are tested against the body before the new head is inserted,
    so the cell the tail is about to leave still counts as occupied.
    """
    if state.phase is not Phase.RUNNING:
        raise GameNotRunningError(f"cannot step a game in phase {state.phase.value}")

    # Commit direction once per tick
    state.direction = state.pending

    hx, hy = state.snake[0]
    dx, dy = state.direction
    nx, ny = hx + dx, hy + dy
    new_head = (nx, ny)

    if not in_bounds(nx, ny):
        return _end(state, Outcome.OUT_OF_BOUNDS)
    if new_head in state.snake:
        return _end(state, Outcome.SELF_COLLISION)

    # Move / grow
    state.snake.insert(0, new_head)
    if new_head == state.food:
        state.score += 1
        state.food = spawn_food(state.rng)
        log.debug("Ate food at %s, score %d, next food at %s", new_head, state.score, state.food)
    else:
        state.snake.pop()

    state.outcome = Outcome.CONTINUED
    _notify(state)
    return Outcome.CONTINUED

def _end(state: GameState, outcome: Outcome) -> Outcome:
    state.phase = Phase.ENDED
    state.outcome = outcome
    log.info("Game over (%s), final score %d", outcome.value, state.score)
    _notify(state)
    return outcome
