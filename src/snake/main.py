# main.py
from typing import Optional, Sequence
import logging
import random
import sys
import pygame # type: ignore

from .assets import Assets, load_assets
from .config import WIDTH, HEIGHT, SCORE_FONT_SIZE, UP, DOWN, LEFT, RIGHT, Config
from .errors import AssetLoadError
from .game import (
    GameState, Outcome, Phase, Snapshot,
    new_game_state, set_direction, snapshot, step_game, subscribe,
)
from .render import build_frame, draw_frame, draw_game_over

log = logging.getLogger(__name__)

# Fired every tick_ms once the game has started
TICK_EVENT = pygame.USEREVENT + 1

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

# What handle_event asks the loop to do
QUIT, STARTED, ENDED = "quit", "started", "ended"


def handle_event(state: GameState, event: pygame.event.Event) -> Optional[str]:
    """Apply one event to the game. Returns QUIT, STARTED, ENDED or None."""
    if event.type == pygame.QUIT:
        return QUIT
    if event.type == pygame.KEYDOWN:
        direction = KEY_DIRECTIONS.get(event.key)
        if direction is None:
            return None
        was_waiting = state.phase is Phase.NOT_STARTED
        set_direction(state, direction)
        if was_waiting and state.phase is Phase.RUNNING:
            return STARTED
        return None
    if event.type == TICK_EVENT and state.phase is Phase.RUNNING:
        if step_game(state) is not Outcome.CONTINUED:
            return ENDED
    return None

def wait_for_ack() -> bool:
    """Block until a key is pressed (True) or the window is closed (False)."""
    while True:
        event = pygame.event.wait()
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            return True

def new_session(rng: random.Random, screen: pygame.Surface, font: pygame.font.Font,
                assets: Assets) -> GameState:
    """Fresh game whose every step is redrawn on `screen`."""
    state = new_game_state(rng=rng)

    def redraw(snap: Snapshot) -> None:
        draw_frame(screen, build_frame(snap), assets.food, font)
        pygame.display.flip()

    subscribe(state, redraw)
    redraw(snapshot(state))
    return state

def run(config: Config, screen: pygame.Surface, font: pygame.font.Font, assets: Assets) -> None:
    rng = random.Random(config.seed)
    state = new_session(rng, screen, font, assets)

    while True:
        action = handle_event(state, pygame.event.wait())
        if action == QUIT:
            return
        if action == STARTED:
            pygame.time.set_timer(TICK_EVENT, config.tick_ms)
        elif action == ENDED:
            pygame.time.set_timer(TICK_EVENT, 0)
            # drop input that arrived before the announcement
            pygame.event.clear()
            draw_game_over(screen, font, state.score)
            pygame.display.flip()
            if not wait_for_ack() or not config.play_again:
                return
            log.info("Starting a new game")
            state = new_session(rng, screen, font, assets)

def main(argv: Optional[Sequence[str]] = None) -> int:
    config = Config.from_args(argv)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    try:
        try:
            assets = load_assets(config.assets_dir)
        except AssetLoadError as e:
            log.error("Startup aborted: %s", e)
            return 1
        pygame.display.set_icon(assets.icon)
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Snake")
        assets.food = assets.food.convert_alpha()
        font = pygame.font.SysFont(None, SCORE_FONT_SIZE, bold=True)

        run(config, screen, font, assets)
    finally:
        pygame.quit()
    return 0

if __name__ == "__main__":
    sys.exit(main())
