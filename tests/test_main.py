import pygame # type: ignore
import pytest

from snake.assets import Assets
from snake.config import Config, TICK_MS, ASSETS_DIR, UP, LEFT, RIGHT
from snake.game import Phase, new_game_state
from snake.main import (
    ENDED, QUIT, STARTED, TICK_EVENT,
    handle_event, main, run,
)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def tick():
    return pygame.event.Event(TICK_EVENT)


def test_first_arrow_key_starts_game():
    state = new_game_state(seed=0)
    assert handle_event(state, key(pygame.K_UP)) == STARTED
    assert state.pending == UP
    assert handle_event(state, key(pygame.K_LEFT)) is None
    assert state.pending == LEFT


def test_other_keys_are_ignored():
    state = new_game_state(seed=0)
    assert handle_event(state, key(pygame.K_SPACE)) is None
    assert state.phase is Phase.NOT_STARTED


def test_tick_before_start_does_nothing():
    state = new_game_state(seed=0)
    assert handle_event(state, tick()) is None
    assert state.snake == [(12, 12)]


def test_quit_event():
    state = new_game_state(seed=0)
    assert handle_event(state, pygame.event.Event(pygame.QUIT)) == QUIT


def test_tick_into_wall_ends(make_state):
    state = make_state([(24, 5)], direction=RIGHT)
    assert handle_event(state, tick()) == ENDED
    assert handle_event(state, tick()) is None


def test_config_defaults():
    config = Config.from_args([])
    assert config.tick_ms == TICK_MS
    assert config.seed is None
    assert config.assets_dir == ASSETS_DIR
    assert not config.play_again


def test_config_from_args():
    config = Config.from_args(["--seed", "5", "--tick-ms", "50", "--play-again", "--log-level", "DEBUG"])
    assert (config.seed, config.tick_ms, config.play_again, config.log_level) == (5, 50, True, "DEBUG")


def test_config_rejects_bad_tick():
    with pytest.raises(SystemExit):
        Config.from_args(["--tick-ms", "0"])


def test_main_aborts_on_missing_assets(tmp_path):
    assert main(["--assets-dir", str(tmp_path)]) == 1


@pytest.fixture
def scripted(monkeypatch):
    """Feed run() a fixed event sequence and record timer changes."""
    timers = []
    monkeypatch.setattr(pygame.time, "set_timer", lambda ev, ms: timers.append((ev, ms)))

    def feed(events):
        queue = list(events)
        monkeypatch.setattr(
            pygame.event, "wait",
            lambda: queue.pop(0) if queue else pygame.event.Event(pygame.QUIT),
        )
        return queue

    return feed, timers


def _assets():
    return Assets(food=pygame.Surface((32, 32), pygame.SRCALPHA), icon=pygame.Surface((32, 32)))


def test_run_exits_after_loss(screen, scripted):
    feed, timers = scripted
    # head starts at x=12; the 13th move leaves the grid
    queue = feed([key(pygame.K_RIGHT)] + [tick()] * 13 + [key(pygame.K_SPACE), key(pygame.K_UP)])
    font = pygame.font.SysFont(None, 24)

    run(Config(seed=1, tick_ms=40), screen, font, _assets())

    assert timers == [(TICK_EVENT, 40), (TICK_EVENT, 0)]
    # the acknowledgement key was consumed, the next one never read
    assert len(queue) == 1


def test_run_play_again_starts_fresh_game(screen, scripted):
    feed, timers = scripted
    events = [key(pygame.K_RIGHT)] + [tick()] * 13 + [key(pygame.K_SPACE)]
    queue = feed(events + [key(pygame.K_DOWN)] + [tick()] * 13 + [key(pygame.K_SPACE)])
    font = pygame.font.SysFont(None, 24)

    run(Config(seed=1, tick_ms=40, play_again=True), screen, font, _assets())

    assert timers == [(TICK_EVENT, 40), (TICK_EVENT, 0)] * 2
    assert queue == []
