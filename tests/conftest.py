import os

# Run pygame without a real window or sound device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame # type: ignore
import pytest

from snake.config import RIGHT, WIDTH, HEIGHT
from snake.game import GameState, Phase


@pytest.fixture
def screen():
    pygame.init()
    surface = pygame.display.set_mode((WIDTH, HEIGHT))
    yield surface
    pygame.quit()


def _make_state(snake, direction=RIGHT, food=(1, 1), seed=0, phase=Phase.RUNNING):
    """Build a running GameState with an explicit body, head first."""
    return GameState(
        snake=list(snake),
        direction=direction,
        pending=direction,
        food=food,
        score=0,
        rng=random.Random(seed),
        phase=phase,
    )


@pytest.fixture
def make_state():
    return _make_state
