from dataclasses import dataclass
from typing import Optional, Sequence
import argparse
import os

# ----- Window & grid -----
GRID_SIZE = 25
TILE_SIZE = 32
WIDTH = HEIGHT = GRID_SIZE * TILE_SIZE

# ----- Timing -----
TICK_MS = 100

# ----- Colors -----
BG     = (0, 0, 0)
GREEN  = (0, 128, 0)
GRAY   = (128, 128, 128)
TEXT   = (255, 255, 255)

# ----- Presentation -----
FOOD_SCALE = 1.2
BORDER_WIDTH = 5
FRAME_WIDTH = 15
SCORE_FONT_SIZE = 24   # px, about 18pt
SCORE_POS = (10, 10)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Assets -----
ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "images")
FOOD_IMAGE = "apple.png"
ICON_IMAGE = "snake.png"


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = TICK_MS
    assets_dir: str = ASSETS_DIR
    play_again: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_args(cls, argv: Optional[Sequence[str]] = None) -> "Config":
        parser = argparse.ArgumentParser(prog="snake", description="Play Snake on a 25x25 grid.")
        parser.add_argument("--seed", type=int, default=None,
                            help="seed for food placement (default: random)")
        parser.add_argument("--tick-ms", type=int, default=TICK_MS,
                            help="milliseconds between snake moves")
        parser.add_argument("--assets-dir", default=ASSETS_DIR,
                            help="directory holding apple.png and snake.png")
        parser.add_argument("--play-again", action="store_true",
                            help="start a new game after a loss instead of exiting")
        parser.add_argument("--log-level", default="INFO",
                            choices=["DEBUG", "INFO", "WARNING", "ERROR"])
        args = parser.parse_args(argv)
        if args.tick_ms <= 0:
            parser.error("--tick-ms must be positive")
        return cls(
            seed=args.seed,
            tick_ms=args.tick_ms,
            assets_dir=args.assets_dir,
            play_again=args.play_again,
            log_level=args.log_level,
        )
