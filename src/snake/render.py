# render.py
from dataclasses import dataclass
from typing import Tuple
import pygame # type: ignore

from .config import (
    WIDTH, HEIGHT, TILE_SIZE,
    BG, GREEN, GRAY, TEXT,
    FOOD_SCALE, BORDER_WIDTH, FRAME_WIDTH, SCORE_FONT_SIZE, SCORE_POS,
)
from .game import Snapshot

Color = Tuple[int, int, int]


# ---------- Frame description ----------
@dataclass(frozen=True)
class Square:
    x: int
    y: int
    size: int
    color: Color

@dataclass(frozen=True)
class Sprite:
    x: int
    y: int
    size: int

@dataclass(frozen=True)
class Border:
    rect: Tuple[int, int, int, int]
    width: int
    color: Color

@dataclass(frozen=True)
class Text:
    text: str
    pos: Tuple[int, int]
    size: int
    color: Color
    bold: bool = True

@dataclass(frozen=True)
class Frame:
    squares: Tuple[Square, ...]
    food: Sprite
    borders: Tuple[Border, ...]
    score: Text


def segment_shade(index: int, length: int) -> int:
    """Grayscale level of segment `index`; the integer step keeps the tail above 0."""
    return 255 - index * (255 // length)

def build_frame(snap: Snapshot) -> Frame:
    """Describe what a snapshot looks like, without touching pygame."""
    length = len(snap.snake)
    squares = []
    for i, (x, y) in enumerate(snap.snake):
        v = segment_shade(i, length)
        squares.append(Square(x * TILE_SIZE, y * TILE_SIZE, TILE_SIZE, (v, v, v)))

    fx, fy = snap.food
    food = Sprite(fx * TILE_SIZE, fy * TILE_SIZE, int(TILE_SIZE * FOOD_SCALE))

    borders = (
        Border((0, 0, WIDTH, HEIGHT), BORDER_WIDTH, GREEN),
        Border((0, 0, WIDTH - 1, HEIGHT - 1), FRAME_WIDTH, GRAY),
    )
    score = Text(f"Score: {snap.score}", SCORE_POS, SCORE_FONT_SIZE, TEXT)
    return Frame(tuple(squares), food, borders, score)


# ---------- Drawing ----------
def draw_frame(screen: pygame.Surface, frame: Frame, food_image: pygame.Surface,
               font: pygame.font.Font) -> None:
    screen.fill(BG)
    # snake
    for sq in frame.squares:
        pygame.draw.rect(screen, sq.color, pygame.Rect(sq.x, sq.y, sq.size, sq.size))
    # food, scaled past the tile edge
    sprite = pygame.transform.scale(food_image, (frame.food.size, frame.food.size))
    screen.blit(sprite, (frame.food.x, frame.food.y))
    # borders
    for b in frame.borders:
        pygame.draw.rect(screen, b.color, pygame.Rect(*b.rect), b.width)
    # score
    txt = font.render(frame.score.text, True, frame.score.color)
    screen.blit(txt, frame.score.pos)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("You lost!", True, (240, 240, 250))
    sco   = font.render(f"Your final score is: {score}", True, (220, 220, 230))
    sub   = font.render("Press any key to continue", True, (160, 160, 170))

    tx = title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 28))
    cx = sco.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 4))
    sx = sub.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 36))

    screen.blit(title, tx)
    screen.blit(sco, cx)
    screen.blit(sub, sx)
