# assets.py
from dataclasses import dataclass
import logging
import os
import pygame # type: ignore

from .config import FOOD_IMAGE, ICON_IMAGE
from .errors import AssetLoadError

log = logging.getLogger(__name__)


@dataclass
class Assets:
    food: pygame.Surface
    icon: pygame.Surface


def load_image(path: str) -> pygame.Surface:
    """Load one image. Missing or undecodable files raise AssetLoadError."""
    if not os.path.isfile(path):
        raise AssetLoadError(path, "file not found")
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        raise AssetLoadError(path, str(e)) from e
    log.debug("Loaded %s (%dx%d)", path, image.get_width(), image.get_height())
    return image

def load_assets(assets_dir: str) -> Assets:
    """Load the food sprite and the window icon from `assets_dir`."""
    log.info("Loading assets from %s", assets_dir)
    return Assets(
        food=load_image(os.path.join(assets_dir, FOOD_IMAGE)),
        icon=load_image(os.path.join(assets_dir, ICON_IMAGE)),
    )
