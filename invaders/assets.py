"""Loading and lookup of the game's images."""

from __future__ import annotations

from pathlib import Path

import pygame

from .animation import Animation


class Assets:
    """A named collection of image surfaces."""

    def __init__(self, images):
        self._images = dict(images)

    @classmethod
    def load(cls, directory):
        """Load every PNG image in directory, keyed by file name without suffix."""
        path = Path(directory)
        if not path.is_dir():
            raise FileNotFoundError(f"asset directory not found: {path}")
        return cls(
            {file.stem: pygame.image.load(str(file)) for file in sorted(path.glob("*.png"))}
        )

    def __contains__(self, name) -> bool:
        return name in self._images

    def image(self, name):
        """Return the image called name; KeyError if it was never loaded."""
        try:
            return self._images[name]
        except KeyError:
            raise KeyError(f"missing image: {name}") from None

    def animation(self, name, speed, frame_width) -> Animation:
        """Build a fresh animation over the image called name."""
        return Animation(speed, frame_width, self.image(name))