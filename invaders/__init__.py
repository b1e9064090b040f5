"""A Space Invaders style arcade game on pygame, with power-ups, a UFO and saved progress."""

__version__ = "0.1.0"