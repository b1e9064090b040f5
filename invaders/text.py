"""Drawing text with a bitmap font strip."""

from __future__ import annotations

import pygame

# The font texture holds one glyph for each character from space onwards.
FONT_GLYPHS = 96
FIRST_GLYPH = 32


def draw_text(x, y, text, surface, font_texture) -> None:
    """Draw text at (x, y); a newline returns to x on the next glyph row."""
    height = font_texture.get_height()
    width = font_texture.get_width() // FONT_GLYPHS
    pen_x, pen_y = int(x), int(y)
    for char in text:
        if char == "\n":
            pen_x = int(x)
            pen_y += height
            continue
        area = pygame.Rect(width * (ord(char) - FIRST_GLYPH), 0, width, height)
        surface.blit(font_texture, (pen_x, pen_y), area)
        pen_x += width