"""Frame-strip sprite animation."""

from __future__ import annotations

import pygame

WHITE = (255, 255, 255)


class Animation:
    """An animation stored as equally wide frames laid out side by side."""

    def __init__(self, animation_speed, frame_width, texture):
        self.texture = texture
        self.animation_iterator = 0
        # Higher values make the animation slower.
        self.animation_speed = max(1, int(animation_speed))
        self.current_frame = 0
        self.frame_width = int(frame_width)
        self.total_frames = texture.get_width() // self.frame_width

    @property
    def frame_rect(self) -> pygame.Rect:
        """The area of the texture that holds the current frame."""
        return pygame.Rect(
            self.current_frame * self.frame_width,
            0,
            self.frame_width,
            self.texture.get_height(),
        )

    def change_current_frame(self) -> bool:
        """Step to the next frame; True when the animation wrapped around."""
        self.current_frame += 1
        if self.current_frame == self.total_frames:
            self.current_frame = 0
            return True
        return False

    def update(self) -> bool:
        """Advance the animation clock; True if the animation completed a loop."""
        finished = False
        self.animation_iterator += 1
        while self.animation_iterator >= self.animation_speed:
            self.animation_iterator -= self.animation_speed
            self.current_frame += 1
            if self.current_frame == self.total_frames:
                finished = True
                self.current_frame = 0
        return finished

    def draw(self, x, y, surface, color=WHITE) -> None:
        """Blit the current frame at (x, y), tinted by multiplying with color."""
        area = self.frame_rect.clip(self.texture.get_rect())
        frame = self.texture.subsurface(area).copy()
        frame.fill(tuple(color)[:3], special_flags=pygame.BLEND_RGB_MULT)
        surface.blit(frame, (int(x), int(y)))

    def reset(self) -> None:
        self.animation_iterator = 0
        self.current_frame = 0