"""The game session: name entry, lives, levels, restarts, drawing and the main loop."""

from __future__ import annotations

import argparse
import math
import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path

import pygame

from .assets import Assets
from .enemy_manager import EnemyManager
from .entities import (
    BASE_SIZE,
    FRAME_DURATION_US,
    NEXT_LEVEL_TRANSITION,
    POWERUP_DURATION,
    SCREEN_HEIGHT,
    SCREEN_RESIZE,
    SCREEN_WIDTH,
)
from .player import Controls, Player
from .text import draw_text
from .ufo import Ufo
from .userdata import DEFAULT_SAVE_FILE, PlayerStore

START_LIVES = 3
NAME_PROMPT = "Enter Name: "
LOGO_SCALE = 0.2
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

POWER_BAR_COLORS = {
    1: (0, 146, 255),
    2: (255, 0, 0),
    3: (255, 219, 0),
    4: (219, 0, 255),
}

_NAME_WHITESPACE = " \t\r\n"


@dataclass(frozen=True)
class _FrameInput(Controls):
    """Keyboard state for one frame, including the restart key."""

    restart: bool = False


def _tinted(surface, color):
    copy = surface.copy()
    copy.fill(tuple(color)[:3], special_flags=pygame.BLEND_RGB_MULT)
    return copy


class Game:
    """One play session, from entering a name through levels and game over."""

    def __init__(self, assets, store, rng):
        self.store = store
        self.rng = rng

        self.background = assets.image("Background")
        self.font_texture = assets.image("Font")
        self.powerup_bar = assets.image("PowerupBar")
        logo = assets.image("logo")
        scaled_size = (
            max(1, round(logo.get_width() * LOGO_SCALE)),
            max(1, round(logo.get_height() * LOGO_SCALE)),
        )
        self.logo = pygame.transform.scale(logo, scaled_size)
        # The logo's origin is half its scaled size, itself scaled once more.
        self.logo_position = (
            int(SCREEN_WIDTH / 2 - 50 - scaled_size[0] / 2 * LOGO_SCALE),
            int(SCREEN_HEIGHT / 2 - 70 - scaled_size[1] / 2 * LOGO_SCALE),
        )
        # A TrueType font for the name prompt; the bitmap font is used when unset.
        self.name_font = None

        self.game_over = False
        self.next_level = False
        self.restart_requested = False
        self.show_splash = True
        self.name_entered = False
        self.lives = START_LIVES
        self.next_level_timer = NEXT_LEVEL_TRANSITION
        self.player_name = ""
        self.input_text = ""
        self.level = 0

        self.enemy_manager = EnemyManager(assets)
        self.player = Player(assets)
        self.ufo = Ufo(rng, assets)

    @property
    def started(self) -> bool:
        """True once the name has been entered and play has begun."""
        return not self.show_splash

    def type_char(self, char) -> None:
        """Feed one typed character to the name prompt."""
        if not self.show_splash or self.name_entered:
            return
        if char == "\b":
            self.input_text = self.input_text[:-1]
        elif char in ("\r", "\n"):
            self.player_name = self.input_text.strip(_NAME_WHITESPACE)
            self.level = self.store.last_level(self.player_name)
            self.show_splash = False
            self.enemy_manager.reset(self.level)
            self.player.reset()
            self.ufo.reset(True, self.rng)
            self.name_entered = True
        elif ord(char) < 128:
            self.input_text += char

    def _restart(self) -> None:
        self.game_over = False
        self.level = self.store.last_level(self.player_name)
        self.lives = START_LIVES
        self.player.reset()
        self.player.reset_score()
        self.enemy_manager.reset(self.level)
        self.ufo.reset(True, self.rng)

    def tick(self, controls) -> None:
        """Advance the game by one frame.

        controls holds the player's keys; a true ``restart`` attribute on it
        means the restart key is held.
        """
        if self.show_splash:
            return

        player = self.player
        if player.dead_animation_over:
            if self.lives > 1:
                self.lives -= 1
                player.reset()
            else:
                self.game_over = True
                self.store.save_player(self.player_name, self.level, player.score)

        if self.enemy_manager.reached_player(player.y):
            player.die()

        if not self.game_over:
            if not self.enemy_manager.enemies:
                if self.next_level_timer == 0:
                    self.next_level = False
                    self.level += 1
                    self.next_level_timer = NEXT_LEVEL_TRANSITION
                    player.reset()
                    self.enemy_manager.reset(self.level)
                    self.ufo.reset(True, self.rng)
                else:
                    self.next_level = True
                    self.next_level_timer -= 1
            else:
                player.update(
                    self.rng,
                    controls,
                    self.enemy_manager.enemy_bullets,
                    self.enemy_manager.enemies,
                    self.ufo,
                )
                self.enemy_manager.update(self.rng)
                self.ufo.update(self.rng)

        restart_held = bool(getattr(controls, "restart", False))
        if self.game_over and restart_held:
            if not self.restart_requested:
                self.restart_requested = True
                self._restart()
        elif not restart_held:
            self.restart_requested = False

    def _draw_prompt(self, surface) -> None:
        text = NAME_PROMPT + self.input_text
        position = (int(SCREEN_WIDTH / 2 - 100), int(SCREEN_HEIGHT / 2 + 60))
        if self.name_font is not None:
            surface.blit(self.name_font.render(text, True, WHITE), position)
        else:
            draw_text(position[0], position[1], text, surface, self.font_texture)

    def _draw_power_bar(self, surface) -> None:
        bar_width = self.powerup_bar.get_width()
        top = int(0.25 * BASE_SIZE)
        frame_area = pygame.Rect(0, 0, bar_width, BASE_SIZE)
        surface.blit(
            self.powerup_bar,
            (int(SCREEN_WIDTH - bar_width - 0.25 * BASE_SIZE), top),
            frame_area,
        )
        fill_width = math.ceil(
            self.player.power_timer * (bar_width - 0.25 * BASE_SIZE) / POWERUP_DURATION
        )
        if fill_width <= 0:
            return
        fill_area = pygame.Rect(int(0.125 * BASE_SIZE), BASE_SIZE, fill_width, BASE_SIZE)
        fill_area = fill_area.clip(self.powerup_bar.get_rect())
        if fill_area.width <= 0 or fill_area.height <= 0:
            return
        fill = self.powerup_bar.subsurface(fill_area)
        color = POWER_BAR_COLORS.get(self.player.current_power, WHITE)
        surface.blit(
            _tinted(fill, color), (int(SCREEN_WIDTH - bar_width - 0.125 * BASE_SIZE), top)
        )

    def draw(self, surface) -> None:
        """Render the current frame onto a surface of the logical screen size."""
        surface.fill(BLACK)
        surface.blit(self.background, (0, 0))

        if self.show_splash:
            surface.blit(self.logo, self.logo_position)
            self._draw_prompt(surface)
            return

        if not self.player.dead:
            self.enemy_manager.draw(surface)
            self.ufo.draw(surface)
            if self.player.current_power > 0:
                self._draw_power_bar(surface)

        self.player.draw(surface)
        draw_text(
            int(0.25 * BASE_SIZE),
            int(0.25 * BASE_SIZE),
            f"Level: {self.level}",
            surface,
            self.font_texture,
        )
        draw_text(
            int(0.25 * BASE_SIZE),
            int(18.5 * BASE_SIZE),
            f"Player: {self.player_name}",
            surface,
            self.font_texture,
        )

        if self.game_over:
            draw_text(
                int(0.5 * (SCREEN_WIDTH - 5 * BASE_SIZE)),
                int(0.5 * (SCREEN_HEIGHT - BASE_SIZE)),
                "Game over!",
                surface,
                self.font_texture,
            )
            draw_text(
                int(0.5 * (SCREEN_WIDTH - 9.5 * BASE_SIZE)),
                int(0.5 * (SCREEN_HEIGHT + BASE_SIZE)),
                "Press R to restart",
                surface,
                self.font_texture,
            )
        elif self.next_level:
            draw_text(
                int(0.5 * (SCREEN_WIDTH - 5.5 * BASE_SIZE)),
                int(0.5 * (SCREEN_HEIGHT - BASE_SIZE)),
                "Next level!",
                surface,
                self.font_texture,
            )


def _load_music(path: Path) -> bool:
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
        pygame.mixer.music.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        return False
    return True


def _play_music() -> None:
    try:
        pygame.mixer.music.play(-1)
    except pygame.error:
        pass


def _music_playing() -> bool:
    try:
        return pygame.mixer.music.get_busy()
    except pygame.error:
        return False


def _read_input() -> _FrameInput:
    pressed = pygame.key.get_pressed()
    return _FrameInput(
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
        fire=bool(pressed[pygame.K_z]),
        restart=bool(pressed[pygame.K_r]),
    )


def main(argv=None) -> int:
    """Run the game in a window."""
    parser = argparse.ArgumentParser(prog="invaders", description="Play Space Invaders.")
    parser.add_argument("--resources", default="Resources", help="resource directory")
    parser.add_argument("--save-file", default=DEFAULT_SAVE_FILE, help="player data file")
    args = parser.parse_args(argv)
    resources = Path(args.resources)

    pygame.init()
    try:
        try:
            assets = Assets.load(resources / "Images")
        except FileNotFoundError as error:
            print(error, file=sys.stderr)
            return 1
        if "logo" not in assets:
            print("Failed to load logo.", file=sys.stderr)
            return 1
        try:
            font = pygame.font.Font(str(resources / "Fonts" / "ARIALN.TTF"), 10)
        except (pygame.error, OSError):
            print("Failed to load font.", file=sys.stderr)
            return 1

        window = pygame.display.set_mode(
            (SCREEN_RESIZE * SCREEN_WIDTH, SCREEN_RESIZE * SCREEN_HEIGHT)
        )
        pygame.display.set_caption("Space Invaders")
        has_music = _load_music(resources / "music" / "music.ogg")

        rng = random.Random(time.time_ns())
        try:
            game = Game(assets, PlayerStore(args.save_file), rng)
        except KeyError as error:
            print(error.args[0], file=sys.stderr)
            return 1
        game.name_font = font

        frame = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.key.start_text_input()
        music_started = False
        running = True
        lag = 0
        previous = time.perf_counter_ns()

        while running:
            now = time.perf_counter_ns()
            lag += (now - previous) // 1000
            previous = now

            while running and lag >= FRAME_DURATION_US:
                lag -= FRAME_DURATION_US
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_BACKSPACE:
                            game.type_char("\b")
                        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                            game.type_char("\r")
                    elif event.type == pygame.TEXTINPUT:
                        for char in event.text:
                            game.type_char(char)

                if not game.started:
                    continue

                if has_music and not music_started and not _music_playing():
                    _play_music()
                    music_started = True

                was_over = game.game_over
                game.tick(_read_input())
                if was_over and not game.game_over and music_started and not _music_playing():
                    _play_music()

            if running and lag < FRAME_DURATION_US:
                game.draw(frame)
                pygame.transform.scale(frame, window.get_size(), window)
                pygame.display.flip()
            pygame.time.wait(1)
        return 0
    finally:
        pygame.quit()