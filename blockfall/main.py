"""Window, main loop and on-screen panels."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

import pygame

from .colors import DARK_BLUE, LIGHT_BLUE, WHITE
from .game import Game, Key, SilentSounds

WINDOW_SIZE = (500, 620)
FPS = 60
FONT_PATH = "Font/monogram.ttf"
FONT_SIZE = 38
MUSIC_PATH = "Sounds/music.mp3"
ROTATE_PATH = "Sounds/rotate.mp3"
CLEAR_PATH = "Sounds/clear.mp3"

_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
}


class EventTimer:
    """Fires at most once per interval, measured from the last firing."""

    def __init__(self) -> None:
        self.last_update_time = 0.0

    def triggered(self, now: float, interval: float) -> bool:
        """Return True and restart the interval if it has elapsed by now."""
        if now - self.last_update_time >= interval:
            self.last_update_time = now
            return True
        return False


class _MixerSounds:
    def __init__(self) -> None:
        self._rotate = pygame.mixer.Sound(ROTATE_PATH)
        self._clear = pygame.mixer.Sound(CLEAR_PATH)

    def play_rotate(self) -> None:
        self._rotate.play()

    def play_clear(self) -> None:
        self._clear.play()


def _load_sounds() -> _MixerSounds | SilentSounds:
    try:
        pygame.mixer.init()
        sounds = _MixerSounds()
    except (pygame.error, FileNotFoundError):
        return SilentSounds()
    try:
        pygame.mixer.music.load(MUSIC_PATH)
        pygame.mixer.music.play(-1)
    except (pygame.error, FileNotFoundError):
        pass
    return sounds


def _load_font() -> pygame.font.Font:
    try:
        return pygame.font.Font(FONT_PATH, FONT_SIZE)
    except (OSError, FileNotFoundError, pygame.error):
        return pygame.font.Font(None, FONT_SIZE)


def _rounded_panel(surface: pygame.Surface, rect: tuple[int, int, int, int]) -> None:
    radius = int(0.3 * min(rect[2], rect[3]) / 2)
    pygame.draw.rect(surface, LIGHT_BLUE, pygame.Rect(rect), border_radius=radius)


def _render(surface: pygame.Surface, font: pygame.font.Font, game: Game) -> None:
    surface.fill(DARK_BLUE)
    surface.blit(font.render("Score", True, WHITE), (365, 15))
    surface.blit(font.render("Next", True, WHITE), (370, 175))
    if game.game_over:
        surface.blit(font.render("GAME OVER", True, WHITE), (320, 450))
    _rounded_panel(surface, (320, 55, 170, 60))
    score_text = font.render(str(game.score), True, WHITE)
    surface.blit(score_text, (320 + (170 - score_text.get_width()) / 2, 65))
    _rounded_panel(surface, (320, 215, 170, 180))
    game.draw(surface)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="blockfall", description="Falling-block puzzle game.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Tetris")
        clock = pygame.time.Clock()
        font = _load_font()
        game = Game(sounds=_load_sounds())
        timer = EventTimer()
        start = time.monotonic()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.handle_input(_KEYS.get(event.key, Key.OTHER))
            if not running:
                break
            if timer.triggered(time.monotonic() - start, game.speed):
                game.move_block_down()
            _render(screen, font, game)
            pygame.display.flip()
            clock.tick(FPS)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())