"""Window, input, sound and screens of the brick breaker game."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from brickbreaker.world import (
    BALL_SIZE,
    COL,
    ROW,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_TITLE,
    Outcome,
    Rect,
    World,
    brick_rect,
    load_map,
)

log = logging.getLogger(__name__)

SCREEN_RECT = Rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
PLAY_BUTTON = Rect(SCREEN_WIDTH // 2 - 50, SCREEN_HEIGHT // 2 - 40, 100, 30)
EXIT_BUTTON = Rect(SCREEN_WIDTH // 2 - 50, SCREEN_HEIGHT // 2, 100, 30)
TRY_AGAIN_BUTTON = Rect(SCREEN_WIDTH // 2 - 80, SCREEN_HEIGHT - 120, 160, 40)
END_EXIT_BUTTON = Rect(SCREEN_WIDTH // 2 - 50, SCREEN_HEIGHT - 60, 100, 40)
LIVES_AREA = Rect(0, SCREEN_HEIGHT - 50, 60, 50)
TEXT_COLOR = (255, 255, 255)
FONT_PATH = "font/SVN-Coder's Crux.otf"
FONT_SIZE = 28
MAP_FILE = "map.txt"
_PADDLE_SIZE = (SCREEN_WIDTH // 4, SCREEN_WIDTH // 16)
_BALL_SIZE = (BALL_SIZE, BALL_SIZE)
_SCREEN_SIZE = (SCREEN_WIDTH, SCREEN_HEIGHT)


class Game:
    """The running game: owns the window, assets and the world."""

    def __init__(self, assets_dir=".") -> None:
        self.assets_dir = Path(assets_dir)
        pygame.init()
        pygame.display.set_caption(WINDOW_TITLE)
        self.screen = pygame.display.set_mode(_SCREEN_SIZE)
        self.audio = self._open_audio()

        self.background = self._load_image("image/background.jpg", _SCREEN_SIZE)
        self.menu_background = self._load_image("image/menu_background.jpg", _SCREEN_SIZE)
        self.ball_image = self._load_image("image/ball.png", _BALL_SIZE)
        self.paddle_image = self._load_image("image/paddle.png", _PADDLE_SIZE)
        self.win_screen = self._load_image("image/win_screen.png", _SCREEN_SIZE)
        self.lose_screen = self._load_image("image/lose_screen.png", _SCREEN_SIZE)
        brick_size = brick_rect(0, 0).size
        self.brick1 = self._load_image("image/brick1.jpg", brick_size)
        self.brick2 = self._load_image("image/brick2.jpg", brick_size)

        self.font = self._load_font()

        self.sound_hit = self._load_sound("music/sound_hit.mp3")
        self.sound_menu = self._load_sound("music/menu_sound.mp3")
        self.background_music = self._music_path("music/sound_background.mp3")
        self.win_music = self._music_path("music/win_sound.mp3")
        self.lose_music = self._music_path("music/lose_sound.mp3")

        self.running = True
        self.waiting = True
        self.world = World(self._read_map())

        self._play_music(self.background_music, loops=-1)

    def __enter__(self) -> Game:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- asset loading -------------------------------------------------

    def _open_audio(self) -> bool:
        try:
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            log.warning("failed to initialise audio: %s", exc)
            return False
        return True

    def _load_image(self, relative: str, size):
        path = self.assets_dir / relative
        try:
            image = pygame.image.load(str(path))
        except (pygame.error, OSError) as exc:
            log.warning("cannot load image %s: %s", path, exc)
            return None
        return pygame.transform.scale(image, size)

    def _load_font(self):
        path = self.assets_dir / FONT_PATH
        try:
            return pygame.font.Font(str(path), FONT_SIZE)
        except (pygame.error, OSError) as exc:
            log.warning("cannot load font %s: %s", path, exc)
            return None

    def _load_sound(self, relative: str):
        if not self.audio:
            return None
        path = self.assets_dir / relative
        try:
            return pygame.mixer.Sound(str(path))
        except (pygame.error, OSError) as exc:
            log.warning("cannot load sound %s: %s", path, exc)
            return None

    def _music_path(self, relative: str):
        path = self.assets_dir / relative
        if not path.is_file():
            log.warning("cannot find music %s", path)
            return None
        return path

    def _read_map(self):
        path = self.assets_dir / MAP_FILE
        try:
            return load_map(path)
        except OSError as exc:
            log.warning("cannot open map %s: %s", path, exc)
            return [[False] * COL for _ in range(ROW)]

    # --- sound and drawing helpers -------------------------------------

    def _play_sound(self, sound) -> None:
        if sound is not None:
            sound.play()

    def _play_music(self, path, loops: int) -> None:
        if not self.audio or path is None:
            return
        try:
            pygame.mixer.music.load(str(path))
            pygame.mixer.music.play(loops)
        except pygame.error as exc:
            log.warning("cannot play music %s: %s", path, exc)

    def _draw(self, image, rect: Rect) -> None:
        if image is not None:
            self.screen.blit(image, (rect.x, rect.y))

    def _draw_text(self, text: str, rect: Rect) -> None:
        if self.font is None:
            return
        surface = self.font.render(text, False, TEXT_COLOR)
        self.screen.blit(pygame.transform.scale(surface, rect.size), (rect.x, rect.y))

    # --- screens ---------------------------------------------------------

    def show_menu(self) -> bool:
        """Show the start menu; True to play, False to quit."""
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return False
                if event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    if PLAY_BUTTON.contains(x, y):
                        self._play_sound(self.sound_menu)
                        return True
                    if EXIT_BUTTON.contains(x, y):
                        self._play_sound(self.sound_menu)
                        return False
            self.screen.fill((0, 0, 0))
            self._draw(self.menu_background, SCREEN_RECT)
            self._draw_text("PLAY", PLAY_BUTTON)
            self._draw_text("EXIT", EXIT_BUTTON)
            pygame.display.flip()

    def show_end_screen(self, win: bool) -> None:
        """Show the win or lose screen and wait for try-again or exit."""
        self.screen.fill((0, 0, 0))
        if win:
            self._draw(self.win_screen, SCREEN_RECT)
            self._play_music(self.win_music, loops=0)
        else:
            self._draw(self.lose_screen, SCREEN_RECT)
            self._play_music(self.lose_music, loops=0)
        self._draw_text("TRY AGAIN", TRY_AGAIN_BUTTON)
        self._draw_text("EXIT", END_EXIT_BUTTON)
        pygame.display.flip()

        waiting_for_choice = True
        while waiting_for_choice:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    return
                if event.type != pygame.MOUSEBUTTONDOWN:
                    continue
                x, y = event.pos
                if TRY_AGAIN_BUTTON.contains(x, y):
                    self._play_sound(self.sound_menu)
                    self.world.reset(self._read_map())
                    self._play_music(self.background_music, loops=-1)
                    waiting_for_choice = False
                    self.waiting = True
                if END_EXIT_BUTTON.contains(x, y):
                    self._play_sound(self.sound_menu)
                    self.running = False
                    waiting_for_choice = False
            if waiting_for_choice:
                pygame.time.wait(1)

    # --- main loop -------------------------------------------------------

    def handle_input(self) -> None:
        """Process pending events and held keys."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            if event.type == pygame.KEYDOWN:
                self.waiting = False
        keys = pygame.key.get_pressed()
        if keys[pygame.K_ESCAPE]:
            self.running = False
        if keys[pygame.K_LEFT]:
            self.world.move_paddle(-1)
        if keys[pygame.K_RIGHT]:
            self.world.move_paddle(1)

    def update(self) -> None:
        """Advance the world once the player has pressed a key."""
        if self.waiting:
            return
        result = self.world.step()
        for _ in range(result.hits):
            self._play_sound(self.sound_hit)
        if result.outcome is Outcome.WON:
            self.show_end_screen(True)
        if self.world.lives <= 0:
            self.show_end_screen(False)

    def render(self) -> None:
        """Draw one frame."""
        pygame.time.delay(3)
        self.screen.fill((0, 0, 0))
        self._draw(self.background, SCREEN_RECT)
        self._draw_text(f"LIVES: {self.world.lives}", LIVES_AREA)
        self._draw(self.ball_image, self.world.ball)
        self._draw(self.paddle_image, self.world.paddle)
        for row, cells in enumerate(self.world.bricks):
            image = self.brick1 if row % 2 == 0 else self.brick2
            for col, alive in enumerate(cells):
                if alive:
                    self._draw(image, brick_rect(row, col))
        pygame.display.flip()

    def run(self) -> None:
        """Show the menu, then play until the player quits."""
        try:
            if not self.show_menu():
                return
            while self.running:
                self.render()
                self.handle_input()
                self.update()
        finally:
            self.close()

    def close(self) -> None:
        """Release audio and the window."""
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.quit()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="brickbreaker", description=WINDOW_TITLE)
    parser.add_argument(
        "--assets",
        default=".",
        help="directory holding image/, music/, font/ and map.txt",
    )
    args = parser.parse_args(argv)
    Game(args.assets).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())