"""The game window: command-line entry point, event loop and frame drawing."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .cubfile import MapError  # noqa: E402
from .game import Game  # noqa: E402
from .image import Image  # noqa: E402
from .player import (  # noqa: E402
    KEYCODE_ESCAPE,
    KEYCODE_LEFT_ARROW,
    KEYCODE_RIGHT_ARROW,
    press_key,
    release_key,
    update_player,
)
from .raycast import fill_background, raycast  # noqa: E402

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
TITLE = "cubecaster"
PROGRAM = "cubecaster"

_KEYSYMS = {
    pygame.K_ESCAPE: KEYCODE_ESCAPE,
    pygame.K_RIGHT: KEYCODE_RIGHT_ARROW,
    pygame.K_LEFT: KEYCODE_LEFT_ARROW,
}


def _error(message: str) -> int:
    print(f"Error\n{PROGRAM}: {message}", file=sys.stderr)
    return 1


def _keysym(key: int) -> int:
    """Translate a pygame key constant into the key codes the player uses."""
    return _KEYSYMS.get(key, key)


def _rgb_bytes(image: Image) -> bytes:
    """Return the image's pixels as packed RGB triples, alpha dropped."""
    data = image.to_bytes()
    rgb = bytearray(image.width * image.height * 3)
    rgb[0::3] = data[2::4]
    rgb[1::3] = data[1::4]
    rgb[2::3] = data[0::4]
    return bytes(rgb)


def _render(game: Game, frame: Image) -> None:
    update_player(game.player, game.keys, game.fps, game.rows)
    fill_background(game, frame)
    raycast(game, frame)


def _handle_event(game: Game, event: pygame.event.Event) -> bool:
    """Apply one window event; return False when the game should stop."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        try:
            game.keys = press_key(game.keys, _keysym(event.key))
        except SystemExit:
            return False
    elif event.type == pygame.KEYUP:
        game.keys = release_key(game.keys, _keysym(event.key))
    return True


def run(game: Game) -> int:
    """Open the window and draw frames until the player quits; return 0."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        pygame.mouse.set_visible(False)
        pygame.key.set_repeat()
        frame = Image(WINDOW_WIDTH, WINDOW_HEIGHT)
        last: float | None = None
        while True:
            for event in pygame.event.get():
                if not _handle_event(game, event):
                    return 0
            now = time.monotonic()
            if last is not None and now > last:
                game.fps = 1.0 / (now - last)
            last = now
            _render(game, frame)
            surface = pygame.image.frombuffer(
                _rgb_bytes(frame), (frame.width, frame.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene file named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return _error("Wrong number of args")
    try:
        game = Game.from_file(args[0])
    except MapError as exc:
        return _error(str(exc))
    return run(game)


if __name__ == "__main__":
    sys.exit(main())