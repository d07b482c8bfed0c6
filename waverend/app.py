"""Window that shows a shaded OBJ model and turns it with the arrow keys."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pygame

from .model import Model
from .objparse import parse_obj
from .raster import DEFAULT_LIGHT, Canvas
from .view import ViewState, render_model

DEFAULT_OBJ = "./src/diablo3_pose.obj"
WIDTH = 640
HEIGHT = 480
TITLE = "Wireframe Renderer"

_KEY_ACTIONS = {
    pygame.K_RIGHT: ViewState.rotate_right,
    pygame.K_LEFT: ViewState.rotate_left,
    pygame.K_DOWN: ViewState.rotate_down,
    pygame.K_UP: ViewState.rotate_up,
}


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(prog="waverend", description="Show a shaded OBJ model.")
    parser.add_argument("obj", nargs="?", default=DEFAULT_OBJ, help="OBJ file to show")
    parser.add_argument("--width", type=int, default=WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="window height in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window size must be positive")
    return args


def _present(screen: pygame.Surface, canvas: Canvas) -> None:
    image = pygame.image.frombuffer(canvas.rgb_bytes(), (canvas.width, canvas.height), "RGB")
    screen.blit(image, (0, 0))
    pygame.display.flip()


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run until it is closed."""
    args = parse_args(argv)
    try:
        model = parse_obj(args.obj)
    except OSError:
        print(f"Error reading file {args.obj}", file=sys.stderr)
        model = Model()

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((args.width, args.height))
        except pygame.error as exc:
            print(f"Couldn't create window and renderer: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(TITLE)
        view = ViewState()
        canvas = Canvas(args.width, args.height)
        clock = pygame.time.Clock()
        dirty = True
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN and event.key in _KEY_ACTIONS:
                    _KEY_ACTIONS[event.key](view)
                    dirty = True
            if dirty:
                render_model(model, view, canvas, DEFAULT_LIGHT)
                _present(screen, canvas)
                dirty = False
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())