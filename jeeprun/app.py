"""Window, input handling and drawing for the game, and the command that starts it."""

from __future__ import annotations

import argparse
import sys

import numpy as np
import pygame

from jeeprun.game_object import BackgroundGameObject, GameObject
from jeeprun.hud import DrawingGameObject, TextGameObject
from jeeprun.particle_system import ParticleSystem
from jeeprun.player import PlayerGameObject, Pointer
from jeeprun.timer import now
from jeeprun.world import Controls, Texture, World

WINDOW_TITLE = "Game Demo"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
BACKGROUND_COLOR = (0, 0, 255)
FONT_SIZE = 20
PARTICLE_RADIUS = 2

# Corners of the unit square in homogeneous coordinates, one per column.
_CORNERS = np.array(
    [
        [-0.5, 0.5, 0.0, 1.0],
        [0.5, 0.5, 0.0, 1.0],
        [0.5, -0.5, 0.0, 1.0],
        [-0.5, -0.5, 0.0, 1.0],
    ]
).T

# Flat colours standing in for each texture.
_PALETTE: dict[int, tuple[int, int, int]] = {
    Texture.JEEP: (200, 170, 60),
    Texture.KAMIKAZE: (160, 40, 40),
    Texture.RANGED: (110, 110, 130),
    Texture.STARS: (210, 180, 120),
    Texture.ORB: (255, 150, 40),
    Texture.EXPLOSION: (255, 90, 0),
    Texture.INVINCIBLE: (90, 90, 90),
    Texture.FIREBALL: (70, 90, 60),
    Texture.BULLET: (240, 240, 80),
    Texture.MISSILE: (200, 200, 200),
    Texture.NOTHING: (0, 0, 0),
    Texture.SQUARE: (180, 0, 0),
    Texture.HEALTH: (220, 30, 30),
    Texture.BULLET_AMMO: (140, 110, 40),
    Texture.YELLOW_ORB: (250, 230, 60),
    Texture.TEXT: (255, 255, 255),
    Texture.WANDERER: (120, 60, 140),
    Texture.BARREL: (60, 60, 60),
    Texture.ROCKET: (90, 90, 90),
    Texture.BOAT: (120, 80, 40),
    Texture.WEAKLING: (80, 180, 220),
}
_DEFAULT_COLOR = (128, 128, 128)
_INVINCIBLE_TINT = (255, 255, 120)
_HEALTH_BACK = (90, 0, 0)
_HEALTH_FRONT = (0, 200, 0)


def _color_of(obj: GameObject) -> tuple[int, int, int]:
    color = _PALETTE.get(int(obj.texture), _DEFAULT_COLOR)
    if obj.ghost:
        grey = sum(color) // 3
        color = (grey, grey, grey)
    if obj.invincible:
        color = tuple((c + t) // 2 for c, t in zip(color, _INVINCIBLE_TINT))
    return color


class App:
    """A game window: reads input, advances the world and draws it each frame."""

    def __init__(self, width=WINDOW_WIDTH, height=WINDOW_HEIGHT, title=WINDOW_TITLE) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window width and height must be positive")
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((int(width), int(height)), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.quit()
            raise RuntimeError("Could not create window") from exc
        pygame.display.set_caption(title)
        self._font = pygame.font.Font(None, FONT_SIZE)
        self.pointer = Pointer(0.0, 0.0, int(width), int(height))
        self.world = World(self.pointer)
        self.world.setup()
        self._reported = 0

    def __enter__(self) -> App:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the window."""
        pygame.quit()

    def read_controls(self) -> Controls:
        """Sample the keyboard and mouse, and track the cursor for the turret."""
        keys = pygame.key.get_pressed()
        buttons = pygame.mouse.get_pressed()
        x, y = pygame.mouse.get_pos()
        width, height = self.screen.get_size()
        self.pointer.x, self.pointer.y = float(x), float(y)
        self.pointer.width, self.pointer.height = width, height
        return Controls(
            forward=bool(keys[pygame.K_w]),
            backward=bool(keys[pygame.K_s]),
            turn_right=bool(keys[pygame.K_d]),
            turn_left=bool(keys[pygame.K_a]),
            select_bullets=bool(keys[pygame.K_1]),
            select_missiles=bool(keys[pygame.K_2]),
            fire=bool(buttons[0]),
            quit=bool(keys[pygame.K_ESCAPE]),
        )

    def _pixels(self, matrix: np.ndarray, corners: np.ndarray = _CORNERS) -> list[tuple[float, float]]:
        width, height = self.screen.get_size()
        clip = matrix @ corners
        xs = (clip[0] / clip[3] + 1.0) * 0.5 * width
        ys = (1.0 - clip[1] / clip[3]) * 0.5 * height
        return list(zip(xs.tolist(), ys.tolist()))

    def _quad(self, matrix: np.ndarray, color) -> int:
        pygame.draw.polygon(self.screen, color, self._pixels(matrix))
        return 1

    def _draw_object(self, obj: GameObject, view: np.ndarray) -> int:
        color = _color_of(obj)
        if isinstance(obj, BackgroundGameObject):
            return sum(self._quad(view @ tile, color) for tile in obj.tile_matrices())
        if isinstance(obj, PlayerGameObject):
            drawn = self._quad(view @ obj.transformation_matrix(), color)
            for component in obj.components:
                drawn += self._quad(view @ component.transformation_matrix(), _color_of(component))
            return drawn
        return self._quad(view @ obj.transformation_matrix(), color)

    def _draw_particles(self, system: ParticleSystem, view: np.ndarray, current_time: float) -> int:
        matrix = view @ system.transformation_matrix()
        elapsed = system.shader_time(current_time)
        rows = system.geometry.vertices[::4]
        if len(rows) == 0:
            return 0
        travel = (elapsed + rows[:, 4]) % 1.0
        points = np.zeros((4, len(rows)))
        points[0] = rows[:, 2] * travel * 10.0
        points[1] = rows[:, 3] * travel * 10.0
        points[3] = 1.0
        color = _PALETTE.get(int(system.texture), _DEFAULT_COLOR)
        for x, y in self._pixels(matrix, points):
            pygame.draw.circle(self.screen, color, (x, y), PARTICLE_RADIUS)
        return len(rows)

    def _draw_hud(self) -> int:
        ortho = np.identity(4)
        drawn = 0
        for element in self.world.hud.elements:
            if isinstance(element, DrawingGameObject):
                matrix = ortho @ element.transformation_matrix()
                drawn += self._quad(matrix, _HEALTH_BACK)
                fraction = min(max(element.displayed_health / element.max_health, 0.0), 1.0)
                if fraction > 0.0:
                    filled = _CORNERS.copy()
                    filled[0, 1:3] = -0.5 + fraction
                    pygame.draw.polygon(self.screen, _HEALTH_FRONT, self._pixels(matrix, filled))
                    drawn += 1
            elif isinstance(element, TextGameObject):
                anchor = np.array([[element.pos[0]], [element.pos[1]], [0.0], [1.0]])
                (x, y), = self._pixels(ortho, anchor)
                image = self._font.render(element.display_text(), True, _PALETTE[Texture.TEXT])
                self.screen.blit(image, image.get_rect(center=(round(x), round(y))))
                drawn += 1
        return drawn

    def draw(self) -> int:
        """Draw the whole scene and return the number of shapes drawn."""
        self.screen.fill(BACKGROUND_COLOR)
        width, height = self.screen.get_size()
        view = self.world.view_matrix(width, height)
        # Earlier objects appear on top, so paint from the back of the list.
        drawn = sum(self._draw_object(obj, view) for obj in reversed(self.world.objects))
        current_time = now()
        drawn += sum(
            self._draw_particles(system, view, current_time)
            for system in self.world.particle_systems
        )
        drawn += self._draw_hud()
        return drawn

    def _report(self) -> None:
        for message in self.world.messages[self._reported:]:
            print(message)
        self._reported = len(self.world.messages)

    def run(self) -> list[str]:
        """Run frames until the world closes; return the messages it produced."""
        last_time = now()
        while not self.world.closed:
            current_time = now()
            delta_time = current_time - last_time
            last_time = current_time
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.world.closed = True
            self.world.handle_controls(delta_time, self.read_controls())
            self.world.update(delta_time)
            self.draw()
            pygame.display.flip()
            self._report()
        self._report()
        return list(self.world.messages)


def main(argv=None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="jeeprun", description="Escort the weaklings to the boat.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height in pixels")
    args = parser.parse_args(argv)
    try:
        with App(args.width, args.height, WINDOW_TITLE) as app:
            app.run()
    except Exception as exc:  # report any failure the way the game always has
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())