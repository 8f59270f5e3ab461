"""Base game objects, colliders and the simple objects built on them."""

from __future__ import annotations

import math
from typing import Any, Iterable

import numpy as np

from jeeprun.timer import Timer

TWO_PI = 2.0 * math.pi
DYING_TEXTURE = 6
BLOOD_TEXTURE = 11
DEATH_DURATION = 5.0
BLOOD_DURATION = 1.0

# Background tiles are laid out over these column and row offsets.
_TILE_COLUMNS = range(-4, 5)
_TILE_ROWS = range(-1, 5)


def _vec3(value: Iterable[float]) -> np.ndarray:
    array = np.array(value, dtype=float).ravel()
    if array.size == 2:
        array = np.append(array, 0.0)
    if array.size != 3:
        raise ValueError(f"expected a 2D or 3D vector, got {array.size} components")
    return array


def _vec2(value: Iterable[float] | float) -> np.ndarray:
    array = np.array(value, dtype=float).ravel()
    if array.size == 1:
        array = np.repeat(array, 2)
    if array.size != 2:
        raise ValueError(f"expected a 2D vector, got {array.size} components")
    return array


def _translation(offset: Iterable[float]) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def _rotation(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    matrix = np.identity(4)
    matrix[0, 0], matrix[0, 1] = c, -s
    matrix[1, 0], matrix[1, 1] = s, c
    return matrix


def _scaling(scale: Iterable[float]) -> np.ndarray:
    sx, sy = _vec2(scale)
    return np.diag([sx, sy, 1.0, 1.0])


class GameObject:
    """One object in the game world with a transform, health and a death timer."""

    def __init__(self, position, geometry, shader, texture, scale) -> None:
        self.position = position
        self.scale = scale
        self._angle = 0.0
        self.geometry = geometry
        self.shader = shader
        self.texture = texture
        self.health = 1
        self.prev_collider: GameObject | None = None
        self.timer = Timer()
        self.dying = False
        self.ghost = False
        self.invincible = False

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: Iterable[float]) -> None:
        self._position = _vec3(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale

    @scale.setter
    def scale(self, value: Iterable[float] | float) -> None:
        self._scale = _vec2(value)

    @property
    def rotation(self) -> float:
        return self._angle

    @rotation.setter
    def rotation(self, angle: float) -> None:
        self.set_rotation(angle)

    def bearing(self) -> np.ndarray:
        """Unit vector in the direction the object faces."""
        return np.array([math.cos(self._angle), math.sin(self._angle), 0.0])

    def right(self) -> np.ndarray:
        """Unit vector pointing to the object's right side."""
        angle = self._angle - math.pi / 2.0
        return np.array([math.cos(angle), math.sin(angle), 0.0])

    def set_rotation(self, angle: float) -> None:
        """Set the facing angle, wrapped into [0, 2*pi)."""
        angle = math.fmod(float(angle), TWO_PI)
        if angle < 0.0:
            angle += TWO_PI
        self._angle = angle

    def update(self, delta_time: float) -> None:
        """Advance the object's state; the base object does nothing."""

    def transformation_matrix(self) -> np.ndarray:
        """Model matrix: translation, then rotation, then scaling."""
        return _translation(self._position) @ _rotation(self._angle) @ _scaling(self._scale)

    def hurt(self) -> None:
        """Remove one point of health, dying when it reaches zero."""
        self.health -= 1
        if self.health == 0:
            self.die()

    def heal(self) -> None:
        """Add one point of health."""
        self.health += 1

    def die(self) -> None:
        """Start dying: switch to the dying texture and start the death timer."""
        self.dying = True
        self.timer.start(DEATH_DURATION)
        self.texture = DYING_TEXTURE

    def location_text(self) -> str:
        """Describe the object's location on the plane."""
        x, y = self._position[0], self._position[1]
        return f"Player location: {x:g}, {y:g}"


class Collider:
    """Mixin giving a game object a collision radius.

    ``ray`` is the collider's type flag. As in the game, a flagged collider
    tests plain circle overlap, while an unflagged one casts a ray along its
    bearing.
    """

    def __init__(self, radius: float, ray: bool = False) -> None:
        self.radius = float(radius)
        self.ray = bool(ray)

    def collide(self, other: Any) -> bool:
        """Test for a collision with another collider."""
        if self.ray:
            return self.circle_collision(other)
        return self.ray_collision(other)

    def circle_collision(self, other: Any) -> bool:
        """True if the two collision circles overlap."""
        distance = float(np.linalg.norm(self.position - other.position))
        return distance < self.radius + other.radius

    def ray_collision(self, other: Any) -> bool:
        """True if a ray along the bearing passes through the other's circle nearby."""
        origin = self.position
        direction = self.bearing()
        direction = direction / np.linalg.norm(direction)
        center = other.position
        circle_radius = other.radius
        t = float(np.dot(2.0 * (center - origin), direction))
        closest = origin + t * direction
        intersect = float(np.linalg.norm(closest - center)) <= circle_radius
        from_origin = float(np.linalg.norm(closest - origin))
        return intersect and from_origin <= self.radius + circle_radius


class BackgroundGameObject(GameObject):
    """A background texture tiled across the world, spaced by its position."""

    def tile_matrices(self) -> list[np.ndarray]:
        """Model matrices for every background tile, column by column."""
        rotation_scale = _rotation(self._angle) @ _scaling(self._scale)
        x, y, z = self._position
        return [
            _translation((x * i, y * j, z)) @ rotation_scale
            for i in _TILE_COLUMNS
            for j in _TILE_ROWS
        ]


class ComponentGameObject(GameObject):
    """A game object attached to a parent object."""

    def __init__(self, position, geometry, shader, texture, scale, radius, parent) -> None:
        super().__init__(position, geometry, shader, texture, scale)
        self.parent = parent


class Blood(GameObject):
    """A short-lived splash of blood that is dying from the start."""

    def __init__(self, position, geometry, shader) -> None:
        super().__init__(position, geometry, shader, BLOOD_TEXTURE, (1.0, 1.0))
        self.dying = True
        self.timer.start(BLOOD_DURATION)


class Explosion(GameObject):
    """An explosion that damages each object within its radius once."""

    def __init__(self, position, geometry, shader, texture, scale, damage, radius) -> None:
        super().__init__(position, geometry, shader, texture, scale)
        self.damage = float(damage)
        self.radius = float(radius)
        self._affected: set[int] = set()
        self.set_rotation(0.0)
        self.dying = True

    def damage_at(self, distance: float) -> float:
        """Damage dealt at ``distance`` from the centre; none outside the radius."""
        if distance <= self.radius:
            return self.damage
        return 0.0

    def is_damaged(self, obj: Any) -> bool:
        """True if ``obj`` has already been hit by this explosion."""
        return id(obj) in self._affected

    def add_affected(self, obj: Any) -> None:
        """Record that ``obj`` has been hit by this explosion."""
        self._affected.add(id(obj))