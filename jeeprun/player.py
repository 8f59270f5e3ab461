"""The player's jeep together with its turret and gun."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from jeeprun.actors import CollectibleType
from jeeprun.game_object import Collider, ComponentGameObject, GameObject
from jeeprun.timer import Timer

PLAYER_HEALTH = 15
MAX_VELOCITY = 3.0
ACCELERATION = 0.05
FRICTION = 0.98
REST_THRESHOLD = 0.01
INVINCIBILITY_TIME = 5.0

TURRET_TEXTURE = 7
TURRET_SCALE = (0.5, 0.5)
TURRET_ROTATION_SPEED = 2.0
ALIGNED_TOLERANCE = 0.001

GUN_TEXTURE = 18
GUN_SCALE = (0.4, 0.2)
GUN_OFFSET = 0.45
MAX_BULLETS = 100
MAX_MISSILES = 10
BULLET_REFILL = 25
MISSILE_REFILL = 5


@dataclass
class Pointer:
    """Cursor position in window pixels, and the size of the window."""

    x: float = 0.0
    y: float = 0.0
    width: int = 800
    height: int = 600


class GunMode(IntEnum):
    """Which weapon the gun fires."""

    BULLET = 0
    MISSILE = 1


# Fire rate (seconds between shots) and texture for each mode.
_GUN_SETTINGS = {
    GunMode.BULLET: (0.2, 18),
    GunMode.MISSILE: (1.2, 19),
}


def _rotate_about(vector: np.ndarray, angle: float, axis: np.ndarray) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return vector * c + np.cross(axis, vector) * s + axis * float(np.dot(axis, vector)) * (1.0 - c)


class GunComponent(ComponentGameObject):
    """A gun mounted on the turret, with two ammunition stores and cooldowns."""

    def __init__(self, position, geometry, shader, texture, scale, radius, parent) -> None:
        super().__init__(position, geometry, shader, texture, scale, radius, parent)
        self.mode = GunMode.BULLET
        self.fire_rate = _GUN_SETTINGS[GunMode.BULLET][0]
        self.ammo_bullets = MAX_BULLETS
        self.ammo_rockets = MAX_MISSILES
        self._cooldowns = {GunMode.BULLET: Timer(), GunMode.MISSILE: Timer()}

    def _follow_parent(self) -> None:
        self.position = self.parent.position
        self.set_rotation(self.parent.rotation)
        self.position = self.position + self.bearing() * GUN_OFFSET

    def attach(self) -> None:
        """Place the gun at the muzzle end of its parent."""
        self._follow_parent()

    def set_mode(self, mode) -> None:
        """Switch weapon; raises ValueError for an unknown mode."""
        self.mode = GunMode(mode)
        self.fire_rate, self.texture = _GUN_SETTINGS[self.mode]

    def add_ammo(self) -> None:
        """Refill both stores, capped at their maximums."""
        self.ammo_bullets = min(self.ammo_bullets + BULLET_REFILL, MAX_BULLETS)
        self.ammo_rockets = min(self.ammo_rockets + MISSILE_REFILL, MAX_MISSILES)

    def has_ammo(self) -> bool:
        """True if the current weapon has ammunition left."""
        if self.mode == GunMode.BULLET:
            return self.ammo_bullets > 0
        return self.ammo_rockets > 0

    def cooling_down(self) -> bool:
        """True while the current weapon is still cooling down after a shot."""
        return not self._cooldowns[self.mode].finished()

    def shoot(self) -> None:
        """Spend one round of the current weapon and start its cooldown."""
        if self.mode == GunMode.BULLET:
            if self.ammo_bullets > 0:
                self.ammo_bullets -= 1
                self._cooldowns[GunMode.BULLET].start(self.fire_rate)
        elif self.ammo_rockets > 0:
            self.ammo_rockets -= 1
            self._cooldowns[GunMode.MISSILE].start(self.fire_rate)

    def update(self, delta_time: float) -> None:
        self._follow_parent()
        super().update(delta_time)


class TurretComponent(ComponentGameObject):
    """A turret that turns steadily towards the mouse cursor."""

    def __init__(self, position, geometry, shader, texture, scale, radius, parent, pointer) -> None:
        super().__init__(position, geometry, shader, texture, scale, radius, parent)
        self.pointer = pointer
        self.rotation_speed = TURRET_ROTATION_SPEED
        self.target_dir = parent.bearing()

    def aim(self) -> None:
        """Point the target direction from the turret towards the cursor."""
        p = self.pointer
        ndc_x = (p.x / p.width) * 2.0 - 1.0
        ndc_y = 1.0 - (p.y / p.height) * 2.0
        mouse_world = np.array([ndc_x * p.width / 2.0, ndc_y * p.height / 2.0, 0.0])
        offset = mouse_world - self.position
        length = float(np.linalg.norm(offset))
        if length > 0.0:
            self.target_dir = offset / length

    def rotate_turret(self, delta_time: float) -> None:
        """Turn towards the target direction by at most speed times elapsed time."""
        current = self.bearing()
        current = current / np.linalg.norm(current)
        if float(np.linalg.norm(self.target_dir - current)) < ALIGNED_TOLERANCE:
            return
        step = self.rotation_speed * float(delta_time)
        dot = min(max(float(np.dot(current, self.target_dir)), -1.0), 1.0)
        angle = min(math.acos(dot), step)
        axis = np.cross(current, self.target_dir)
        if float(np.linalg.norm(axis)) < ALIGNED_TOLERANCE:
            if dot >= 0.0:
                return
            axis = np.array([0.0, 0.0, 1.0])
        axis = axis / np.linalg.norm(axis)
        new_bearing = _rotate_about(current, angle, axis)
        new_bearing = new_bearing / np.linalg.norm(new_bearing)
        self.set_rotation(math.atan2(new_bearing[1], new_bearing[0]))

    def update(self, delta_time: float) -> None:
        self.aim()
        self.rotate_turret(delta_time)
        self.position = self.parent.position
        super().update(delta_time)


class PlayerGameObject(GameObject, Collider):
    """The player's jeep: drives with momentum and carries a turret and gun."""

    def __init__(self, position, geometry, shader, texture, scale, radius, pointer) -> None:
        GameObject.__init__(self, position, geometry, shader, texture, scale)
        Collider.__init__(self, radius)
        self.health = PLAYER_HEALTH
        self.invincibility_timer = Timer()
        self.pointer = pointer
        self.velocity = 0.0
        self._base_texture = texture
        self.turret = TurretComponent(position, geometry, shader, TURRET_TEXTURE,
                                      TURRET_SCALE, radius, self, pointer)
        self.gun = GunComponent(position, geometry, shader, GUN_TEXTURE,
                                GUN_SCALE, radius, self.turret)
        # Index 0 is the turret, index 1 the gun.
        self.components: list[ComponentGameObject] = [self.turret, self.gun]

    @property
    def ammo_bullets(self) -> int:
        return self.gun.ammo_bullets

    @property
    def ammo_rockets(self) -> int:
        return self.gun.ammo_rockets

    def update(self, delta_time: float) -> None:
        """Apply friction, drive forward, expire invincibility and move components."""
        if not self.dying:
            if abs(self.velocity) > REST_THRESHOLD:
                self.velocity *= FRICTION
            else:
                self.velocity = 0.0
            self.position = self.position + float(delta_time) * self.velocity * self.bearing()
        if self.invincibility_timer.finished():
            self.invincible = False
            self.texture = self._base_texture
        for component in self.components:
            component.update(delta_time)
        super().update(delta_time)

    def collect(self, kind) -> None:
        """Apply the effect of a picked-up collectible."""
        kind = CollectibleType(kind)
        if kind == CollectibleType.HEALTH:
            self.heal()
        elif kind == CollectibleType.AMMO:
            self.gun.add_ammo()
        else:
            self.invincibility_timer.start(INVINCIBILITY_TIME)
            self.invincible = True

    def is_invincible(self) -> bool:
        return self.invincible

    def update_velocity(self, direction: int) -> None:
        """Accelerate forward (0) or backward (1), up to the speed limits."""
        if direction == 0:
            if self.velocity < MAX_VELOCITY:
                self.velocity += ACCELERATION
        elif direction == 1:
            if self.velocity > -MAX_VELOCITY / 2.0:
                self.velocity -= ACCELERATION

    def component(self, index: int) -> ComponentGameObject:
        """Return the component at ``index``: 0 is the turret, 1 the gun."""
        return self.components[index]

    def shoot_projectile(self) -> None:
        """Spend a round from the gun."""
        self.gun.shoot()