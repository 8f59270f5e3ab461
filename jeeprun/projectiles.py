"""Projectiles fired by the player and by enemies."""

from __future__ import annotations

import math

from jeeprun.game_object import Collider, GameObject, _vec3


class ProjectileGameObject(GameObject, Collider):
    """A projectile flying straight along its bearing until its timer runs out."""

    def __init__(self, position, bearing, geometry, shader, texture, scale,
                 speed, damage, time, radius, ray) -> None:
        GameObject.__init__(self, position, geometry, shader, texture, scale)
        Collider.__init__(self, radius, ray)
        self.speed = float(speed)
        self.damage = int(damage)
        self.timer.start(time)
        direction = _vec3(bearing)
        self.set_rotation(math.atan2(direction[1], direction[0]))

    def update(self, delta_time: float) -> None:
        """Move forward by speed times elapsed time."""
        self.position = self.position + self.speed * self.bearing() * float(delta_time)
        super().update(delta_time)


class BulletProjectile(ProjectileGameObject):
    """A bullet; it hits what lies along its flight line."""

    def __init__(self, position, bearing, geometry, shader, texture, scale,
                 speed, damage, time, radius) -> None:
        super().__init__(position, bearing, geometry, shader, texture, scale,
                         speed, damage, time, radius, False)


class MissileProjectile(ProjectileGameObject):
    """A missile; it hits what its collision circle touches."""

    def __init__(self, position, bearing, geometry, shader, texture, scale,
                 speed, damage, time, radius) -> None:
        super().__init__(position, bearing, geometry, shader, texture, scale,
                         speed, damage, time, radius, True)


class EnemyProjectileObject(BulletProjectile):
    """A bullet fired by an enemy."""