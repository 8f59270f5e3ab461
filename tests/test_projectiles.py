import math

import numpy as np

from jeeprun.game_object import Collider, GameObject
from jeeprun.projectiles import (
    BulletProjectile,
    EnemyProjectileObject,
    MissileProjectile,
    ProjectileGameObject,
)


class Target(GameObject, Collider):
    def __init__(self, position, radius):
        GameObject.__init__(self, position, None, None, 0, (1.0, 1.0))
        Collider.__init__(self, radius)


def test_rotation_from_bearing():
    shot = BulletProjectile((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), None, None, 8,
                            (0.2, 0.2), 8.0, 1, 5.0, 0.1)
    assert math.isclose(shot.rotation, math.pi / 2)
    assert np.allclose(shot.bearing(), [0.0, 1.0, 0.0])


def test_attributes_and_timer():
    shot = BulletProjectile((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), None, None, 8,
                            (0.2, 0.2), 8.0, 1, 5.0, 0.1)
    assert shot.speed == 8.0
    assert shot.damage == 1
    assert shot.radius == 0.1
    assert shot.timer.target() == 5.0
    assert shot.timer.is_running()
    assert shot.texture == 8


def test_update_moves_along_bearing():
    shot = BulletProjectile((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), None, None, 8,
                            (0.2, 0.2), 8.0, 1, 5.0, 0.1)
    shot.update(0.5)
    assert np.allclose(shot.position, [0.0, 8.0 * 0.5, 0.0])
    shot.update(0.5)
    assert np.allclose(shot.position, [0.0, 8.0, 0.0])


def test_bullet_uses_ray_and_missile_uses_circle():
    target = Target((0.3, 0.0, 0.0), 0.4)
    shot = BulletProjectile((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), None, None, 8,
                            (0.2, 0.2), 8.0, 1, 5.0, 0.1)
    missile = MissileProjectile((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), None, None, 9,
                                (0.8, 0.5), 5.0, 1, 5.0, 0.1)
    assert shot.ray is False
    assert missile.ray is True
    assert not shot.collide(target)
    assert missile.collide(target)


def test_missile_misses_distant_target():
    target = Target((3.0, 0.0, 0.0), 0.4)
    missile = MissileProjectile((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), None, None, 9,
                                (0.8, 0.5), 5.0, 1, 5.0, 0.2)
    assert not missile.collide(target)


def test_enemy_projectile_is_a_bullet():
    shot = EnemyProjectileObject((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), None, None, 8,
                                 (0.2, 0.2), 8.0, 1, 5.0, 0.1)
    assert isinstance(shot, BulletProjectile)
    assert isinstance(shot, ProjectileGameObject)
    assert shot.ray is False
    shot.update(0.25)
    assert np.allclose(shot.position, [2.0, 0.0, 0.0])


def test_generic_projectile_flag():
    shot = ProjectileGameObject((1.0, 1.0, 0.0), (-1.0, 0.0, 0.0), None, None, 8,
                                (0.2, 0.2), 2.0, 3, 1.0, 0.1, True)
    assert shot.ray is True
    assert shot.damage == 3
    shot.update(1.0)
    assert np.allclose(shot.position, [1.0 - 2.0, 1.0, 0.0])