import math

import numpy as np

from jeeprun.game_object import GameObject
from jeeprun.particle_system import ParticleSystem


class FakeClock:
    def __init__(self, t=0.0):
        self.t = t

    def __call__(self):
        return self.t


def make(parent_pos=(3.0, 4.0, 0.0), clock=None):
    parent = GameObject(parent_pos, None, None, 0, (1.0, 1.0))
    system = ParticleSystem((-0.5, 0.0, 0.0), None, None, 4, parent, clock or FakeClock(10.0))
    return parent, system


def test_default_scale_and_parent():
    parent, system = make()
    assert np.allclose(system.scale, [0.2, 0.2])
    assert system.parent is parent


def test_shader_time_counts_from_creation():
    clock = FakeClock(10.0)
    _, system = make(clock=clock)
    assert system.creation_time == 10.0
    assert math.isclose(system.shader_time(12.0), 12.0 - 10.0 + 0.5)
    assert math.isclose(system.shader_time(10.0), 0.5)


def test_transformation_follows_parent_position():
    parent, system = make()
    origin = system.transformation_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(origin[:3], parent.position + system.position)
    parent.position = (0.0, 0.0, 0.0)
    origin = system.transformation_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(origin[:3], system.position)


def test_transformation_follows_parent_rotation():
    parent, system = make()
    parent.set_rotation(math.pi / 2)
    origin = system.transformation_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(origin[:3], [3.0, 4.0 - 0.5, 0.0])


def test_timer_uses_clock():
    clock = FakeClock(0.0)
    _, system = make(clock=clock)
    system.timer.start(1)
    assert not system.timer.finished()
    clock.t = 2.0
    assert system.timer.finished()


def test_update_leaves_position():
    _, system = make()
    before = system.position.copy()
    system.update(0.5)
    assert np.allclose(system.position, before)