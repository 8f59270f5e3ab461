"""Enemies: the patrolling base enemy and its kamikaze, ranged and wandering kinds."""

from __future__ import annotations

import math
import random
from enum import IntEnum

import numpy as np

from jeeprun.game_object import DYING_TEXTURE, Collider, GameObject, _vec3
from jeeprun.timer import Timer, now

INTERCEPT_DISTANCE = 2.0
MOVE_FACTOR = 0.001

KAMIKAZE_HEALTH = 3
KAMIKAZE_SPEED = 1250.0
KAMIKAZE_RANGE = 1.0
KAMIKAZE_FUSE = 0.01

RANGED_HEALTH = 3
RANGED_SPEED = 420.0
RANGED_SHOOT_RANGE = 4.0
RANGED_FOLLOW_RANGE = 6.0
RANGED_MIN_DISTANCE = 2.0

WANDER_SPEED = 1.0
WANDER_INTERVAL = 3.0
WANDER_OPENING = 360 * 3.141592 / 180.0
WANDER_TARGET_DISTANCE = 10.0
WANDER_FORCE = 0.1


class EnemyState(IntEnum):
    PATROL = 0
    INTERCEPT = 1


class KamikazeState(IntEnum):
    FOLLOW = 0
    EXPLODE = 1


class RangedState(IntEnum):
    FOLLOW = 0
    RETREAT = 1
    PATROL = 2


def _unit(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        return np.zeros(3)
    return vector / length


def _random_heading(rng: random.Random) -> np.ndarray:
    return _unit(np.array([rng.randint(-1, 1), rng.randint(-1, 1), 0.0], dtype=float))


class EnemyGameObject(GameObject, Collider):
    """An enemy that patrols an ellipse and intercepts a nearby target."""

    def __init__(self, position, geometry, shader, texture, scale, radius,
                 rng=None, clock=None) -> None:
        GameObject.__init__(self, position, geometry, shader, texture, scale)
        Collider.__init__(self, radius)
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else now
        self.timer = Timer(self._clock)
        self.velocity = np.zeros(3)
        self.speed = 0.0
        self.player_pos = np.zeros(3)
        self.distance = 0.0
        self.state: IntEnum = EnemyState.PATROL
        self.height = (self._rng.randrange(20) - 10) / 10.0
        self.patrol_radius = (self._rng.randrange(20) - 10) / 10.0
        offset = np.array([self.patrol_radius, self.height, 0.0])
        x, y = self.position[0], self.position[1]
        if self._rng.randrange(2):
            self.center = np.array([x, y, 0.0]) + offset
        else:
            self.center = np.array([x, y, 0.0]) - offset

    def update(self, delta_time: float) -> None:
        """Patrol or intercept according to the current state, unless dying."""
        if not self.dying:
            if self.state == EnemyState.INTERCEPT:
                self.intercept(delta_time)
            elif self.state == EnemyState.PATROL:
                self.patrol(delta_time)
        super().update(delta_time)

    def update_player_pos(self, player_pos) -> None:
        """Record the target's position and choose a state from its distance."""
        self.player_pos = _vec3(player_pos)
        self.distance = float(np.linalg.norm(self.player_pos - self.position))
        self.determine_state()

    def determine_state(self) -> None:
        """Intercept when the target is close, otherwise patrol."""
        if self.distance < INTERCEPT_DISTANCE:
            self.state = EnemyState.INTERCEPT
        else:
            self.state = EnemyState.PATROL

    def patrol(self, delta_time: float) -> None:
        """Move along an ellipse around the patrol centre, driven by the clock."""
        t = self._clock()
        new_pos = np.array([
            self.center[0] + self.patrol_radius * math.cos(t),
            self.center[1] + self.height * math.sin(t),
            0.0,
        ])
        self.set_rotation(math.atan2(new_pos[1] - self.position[1],
                                     new_pos[0] - self.position[0]))
        self.position = new_pos

    def intercept(self, delta_time: float) -> None:
        """Head straight for the target; the patrol centre follows along."""
        self.velocity = _unit(self.player_pos - self.position)
        self.set_rotation(math.atan2(self.velocity[1], self.velocity[0]))
        self.position = self.position + self.velocity * MOVE_FACTOR * float(delta_time) * self.speed
        self.center = self.position.copy()


class KamikazeEnemyObject(EnemyGameObject):
    """An enemy that chases its target and blows up when it gets close."""

    def __init__(self, position, geometry, shader, texture, scale, radius,
                 rng=None, clock=None) -> None:
        super().__init__(position, geometry, shader, texture, scale, radius, rng, clock)
        self.health = KAMIKAZE_HEALTH
        self.speed = KAMIKAZE_SPEED
        self.state = KamikazeState.FOLLOW
        self.velocity = _random_heading(self._rng)

    def update(self, delta_time: float) -> None:
        if not self.dying and self.state == KamikazeState.FOLLOW:
            self.intercept(delta_time)

    def determine_state(self) -> None:
        if self.distance < KAMIKAZE_RANGE:
            self.state = KamikazeState.EXPLODE
        else:
            self.state = KamikazeState.FOLLOW

    def is_exploding(self) -> bool:
        """True once the kamikaze has decided to explode."""
        return self.state == KamikazeState.EXPLODE

    def in_range(self, pos) -> bool:
        """True if ``pos`` is within blast range; arms the kamikaze if so."""
        close = float(np.linalg.norm(_vec3(pos) - self.position)) <= KAMIKAZE_RANGE
        if close:
            self.state = KamikazeState.EXPLODE
        return close

    def die(self) -> None:
        """Die almost at once so the explosion follows immediately."""
        self.dying = True
        self.timer.start(KAMIKAZE_FUSE)
        self.texture = DYING_TEXTURE


class RangedEnemyObject(EnemyGameObject):
    """An enemy that keeps its distance and shoots at targets in range."""

    def __init__(self, position, geometry, shader, texture, scale, radius,
                 rng=None, clock=None) -> None:
        super().__init__(position, geometry, shader, texture, scale, radius, rng, clock)
        self.health = RANGED_HEALTH
        self.speed = RANGED_SPEED
        self.shoot_timer = Timer(self._clock)
        self._wander_timer = Timer(self._clock)
        self._wander_timer.start(WANDER_INTERVAL)
        self.state = RangedState.FOLLOW
        self.velocity = _random_heading(self._rng)

    def update(self, delta_time: float) -> None:
        if self.dying:
            return
        if self.state == RangedState.FOLLOW:
            self.intercept(delta_time)
        elif self.state == RangedState.RETREAT:
            self.retreat(delta_time)
        elif self.state == RangedState.PATROL:
            self.patrol(delta_time)

    def determine_state(self) -> None:
        if RANGED_FOLLOW_RANGE >= self.distance >= RANGED_MIN_DISTANCE:
            self.state = RangedState.FOLLOW
        elif self.distance < RANGED_MIN_DISTANCE:
            self.state = RangedState.RETREAT
        else:
            self.state = RangedState.PATROL

    def in_range(self, pos) -> bool:
        """True if ``pos`` is close enough to shoot at."""
        return float(np.linalg.norm(_vec3(pos) - self.position)) <= RANGED_SHOOT_RANGE

    def retreat(self, delta_time: float) -> None:
        """Move directly away from the target."""
        angle = math.atan2(self.player_pos[1] - self.position[1],
                           self.player_pos[0] - self.position[0]) + math.pi
        self.velocity = np.array([math.cos(angle), math.sin(angle), 0.0])
        self.position = self.position + self.velocity * MOVE_FACTOR * float(delta_time) * self.speed


class WanderingEnemyObject(EnemyGameObject):
    """An enemy that drifts about, nudging its heading every few seconds."""

    def __init__(self, position, geometry, shader, texture, scale, radius,
                 rng=None, clock=None) -> None:
        super().__init__(position, geometry, shader, texture, scale, radius, rng, clock)
        self._wander_timer = Timer(self._clock)
        self._wander_timer.start(WANDER_INTERVAL)
        self.speed = WANDER_SPEED
        self.velocity = _random_heading(self._rng)

    def update(self, delta_time: float) -> None:
        if self._wander_timer.finished():
            r_angle = (self._rng.random() * 2.0 * WANDER_OPENING
                       + self.rotation - WANDER_OPENING)
            target = np.array([
                WANDER_TARGET_DISTANCE * math.cos(r_angle),
                WANDER_TARGET_DISTANCE * math.sin(r_angle),
                0.0,
            ])
            steering = _unit(target + self.velocity) * WANDER_FORCE
            self.velocity = self.velocity + steering
            self._wander_timer.start(WANDER_INTERVAL)
        self.position = self.position + self.velocity * float(delta_time) * self.speed