"""Collectibles, the weaklings the player escorts, and the goal they head for."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

from jeeprun.game_object import Collider, GameObject, _vec3

WEAKLING_HEALTH = 3
WEAKLING_SPEED = 1.0


class CollectibleType(IntEnum):
    """What a collectible gives the player when picked up."""

    HEALTH = 0
    AMMO = 1
    INVINCIBILITY = 2


class CollectibleGameObject(GameObject, Collider):
    """An item lying in the world that the player can pick up."""

    def __init__(self, position, geometry, shader, texture, scale, kind, radius) -> None:
        GameObject.__init__(self, position, geometry, shader, texture, scale)
        Collider.__init__(self, radius)
        self.kind = CollectibleType(kind)
        self.health = -1

    def update(self, delta_time: float) -> None:
        super().update(delta_time)


class WeaklingObject(GameObject, Collider):
    """A defenceless walker heading steadily towards its goal."""

    def __init__(self, position, geometry, shader, texture, scale, radius, goal) -> None:
        GameObject.__init__(self, position, geometry, shader, texture, scale)
        Collider.__init__(self, radius)
        self.goal = _vec3(goal)
        self.health = WEAKLING_HEALTH
        self.speed = WEAKLING_SPEED
        self.reached_end = False

    def update(self, delta_time: float) -> None:
        """Walk towards the goal unless dying or already arrived."""
        if not self.dying and not self.reached_end:
            self._move_towards_goal(delta_time)
        super().update(delta_time)

    def _move_towards_goal(self, delta_time: float) -> None:
        offset = self.goal - self.position
        length = float(np.linalg.norm(offset))
        if length == 0.0:
            return
        self.position = self.position + float(delta_time) * self.speed * (offset / length)

    def reach_end(self) -> None:
        """Mark the weakling as safely arrived; it stops moving."""
        self.reached_end = True

    def set_goal(self, goal) -> None:
        """Change where the weakling is heading."""
        self.goal = _vec3(goal)


class Outcome(IntEnum):
    """State of the game as judged by the end goal."""

    IN_PROGRESS = 0
    WIN = 1
    LOSE = 2


class EndGoalObject(GameObject, Collider):
    """The destination the weaklings must reach."""

    def __init__(self, position, geometry, shader, texture, scale, radius) -> None:
        GameObject.__init__(self, position, geometry, shader, texture, scale)
        Collider.__init__(self, radius)
        self.weaklings: list[WeaklingObject] = []
        self.num_alive = -1

    def add_weakling(self, weakling: WeaklingObject) -> None:
        """Record a weakling belonging to this goal."""
        self.weaklings.append(weakling)

    def update_num_alive(self) -> None:
        """Count one weakling fewer as alive."""
        self.num_alive -= 1

    def add_alive(self) -> None:
        """Count one more weakling as alive."""
        self.num_alive += 1

    def set_num_alive(self, count: int) -> None:
        """Set the number of weaklings alive."""
        self.num_alive = int(count)

    def check_end_goal(self) -> Outcome:
        """Lose when none are alive, win when all recorded are alive."""
        if self.num_alive == 0:
            return Outcome.LOSE
        if self.num_alive == len(self.weaklings):
            return Outcome.WIN
        return Outcome.IN_PROGRESS