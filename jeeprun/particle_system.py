"""A particle effect that follows a parent object."""

from __future__ import annotations

from jeeprun.game_object import GameObject, _rotation, _scaling, _translation
from jeeprun.timer import Timer, now

SHADER_TIME_OFFSET = 0.5


class ParticleSystem(GameObject):
    """Particles drawn relative to a parent object, timed from their creation."""

    def __init__(self, position, geometry, shader, texture, parent, clock=None) -> None:
        super().__init__(position, geometry, shader, texture, (0.2, 0.2))
        self._clock = clock if clock is not None else now
        self.timer = Timer(self._clock)
        self.parent = parent
        self.creation_time = self._clock()

    def update(self, delta_time: float) -> None:
        super().update(delta_time)

    def transformation_matrix(self):
        """Model matrix placed in the parent's frame."""
        parent_matrix = _translation(self.parent.position) @ _rotation(self.parent.rotation)
        own = _translation(self.position) @ _rotation(self.rotation) @ _scaling(self.scale)
        return parent_matrix @ own

    def shader_time(self, current_time: float) -> float:
        """Time value handed to the particle shader."""
        return current_time - self.creation_time + SHADER_TIME_OFFSET