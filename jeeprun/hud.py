"""Heads-up display: health bar and ammunition counters."""

from __future__ import annotations

from jeeprun.game_object import GameObject, _rotation, _scaling, _translation, _vec2, _vec3

TEXT_LENGTH = 40
HEALTH_BAR_POSITION = (-0.3, -1.2, 0.0)
MAX_HEALTH = 15.0
INITIAL_HUD_HEALTH = 100


class DrawingGameObject(GameObject):
    """A health bar drawn by its shader from the current and maximum health."""

    def __init__(self, position, geometry, shader, texture, offset) -> None:
        super().__init__(position, geometry, shader, texture, (1.0, 1.0))
        self.offset = _vec2(offset)
        self.displayed_health = 0.0
        self.max_health = MAX_HEALTH

    def transformation_matrix(self):
        """Model matrix at the fixed health-bar location on screen."""
        return _translation(HEALTH_BAR_POSITION) @ _rotation(self.rotation) @ _scaling(self.scale)


class TextGameObject(GameObject):
    """A text label followed by an ammunition count."""

    def __init__(self, position, geometry, shader, texture) -> None:
        super().__init__(position, geometry, shader, texture, (1.0, 1.0))
        self.text = ""
        self.ammo_count = 0
        self.pos = (0.0, 0.0, 0.0)

    @property
    def pos(self):
        return self._pos

    @pos.setter
    def pos(self, value) -> None:
        self._pos = _vec3(value)

    def display_text(self) -> str:
        """Label and count, at most TEXT_LENGTH characters; the label is cut first."""
        count = str(self.ammo_count)
        label = self.text[: max(0, TEXT_LENGTH - len(count))]
        return (label + count)[:TEXT_LENGTH]

    def text_codes(self) -> list[int]:
        """Character codes handed to the text shader."""
        return [ord(ch) for ch in self.display_text()]

    def transformation_matrix(self):
        """Model matrix placed at the label's screen position."""
        return _translation(self._pos) @ _rotation(self.rotation) @ _scaling(self.scale)


class HUD:
    """Keeps the health bar and ammo counters in step with the player."""

    def __init__(self, shader, geometry, texture, player) -> None:
        self.shader = shader
        self.geometry = geometry
        self.texture = texture
        self.player = player
        self.health = INITIAL_HUD_HEALTH
        self.ammo_bullets = 0
        self.ammo_rockets = 0
        self.elements: list[GameObject] = []

    def add_element(self, element: GameObject) -> None:
        """Add an element; the first three are the health bar, bullets and rockets."""
        self.elements.append(element)

    def update(self, delta_time: float) -> None:
        """Copy the player's health and ammo into the display elements."""
        if len(self.elements) < 3:
            raise ValueError("HUD needs a health bar and two ammo counters")
        self.health = self.player.health
        self.ammo_bullets = self.player.ammo_bullets
        self.ammo_rockets = self.player.ammo_rockets
        bar, bullets, rockets = self.elements[:3]
        bar.displayed_health = self.health
        bullets.ammo_count = self.ammo_bullets
        rockets.ammo_count = self.ammo_rockets
        for element in self.elements:
            element.update(delta_time)

    def set_health(self, health: int) -> None:
        self.health = health