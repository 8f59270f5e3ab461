import numpy as np
import pytest

from jeeprun.hud import HUD, DrawingGameObject, TextGameObject
from jeeprun.player import PlayerGameObject, Pointer


def make_player():
    return PlayerGameObject((0.0, 0.0, 0.0), None, None, 1, (1.5, 1.0), 0.4, Pointer())


def make_hud(player):
    hud = HUD(None, None, 10, player)
    hud.add_element(DrawingGameObject((-0.9, 0.8, 0.0), None, None, 10, (0.0, 0.0)))
    for label in ("Bullets: ", "Rockets: "):
        text = TextGameObject((0.0, 0.0, 0.0), None, None, 15)
        text.text = label
        hud.add_element(text)
    return hud


def test_display_text_joins_label_and_count():
    text = TextGameObject((0.0, 0.0, 0.0), None, None, 15)
    text.text = "Bullets: "
    text.ammo_count = 42
    assert text.display_text() == "Bullets: 42"


def test_display_text_truncates_label_keeps_count():
    text = TextGameObject((0.0, 0.0, 0.0), None, None, 15)
    text.text = "x" * 50
    text.ammo_count = 123
    shown = text.display_text()
    assert len(shown) == 40
    assert shown.endswith("123")


def test_text_codes_match_characters():
    text = TextGameObject((0.0, 0.0, 0.0), None, None, 15)
    text.text = "Rockets: "
    text.ammo_count = 7
    assert text.text_codes() == [ord(c) for c in "Rockets: 7"]


def test_text_matrix_uses_screen_position():
    text = TextGameObject((0.0, 0.0, 0.0), None, None, 15)
    text.pos = (0.6, -0.7, 0.0)
    text.scale = (0.5, 0.1)
    matrix = text.transformation_matrix()
    assert matrix[:3, 3] == pytest.approx([0.6, -0.7, 0.0])
    assert matrix[0, 0] == pytest.approx(0.5)
    assert matrix[1, 1] == pytest.approx(0.1)


def test_health_bar_fixed_location():
    bar = DrawingGameObject((-0.9, 0.8, 0.0), None, None, 10, (0.0, 0.0))
    matrix = bar.transformation_matrix()
    assert matrix[:3, 3] == pytest.approx([-0.3, -1.2, 0.0])
    assert bar.max_health == 15


def test_hud_update_copies_player_state():
    player = make_player()
    player.shoot_projectile()
    player.hurt()
    hud = make_hud(player)
    hud.update(0.0)
    bar, bullets, rockets = hud.elements
    assert hud.health == player.health
    assert bar.displayed_health == player.health
    assert bullets.ammo_count == player.ammo_bullets
    assert rockets.ammo_count == player.ammo_rockets
    assert bullets.display_text() == "Bullets: " + str(player.ammo_bullets)


def test_hud_update_requires_elements():
    hud = HUD(None, None, 10, make_player())
    with pytest.raises(ValueError):
        hud.update(0.0)


def test_set_health():
    hud = HUD(None, None, 10, make_player())
    assert hud.health == 100
    hud.set_health(3)
    assert hud.health == 3


def test_text_position_roundtrip_as_array():
    text = TextGameObject((0.0, 0.0, 0.0), None, None, 15)
    text.pos = (0.6, -0.8)
    assert np.allclose(text.pos, [0.6, -0.8, 0.0])