import pygame
import pytest

from jeeprun.app import App, main
from jeeprun.world import Controls


@pytest.fixture
def app(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    instance = App(800, 600, "Test")
    yield instance
    instance.close()


def test_read_controls_with_nothing_pressed(app):
    assert app.read_controls() == Controls()


def test_read_controls_tracks_window_size(app):
    app.read_controls()
    assert (app.pointer.width, app.pointer.height) == (800, 600)


def test_draw_covers_every_background_tile(app):
    drawn = app.draw()
    # 9 columns by 6 rows of background tiles, plus every other object.
    assert drawn >= 9 * 6 + len(app.world.objects) - 1


def test_draw_is_repeatable_without_updates(app):
    first = app.draw()
    assert first >= 9 * 6
    second = app.draw()
    assert second == first


def test_run_stops_on_quit_event(app):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    messages = app.run()
    assert app.world.closed is True
    assert messages == app.world.messages


def test_run_returns_at_once_when_already_closed(app):
    app.world.closed = True
    assert app.run() == []


def test_app_rejects_empty_window():
    with pytest.raises(ValueError):
        App(0, 600, "Test")


def test_main_reports_errors_and_returns_zero(capsys):
    assert main(["--width", "0"]) == 0
    assert "positive" in capsys.readouterr().err