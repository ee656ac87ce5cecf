import logging

import pygame

from verletsim.app import App


def test_starts_with_one_object_unpaused():
    app = App(seed=3)
    assert len(app.world) == 1
    assert app.world.objects[0].position == (1000.0, 400.0)
    assert app.paused is False


def test_space_toggles_pause():
    app = App(seed=3)
    app.handle_key("space", 0)
    assert app.paused is True
    app.handle_key("space", 0)
    assert app.paused is False


def test_spawn_respects_cooldown():
    app = App(seed=3)
    app.handle_key("f", 40)
    assert len(app.world) == 1
    app.handle_key("f", 100)
    assert len(app.world) == 2
    app.handle_key("f", 130)
    assert len(app.world) == 2
    app.handle_key("f", 200)
    assert len(app.world) == 3


def test_step_runs_once_while_paused():
    app = App(seed=3)
    app.frame_time_ms = 16
    app.handle_key("space", 0)
    obj = app.world.objects[0]
    app.advance()
    assert obj.position == (1000.0, 400.0)
    app.handle_key("s", 0)
    app.advance()
    moved = obj.position
    assert moved[1] > 400.0
    assert app.step_pending is False
    app.advance()
    assert obj.position == moved


def test_advance_moves_objects_when_running():
    app = App(seed=3)
    app.frame_time_ms = 16
    app.advance()
    assert app.world.objects[0].position[1] > 400.0


def test_status_format():
    app = App(seed=3)
    app.frame_time_ms = 7
    assert app.status() == "Object Count: 1\t Frame Time: 7ms"


def test_c_key_logs_status(caplog):
    app = App(seed=3)
    with caplog.at_level(logging.INFO, logger="verletsim.app"):
        app.handle_key("c", 0)
    assert app.status() in caplog.text


def test_draw_paints_background_and_objects():
    app = App(seed=3)
    surface = pygame.Surface((1920, 1080))
    app.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == (33, 33, 33)
    assert tuple(surface.get_at((1000, 400)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((1499, 500)))[:3] == (255, 255, 255)