import pygame
import pytest

from taskset.collision import Triangle, Vec2
from taskset.visualizer import (
    BACKGROUND_COLOR,
    COLLISION_COLOR,
    MAX_ZOOM,
    MIN_ZOOM,
    Camera,
    Visualizer,
    manhattan_distance,
    point_in_triangle,
    signed_area,
)


@pytest.fixture
def vis(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    visualizer = Visualizer(200, 150)
    pygame.event.clear()
    yield visualizer
    visualizer.close()


def _triangle():
    return Triangle([Vec2(100, 100), Vec2(0, 300), Vec2(200, 300)])


def _post(kind, **attrs):
    pygame.event.post(pygame.event.Event(kind, **attrs))


def test_manhattan_distance_sums_axes():
    assert manhattan_distance(0, 0, 3, 4) == 7
    assert manhattan_distance(5, 5, 5, 5) == 0
    assert manhattan_distance(1, 2, 3, 4) == manhattan_distance(3, 4, 1, 2)


def test_signed_area_changes_sign_with_winding():
    a, b, c = Vec2(530, 100), Vec2(300, 450), Vec2(750, 448)
    assert signed_area(a, b, c) > 0
    assert signed_area(a, c, b) == -signed_area(a, b, c)


def test_signed_area_degenerate_is_zero():
    assert signed_area(Vec2(0, 0), Vec2(1, 1), Vec2(2, 2)) == 0


def test_point_in_triangle():
    a, b, c = Vec2(100, 100), Vec2(0, 300), Vec2(200, 300)
    assert point_in_triangle(Vec2(100, 250), a, b, c)
    assert not point_in_triangle(Vec2(0, 0), a, b, c)
    assert not point_in_triangle(a, a, b, c)


def test_point_in_degenerate_triangle_is_false():
    p = Vec2(1, 1)
    assert not point_in_triangle(p, Vec2(0, 0), Vec2(1, 1), Vec2(2, 2))


@pytest.mark.parametrize(
    "camera",
    [
        Camera(),
        Camera(offset=Vec2(10, 20), target=Vec2(-5, 7), zoom=2.5),
        Camera(offset=Vec2(400, 300), target=Vec2(50, 50), rotation=30.0, zoom=0.5),
    ],
)
def test_camera_round_trip(camera):
    point = Vec2(123.0, -45.0)
    back = camera.world_to_screen(camera.screen_to_world(point))
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_default_camera_is_identity():
    assert Camera().screen_to_world(Vec2(17, 42)) == Vec2(17, 42)


def test_camera_target_maps_to_offset():
    camera = Camera(offset=Vec2(10, 20), target=Vec2(300, 400), zoom=3.0)
    assert camera.world_to_screen(Vec2(300, 400)) == Vec2(10, 20)


def test_quit_event_requests_close(vis):
    assert not vis.should_close()
    _post(pygame.QUIT)
    vis.handle_input()
    assert vis.should_close()


def test_drag_moves_every_vertex(vis):
    triangle = _triangle()
    original = [Vec2(p.x, p.y) for p in triangle.points]
    vis.add_triangle(triangle)

    _post(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 250))
    vis.handle_input()
    _post(pygame.MOUSEMOTION, pos=(130, 260), rel=(30, 10), buttons=(1, 0, 0))
    vis.handle_input()

    for before, after in zip(original, triangle.points):
        assert after.x - before.x == pytest.approx(30)
        assert after.y - before.y == pytest.approx(10)


def test_release_stops_dragging(vis):
    triangle = _triangle()
    vis.add_triangle(triangle)
    _post(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 250))
    vis.handle_input()
    _post(pygame.MOUSEBUTTONUP, button=1, pos=(100, 250))
    vis.handle_input()
    snapshot = [Vec2(p.x, p.y) for p in triangle.points]
    _post(pygame.MOUSEMOTION, pos=(150, 280), rel=(50, 30), buttons=(0, 0, 0))
    vis.handle_input()
    assert triangle.points == snapshot


def test_vertex_follows_mouse(vis):
    triangle = _triangle()
    vis.add_triangle(triangle)
    _post(pygame.MOUSEBUTTONDOWN, button=1, pos=(102, 101))
    vis.handle_input()
    _post(pygame.MOUSEMOTION, pos=(120, 80), rel=(18, -21), buttons=(1, 0, 0))
    vis.handle_input()
    assert triangle.points[0] == Vec2(120, 80)
    assert triangle.points[1] == Vec2(0, 300)
    assert triangle.points[2] == Vec2(200, 300)


def test_resize_rejected_when_area_too_small(vis):
    triangle = _triangle()
    vis.add_triangle(triangle)
    _post(pygame.MOUSEBUTTONDOWN, button=1, pos=(100, 100))
    vis.handle_input()
    # Moving the apex onto the base would flatten the triangle.
    _post(pygame.MOUSEMOTION, pos=(100, 300), rel=(0, 200), buttons=(1, 0, 0))
    vis.handle_input()
    assert triangle.points[0] == Vec2(100, 100)
    assert signed_area(*triangle.points) >= 1000


def test_right_drag_pans_camera(vis):
    _post(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0))
    vis.handle_input()
    _post(pygame.MOUSEMOTION, pos=(10, 20), rel=(10, 20), buttons=(0, 0, 1))
    vis.handle_input()
    assert vis.camera.target.x == pytest.approx(-10)
    assert vis.camera.target.y == pytest.approx(-20)


def test_wheel_zoom_is_clamped_and_keeps_point_under_mouse(vis):
    _post(pygame.MOUSEMOTION, pos=(50, 40), rel=(0, 0), buttons=(0, 0, 0))
    vis.handle_input()
    anchor = vis.camera.screen_to_world(Vec2(50, 40))

    _post(pygame.MOUSEWHEEL, x=0, y=100)
    vis.handle_input()
    assert vis.camera.zoom == pytest.approx(MAX_ZOOM)
    after = vis.camera.screen_to_world(Vec2(50, 40))
    assert after.x == pytest.approx(anchor.x)
    assert after.y == pytest.approx(anchor.y)

    _post(pygame.MOUSEWHEEL, x=0, y=-100)
    vis.handle_input()
    assert vis.camera.zoom == pytest.approx(MIN_ZOOM)


def test_draw_background_reflects_collision(vis):
    vis.is_colliding = True
    vis.draw()
    assert tuple(vis.screen.get_at((1, 1)))[:3] == COLLISION_COLOR[:3]
    vis.is_colliding = False
    vis.draw()
    assert tuple(vis.screen.get_at((1, 1)))[:3] == BACKGROUND_COLOR[:3]