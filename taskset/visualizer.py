"""Interactive window for dragging, reshaping and colliding triangles."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass, field

import pygame

from taskset.collision import Triangle, Vec2
from taskset.collision import is_colliding as triangles_collide

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
DEFAULT_FPS = 60

GRID_SPACING = 50
GRID_COLOR = (120, 120, 120, 200)
BACKGROUND_COLOR = (60, 60, 60, 255)
HIGHLIGHT_COLOR = (150, 255, 150, 100)
COLLISION_COLOR = (90, 60, 60, 255)
TRIANGLE_COLOR = (55, 150, 50, 255)
SELECTED_TRIANGLE_COLOR = (135, 250, 130, 255)
MIN_ZOOM = 0.1
MAX_ZOOM = 5.0
MIN_TRIANGLE_AREA = 1000.0
PICK_RADIUS = 25.0
ZOOM_STEP = 0.1

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3


def manhattan_distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Return the taxicab distance between two points."""
    return abs(x1 - x2) + abs(y1 - y2)


def signed_area(a: Vec2, b: Vec2, c: Vec2) -> float:
    """Return the signed area of triangle abc, positive for the screen's usual winding."""
    return 0.5 * -((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y))


def point_in_triangle(point: Vec2, a: Vec2, b: Vec2, c: Vec2) -> bool:
    """Tell whether ``point`` lies strictly inside triangle abc."""
    denominator = (b.y - c.y) * (a.x - c.x) + (c.x - b.x) * (a.y - c.y)
    if denominator == 0:
        return False
    alpha = ((b.y - c.y) * (point.x - c.x) + (c.x - b.x) * (point.y - c.y)) / denominator
    beta = ((c.y - a.y) * (point.x - c.x) + (a.x - c.x) * (point.y - c.y)) / denominator
    gamma = 1.0 - alpha - beta
    return alpha > 0 and beta > 0 and gamma > 0


@dataclass
class Camera:
    """A 2D camera: world ``target`` shown at screen ``offset``, rotated and zoomed."""

    offset: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    target: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    rotation: float = 0.0
    zoom: float = 1.0

    def screen_to_world(self, point: Vec2) -> Vec2:
        """Map a screen position to world coordinates."""
        x = (point.x - self.offset.x) / self.zoom
        y = (point.y - self.offset.y) / self.zoom
        angle = -math.radians(self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        return Vec2(x * cos - y * sin + self.target.x, x * sin + y * cos + self.target.y)

    def world_to_screen(self, point: Vec2) -> Vec2:
        """Map a world position to screen coordinates."""
        x = point.x - self.target.x
        y = point.y - self.target.y
        angle = math.radians(self.rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        rx, ry = x * cos - y * sin, x * sin + y * cos
        return Vec2(rx * self.zoom + self.offset.x, ry * self.zoom + self.offset.y)


@dataclass
class _FrameInput:
    pressed: bool = False
    released: bool = False
    right_released: bool = False
    wheel: float = 0.0
    motion: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))


def _set_cursor(cursor: int) -> None:
    try:
        pygame.mouse.set_cursor(cursor)
    except pygame.error:
        pass


class Visualizer:
    """Shows triangles on a zoomable grid and lets the mouse move and reshape them.

    Left-click inside a triangle drags it; left-click near a vertex moves that
    vertex, provided the triangle keeps an area of at least 1000. The right
    button pans and the wheel zooms. ``is_colliding`` tints the background.
    """

    def __init__(self, width: int, height: int, fps: int = DEFAULT_FPS) -> None:
        pygame.display.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Triangle Visualizer")
        self.width = width
        self.height = height
        self.fps = fps
        self.camera = Camera()
        self.triangles: list[Triangle] = []
        self.is_colliding = False
        self._clock = pygame.time.Clock()
        self._closing = False
        self._mouse = Vec2(*map(float, pygame.mouse.get_pos()))
        self._right_down = False
        self._dragged: Triangle | None = None
        self._selected: Triangle | None = None
        self._resized: Triangle | None = None
        self._vertex_index: int | None = None
        self._drag_start = Vec2(0.0, 0.0)

    def add_triangle(self, triangle: Triangle) -> None:
        """Show ``triangle``; it is moved and reshaped in place."""
        self.triangles.append(triangle)

    def should_close(self) -> bool:
        """Tell whether the user asked to close the window."""
        return self._closing

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()

    def handle_input(self) -> None:
        """Process pending events: selection, dragging, resizing and camera moves."""
        frame = self._collect_events()
        mouse_world = self.camera.screen_to_world(self._mouse)
        self._handle_selection(frame, mouse_world)
        self._handle_transformation(mouse_world)
        self._handle_camera(frame)

    def _collect_events(self) -> _FrameInput:
        frame = _FrameInput()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._closing = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self._closing = True
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self._mouse = Vec2(float(event.pos[0]), float(event.pos[1]))
                if event.button == _LEFT_BUTTON:
                    frame.pressed = True
                elif event.button == _RIGHT_BUTTON:
                    self._right_down = True
            elif event.type == pygame.MOUSEBUTTONUP:
                self._mouse = Vec2(float(event.pos[0]), float(event.pos[1]))
                if event.button == _LEFT_BUTTON:
                    frame.released = True
                elif event.button == _RIGHT_BUTTON:
                    self._right_down = False
                    frame.right_released = True
            elif event.type == pygame.MOUSEMOTION:
                self._mouse = Vec2(float(event.pos[0]), float(event.pos[1]))
                frame.motion = Vec2(frame.motion.x + event.rel[0], frame.motion.y + event.rel[1])
            elif event.type == pygame.MOUSEWHEEL:
                frame.wheel += event.y
        return frame

    def _handle_selection(self, frame: _FrameInput, mouse: Vec2) -> None:
        if frame.pressed:
            min_distance = math.inf
            for triangle in self.triangles:
                for index, vertex in enumerate(triangle.points):
                    distance = manhattan_distance(mouse.x, mouse.y, vertex.x, vertex.y)
                    if distance < PICK_RADIUS / self.camera.zoom and distance < min_distance:
                        min_distance = distance
                        _set_cursor(pygame.SYSTEM_CURSOR_SIZEALL)
                        self._vertex_index = index
                        self._resized = triangle
                        self._selected = triangle
                        self._dragged = None
                if self._resized is None and point_in_triangle(mouse, *triangle.points):
                    _set_cursor(pygame.SYSTEM_CURSOR_SIZEALL)
                    self._dragged = triangle
                    self._selected = triangle
                    self._drag_start = mouse
        if frame.released:
            self._dragged = None
            self._resized = None
            _set_cursor(pygame.SYSTEM_CURSOR_ARROW)

    def _handle_transformation(self, mouse: Vec2) -> None:
        if self._dragged is not None:
            dx = mouse.x - self._drag_start.x
            dy = mouse.y - self._drag_start.y
            for vertex in self._dragged.points:
                vertex.x += dx
                vertex.y += dy
            self._drag_start = mouse

        if self._resized is not None and self._vertex_index is not None:
            points = self._resized.points
            original = points[self._vertex_index]
            points[self._vertex_index] = Vec2(mouse.x, mouse.y)
            if signed_area(*points) < MIN_TRIANGLE_AREA:
                points[self._vertex_index] = original

    def _handle_camera(self, frame: _FrameInput) -> None:
        camera = self.camera
        if self._right_down:
            _set_cursor(pygame.SYSTEM_CURSOR_SIZEALL)
            scale = -1.0 / camera.zoom
            camera.target = Vec2(
                camera.target.x + frame.motion.x * scale,
                camera.target.y + frame.motion.y * scale,
            )
        if frame.right_released:
            _set_cursor(pygame.SYSTEM_CURSOR_ARROW)

        if frame.wheel:
            before = camera.screen_to_world(self._mouse)
            camera.zoom = min(max(camera.zoom + frame.wheel * ZOOM_STEP, MIN_ZOOM), MAX_ZOOM)
            after = camera.screen_to_world(self._mouse)
            camera.target = Vec2(
                camera.target.x + before.x - after.x,
                camera.target.y + before.y - after.y,
            )

    def _to_screen(self, point: Vec2) -> tuple[float, float]:
        screen = self.camera.world_to_screen(point)
        return screen.x, screen.y

    def _draw_grid(self, overlay: pygame.Surface) -> None:
        top_left = self.camera.screen_to_world(Vec2(0.0, 0.0))
        bottom_right = self.camera.screen_to_world(Vec2(float(self.width), float(self.height)))

        start_y = math.ceil(top_left.y / GRID_SPACING) * GRID_SPACING
        end_y = math.floor(bottom_right.y / GRID_SPACING) * GRID_SPACING
        y = start_y
        while y <= end_y:
            pygame.draw.line(
                overlay, GRID_COLOR,
                self._to_screen(Vec2(top_left.x, y)),
                self._to_screen(Vec2(bottom_right.x, y)),
            )
            y += GRID_SPACING

        start_x = math.ceil(top_left.x / GRID_SPACING) * GRID_SPACING
        end_x = math.floor(bottom_right.x / GRID_SPACING) * GRID_SPACING
        x = start_x
        while x <= end_x:
            pygame.draw.line(
                overlay, GRID_COLOR,
                self._to_screen(Vec2(x, top_left.y)),
                self._to_screen(Vec2(x, bottom_right.y)),
            )
            x += GRID_SPACING

    def _draw_triangles(self) -> None:
        active: Triangle | None = None
        transforming = self._resized is not None or self._dragged is not None
        for triangle in self.triangles:
            if triangle is self._selected and transforming:
                active = triangle
            else:
                pygame.draw.polygon(
                    self.screen, TRIANGLE_COLOR, [self._to_screen(p) for p in triangle.points]
                )

        if self._selected is not None:
            corners = [self._to_screen(p) for p in self._selected.points]
            overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
            pygame.draw.polygon(overlay, HIGHLIGHT_COLOR, corners, 1)
            self.screen.blit(overlay, (0, 0))
            if active is not None:
                pygame.draw.polygon(self.screen, SELECTED_TRIANGLE_COLOR, corners)

    def draw(self) -> None:
        """Render the grid and triangles and wait for the next frame."""
        self.screen.fill(COLLISION_COLOR if self.is_colliding else BACKGROUND_COLOR)
        grid = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        self._draw_grid(grid)
        self.screen.blit(grid, (0, 0))
        self._draw_triangles()
        pygame.display.flip()
        self._clock.tick(self.fps)


def main(argv: list[str] | None = None) -> int:
    """Open the window with two triangles and report when they collide."""
    parser = argparse.ArgumentParser(description="Drag triangles and watch them collide.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH)
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT)
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS)
    args = parser.parse_args(argv)

    t1 = Triangle([Vec2(530, 100), Vec2(300, 450), Vec2(750, 448)])
    t2 = Triangle([Vec2(450, 100), Vec2(50, 100), Vec2(250, 450)])

    visualizer = Visualizer(args.width, args.height, args.fps)
    visualizer.add_triangle(t1)
    visualizer.add_triangle(t2)
    try:
        while not visualizer.should_close():
            visualizer.handle_input()
            visualizer.is_colliding = triangles_collide(t1, t2)
            visualizer.draw()
    finally:
        visualizer.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())