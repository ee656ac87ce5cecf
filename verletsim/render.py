"""Circle rasterisation: filled triangle fans and midpoint outlines."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

from .vmath import Vec


def round_up_to_multiple_of_eight(v: int) -> int:
    """Round ``v`` up to the next multiple of eight."""
    return (v + 7) & -8


def circle_fan(
    cx: float, cy: float, radius: float, segments: int
) -> tuple[list[Vec], list[int]]:
    """Build the vertices and triangle indices of a filled circle.

    Vertex 0 is the centre; vertices 1..segments lie on the perimeter.
    Fewer than three segments give no geometry.
    """
    if segments < 3:
        return [], []
    positions: list[Vec] = [(cx, cy)]
    for i in range(segments):
        angle = i / segments * 2.0 * math.pi
        positions.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    indices: list[int] = []
    for i in range(segments):
        indices.extend((0, i + 1, 1 if i + 2 > segments else i + 2))
    return positions, indices


def circle_outline_points(center: Vec, radius: int) -> list[Vec]:
    """Return the points of a circle outline using the midpoint algorithm."""
    cx, cy = center
    diameter = radius * 2
    x = radius - 1
    y = 0
    tx = 1
    ty = 1
    error = tx - diameter
    points: list[Vec] = []
    while x >= y:
        points.extend(
            (
                (cx + x, cy - y),
                (cx + x, cy + y),
                (cx - x, cy - y),
                (cx - x, cy + y),
                (cx + y, cy - x),
                (cx + y, cy + x),
                (cx - y, cy - x),
                (cx - y, cy + x),
            )
        )
        if error <= 0:
            y += 1
            error += ty
            ty += 2
        if error > 0:
            x -= 1
            tx += 2
            error += tx - diameter
    return points


def _to_byte(channel: float) -> int:
    return max(0, min(255, round(channel * 255)))


def render_circle(
    surface: pygame.Surface,
    cx: float,
    cy: float,
    radius: float,
    segments: int,
    color: Sequence[float],
) -> None:
    """Fill a circle approximated by ``segments`` triangles.

    ``color`` holds red, green and blue (and optionally alpha) as floats in [0, 1].
    """
    positions, _ = circle_fan(cx, cy, radius, segments)
    if not positions:
        return
    rgb = tuple(_to_byte(c) for c in color[:3])
    pygame.draw.polygon(surface, rgb, positions[1:])


def draw_circle(
    surface: pygame.Surface,
    center: Vec,
    radius: int,
    r: int = 255,
    g: int = 255,
    b: int = 0,
) -> None:
    """Plot a one-pixel circle outline in the given colour."""
    bounds = surface.get_rect()
    rgb = (r, g, b)
    for px, py in circle_outline_points(center, radius):
        pixel = (math.floor(px), math.floor(py))
        if bounds.collidepoint(pixel):
            surface.set_at(pixel, rgb)