"""Verlet-integrated circles in a circular arena with a uniform broad-phase grid."""

from __future__ import annotations

import math
import random

from .vmath import Vec, add, magnitude, minus

GRAVITY = 500.0
CONSTRAINT_CENTER: Vec = (1000.0, 500.0)
CONSTRAINT_RADIUS = 500.0
SUBSTEPS = 6
GRID_SIZE = 10
CELL_WIDTH = 192.0
CELL_HEIGHT = 108.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class VerletObject:
    """A circle whose velocity is implied by its current and previous positions."""

    __slots__ = ("radius", "position", "previous_position", "acceleration", "color")

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        color: tuple[float, float, float] = (1.0, 1.0, 1.0),
    ) -> None:
        self.radius = radius
        self.position: Vec = (x, y)
        self.previous_position: Vec = (x, y)
        self.acceleration: Vec = (0.0, 0.0)
        self.color = color

    def __repr__(self) -> str:
        return f"VerletObject(position={self.position}, radius={self.radius})"

    def simulate_gravity(self, dt: float) -> None:
        """Accumulate the downward gravity acceleration."""
        ax, ay = self.acceleration
        self.acceleration = (ax, ay + GRAVITY)

    def calculate_position(self, dt: float) -> None:
        """Advance one Verlet step and clear the accumulated acceleration."""
        (px, py), (qx, qy), (ax, ay) = self.position, self.previous_position, self.acceleration
        new = (2 * px - qx + ax * dt * dt, 2 * py - qy + ay * dt * dt)
        self.previous_position = self.position
        self.position = new
        self.acceleration = (0.0, 0.0)

    def apply_constraint(self, center: Vec, c_radius: float) -> None:
        """Pull the object back inside a circle of radius ``c_radius``."""
        delta = minus(self.position, center)
        distance = magnitude(delta)
        limit = c_radius - self.radius
        if distance > limit:
            nx, ny = delta[0] / distance, delta[1] / distance
            self.position = (center[0] + nx * limit, center[1] + ny * limit)

    def grid_index(self) -> int:
        """Return ``row * 10 + column`` with rows counted from one."""
        x, y = self.position
        row = int(_clamp(y / CELL_HEIGHT + 1, 1, GRID_SIZE))
        column = int(_clamp(x / CELL_WIDTH, 0, GRID_SIZE))
        return row * GRID_SIZE + column


def _cell_of(obj: VerletObject) -> tuple[int, int]:
    index = obj.grid_index()
    return index // GRID_SIZE - 1, index % GRID_SIZE


def solve_collision(first: VerletObject, second: VerletObject) -> None:
    """Push two overlapping circles apart along the line joining them."""
    delta = minus(first.position, second.position)
    distance = magnitude(delta)
    if distance < 0.01:
        delta = (1.0, 1.0)
        distance = 0.01
    overlap_limit = first.radius + second.radius
    if distance < overlap_limit:
        unresolved = overlap_limit - distance
        push = (
            0.5 * unresolved * (delta[0] / distance),
            0.5 * unresolved * (delta[1] / distance),
        )
        first.position = add(first.position, push)
        second.position = minus(second.position, push)


class VerletWorld:
    """All simulated objects plus the spatial grid used for collisions."""

    def __init__(self) -> None:
        self.objects: list[VerletObject] = []
        self.grid: list[list[list[VerletObject]]] = [
            [[] for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)
        ]

    def __len__(self) -> int:
        return len(self.objects)

    def add(self, obj: VerletObject) -> None:
        """Add an object to the simulation."""
        self.objects.append(obj)

    def simulate(self, dt: float) -> None:
        """Advance the world by ``dt`` seconds in fixed sub-steps."""
        sub_dt = dt / SUBSTEPS
        for _ in range(SUBSTEPS):
            for obj in self.objects:
                obj.simulate_gravity(sub_dt)
                obj.apply_constraint(CONSTRAINT_CENTER, CONSTRAINT_RADIUS)
                obj.calculate_position(sub_dt)
            self.update_grid()
            self.solve_collisions()

    def update_grid(self) -> None:
        """Rebuild the grid from the objects' current positions."""
        for row in self.grid:
            for cell in row:
                cell.clear()
        for obj in self.objects:
            row, column = _cell_of(obj)
            if not (0 <= row < GRID_SIZE and 0 <= column < GRID_SIZE):
                raise IndexError(
                    f"invalid grid access: row={row}, col={column}, "
                    f"pos=({obj.position[0]:.2f}, {obj.position[1]:.2f})"
                )
            self.grid[row][column].append(obj)

    def solve_collisions(self) -> None:
        """Resolve collisions for every object against its neighbourhood."""
        for obj in self.objects:
            self.explore_and_solve(obj)

    def explore_and_solve(self, obj: VerletObject) -> None:
        """Resolve ``obj`` against everything in its cell and the eight around it."""
        row, column = _cell_of(obj)
        for i in range(max(0, row - 1), min(GRID_SIZE - 1, row + 1) + 1):
            for j in range(max(0, column - 1), min(GRID_SIZE - 1, column + 1) + 1):
                for other in self.grid[i][j]:
                    solve_collision(obj, other)


class Spawner:
    """Launches new objects from a fixed point with a sweeping angle."""

    SPAWN_POINT: Vec = (1000.0, 250.0)
    LAUNCH_ACCELERATION = 2000.0
    STEP = 4.0 * (math.pi / 180.0)
    MIN_ANGLE = 0.3

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.angle = self.MIN_ANGLE
        self.reversed = False

    def spawn(self, world: VerletWorld) -> VerletObject:
        """Create, launch and add one object to ``world``; return it."""
        radius = float(_clamp(self.rng.randint(0, 20000) % 25, 4, 25))
        obj = VerletObject(*self.SPAWN_POINT, radius)
        obj.acceleration = (
            math.cos(self.angle) * self.LAUNCH_ACCELERATION,
            math.sin(self.angle) * self.LAUNCH_ACCELERATION,
        )
        obj.calculate_position(0.03)
        world.add(obj)
        obj.color = tuple(self.rng.uniform(0.3, 1.0) for _ in range(3))

        self.angle += -self.STEP if self.reversed else self.STEP
        if self.angle > math.pi - self.MIN_ANGLE:
            self.reversed = True
        elif self.angle < self.MIN_ANGLE:
            self.reversed = False
        return obj