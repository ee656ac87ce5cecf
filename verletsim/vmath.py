"""Small 2-D vector helpers working on ``(x, y)`` tuples."""

from __future__ import annotations

import math

Vec = tuple[float, float]


def magnitude(v: Vec) -> float:
    """Return the Euclidean length of ``v``."""
    return math.hypot(v[0], v[1])


def add(lhs: Vec, rhs: Vec) -> Vec:
    """Return the component-wise sum of two vectors."""
    return (lhs[0] + rhs[0], lhs[1] + rhs[1])


def minus(lhs: Vec, rhs: Vec) -> Vec:
    """Return ``lhs - rhs`` component-wise."""
    return (lhs[0] - rhs[0], lhs[1] - rhs[1])