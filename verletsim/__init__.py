"""Interactive 2D Verlet-integration particle simulation with a pygame front end."""

__version__ = "1.0.0"
__all__ = ["app", "physics", "render", "vmath"]