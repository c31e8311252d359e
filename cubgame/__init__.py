"""Top-down raycasting explorer for .cub scene files, with a scene parser."""

__version__ = "0.1.0"
__all__ = ["__version__"]