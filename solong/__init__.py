"""A tile game: collect every key on a walled map, then reach the exit."""

__version__ = "1.0.0"
__all__ = ["maps", "pathcheck", "game", "colors", "xpm", "app"]