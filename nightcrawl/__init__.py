"""Game logic for a side-scrolling castle action game, without rendering."""

__version__ = "0.1.0"