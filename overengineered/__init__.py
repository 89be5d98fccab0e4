"""Game data for a terminal side-scrolling platformer: loading, validation and saving."""

__version__ = "0.1.0"