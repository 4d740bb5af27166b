"""A falling-coins arcade game with in-memory display, touch panel and buzzer models."""

__version__ = "0.1.0"