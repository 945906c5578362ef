"""Versus puzzle game settings, menus and helpers, with a scenario script checker."""

__version__ = "1.0.0"

__all__ = ["defines", "tools", "scenario_filter", "menu", "taisen"]