"""Integer geometry, a chi-squared check, layout helpers and a console demo menu."""

__version__ = "1.0.0"

__all__ = [
    "chi_squared",
    "console",
    "geometry",
    "layout",
    "menu",
]