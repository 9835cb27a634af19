"""Layout helpers: aspect-ratio fitting, map projection and file choosers."""

from __future__ import annotations

import math
import os
from collections.abc import Callable
from dataclasses import dataclass

_NEWTON_ITERATIONS = 100


@dataclass(frozen=True)
class Bounds:
    """An axis-aligned rectangle with real-valued corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


def fit_to_bounds(bounds: Bounds, aspect_ratio: float) -> Bounds:
    """The largest rectangle with the given aspect ratio centred inside bounds.

    A rectangle with no positive area collapses to zero size at its corner.
    """
    if bounds.width <= 0 or bounds.height <= 0:
        return Bounds(bounds.x, bounds.y, 0.0, 0.0)

    if bounds.width / bounds.height <= aspect_ratio:
        width = bounds.width
        height = width / aspect_ratio
    else:
        height = bounds.height
        width = height * aspect_ratio

    base_x = bounds.x + (bounds.width - width) / 2.0
    base_y = bounds.y + (bounds.height - height) / 2.0
    return Bounds(base_x, base_y, width, height)


def mollweide_projection_of(
    latitude: float,
    longitude: float,
    longitude_offset: float = 0.0,
    latitude_offset: float = 0.0,
) -> tuple[float, float]:
    """Mollweide projection of a coordinate given in degrees.

    The result lies in logical space [-2, 2] x [-1, 1] and still needs to be
    scaled to screen coordinates.
    """
    longitude -= longitude_offset
    if longitude < -180:
        longitude += 360
    if longitude > 180:
        longitude -= 360

    latitude -= latitude_offset
    if latitude < -90:
        latitude += 180
    if latitude > 90:
        latitude -= 180

    longitude = math.radians(longitude)
    latitude = math.radians(latitude)

    # No closed form exists for theta; refine it with Newton's method.
    target = math.pi * math.sin(latitude)
    theta = latitude
    for _ in range(_NEWTON_ITERATIONS):
        denominator = 2 + 2 * math.cos(2 * theta)
        if denominator == 0:
            break  # At a pole the starting guess is already exact.
        theta -= (2 * theta + math.sin(2 * theta) - target) / denominator

    x = 2 * math.cos(theta) * longitude / math.pi
    y = math.sin(theta)
    return x, y


def trim_extension_from(filename: str) -> str:
    """The filename without its final '.suffix', if it has one."""
    index = filename.rfind(".")
    return filename if index == -1 else filename[:index]


def file_choices(
    base_dir: str | os.PathLike[str],
    default_option: str,
    predicate: Callable[[str], bool],
) -> list[str]:
    """Entries for a file chooser: the default, then matching files in base_dir.

    Files are ordered by name with their extensions dropped; files that tie
    keep their full-name order.
    """
    files = sorted(name for name in os.listdir(base_dir) if predicate(name))
    files.sort(key=trim_extension_from)
    return [default_option, *files]