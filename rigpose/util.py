import math

import numpy


def rad2deg(rad):
    return rad * 180.0 / math.pi


def wrap_degrees(deg: float) -> float:
    """Bring an angle difference from (-360, 360) into [-180, 180] with one turn."""
    if deg > 180:
        deg -= 360
    if deg < -180:
        deg += 360
    return deg


def as_point(value) -> numpy.ndarray:
    """Accept (x, y), {"x": .., "y": ..} or an ndarray and return a float (2,) array."""
    if isinstance(value, dict):
        value = (value["x"], value["y"])
    point = numpy.asarray(value, dtype=float)
    if point.shape != (2,):
        raise ValueError("point must be a 2D vector")
    return point
