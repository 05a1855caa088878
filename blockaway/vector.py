"""Tuple based vector helpers shared by block geometry and gameplay."""
from __future__ import annotations

from typing import Iterable, Tuple

IVec3 = Tuple[int, int, int]
Vector3 = Tuple[float, float, float]


# //1.- Convert iterables into integer triples, rejecting wrong arity.
def to_ivec3(components: Iterable[int]) -> IVec3:
    values = tuple(int(component) for component in components)
    if len(values) != 3:
        raise ValueError("IVec3 requires exactly three components")
    return values  # type: ignore[return-value]


# //2.- Convert iterables into float triples for center and distance math.
def to_vector(components: Iterable[float]) -> Vector3:
    values = tuple(float(component) for component in components)
    if len(values) != 3:
        raise ValueError("Vector3 requires exactly three components")
    return values  # type: ignore[return-value]


def add(a: Iterable[float], b: Iterable[float]) -> Vector3:
    ax, ay, az = to_vector(a)
    bx, by, bz = to_vector(b)
    return (ax + bx, ay + by, az + bz)


def subtract(a: Iterable[float], b: Iterable[float]) -> Vector3:
    ax, ay, az = to_vector(a)
    bx, by, bz = to_vector(b)
    return (ax - bx, ay - by, az - bz)


def isubtract(a: Iterable[int], b: Iterable[int]) -> IVec3:
    ax, ay, az = to_ivec3(a)
    bx, by, bz = to_ivec3(b)
    return (ax - bx, ay - by, az - bz)


def scale(vector: Iterable[float], scalar: float) -> Vector3:
    vx, vy, vz = to_vector(vector)
    factor = float(scalar)
    return (vx * factor, vy * factor, vz * factor)


def dot(a: Iterable[float], b: Iterable[float]) -> float:
    ax, ay, az = to_vector(a)
    bx, by, bz = to_vector(b)
    return ax * bx + ay * by + az * bz


# //3.- Average two points; argument order does not change the result.
def midpoint(a: Iterable[float], b: Iterable[float]) -> Vector3:
    return scale(add(a, b), 0.5)
