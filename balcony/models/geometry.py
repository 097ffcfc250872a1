"""Geometric primitives used throughout the layout engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the ground plane (X-Z in Three.js convention)."""
    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def offset(self, direction: Vector2D, distance: float) -> Point2D:
        """Move `distance` along `direction` (normalized first)."""
        d = direction.normalized()
        return Point2D(x=self.x + d.x * distance, z=self.z + d.z * distance)


class Point3D(BaseModel):
    """Point in 3D space. Y is up, 0 is ground level."""
    x: float
    y: float
    z: float

    @classmethod
    def at_height(cls, point: Point2D, y: float) -> Point3D:
        return cls(x=point.x, y=y, z=point.z)


class Rotation(BaseModel):
    """Euler rotation in radians (XYZ order, as applied by Three.js)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class Vector2D(BaseModel):
    """2D vector for direction calculations on the ground plane."""
    x: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.z * self.z)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, z=0.0)
        return Vector2D(x=self.x / ln, z=self.z / ln)

