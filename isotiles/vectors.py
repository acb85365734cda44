"""Small vector and unit-quaternion types for 2D/3D maths."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]

# Sums of squares this close to 1 are treated as already unit length.
_UNIT_THRESHOLD = 0.0001
# Below this sine of the half angle, slerp falls back to linear blending.
_SLERP_LINEAR_THRESHOLD = 0.001


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"[{self.x:.2f}, {self.y:.2f}]"


@dataclass(frozen=True)
class Vec3:
    """A three-component vector with the usual arithmetic."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_vec2(cls, v: Vec2, z: float) -> Vec3:
        """Extend a 2D vector with a z component."""
        return cls(v.x, v.y, z)

    @classmethod
    def from_vec4(cls, v: Vec4) -> Vec3:
        """Drop the w component of a 4D vector."""
        return cls(v.x, v.y, v.z)

    @classmethod
    def from_heading(cls, degrees: float) -> Vec3:
        """Unit direction in the xz plane for a heading in degrees."""
        rad = math.radians(degrees)
        return cls(-math.sin(rad), 0.0, -math.cos(rad))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"[{self.x:.2f}, {self.y:.2f}, {self.z:.2f}]"

    def __add__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)
        if _is_number(other):
            return Vec3(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    def __sub__(self, other: Vec3 | Number) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)
        if _is_number(other):
            return Vec3(self.x - other, self.y - other, self.z - other)
        return NotImplemented

    def __mul__(self, scalar: Number) -> Vec3:
        if not _is_number(scalar):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: Number) -> Vec3:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Number) -> Vec3:
        if not _is_number(scalar):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length2())

    def length2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalised(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vec3(0.0, 0.0, 0.0)
        return Vec3(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def squared_distance(self, other: Vec3) -> float:
        """Squared distance from this point to another."""
        return (other - self).length2()

    def heading(self) -> float:
        """Heading in degrees of this (not necessarily unit) direction."""
        return math.degrees(math.atan2(-self.x, -self.z))


@dataclass(frozen=True)
class Vec4:
    """A four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_vec2(cls, v: Vec2, z: float, w: float) -> Vec4:
        """Extend a 2D vector with z and w components."""
        return cls(v.x, v.y, z, w)

    @classmethod
    def from_vec3(cls, v: Vec3, w: float) -> Vec4:
        """Extend a 3D vector with a w component."""
        return cls(v.x, v.y, v.z, w)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __str__(self) -> str:
        return f"[{self.x:.2f}, {self.y:.2f}, {self.z:.2f}, {self.w:.2f}]"


@dataclass(frozen=True)
class Versor:
    """A quaternion, stored as (w, x, y, z), used for rotations."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def from_axis_rad(cls, radians: float, x: float, y: float, z: float) -> Versor:
        """Rotation of ``radians`` about the axis (x, y, z)."""
        half = radians / 2.0
        s = math.sin(half)
        return cls(math.cos(half), s * x, s * y, s * z)

    @classmethod
    def from_axis_deg(cls, degrees: float, x: float, y: float, z: float) -> Versor:
        """Rotation of ``degrees`` about the axis (x, y, z)."""
        return cls.from_axis_rad(math.radians(degrees), x, y, z)

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    def __str__(self) -> str:
        return f"[{self.w:.2f} ,{self.x:.2f}, {self.y:.2f}, {self.z:.2f}]"

    def __truediv__(self, scalar: Number) -> Versor:
        if not _is_number(scalar):
            return NotImplemented
        return Versor(self.w / scalar, self.x / scalar, self.y / scalar, self.z / scalar)

    def __mul__(self, other: Versor | Number) -> Versor:
        """Scale by a number, or compose with another versor (re-normalised)."""
        if _is_number(other):
            return Versor(self.w * other, self.x * other, self.y * other, self.z * other)
        if not isinstance(other, Versor):
            return NotImplemented
        r = other
        return Versor(
            r.w * self.w - r.x * self.x - r.y * self.y - r.z * self.z,
            r.w * self.x + r.x * self.w - r.y * self.z + r.z * self.y,
            r.w * self.y + r.x * self.z + r.y * self.w - r.z * self.x,
            r.w * self.z - r.x * self.y + r.y * self.x + r.z * self.w,
        ).normalised()

    def __add__(self, other: Versor) -> Versor:
        if not isinstance(other, Versor):
            return NotImplemented
        return Versor(
            self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z
        ).normalised()

    def __neg__(self) -> Versor:
        return Versor(-self.w, -self.x, -self.y, -self.z)

    def normalised(self) -> Versor:
        """Unit-length copy; returned unchanged if already close to unit length."""
        total = self.dot(self)
        if abs(1.0 - total) < _UNIT_THRESHOLD:
            return self
        return self / math.sqrt(total)

    def dot(self, other: Versor) -> float:
        """Four-component dot product."""
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z


def slerp(q: Versor, r: Versor, t: float) -> Versor:
    """Spherical linear interpolation from ``q`` to ``r`` by ``t`` in [0, 1]."""
    cos_half_theta = q.dot(r)
    # Take the short way round.
    if cos_half_theta < 0.0:
        q = -q
        cos_half_theta = q.dot(r)
    if abs(cos_half_theta) >= 1.0:
        return q
    sin_half_theta = math.sqrt(1.0 - cos_half_theta * cos_half_theta)
    if abs(sin_half_theta) < _SLERP_LINEAR_THRESHOLD:
        return Versor(*((1.0 - t) * a + t * b for a, b in zip(q, r)))
    half_theta = math.acos(cos_half_theta)
    a = math.sin((1.0 - t) * half_theta) / sin_half_theta
    b = math.sin(t * half_theta) / sin_half_theta
    return Versor(*(qa * a + rb * b for qa, rb in zip(q, r)))