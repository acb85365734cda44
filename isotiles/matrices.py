"""Column-major 3x3 and 4x4 matrices and the affine and camera helpers built on them."""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Iterable, Iterator

from .vectors import Vec3, Vec4, Versor


def _as_floats(values: Iterable[float], count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(value) for value in values)
    if len(result) != count:
        raise ValueError(f"{name} needs {count} values, got {len(result)}")
    return result


def _det3(rows: list[list[float]]) -> float:
    (a, b, c), (d, e, f), (g, h, i) = rows
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


@dataclass(frozen=True)
class Mat3:
    """A 3x3 matrix whose nine values are stored column by column."""

    m: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _as_floats(self.m, 9, "Mat3"))

    @classmethod
    def zero(cls) -> Mat3:
        """The all-zero matrix."""
        return cls((0.0,) * 9)

    @classmethod
    def identity(cls) -> Mat3:
        """The identity matrix."""
        return cls(1.0 if index % 4 == 0 else 0.0 for index in range(9))

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.m)

    def __str__(self) -> str:
        rows = (
            "".join(f"[{self.m[row + col * 3]:.2f}]" for col in range(3))
            for row in range(3)
        )
        return "\n" + "\n".join(rows)


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix whose sixteen values are stored column by column.

    Index layout::

        0  4  8 12
        1  5  9 13
        2  6 10 14
        3  7 11 15
    """

    m: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "m", _as_floats(self.m, 16, "Mat4"))

    @classmethod
    def zero(cls) -> Mat4:
        """The all-zero matrix."""
        return cls((0.0,) * 16)

    @classmethod
    def identity(cls) -> Mat4:
        """The identity matrix."""
        return cls(1.0 if index % 5 == 0 else 0.0 for index in range(16))

    def __getitem__(self, index: int) -> float:
        return self.m[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.m)

    def __str__(self) -> str:
        rows = (
            "".join(f"[{self._at(row, col):.2f}]" for col in range(4))
            for row in range(4)
        )
        return "\n" + "\n".join(rows)

    def _at(self, row: int, col: int) -> float:
        return self.m[row + col * 4]

    def __mul__(self, other: Mat4 | Vec4) -> Mat4 | Vec4:
        """Multiply by a column vector or by another matrix (``self`` on the left)."""
        if isinstance(other, Vec4):
            v = tuple(other)
            return Vec4(*(sum(self._at(row, i) * v[i] for i in range(4)) for row in range(4)))
        if isinstance(other, Mat4):
            return Mat4(
                sum(self._at(row, i) * other._at(i, col) for i in range(4))
                for col in range(4)
                for row in range(4)
            )
        return NotImplemented

    def _cofactor(self, row: int, col: int) -> float:
        minor = [
            [self._at(r, c) for c in range(4) if c != col]
            for r in range(4)
            if r != row
        ]
        sign = -1.0 if (row + col) % 2 else 1.0
        return sign * _det3(minor)

    def determinant(self) -> float:
        """Determinant of the matrix."""
        return sum(self._at(row, 0) * self._cofactor(row, 0) for row in range(4))

    def inverse(self) -> Mat4:
        """Inverse matrix; a singular matrix is returned unchanged with a warning."""
        det = self.determinant()
        if det == 0.0:
            warnings.warn(
                "matrix has no determinant; cannot invert", RuntimeWarning, stacklevel=2
            )
            return self
        inv_det = 1.0 / det
        return Mat4(
            inv_det * self._cofactor(col, row) for col in range(4) for row in range(4)
        )

    def transposed(self) -> Mat4:
        """The matrix flipped on its main diagonal."""
        return Mat4(self._at(col, row) for col in range(4) for row in range(4))


def _identity_with(entries: dict[int, float]) -> Mat4:
    values = list(Mat4.identity().m)
    for index, value in entries.items():
        values[index] = value
    return Mat4(values)


def translate(m: Mat4, v: Vec3) -> Mat4:
    """Apply a translation by ``v`` after ``m``."""
    return _identity_with({12: v.x, 13: v.y, 14: v.z}) * m


def rotate_x_deg(m: Mat4, deg: float) -> Mat4:
    """Apply a rotation about the x axis by ``deg`` degrees after ``m``."""
    rad = math.radians(deg)
    c, s = math.cos(rad), math.sin(rad)
    return _identity_with({5: c, 9: -s, 6: s, 10: c}) * m


def rotate_y_deg(m: Mat4, deg: float) -> Mat4:
    """Apply a rotation about the y axis by ``deg`` degrees after ``m``."""
    rad = math.radians(deg)
    c, s = math.cos(rad), math.sin(rad)
    return _identity_with({0: c, 8: s, 2: -s, 10: c}) * m


def rotate_z_deg(m: Mat4, deg: float) -> Mat4:
    """Apply a rotation about the z axis by ``deg`` degrees after ``m``."""
    rad = math.radians(deg)
    c, s = math.cos(rad), math.sin(rad)
    return _identity_with({0: c, 4: -s, 1: s, 5: c}) * m


def scale(m: Mat4, v: Vec3) -> Mat4:
    """Apply a per-axis scale by ``v`` after ``m``."""
    return _identity_with({0: v.x, 5: v.y, 10: v.z}) * m


def look_at(cam_pos: Vec3, targ_pos: Vec3, up: Vec3) -> Mat4:
    """View matrix for a camera at ``cam_pos`` looking at ``targ_pos``."""
    p = translate(Mat4.identity(), -cam_pos)
    f = (targ_pos - cam_pos).normalised()
    r = f.cross(up).normalised()
    u = r.cross(f).normalised()
    ori = _identity_with(
        {
            0: r.x, 4: r.y, 8: r.z,
            1: u.x, 5: u.y, 9: u.z,
            2: -f.x, 6: -f.y, 10: -f.z,
        }
    )
    return ori * p


def perspective(fovy: float, aspect: float, near: float, far: float) -> Mat4:
    """Perspective projection with a vertical field of view in degrees."""
    fov_rad = math.radians(fovy)
    view_range = math.tan(fov_rad / 2.0) * near
    sx = (2.0 * near) / (view_range * aspect + view_range * aspect)
    sy = near / view_range
    sz = -(far + near) / (far - near)
    pz = -(2.0 * far * near) / (far - near)
    values = [0.0] * 16
    values[0] = sx
    values[5] = sy
    values[10] = sz
    values[14] = pz
    values[11] = -1.0
    return Mat4(values)


def quat_to_mat4(q: Versor) -> Mat4:
    """Rotation matrix for the versor ``q``."""
    w, x, y, z = q.w, q.x, q.y, q.z
    return Mat4(
        (
            1.0 - 2.0 * y * y - 2.0 * z * z,
            2.0 * x * y + 2.0 * w * z,
            2.0 * x * z - 2.0 * w * y,
            0.0,
            2.0 * x * y - 2.0 * w * z,
            1.0 - 2.0 * x * x - 2.0 * z * z,
            2.0 * y * z + 2.0 * w * x,
            0.0,
            2.0 * x * z + 2.0 * w * y,
            2.0 * y * z - 2.0 * w * x,
            1.0 - 2.0 * x * x - 2.0 * y * y,
            0.0,
            0.0,
            0.0,
            0.0,
            1.0,
        )
    )