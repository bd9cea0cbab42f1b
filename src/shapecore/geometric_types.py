# Copyright 2020 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Immutable 2D/3D/4D vector value types.

Every operation returns a new value. Division follows IEEE-754: dividing by
zero yields +/-inf or nan instead of raising.
"""
import math
from typing import NamedTuple, Optional, Union


DEFAULT_ALMOST_EQUAL_TOLERANCE = 1e-9
_Scalar = Union[int, float]


def almost_equal(c1, c2, tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE) -> bool:
    return abs(c1 - c2) <= tolerance


def clamp(value: float, minv: float, maxv: float) -> float:
    # nan stays nan
    if math.isnan(value):
        return value
    return max(minv, min(value, maxv))


def ieee_div(n: float, d: float) -> float:
    """Return n / d, with IEEE-754 results where Python would raise.

    1 / 0 is inf, -1 / 0 is -inf, 0 / 0 is nan. The sign of a zero
    divisor is respected, so 1 / -0.0 is -inf.
    """
    try:
        return n / d
    except ZeroDivisionError:
        if n == 0 or math.isnan(n):
            return math.nan
        return math.copysign(math.inf, n) * math.copysign(1.0, d)


class Vector3(NamedTuple):
    x: float = 0
    y: float = 0
    z: float = 0


class Vector4(NamedTuple):
    x: float = 0
    y: float = 0
    z: float = 0
    w: float = 0


class Vector2(NamedTuple):
    x: float = 0
    y: float = 0

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.__class__(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.__class__(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return self.__class__(-self.x, -self.y)

    def __mul__(self, other: Union[_Scalar, "Vector2"]) -> "Vector2":
        """Multiply by a scalar, or element-wise by another Vector2."""
        if isinstance(other, Vector2):
            return self.__class__(self.x * other.x, self.y * other.y)
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.__class__(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union[_Scalar, "Vector2"]) -> "Vector2":
        """Divide by a scalar, or element-wise by another Vector2."""
        if isinstance(other, Vector2):
            return self.__class__(ieee_div(self.x, other.x), ieee_div(self.y, other.y))
        if not isinstance(other, (int, float)):
            return NotImplemented
        return self.__class__(ieee_div(self.x, other), ieee_div(self.y, other))

    @property
    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    @property
    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    @property
    def normalized(self) -> "Vector2":
        """Return self / length.

        The zero vector has no direction; its normalized form has nan
        components.
        """
        return self / self.length

    def perpendicular(self, clockwise: bool = False) -> "Vector2":
        """Return Vector2 rotated 90 degrees counter-clockwise from self.

        If clockwise is True, return the other perpendicular vector.
        """
        if clockwise:
            return self.__class__(self.y, -self.x)
        return self.__class__(-self.y, self.x)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    @property
    def yx(self) -> "Vector2":
        return self.__class__(self.y, self.x)

    @property
    def xx(self) -> "Vector2":
        return self.__class__(self.x, self.x)

    @property
    def yy(self) -> "Vector2":
        return self.__class__(self.y, self.y)

    @property
    def xy0(self) -> Vector3:
        return Vector3(self.x, self.y, 0.0)

    @property
    def xy01(self) -> Vector4:
        return Vector4(self.x, self.y, 0.0, 1.0)

    def vector3(
        self, x: Optional[float] = None, y: Optional[float] = None, z: float = 0.0
    ) -> Vector3:
        """Return a Vector3; x and y default to this vector's components."""
        return Vector3(
            self.x if x is None else x,
            self.y if y is None else y,
            z,
        )

    def clamp(self, lo: "Vector2", hi: "Vector2") -> "Vector2":
        return self.__class__(clamp(self.x, lo.x, hi.x), clamp(self.y, lo.y, hi.y))

    def round(self, digits: int) -> "Vector2":
        return Vector2(round(self.x, digits), round(self.y, digits))

    def almost_equals(
        self, other: "Vector2", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE
    ) -> bool:
        return almost_equal(self.x, other.x, tolerance) and almost_equal(
            self.y, other.y, tolerance
        )


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.UNIT_X = Vector2(1.0, 0.0)
Vector2.UNIT_Y = Vector2(0.0, 1.0)
Vector2.INFINITY = Vector2(math.inf, math.inf)
