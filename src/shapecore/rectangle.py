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

"""Axis-aligned rectangles and the aggregate functions over them.

Rectangles are laid out in a y-down convention: corner is the top-left.
Width and height are allowed to be zero or negative; nothing here
normalizes them.
"""
import dataclasses
import math
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple, Union
from shapecore.geometric_types import (
    DEFAULT_ALMOST_EQUAL_TOLERANCE,
    Vector2,
    almost_equal,
    ieee_div,
)
from shapecore.shape import Shape, ShapeContour, YPolarity


class IntRectangle(NamedTuple):
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclasses.dataclass(frozen=True)
class Rectangle:
    corner: Vector2
    width: float
    # None means "same as width"
    height: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.corner, Vector2):
            object.__setattr__(self, "corner", Vector2(*self.corner))
        if self.height is None:
            object.__setattr__(self, "height", self.width)

    @classmethod
    def from_xywh(
        cls, x: float, y: float, width: float, height: Optional[float] = None
    ) -> "Rectangle":
        return cls(Vector2(x, y), width, height)

    @classmethod
    def from_center(
        cls, center: Vector2, width: float, height: Optional[float] = None
    ) -> "Rectangle":
        if height is None:
            height = width
        cx, cy = center
        return cls.from_xywh(cx - width / 2.0, cy - height / 2.0, width, height)

    @property
    def x(self) -> float:
        return self.corner.x

    @property
    def y(self) -> float:
        return self.corner.y

    @property
    def center(self) -> Vector2:
        return self.corner + Vector2(self.width / 2, self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def dimensions(self) -> Vector2:
        return Vector2(self.width, self.height)

    def position(self, u: Union[float, Vector2], v: Optional[float] = None) -> Vector2:
        """Return the point at parametric (u, v); (0.5, 0.5) is the center.

        position(uv) with a single Vector2 is accepted too.
        """
        if v is None:
            u, v = u
        return self.corner + Vector2(u * self.width, v * self.height)

    @property
    def contour(self) -> ShapeContour:
        """Closed clockwise contour: corner, +width, +width+height, +height.

        ShapeContour.EMPTY if either corner coordinate is not finite, or any
        of the points would carry a nan.
        """
        corner = self.corner
        points = (
            corner,
            corner + Vector2(self.width, 0.0),
            corner + Vector2(self.width, self.height),
            corner + Vector2(0.0, self.height),
        )
        if not all(math.isfinite(c) for c in corner) or any(
            math.isnan(c) for pt in points for c in pt
        ):
            return ShapeContour.EMPTY
        return ShapeContour.from_points(points, True, YPolarity.CW_NEGATIVE_Y)

    @property
    def shape(self) -> Shape:
        contour = self.contour
        if contour.empty:
            return Shape.EMPTY
        return Shape((contour,))

    def offset_edges(self, offset: float, offset_y: Optional[float] = None) -> "Rectangle":
        """Return a Rectangle with every side pushed out by offset.

        Negative offsets pull the sides in. offset_y defaults to offset.
        """
        if offset_y is None:
            offset_y = offset
        return Rectangle(
            Vector2(self.x - offset, self.y - offset_y),
            self.width + 2 * offset,
            self.height + 2 * offset_y,
        )

    def scale(
        self,
        scale_x: float,
        scale_y: Optional[float] = None,
        anchor_u: float = 0.5,
        anchor_v: float = 0.5,
    ) -> "Rectangle":
        """Return a Rectangle with dimensions scaled by scale_x and scale_y.

        The point at parametric (anchor_u, anchor_v) stays where it is;
        the defaults scale about the center. scale_y defaults to scale_x.
        """
        if scale_y is None:
            scale_y = scale_x
        anchor = self.position(anchor_u, anchor_v)
        offset = self.corner - anchor
        return Rectangle(
            anchor + offset * Vector2(scale_x, scale_y),
            self.width * scale_x,
            self.height * scale_y,
        )

    def width_scaled_to(self, fit_width: float) -> "Rectangle":
        """Return a Rectangle fit_width wide with height scaled proportionally."""
        scale = ieee_div(fit_width, self.width)
        return Rectangle(self.corner, fit_width, self.height * scale)

    def height_scaled_to(self, fit_height: float) -> "Rectangle":
        """Return a Rectangle fit_height high with width scaled proportionally."""
        scale = ieee_div(fit_height, self.height)
        return Rectangle(self.corner, self.width * scale, fit_height)

    def moved(self, offset: Vector2) -> "Rectangle":
        return Rectangle(self.corner + Vector2(*offset), self.width, self.height)

    def sub(self, u0: float, v0: float, u1: float, v1: float) -> "Rectangle":
        """Return the Rectangle spanning parametric (u0, v0) to (u1, v1).

        The result has negative width (height) when u1 < u0 (v1 < v0).
        """
        p0 = self.position(u0, v0)
        p1 = self.position(u1, v1)
        return Rectangle(p0, p1.x - p0.x, p1.y - p0.y)

    def contains(self, point: Vector2) -> bool:
        """True if point lies in [x, x + width) and [y, y + height).

        The bounds are compared as given; a negative width or height makes
        the interval empty on that axis.
        """
        px, py = point
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    __contains__ = contains

    def __add__(self, other: "Rectangle") -> "Rectangle":
        if not isinstance(other, Rectangle):
            return NotImplemented
        return Rectangle(
            self.corner + other.corner,
            self.width + other.width,
            self.height + other.height,
        )

    def __sub__(self, other: "Rectangle") -> "Rectangle":
        if not isinstance(other, Rectangle):
            return NotImplemented
        return Rectangle(
            self.corner - other.corner,
            self.width - other.width,
            self.height - other.height,
        )

    def __mul__(self, scale: float) -> "Rectangle":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Rectangle(self.corner * scale, self.width * scale, self.height * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: float) -> "Rectangle":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Rectangle(
            self.corner / scale,
            ieee_div(self.width, scale),
            ieee_div(self.height, scale),
        )

    def to_int(self) -> IntRectangle:
        """Truncate x, y, width and height toward zero."""
        return IntRectangle(int(self.x), int(self.y), int(self.width), int(self.height))

    def almost_equals(
        self, other: "Rectangle", tolerance=DEFAULT_ALMOST_EQUAL_TOLERANCE
    ) -> bool:
        return (
            self.corner.almost_equals(other.corner, tolerance)
            and almost_equal(self.width, other.width, tolerance)
            and almost_equal(self.height, other.height, tolerance)
        )


Rectangle.EMPTY = Rectangle(Vector2(0.0, 0.0), 0.0, 0.0)


def extents_bounds(extents: Iterable[Tuple[float, float, float, float]]) -> Rectangle:
    """Reduce (x1, y1, x2, y2) extents to min x1, y1 and max x2, y2.

    No sentinel is skipped here. Rectangle.EMPTY if there are no extents.
    """
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    found = False
    for x1, y1, x2, y2 in extents:
        found = True
        min_x = min(min_x, x1)
        min_y = min(min_y, y1)
        max_x = max(max_x, x2)
        max_y = max(max_y, y2)
    if not found:
        return Rectangle.EMPTY
    return Rectangle(Vector2(min_x, min_y), max_x - min_x, max_y - min_y)


def vector2_bounds(points: Iterable[Vector2]) -> Rectangle:
    """Return the smallest Rectangle covering every point.

    Rectangle.EMPTY if there are no points.
    """
    return extents_bounds((x, y, x, y) for x, y in points)


def rectangle_bounds(rectangles: Iterable[Rectangle]) -> Rectangle:
    """Return the smallest Rectangle covering every rectangle.

    Rectangles equal to Rectangle.EMPTY are skipped; other zero area
    rectangles still count. Rectangle.EMPTY if nothing is left.
    """
    return extents_bounds(
        (r.x, r.y, r.x + r.width, r.y + r.height)
        for r in rectangles
        if r != Rectangle.EMPTY
    )


def bounds(items: Iterable[Union[Vector2, Rectangle]]) -> Rectangle:
    """Bounds of a sequence of all points or all rectangles."""
    items = list(items)
    if items and isinstance(items[0], Rectangle):
        return rectangle_bounds(items)
    return vector2_bounds(items)


def intersects(a: Rectangle, b: Rectangle) -> bool:
    """True unless a lies strictly above, below, left or right of b.

    Rectangles that only share an edge intersect.
    """
    above = a.y + a.height < b.y
    below = a.y > b.y + b.height
    right_of = a.x > b.x + b.width
    left_of = a.x + a.width < b.x
    return not (above or below or left_of or right_of)


def map_point(
    point: Vector2,
    source: Rectangle,
    target: Rectangle,
    clamp: bool = False,
) -> Vector2:
    """Move point from its place on source to the equivalent place on target.

    With clamp the result is limited to target's extent.
    """
    point = Vector2(*point)
    remapped = (
        (point - source.corner) / source.dimensions * target.dimensions
        + target.corner
    )
    if clamp:
        return remapped.clamp(target.corner, target.corner + target.dimensions)
    return remapped


def map_points(
    points: Sequence[Vector2],
    source: Rectangle,
    target: Rectangle,
    clamp: bool = False,
) -> Tuple[Vector2, ...]:
    return tuple(map_point(p, source, target, clamp) for p in points)
