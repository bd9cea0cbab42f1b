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

"""Closed or open polygonal contours and the shapes built from them.

This is the contract Rectangle.contour feeds: an ordered point list, a
closed flag and the y-axis polarity the points were laid out under. A
contour that could not be built from valid points is ShapeContour.EMPTY,
never a list of nan-bearing points.
"""
import enum
import itertools
from typing import Iterable, NamedTuple, Tuple
from shapecore.geometric_types import Vector2
from shapecore.svg_meta import SVGCommandGen, SVGCommandSeq, path_data
from shapecore import svg_pathops


class YPolarity(enum.Enum):
    # y grows upwards, counter-clockwise is the positive rotation
    CCW_POSITIVE_Y = "ccw_positive_y"
    # y grows downwards (screen space), clockwise is the positive rotation
    CW_NEGATIVE_Y = "cw_negative_y"


class Winding(enum.Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


class ShapeContour(NamedTuple):
    points: Tuple[Vector2, ...] = ()
    closed: bool = False
    polarity: YPolarity = YPolarity.CW_NEGATIVE_Y

    @classmethod
    def from_points(
        cls,
        points: Iterable[Vector2],
        closed: bool = False,
        polarity: YPolarity = YPolarity.CW_NEGATIVE_Y,
    ) -> "ShapeContour":
        return cls(tuple(Vector2(*p) for p in points), closed, polarity)

    @property
    def empty(self) -> bool:
        return not self.points

    @property
    def segments(self) -> Tuple[Tuple[Vector2, Vector2], ...]:
        """Pairs of consecutive points, including the closing pair if closed."""
        if len(self.points) < 2:
            return ()
        pairs = tuple(zip(self.points, self.points[1:]))
        if self.closed:
            pairs += ((self.points[-1], self.points[0]),)
        return pairs

    @property
    def signed_area(self) -> float:
        """Shoelace area of the closed polygon through the points.

        Positive when the points turn from +x towards +y.
        """
        if len(self.points) < 3:
            return 0.0
        total = 0.0
        for p0, p1 in zip(self.points, self.points[1:] + self.points[:1]):
            total += p0.x * p1.y - p1.x * p0.y
        return total / 2

    @property
    def winding(self) -> Winding:
        """Visual winding of the contour under its polarity.

        Degenerate (zero area) contours report CLOCKWISE.
        """
        area = self.signed_area
        if self.polarity == YPolarity.CCW_POSITIVE_Y:
            area = -area
        if area >= 0:
            return Winding.CLOCKWISE
        return Winding.COUNTER_CLOCKWISE

    @property
    def bounds(self):
        from shapecore.rectangle import vector2_bounds

        return vector2_bounds(self.points)

    def reversed(self) -> "ShapeContour":
        return self._replace(points=self.points[::-1])

    def as_cmd_seq(self) -> SVGCommandGen:
        if self.empty:
            return
        first, *rest = self.points
        yield ("M", tuple(first))
        for pt in rest:
            yield ("L", tuple(pt))
        if self.closed:
            yield ("Z", ())

    @property
    def d(self) -> str:
        return path_data(self.as_cmd_seq())

    def area(self) -> float:
        """Absolute area; open contours count as closed."""
        return svg_pathops.path_area(self.as_cmd_seq())


ShapeContour.EMPTY = ShapeContour()


class Shape(NamedTuple):
    contours: Tuple[ShapeContour, ...] = ()

    @property
    def empty(self) -> bool:
        return all(c.empty for c in self.contours)

    def as_cmd_seq(self) -> SVGCommandSeq:
        return itertools.chain.from_iterable(c.as_cmd_seq() for c in self.contours)

    @property
    def d(self) -> str:
        return path_data(self.as_cmd_seq())

    @property
    def bounds(self):
        from shapecore.rectangle import Rectangle

        if self.empty:
            return Rectangle.EMPTY
        x1, y1, x2, y2 = svg_pathops.bounding_box(self.as_cmd_seq())
        return Rectangle.from_xywh(x1, y1, x2 - x1, y2 - y1)

    def area(self, fill_rule: str = "nonzero") -> float:
        return svg_pathops.path_area(self.as_cmd_seq(), fill_rule)


Shape.EMPTY = Shape()
