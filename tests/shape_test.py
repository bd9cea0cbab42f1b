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

from shapecore.geometric_types import Vector2
from shapecore.rectangle import Rectangle
from shapecore.shape import Shape, ShapeContour, Winding, YPolarity
import pytest


_TRIANGLE = ((0, 0), (1, 0), (1, 1))


def test_from_points():
    contour = ShapeContour.from_points(_TRIANGLE, closed=True)
    assert contour.points == (Vector2(0, 0), Vector2(1, 0), Vector2(1, 1))
    assert all(isinstance(p, Vector2) for p in contour.points)
    assert contour.closed
    assert contour.polarity == YPolarity.CW_NEGATIVE_Y


def test_empty_contour():
    assert ShapeContour.EMPTY.empty
    assert ShapeContour.EMPTY.segments == ()
    assert ShapeContour.EMPTY.d == ""
    assert ShapeContour.EMPTY.bounds == Rectangle.EMPTY
    assert ShapeContour.EMPTY.area() == 0.0


@pytest.mark.parametrize("closed, expected", [(True, 3), (False, 2)])
def test_segments(closed, expected):
    contour = ShapeContour.from_points(_TRIANGLE, closed=closed)
    assert len(contour.segments) == expected
    assert contour.segments[0] == (Vector2(0, 0), Vector2(1, 0))
    if closed:
        assert contour.segments[-1] == (Vector2(1, 1), Vector2(0, 0))


def test_signed_area():
    contour = ShapeContour.from_points(_TRIANGLE, closed=True)
    assert contour.signed_area == 0.5
    assert contour.reversed().signed_area == -0.5
    assert ShapeContour.from_points(_TRIANGLE[:2]).signed_area == 0


@pytest.mark.parametrize(
    "polarity, reverse, expected",
    [
        (YPolarity.CW_NEGATIVE_Y, False, Winding.CLOCKWISE),
        (YPolarity.CW_NEGATIVE_Y, True, Winding.COUNTER_CLOCKWISE),
        (YPolarity.CCW_POSITIVE_Y, False, Winding.COUNTER_CLOCKWISE),
        (YPolarity.CCW_POSITIVE_Y, True, Winding.CLOCKWISE),
    ],
)
def test_winding(polarity, reverse, expected):
    contour = ShapeContour.from_points(_TRIANGLE, True, polarity)
    if reverse:
        contour = contour.reversed()
    assert contour.winding == expected


def test_reversed_keeps_flags():
    contour = ShapeContour.from_points(_TRIANGLE, True, YPolarity.CCW_POSITIVE_Y)
    reversed_contour = contour.reversed()
    assert reversed_contour.points == contour.points[::-1]
    assert reversed_contour.closed
    assert reversed_contour.polarity == YPolarity.CCW_POSITIVE_Y


def test_bounds():
    contour = ShapeContour.from_points([(2, 3), (-1, 4), (0, 9)])
    assert contour.bounds == Rectangle.from_xywh(-1, 3, 3, 6)


@pytest.mark.parametrize(
    "closed, expected_cmds, expected_d",
    [
        (
            True,
            (("M", (0, 0)), ("L", (1, 0)), ("L", (1, 1)), ("Z", ())),
            "M0,0 L1,0 L1,1 Z",
        ),
        (
            False,
            (("M", (0, 0)), ("L", (1, 0)), ("L", (1, 1))),
            "M0,0 L1,0 L1,1",
        ),
    ],
)
def test_commands(closed, expected_cmds, expected_d):
    contour = ShapeContour.from_points(_TRIANGLE, closed=closed)
    assert tuple(contour.as_cmd_seq()) == expected_cmds
    assert contour.d == expected_d


@pytest.mark.parametrize("closed", [True, False])
def test_area(closed):
    # open contours are considered closed for area calculation
    contour = ShapeContour.from_points(_TRIANGLE, closed=closed)
    assert contour.area() == 0.5


def test_shape():
    a = Rectangle.from_xywh(0, 0, 2, 2).contour
    b = Rectangle.from_xywh(5, 1, 1, 3).contour
    shape = Shape((a, b))
    assert not shape.empty
    assert shape.d == a.d + " " + b.d
    assert shape.bounds == Rectangle.from_xywh(0, 0, 6, 4)
    assert shape.area() == 7.0


def test_empty_shape():
    assert Shape.EMPTY.empty
    assert Shape((ShapeContour.EMPTY,)).empty
    assert Shape.EMPTY.d == ""
    assert Shape.EMPTY.bounds == Rectangle.EMPTY
