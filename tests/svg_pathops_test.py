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

import pytest
from shapecore import svg_pathops
from shapecore.rectangle import Rectangle
from shapecore.shape import ShapeContour


def test_skia_path_segments():
    contour = Rectangle.from_xywh(4, 4, 6, 16).contour
    sk_path = svg_pathops.skia_path(contour.as_cmd_seq(), "nonzero")
    segments = tuple(sk_path.segments)
    assert segments[0] == ("moveTo", ((4.0, 4.0),))
    assert segments[1] == ("lineTo", ((10.0, 4.0),))
    assert segments[-1] == ("closePath", ())
    assert sk_path.area == 96.0


def test_skia_path_invalid_fill_rule():
    with pytest.raises(ValueError, match="Invalid fill rule"):
        svg_pathops.skia_path((), "sometimes")


def test_skia_path_unmapped_command():
    with pytest.raises(ValueError, match="No mapping to Skia"):
        svg_pathops.skia_path((("Q", (0, 0, 1, 1)),), "nonzero")


def test_bounding_box():
    contour = ShapeContour.from_points([(1, 1), (3, 5), (-2, 2)], closed=True)
    assert svg_pathops.bounding_box(contour.as_cmd_seq()) == (-2, 1, 3, 5)


@pytest.mark.parametrize(
    "cmds, expected_result",
    [
        # rectangles with no width or height have zero area
        (Rectangle.from_xywh(1, 1, 0, 1).contour.as_cmd_seq(), 0.0),
        (Rectangle.from_xywh(1, 1, 1, 0).contour.as_cmd_seq(), 0.0),
        # sub-paths with inverse winding direction
        (
            (
                ("M", (0, 0)),
                ("L", (0, 1)),
                ("L", (1, 1)),
                ("L", (1, 0)),
                ("Z", ()),
                ("M", (2, 0)),
                ("L", (3, 0)),
                ("L", (3, 1)),
                ("L", (2, 1)),
                ("Z", ()),
            ),
            2.0,
        ),
        # a straight line has no area
        ((("M", (1, 1)), ("L", (3, 1))), 0.0),
        # open paths (no 'Z' at the end) are considered closed for area calculation
        ((("M", (1, 1)), ("L", (3, 1)), ("L", (2, 0))), 1.0),
    ],
)
def test_path_area(cmds, expected_result):
    assert svg_pathops.path_area(cmds) == expected_result
