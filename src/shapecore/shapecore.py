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

"""Rectangle and point queries from the command line.

Usage:
shapecore bounds --rect 0,0,10,10 --rect 20,5,5 --point -3,4
shapecore intersects --rect 0,0,10,10 --rect 10,0,10,10
shapecore map --source 0,0,10,10 --target 0,0,100,100 --point 5,5 --clamp
shapecore svg --rect 0,0,10,10 --offset 2 --output_file out.svg
"""
from absl import app
from absl import flags
from absl import logging
from shapecore.geometric_types import Vector2
from shapecore.rectangle import (
    Rectangle,
    extents_bounds,
    intersects,
    map_points,
    rectangle_bounds,
    vector2_bounds,
)
from shapecore.svg_meta import ntos, parse_rectangle, parse_vector2
from shapecore import svg_writer
from typing import Sequence


FLAGS = flags.FLAGS


flags.DEFINE_multi_string("rect", [], "Rectangle as 'x,y,width[,height]'")
flags.DEFINE_multi_string("point", [], "Point as 'x,y'")
flags.DEFINE_string("source", None, "Rectangle to map points from (map)")
flags.DEFINE_string("target", None, "Rectangle to map points onto (map)")
flags.DEFINE_bool("clamp", False, "Whether to clamp mapped points to --target")
flags.DEFINE_float("offset", 0.0, "Offset applied to every rectangle's edges (svg)")
flags.DEFINE_float("scale", 1.0, "Scale applied about every rectangle's center (svg)")
flags.DEFINE_string("output_file", "-", "Output SVG file ('-' means stdout)")


def _format(*values: float) -> str:
    return " ".join(ntos(float(v)) for v in values)


def bounds_command(rects: Sequence[Rectangle], points: Sequence[Vector2]) -> str:
    parts = []
    if any(r != Rectangle.EMPTY for r in rects):
        parts.append(rectangle_bounds(rects))
    if points:
        parts.append(vector2_bounds(points))
    # merged by extent, a lone point at the origin is not the empty sentinel
    result = extents_bounds((r.x, r.y, r.x + r.width, r.y + r.height) for r in parts)
    if not parts:
        logging.warning("Nothing to bound, reporting the empty rectangle")
    return _format(result.x, result.y, result.width, result.height)


def intersects_command(rects: Sequence[Rectangle]) -> str:
    if len(rects) != 2:
        raise app.UsageError(f"intersects needs exactly 2 --rect, got {len(rects)}")
    return "true" if intersects(*rects) else "false"


def map_command(
    points: Sequence[Vector2], source: Rectangle, target: Rectangle, clamp: bool
) -> str:
    mapped = map_points(points, source, target, clamp)
    logging.info("Mapped %d point(s) from %s to %s", len(mapped), source, target)
    return "\n".join(_format(*p) for p in mapped)


def svg_command(rects: Sequence[Rectangle], offset: float, scale: float) -> str:
    shapes = [r.offset_edges(offset).scale(scale).shape for r in rects]
    empties = sum(1 for s in shapes if s.empty)
    if empties:
        logging.warning("Skipping %d degenerate rectangle(s)", empties)
    return svg_writer.tostring(shapes)


def _required_rectangle(flag_name: str) -> Rectangle:
    value = getattr(FLAGS, flag_name)
    if value is None:
        raise app.UsageError(f"--{flag_name} is required")
    return parse_rectangle(value)


def _run(argv):
    if len(argv) != 2:
        raise app.UsageError("Expected exactly one command")
    command = argv[1]

    rects = [parse_rectangle(r) for r in FLAGS.rect]
    points = [parse_vector2(p) for p in FLAGS.point]
    logging.info("%s: %d rectangle(s), %d point(s)", command, len(rects), len(points))

    if command == "bounds":
        output = bounds_command(rects, points)
    elif command == "intersects":
        output = intersects_command(rects)
    elif command == "map":
        output = map_command(
            points,
            _required_rectangle("source"),
            _required_rectangle("target"),
            FLAGS.clamp,
        )
    elif command == "svg":
        output = svg_command(rects, FLAGS.offset, FLAGS.scale)
    else:
        raise app.UsageError(f"Unknown command {command!r}")

    if command == "svg" and FLAGS.output_file != "-":
        with open(FLAGS.output_file, "w") as f:
            f.write(output)
    else:
        print(output)


def main(argv=None):
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run, argv=argv)


if __name__ == "__main__":
    main()
