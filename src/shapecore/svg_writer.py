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

"""Render Shapes as an SVG document."""
import dataclasses
from lxml import etree  # pytype: disable=import-error
from typing import Iterable, Optional, Tuple
from shapecore.rectangle import Rectangle, rectangle_bounds
from shapecore.shape import Shape
from shapecore.svg_meta import ntos, svgns


# Subset of https://www.w3.org/TR/SVG11/painting.html, defaults as per SVG
@dataclasses.dataclass(frozen=True)
class PathStyle:
    fill: str = "black"
    fill_rule: str = "nonzero"
    stroke: str = "none"
    stroke_width: float = 1.0
    opacity: float = 1.0


def _attr_name(field_name: str) -> str:
    return field_name.replace("_", "-")


def _svg_tag(tag: str) -> str:
    return f"{{{svgns()}}}{tag}"


def _set_path_attrib(el: etree.Element, shape: Shape, style: PathStyle):
    el.attrib["d"] = shape.d
    for field in dataclasses.fields(style):
        field_value = getattr(style, field.name)
        # omit attributes whose value == the respective default
        if field_value == field.default:
            continue
        if isinstance(field_value, float):
            field_value = ntos(field_value)
        el.attrib[_attr_name(field.name)] = str(field_value)


def to_element(shape: Shape, style: PathStyle = PathStyle()) -> etree.Element:
    el = etree.Element(_svg_tag("path"), nsmap={None: svgns()})
    _set_path_attrib(el, shape, style)
    return el


def _view_box(shapes: Tuple[Shape, ...]) -> Rectangle:
    return rectangle_bounds(s.bounds for s in shapes)


def toetree(
    shapes: Iterable[Shape],
    view_box: Optional[Rectangle] = None,
    style: PathStyle = PathStyle(),
) -> etree.Element:
    """Return an <svg> element with one <path> per non-empty shape.

    view_box defaults to the bounds of the shapes.
    """
    shapes = tuple(s for s in shapes if not s.empty)
    if view_box is None:
        view_box = _view_box(shapes)
    root = etree.Element(_svg_tag("svg"), nsmap={None: svgns()})
    root.attrib["version"] = "1.1"
    root.attrib["viewBox"] = " ".join(
        ntos(float(v)) for v in (view_box.x, view_box.y, view_box.width, view_box.height)
    )
    for shape in shapes:
        _set_path_attrib(etree.SubElement(root, _svg_tag("path")), shape, style)
    return root


def tostring(
    shapes: Iterable[Shape],
    view_box: Optional[Rectangle] = None,
    style: PathStyle = PathStyle(),
    pretty_print: bool = True,
) -> str:
    tree = toetree(shapes, view_box, style)
    return etree.tostring(tree, pretty_print=pretty_print).decode("utf-8")
