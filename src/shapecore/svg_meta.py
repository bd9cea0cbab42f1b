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

import re
from typing import Generator, Iterable, Tuple
from shapecore.geometric_types import Vector2


SVGCommand = Tuple[str, Tuple[float, ...]]
SVGCommandSeq = Iterable[SVGCommand]
SVGCommandGen = Generator[SVGCommand, None, None]


def svgns():
    return "http://www.w3.org/2000/svg"


# https://www.w3.org/TR/SVG11/paths.html#PathData
# Contours are polygons, so only the straight line commands are needed
_CMD_ARGS = {
    "m": 2,
    "z": 0,
    "l": 2,
}
_CMD_ARGS.update({k.upper(): v for k, v in _CMD_ARGS.items()})


# For each command iterable of x-coords and iterable of y-coords
_CMD_COORDS = {
    "m": ((0,), (1,)),
    "z": ((), ()),
    "l": ((0,), (1,)),
}
_CMD_COORDS.update({k.upper(): v for k, v in _CMD_COORDS.items()})


def check_cmd(cmd, args):
    cmd_args = num_args(cmd)
    if cmd_args == 0:
        if args:
            raise ValueError(f"{cmd} has no args, {len(args)} invalid")
    elif len(args) % cmd_args != 0:
        raise ValueError(f"{cmd} has sets of {cmd_args} args, {len(args)} invalid")
    return cmd_args


def num_args(cmd):
    if not cmd in _CMD_ARGS:
        raise ValueError(f'Invalid svg command "{cmd}"')
    return _CMD_ARGS[cmd]


def ntos(n: float) -> str:
    # strip superflous .0 decimals
    return str(int(n)) if isinstance(n, float) and n.is_integer() else str(n)


def path_segment(cmd, *args):
    # put commas between coords, spaces otherwise, author readability pref
    args_per_cmd = check_cmd(cmd, args)
    args = [ntos(a) for a in args]
    combined_args = []
    xy_coords = set(zip(*_CMD_COORDS[cmd]))
    if args_per_cmd:
        for n in range(len(args) // args_per_cmd):
            sub_args = args[n * args_per_cmd : (n + 1) * args_per_cmd]
            i = 0
            while i < len(sub_args):
                if (i, i + 1) in xy_coords:
                    combined_args.append(f"{sub_args[i]},{sub_args[i+1]}")
                    i += 2
                else:
                    combined_args.append(sub_args[i])
                    i += 1
    return cmd + " ".join(combined_args)


def path_data(svg_cmds: SVGCommandSeq) -> str:
    return " ".join(path_segment(cmd, *args) for cmd, args in svg_cmds)


def _parse_numbers(s: str) -> Tuple[float, ...]:
    try:
        return tuple(float(v) for v in re.split(r"\s*[,\s]\s*", s.strip()))
    except ValueError:
        raise ValueError(f"Unable to parse numbers: {s!r}")


def parse_vector2(s: str) -> Vector2:
    """Parse "x,y" (or "x y") into a Vector2."""
    values = _parse_numbers(s)
    if len(values) != 2:
        raise ValueError(f"Unable to parse point: {s!r}")
    return Vector2(*values)


def parse_rectangle(s: str):
    """Parse "x,y,width[,height]" into a Rectangle; height defaults to width."""
    from shapecore.rectangle import Rectangle

    values = _parse_numbers(s)
    if len(values) not in (3, 4):
        raise ValueError(f"Unable to parse rectangle: {s!r}")
    return Rectangle.from_xywh(*values)
