"""Handling path data strings: tokenizing, making coordinates absolute, transforming"""

from __future__ import annotations

import math
import re
from typing import ClassVar, List, Sequence, Tuple, Union

from mosaico.geom import GeomMath
from mosaico.path import format_number

SvgCommand = Tuple[str, List[float]]


class MoSvgPath:
    """
    This class provides a collection of static methods for manipulation of path data strings
    as written by MoPath (or any other SVG path data).
    Commands (command : number of values : command-character):
        MoveTo:           2: Mm
        LineTo:           2: Ll   1: Hh(x)   1:Vv(y)
        CubicBezier:      6: Cc
        QuadraticBezier:  4: Qq
        ArcCurve:         7: Aa
        ClosePath:        0: Zz
    Smooth curves (Ss, Tt) are not written by MoPath and are not supported here.
    """

    # Command letters:
    SVG_CMDS: ClassVar[str] = "MmLlHhVvCcQqAaZz"
    # Definition of a number:
    SVG_ARGS: ClassVar[str] = r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
    # Number of values per command
    BATCH_SIZE: ClassVar[dict] = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "Q": 4, "A": 7, "Z": 0}

    @staticmethod
    def split_commands(path_string: str) -> List[SvgCommand]:
        """
        Split the given _path_string_ into commands.

        Implicitly repeated commands ("L 1 2 3 4") are split into one command per
        batch of values. Following the SVG rules, values repeated after a moveto are
        treated as lineto of the same kind (absolute/relative).

        Args:
            path_string (str): a SVG path string

        Returns:
            List[Tuple[str, List[float]]]: (command letter, values) per command

        Raises:
            ValueError: unsupported command letter or wrong number of values
        """
        unsupported = re.findall(r"[SsTt]", path_string)
        if unsupported:
            raise ValueError(f"Unsupported path command '{unsupported[0]}'")

        commands: List[SvgCommand] = []
        for chunk in re.findall(f"[{MoSvgPath.SVG_CMDS}][^{MoSvgPath.SVG_CMDS}]*", path_string):
            letter = chunk[0]
            values = [float(arg) for arg in re.findall(MoSvgPath.SVG_ARGS, chunk[1:])]
            batch_size = MoSvgPath.BATCH_SIZE[letter.upper()]
            if batch_size == 0:
                commands.append((letter, []))
                continue
            if not values or len(values) % batch_size:
                raise ValueError(f"Command '{letter}' expects a multiple of {batch_size} values, got {len(values)}")
            for i in range(0, len(values), batch_size):
                batch_letter = letter
                if i and letter in "Mm":
                    batch_letter = "L" if letter == "M" else "l"
                commands.append((batch_letter, values[i : i + batch_size]))
        return commands

    @staticmethod
    def join_commands(commands: Sequence[SvgCommand]) -> str:
        """Write _commands_ in the compact MoPath format ("M10,10L20,10Z")."""
        return "".join(letter + ",".join(format_number(v) for v in values) for letter, values in commands)

    @staticmethod
    def convert_relative_to_absolute(path_string: str) -> str:
        """Take the given SVG _path_string_ and make all coordinates absolute.

        Lower case commands are replaced by upper case commands. Horizontal and
        vertical lines become plain lines ("L") so every command carries its end
        point. The geometry of the path stays the same.
        Use this function before doing a transform.

        Args:
            path_string (str): SVG path string input

        Returns:
            str: path_string using absolute coordinates
        """
        ret_commands: List[SvgCommand] = []
        # Start of the current subpath (absolute):
        first_point = (0.0, 0.0)
        # Keep track of the last (iterating) point (absolute):
        last_x, last_y = 0.0, 0.0

        for letter, args in MoSvgPath.split_commands(path_string):
            relative = letter.islower()
            cmd = letter.upper()
            dx, dy = (last_x, last_y) if relative else (0.0, 0.0)

            if cmd == "Z":
                ret_commands.append(("Z", []))
                last_x, last_y = first_point
                continue
            if cmd == "H":
                args = [args[0] + dx, last_y]
                cmd = "L"
            elif cmd == "V":
                args = [last_x, args[0] + dy]
                cmd = "L"
            elif cmd == "A":
                args = args[:5] + [args[5] + dx, args[6] + dy]
            else:
                args = [value + (dx if i % 2 == 0 else dy) for i, value in enumerate(args)]

            last_x, last_y = args[-2], args[-1]
            if cmd == "M":
                first_point = (last_x, last_y)
            ret_commands.append((cmd, args))

        return MoSvgPath.join_commands(ret_commands)

    @staticmethod
    def transform_path_string(path_string: str, affine_trafo: Sequence[Union[int, float]]) -> str:
        """Transform the given SVG-_path_string_ by using the given _affine_trafo_.

        The path is made absolute first. The given _affine_trafo_ is a list of 6 floats,
        see GeomMath.transform_point(). Arcs keep their shape for similarity transforms
        (translation, rotation, uniform scaling, mirroring): radii are scaled by
        sqrt(|det|), the ellipse rotation follows the transformation and a mirroring
        flips the sweep flag.

        Args:
            path_string (str): SVG-path-string input
            affine_trafo (List[float]): Affine transformation [a00, a01, a10, a11, b0, b1]

        Returns:
            str: the transformed _path_string_
        """
        a00, a01, a10, a11 = affine_trafo[0], affine_trafo[1], affine_trafo[2], affine_trafo[3]
        det = a00 * a11 - a01 * a10
        radius_scale = math.sqrt(abs(det))
        rotation = math.degrees(math.atan2(a10, a00))

        ret_commands: List[SvgCommand] = []
        for cmd, args in MoSvgPath.split_commands(MoSvgPath.convert_relative_to_absolute(path_string)):
            if cmd == "A":
                x, y = GeomMath.transform_point(affine_trafo, (args[5], args[6]))
                sweep = args[4] if det >= 0 else 1.0 - args[4]
                ret_commands.append(
                    (
                        "A",
                        [args[0] * radius_scale, args[1] * radius_scale, args[2] + rotation, args[3], sweep, x, y],
                    )
                )
            else:
                points = [
                    GeomMath.transform_point(affine_trafo, (args[i], args[i + 1])) for i in range(0, len(args), 2)
                ]
                ret_commands.append((cmd, [value for point in points for value in point]))

        return MoSvgPath.join_commands(ret_commands)
