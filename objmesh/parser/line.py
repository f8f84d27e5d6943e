# objmesh/parser/line.py
# -*- coding: utf-8 -*-
"""
Парсер одной строки OBJ → директива.

Строка приходит уже без `\\n`. Тег отделяется от остатка первым пробелом,
поля внутри остатка – одиночными пробелами. Функции чистые, без состояния.
"""

import math
import re
from decimal import Decimal
from typing import Callable, Dict, Iterator

import numpy as np

from objmesh.errors import (
    FloatParseError,
    MissingNumberError,
    MissingTagError,
    UnrecognizedTagError,
)
from objmesh.parser.directives import (
    Comment,
    Directive,
    Face,
    Group,
    LineSegment,
    MaterialLib,
    Normal,
    ObjectName,
    Point,
    RawPosition,
    RawTextureCoord,
    SmoothingGroup,
    TextureCoord,
    UseMaterial,
    Vertex,
)
from objmesh.parser.indices import parse_indices, parse_uint

_FLOAT_RE = re.compile(
    r"[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


# ----------------------------------------------------------------------
# числа
# ----------------------------------------------------------------------
def parse_float(text: str) -> float:
    """
    Число одинарной точности, округлённое к ближайшему float32 один раз.

    float() даёт ближайший float64; ошибиться при втором округлении можно,
    только если этот float64 ровно посередине между соседними float32.
    Тогда сторону выбирает точное десятичное значение строки.
    """
    if not _FLOAT_RE.fullmatch(text):
        raise FloatParseError(text)
    wide = float(text)
    with np.errstate(over="ignore"):
        narrow = np.float32(wide)
        if not math.isfinite(wide) or float(narrow) == wide:
            return float(narrow)
        toward = np.float32(np.inf if wide > float(narrow) else -np.inf)
        other = np.nextafter(narrow, toward)
    if (float(narrow) + float(other)) / 2 != wide:
        return float(narrow)
    exact, midpoint = Decimal(text), Decimal(wide)
    if exact == midpoint:
        return float(narrow)   # ничья – numpy уже округлил к чётному
    above = exact > midpoint
    return float(max(narrow, other) if above else min(narrow, other))


def _take(fields: Iterator[str], what: str) -> str:
    try:
        return next(fields)
    except StopIteration:
        raise MissingNumberError(what) from None


def _take_optional(fields: Iterator[str], default: float) -> float:
    text = next(fields, None)
    return default if text is None else parse_float(text)


def parse_position(rest: str) -> RawPosition:
    """`x y z [w]`, w по умолчанию 1.0."""
    fields = iter(rest.split(" "))
    x = parse_float(_take(fields, "x coordinate"))
    y = parse_float(_take(fields, "y coordinate"))
    z = parse_float(_take(fields, "z coordinate"))
    w = _take_optional(fields, 1.0)
    return RawPosition(x, y, z, w)


def parse_texture_coord(rest: str) -> RawTextureCoord:
    """`u v [w]`, w по умолчанию 1.0."""
    fields = iter(rest.split(" "))
    u = parse_float(_take(fields, "u coordinate"))
    v = parse_float(_take(fields, "v coordinate"))
    w = _take_optional(fields, 1.0)
    return RawTextureCoord(u, v, w)


# ----------------------------------------------------------------------
# обработчики тегов
# ----------------------------------------------------------------------
def _line_segment(rest: str) -> LineSegment:
    fields = iter(rest.split(" "))
    start = parse_indices(_take(fields, "line start"))
    end = parse_indices(_take(fields, "line end"))
    return LineSegment(start, end)


def _face(rest: str) -> Face:
    fields = iter(rest.split(" "))
    a = parse_indices(_take(fields, "first face corner"))
    b = parse_indices(_take(fields, "second face corner"))
    c = parse_indices(_take(fields, "third face corner"))
    return Face(a, b, c)


def _smoothing_group(rest: str) -> SmoothingGroup:
    if rest == "off":
        return SmoothingGroup(None)
    # 0 – не группа
    return SmoothingGroup(parse_uint(rest) or None)


_HANDLERS: Dict[str, Callable[[str], Directive]] = {
    "#": Comment,
    "o": ObjectName,
    "usemtl": UseMaterial,
    "mtllib": MaterialLib,
    "g": Group,
    "v": lambda rest: Vertex(parse_position(rest)),
    "vt": lambda rest: TextureCoord(parse_texture_coord(rest)),
    "vn": lambda rest: Normal(parse_position(rest)),
    "p": lambda rest: Point(parse_indices(rest)),
    "l": _line_segment,
    "f": _face,
    "s": _smoothing_group,
}


def parse_line(line: str) -> Directive:
    """Разобрать одну строку. Бросает подкласс ObjParseError."""
    tag, sep, rest = line.partition(" ")
    if not sep:
        raise MissingTagError(line)
    handler = _HANDLERS.get(tag)
    if handler is None:
        raise UnrecognizedTagError(tag)
    return handler(rest)
