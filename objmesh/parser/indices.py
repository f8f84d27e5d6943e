# objmesh/parser/indices.py
"""
Разбор ссылки угла грани: `v`, `v/vt`, `v//vn`, `v/vt/vn`.
"""

from objmesh.errors import IntParseError
from objmesh.parser.directives import AttributeIndexTriple

U32_MAX = 0xFFFFFFFF


def parse_uint(text: str) -> int:
    """Беззнаковое 32‑битное целое; знак минус (относительные индексы) – ошибка."""
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise IntParseError(text)
    # длинные строки не отдаём в int(): лимит на число цифр в CPython
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(U32_MAX)):
        raise IntParseError(text, "number too large to fit in 32 bits")
    value = int(significant)
    if value > U32_MAX:
        raise IntParseError(text, "number too large to fit in 32 bits")
    return value


def parse_indices(token: str) -> AttributeIndexTriple:
    """
    Пустое поле (или отсутствующее) – «нет ссылки». Позиция 0 здесь
    допустима, диапазон проверяет MeshBuilder. Для vt/vn значение 0
    неотличимо от отсутствия.
    """
    fields = token.split("/")
    if len(fields) > 3:
        raise IntParseError(token, "more than three index fields")

    values = [0, 0, 0]
    for slot, field in enumerate(fields):
        if field:
            values[slot] = parse_uint(field)

    position, tex, normal = values
    return AttributeIndexTriple(
        position=position,
        texture_coords=tex or None,
        normal=normal or None,
    )
