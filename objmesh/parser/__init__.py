"""
Пакет parser – разбор строк OBJ в директивы.
"""

from objmesh.parser.directives import (
    AttributeIndexTriple,
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
from objmesh.parser.indices import parse_indices
from objmesh.parser.line import parse_line

__all__ = [
    "AttributeIndexTriple", "Comment", "Directive", "Face", "Group",
    "LineSegment", "MaterialLib", "Normal", "ObjectName", "Point",
    "RawPosition", "RawTextureCoord", "SmoothingGroup", "TextureCoord",
    "UseMaterial", "Vertex", "parse_indices", "parse_line",
]
