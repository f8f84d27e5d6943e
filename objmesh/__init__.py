"""
objmesh – загрузчик Wavefront OBJ в индексированный треугольный меш,
готовый к загрузке в GPU (float32 вершины 3+3+2, uint32 индексы).
"""

from objmesh.utils import logger, Config
from objmesh.errors import (
    ObjError,
    ResourceError,
    ObjParseError,
    MeshBuildError,
)
from objmesh.parser import parse_line, parse_indices
from objmesh.mesh import Mesh, MeshBuilder, OutputVertex, DirectiveOutcome
from objmesh.utils.loader import load_obj, load_obj_lines, iter_directives
from objmesh.multithread import TaskPool

__version__ = "1.0.0"

__all__ = [
    "Config",
    "ObjError",
    "ResourceError",
    "ObjParseError",
    "MeshBuildError",
    "parse_line",
    "parse_indices",
    "Mesh",
    "MeshBuilder",
    "OutputVertex",
    "DirectiveOutcome",
    "load_obj",
    "load_obj_lines",
    "iter_directives",
    "TaskPool",
]
