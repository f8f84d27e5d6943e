# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ: файл → строки → директивы → MeshBuilder → Mesh.

Строки обрабатываются строго по порядку; первая ошибка разбора или сборки
прерывает загрузку целиком (частичного меша не бывает). Ошибки дополняются
именем источника, номером строки и её текстом.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from objmesh.errors import ObjError, ResourceError
from objmesh.mesh.builder import MeshBuilder
from objmesh.mesh.mesh import Mesh
from objmesh.parser.directives import Directive
from objmesh.parser.line import parse_line
from objmesh.utils.config import Config
from objmesh.utils.logger import logger
from objmesh.utils.profiler import Profiler


def iter_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """(номер строки с 1, строка без `\\r\\n`), пустые строки пропускаются."""
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if line:
            yield lineno, line


def iter_directives(lines: Iterable[str],
                    source: str = "<lines>") -> Iterator[Tuple[int, str, Directive]]:
    """Разобрать строки в директивы, не собирая меш."""
    for lineno, line in iter_lines(lines):
        try:
            yield lineno, line, parse_line(line)
        except ObjError as exc:
            raise exc.at(source, lineno, line)


def _make_builder(config: Optional[Config]) -> MeshBuilder:
    config = config or Config()
    return MeshBuilder(dedup=config.dedup, strict=config.strict)


def load_obj_lines(lines: Iterable[str], source: str = "<lines>",
                   config: Optional[Config] = None) -> Mesh:
    """Собрать меш из уже прочитанных строк (файл, StringIO, список)."""
    builder = _make_builder(config)
    lineno, line = 0, ""
    try:
        for lineno, line, directive in iter_directives(lines, source):
            builder.process_directive(directive)
    except ObjError as exc:
        if exc.lineno is None and not isinstance(exc, ResourceError):
            exc.at(source, lineno, line)
        logger.error(f"[Loader] {exc}")
        raise
    mesh = builder.finish()
    logger.debug(f"[Loader] {source}: {mesh.vertex_count} vertices, "
                 f"{mesh.triangle_count} triangles")
    return mesh


def _read_lines(path: Path, encoding: str) -> Iterator[str]:
    try:
        with path.open("r", encoding=encoding) as f:
            yield from f
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceError(f"Cannot read {path}: {exc}") from exc


def load_obj(path: Union[str, Path], config: Optional[Config] = None) -> Mesh:
    """
    Загрузить `.obj` с диска.

    Бросает ResourceError при проблемах чтения, ObjParseError / MeshBuildError
    при ошибках в содержимом.
    """
    config = config or Config()
    p = Path(path).expanduser()
    lines = _read_lines(p, config.encoding)
    with Profiler(f"load_obj({p.name})"):
        try:
            mesh = load_obj_lines(lines, source=str(p), config=config)
        finally:
            lines.close()
    logger.info(f"[Loader] Loaded {p} ({mesh.vertex_count} vertices, "
                f"{mesh.index_count} indices)")
    return mesh
