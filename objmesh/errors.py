# objmesh/errors.py
# -*- coding: utf-8 -*-
"""
Иерархия исключений загрузчика.

    ObjError
    ├── ResourceError          – файл не открылся / не прочитался
    ├── ObjParseError          – синтаксис строки
    │   ├── MissingTagError
    │   ├── UnrecognizedTagError
    │   ├── IntParseError
    │   ├── FloatParseError
    │   └── MissingNumberError
    └── MeshBuildError         – сборка меша
        ├── MissingNormalError
        ├── MissingTextureCoordError
        ├── InvalidIndexError
        └── UnsupportedDirectiveError

Ошибки разбора/сборки дополняются контекстом (файл, номер строки, текст
строки) в загрузчике через `ObjError.at()`.
"""

from typing import Optional


class ObjError(Exception):
    """Базовое исключение пакета."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message
        self.source: Optional[str] = None
        self.lineno: Optional[int] = None
        self.line: Optional[str] = None

    def at(self, source: str, lineno: int, line: str) -> "ObjError":
        """Привязать ошибку к строке исходника; возвращает self."""
        self.source = source
        self.lineno = lineno
        self.line = line
        return self

    def __str__(self) -> str:
        if self.lineno is None:
            return self.message
        return f"{self.source}:{self.lineno}: {self.message} [{self.line!r}]"


class ResourceError(ObjError):
    """Ошибка ввода‑вывода (открытие, чтение, декодирование)."""


# ----------------------------------------------------------------------
# Синтаксис
# ----------------------------------------------------------------------
class ObjParseError(ObjError):
    """Строка не соответствует грамматике."""


class MissingTagError(ObjParseError):
    def __init__(self, line: str):
        super().__init__(f"No tag separator in {line!r}")


class UnrecognizedTagError(ObjParseError):
    def __init__(self, tag: str):
        super().__init__(f"Unrecognized tag {tag!r}")
        self.tag = tag


class IntParseError(ObjParseError):
    def __init__(self, text: str, reason: str = "invalid unsigned integer"):
        super().__init__(f"Cannot parse integer from {text!r}: {reason}")
        self.text = text


class FloatParseError(ObjParseError):
    def __init__(self, text: str, reason: str = "invalid float literal"):
        super().__init__(f"Cannot parse float from {text!r}: {reason}")
        self.text = text


class MissingNumberError(ObjParseError):
    def __init__(self, what: str):
        super().__init__(f"Missing {what}")


# ----------------------------------------------------------------------
# Сборка меша
# ----------------------------------------------------------------------
class MeshBuildError(ObjError):
    """Директива синтаксически верна, но не может быть применена к мешу."""


class MissingNormalError(MeshBuildError):
    def __init__(self):
        super().__init__("Normal index present only on some face corners")


class MissingTextureCoordError(MeshBuildError):
    def __init__(self):
        super().__init__("Texture coordinate index present only on some face corners")


class InvalidIndexError(MeshBuildError):
    def __init__(self, kind: str, index: int, size: int):
        super().__init__(f"{kind} index {index} out of range (pool size {size})")
        self.kind = kind
        self.index = index
        self.size = size


class UnsupportedDirectiveError(MeshBuildError):
    def __init__(self, directive):
        super().__init__(f"Unsupported directive {type(directive).__name__}")
        self.directive = directive
