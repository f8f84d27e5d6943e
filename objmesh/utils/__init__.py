# objmesh/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger   – готовый объект logging.Logger (с level INFO)
    * Config   – настройки загрузчика (JSON)
    * Profiler – контекст‑менеджер замера времени

Загрузчик (`objmesh.utils.loader`) импортируется напрямую – он зависит
от objmesh.mesh, который сам пользуется логгером отсюда.
"""

from .logger import logger, set_level
from .config import Config
from .profiler import Profiler

__all__ = ["logger", "set_level", "Config", "Profiler"]
