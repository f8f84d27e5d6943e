# objmesh/multithread/task_pool.py
# ---------------------------------------------------------------
# Пул фоновых загрузок на основе concurrent.futures.
# Каждая загрузка владеет своим MeshBuilder, поэтому общего
# состояния между потоками нет и блокировки не нужны.
# ---------------------------------------------------------------

from concurrent.futures import Future, ThreadPoolExecutor
import queue
from typing import Dict, Optional

from objmesh.mesh.mesh import Mesh
from objmesh.utils.config import Config
from objmesh.utils.loader import load_obj


class TaskPool:
    """Пул потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None, config: Optional[Config] = None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        self.config = config
        self.tasks = queue.Queue()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs) -> Future:
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        self.tasks.put(future)
        return future

    def submit_load(self, path) -> Future:
        """Загрузить `.obj` в фоне; Future.result() → Mesh."""
        return self.submit(load_obj, path, self.config)

    def load_all(self, paths) -> Dict[str, Mesh]:
        """Загрузить несколько файлов параллельно; первая ошибка пробрасывается."""
        futures = {str(p): self.submit_load(p) for p in paths}
        self.wait_all()
        return {name: future.result() for name, future in futures.items()}

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач."""
        while not self.tasks.empty():
            future = self.tasks.get()
            future.result()  # пробрасывает исключения, если они возникли

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown(wait=True)
