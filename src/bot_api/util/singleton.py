import threading
from typing import Any


class Singleton(type):
    """Metaclass that hands out one shared instance per class, created on first call."""
    __lock = threading.Lock()
    __instances: dict[type, Any] = {}

    def __call__(cls, *args, **kwargs):
        instance = Singleton.__instances.get(cls)
        if instance is None:
            with Singleton.__lock:
                # another thread may have won the race while we waited
                instance = Singleton.__instances.get(cls)
                if instance is None:
                    instance = super().__call__(*args, **kwargs)
                    Singleton.__instances[cls] = instance
        return instance

    def reset(cls):
        """Drops the cached instance so the next call re-reads its inputs (used by tests)."""
        with Singleton.__lock:
            Singleton.__instances.pop(cls, None)
