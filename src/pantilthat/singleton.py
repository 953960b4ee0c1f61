"""
Reusable Singleton metaclass.
"""

import threading
from typing import Any, Dict


class Singleton(type):
    """
    Metaclass that enforces single-instance creation for subclasses.

    Creation is guarded by a lock because idle timers may ask for an
    instance from their own thread.
    """

    _instances: Dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with Singleton._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


__all__ = [
    'Singleton',
]
