"""
Dotted-decimal unique ids.

Format: ``<root><YYYYMMDDhhmmSSsss>.<seed>``, e.g.
``1.2.40.0.13.1.1.3542466645.20211021090059143.32643``. The seed starts from
the first digits of the current nanosecond and is incremented after every id,
so ids from one generator never repeat even within the same millisecond.
"""

import threading
import time
import uuid
from datetime import datetime
from typing import Callable

from tukutil.config import get_config
from tukutil.text.strings import get_int_from_string, substr
from tukutil.timeutil import datetime_stamp

DEFAULT_ROOT = "1.2.40.0.13.1.1.3542466645."
DEFAULT_SEED_LENGTH = 5


def initial_seed(length: int = DEFAULT_SEED_LENGTH) -> int:
    """Leading ``length`` digits of the current sub-second nanoseconds, or 0."""
    nanos = time.time_ns() % 1_000_000_000
    return get_int_from_string(substr(str(nanos), 0, length))


class IdGenerator:
    """Issue unique ids from a fixed root, the current time and an incrementing seed."""

    def __init__(
        self,
        root: str | None = None,
        seed: int | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if root is None or seed is None:
            ids_config = get_config().get("ids", {})
            if root is None:
                root = ids_config.get("root", DEFAULT_ROOT)
            if seed is None:
                seed = initial_seed(int(ids_config.get("seed_length", DEFAULT_SEED_LENGTH)))
        self.root = root
        self._seed = seed
        self._clock = clock or datetime.now
        self._lock = threading.Lock()

    @property
    def seed(self) -> int:
        """Seed the next id will carry."""
        return self._seed

    def new_id(self) -> str:
        with self._lock:
            seed = self._seed
            self._seed += 1
        return f"{self.root}{datetime_stamp(self._clock())}.{seed}"


_default: IdGenerator | None = None
_default_lock = threading.Lock()


def default_generator() -> IdGenerator:
    """Process-wide generator, created on first use."""
    global _default
    with _default_lock:
        if _default is None:
            _default = IdGenerator()
        return _default


def new_id() -> str:
    return default_generator().new_id()


def new_uuid() -> str:
    return str(uuid.uuid4())
