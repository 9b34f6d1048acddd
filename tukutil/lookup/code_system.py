"""Code system lookup: coded values to display text, loaded from a JSON file."""

import json
import logging
from pathlib import Path
from typing import Mapping

from tukutil.config import get_config

logger = logging.getLogger(__name__)


class CodeSystemError(Exception):
    """Base class for code system load failures."""


class CodeSystemFileError(CodeSystemError):
    """Code system file is missing or unreadable."""


class CodeSystemDecodeError(CodeSystemError, ValueError):
    """Code system file is not a flat JSON object of strings."""


def _validate(data: object, source: str) -> dict[str, str]:
    if not isinstance(data, dict):
        raise CodeSystemDecodeError(f"Code system must be a JSON object: {source}")
    for key, value in data.items():
        if not isinstance(value, str):
            raise CodeSystemDecodeError(f"Code system value for {key!r} is not a string: {source}")
    return dict(data)


class CodeSystem:
    """
    Mapping of codes to display values with fallback-to-key on a miss.

    The table is only ever replaced whole, by swapping the reference, so a
    reader sees either the old or the new table and never a partial load.
    """

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    def set(self, values: Mapping[str, str]) -> None:
        """Replace the whole table."""
        self._values = dict(values)

    def load(self, path: str | Path) -> int:
        """
        Replace the table with the JSON object in ``path``.

        Returns the number of entries loaded. Raises CodeSystemFileError or
        CodeSystemDecodeError; the current table is kept on failure.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            logger.error("Unable to open code system file %s: %s", path, e)
            raise CodeSystemFileError(f"Code system file not readable: {path}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error("Unable to decode code system file %s: %s", path, e)
            raise CodeSystemDecodeError(f"Code system file is not valid JSON: {path}") from e

        try:
            values = _validate(data, str(path))
        except CodeSystemDecodeError as e:
            logger.error(str(e))
            raise
        self._values = values
        logger.info("Loaded %d code system key values", len(values))
        return len(values)

    def load_default(self) -> int:
        """Load from ``paths.codesystem_file`` in config."""
        config = get_config()
        path = config.get("paths", {}).get("codesystem_file", "data/codesystem/codesystem.json")
        return self.load(path)

    def lookup(self, key: str) -> str:
        """Mapped value for ``key``, or ``key`` itself when unmapped."""
        return self._values.get(key, key)


_default = CodeSystem()


def default_code_system() -> CodeSystem:
    return _default


def init_code_system(path: str | Path) -> int:
    return _default.load(path)


def set_code_system(values: Mapping[str, str]) -> None:
    _default.set(values)


def get_code_system_val(key: str) -> str:
    return _default.lookup(key)
