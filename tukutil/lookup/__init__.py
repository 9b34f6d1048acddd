"""Code system lookups."""

from tukutil.lookup.code_system import (
    CodeSystem,
    CodeSystemDecodeError,
    CodeSystemError,
    CodeSystemFileError,
    default_code_system,
    get_code_system_val,
    init_code_system,
    set_code_system,
)

__all__ = [
    "CodeSystem",
    "CodeSystemDecodeError",
    "CodeSystemError",
    "CodeSystemFileError",
    "default_code_system",
    "get_code_system_val",
    "init_code_system",
    "set_code_system",
]
