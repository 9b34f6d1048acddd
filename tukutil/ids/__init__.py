"""Identifier generation."""

from tukutil.ids.identifier import IdGenerator, default_generator, initial_seed, new_id, new_uuid

__all__ = ["IdGenerator", "default_generator", "initial_seed", "new_id", "new_uuid"]
