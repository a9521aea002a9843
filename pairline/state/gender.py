from __future__ import annotations

from enum import Enum


class GenderTag(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> GenderTag:
        """Map a client-supplied tag to a bucket; anything unrecognised is ``other``."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.OTHER


__all__ = ["GenderTag"]
