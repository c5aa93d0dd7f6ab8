"""Domain enums."""

from fiscalcode.models.enums import ErrorKind, Gender

__all__ = ["ErrorKind", "Gender"]
