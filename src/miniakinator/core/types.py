"""Shared type aliases for the core and domain layers."""
from typing import Literal

HintRejection = Literal["invalid", "no_match"]

__all__ = ["HintRejection"]
