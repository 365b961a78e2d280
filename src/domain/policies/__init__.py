"""Domain policies package."""

from .carry_forward import resolve_carry_forward

__all__ = ["resolve_carry_forward"]
