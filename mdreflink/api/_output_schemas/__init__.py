"""Output schemas for API commands."""

from .reflink import ReflinkOutput

__all__ = ["ReflinkOutput"]
