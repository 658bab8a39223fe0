"""Service module exports."""

from . import habits

__all__ = ["habits"]
