"""Recording timeline."""

from .clock import SessionClock

__all__ = ["SessionClock"]
