"""Kernel time – Clock port and implementations."""
from flag_tags.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
