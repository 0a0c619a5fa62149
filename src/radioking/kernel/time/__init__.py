"""Kernel time – Clock port + implementations."""
from radioking.kernel.time.clock import Clock, FrozenClock, SystemClock, ensure_utc

__all__ = ["Clock", "FrozenClock", "SystemClock", "ensure_utc"]
