"""Kernel messaging – transport errors.

These are plain exceptions, not part of the :mod:`radioking.kernel.errors`
taxonomy: the immediate caller decides what a transport failure means
(the orchestrator propagates it, the consumer requeues).
"""
from __future__ import annotations


class MessagingError(Exception):
    """Base class for broker transport failures."""


class PublishError(MessagingError):
    """The event could not be handed to the broker."""


class ConsumerError(MessagingError):
    """The consumer could not subscribe or lost its subscription."""


class ConsumerAlreadyRunningError(ConsumerError):
    """``start`` was called on a consumer service that is not idle."""

    def __init__(self) -> None:
        super().__init__("consumer service is already running")


class ConsumerStartError(ConsumerError):
    """Registering the handler with the underlying consumer failed."""


__all__ = [
    "ConsumerAlreadyRunningError",
    "ConsumerError",
    "ConsumerStartError",
    "MessagingError",
    "PublishError",
]
