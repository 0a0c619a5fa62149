"""Testing fakes – in-memory doubles for kernel and domain ports."""
from radioking.kernel.time import FrozenClock
from radioking.testing.fakes.messaging import (
    InMemoryBroker,
    InMemoryDelivery,
    InMemoryEventConsumer,
    InMemoryEventPublisher,
)
from radioking.testing.fakes.repositories import (
    InMemoryPlaylistRepository,
    InMemoryTrackPlayRepository,
)

__all__ = [
    "FrozenClock",
    "InMemoryBroker",
    "InMemoryDelivery",
    "InMemoryEventConsumer",
    "InMemoryEventPublisher",
    "InMemoryPlaylistRepository",
    "InMemoryTrackPlayRepository",
]
