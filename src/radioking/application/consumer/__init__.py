"""Consumer supervisor – lifecycle of the track-played consumption loop."""
from radioking.application.consumer.service import ConsumerState, TrackPlayConsumerService

__all__ = ["ConsumerState", "TrackPlayConsumerService"]
