"""RabbitMQ adapter – track-played event publisher, consumer and codec."""
from radioking.adapters.rabbitmq.consumer import RabbitMQEventConsumer
from radioking.adapters.rabbitmq.publisher import RabbitMQEventPublisher
from radioking.adapters.rabbitmq.serializer import TrackPlayedEventSerializer

__all__ = ["RabbitMQEventConsumer", "RabbitMQEventPublisher", "TrackPlayedEventSerializer"]
