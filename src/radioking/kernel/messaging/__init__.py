"""Kernel messaging – publisher/consumer ports, redelivery policy, errors."""
from radioking.kernel.messaging.errors import (
    ConsumerAlreadyRunningError,
    ConsumerError,
    ConsumerStartError,
    MessagingError,
    PublishError,
)
from radioking.kernel.messaging.message import (
    EventConsumer,
    EventPublisher,
    MessageSerializer,
)
from radioking.kernel.messaging.redelivery import (
    AlwaysRequeue,
    FailedDelivery,
    RedeliveryPolicy,
)

__all__ = [
    "AlwaysRequeue",
    "ConsumerAlreadyRunningError",
    "ConsumerError",
    "ConsumerStartError",
    "EventConsumer",
    "EventPublisher",
    "FailedDelivery",
    "MessageSerializer",
    "MessagingError",
    "PublishError",
    "RedeliveryPolicy",
]
