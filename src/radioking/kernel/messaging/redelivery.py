"""Kernel messaging – redelivery policy for failed handler invocations.

The consumer asks the policy whether a delivery whose handler raised should
be requeued. The default :class:`AlwaysRequeue` requeues forever, so a
permanently failing handler causes endless redelivery. A dead-letter
threshold belongs in a custom policy.
"""
from __future__ import annotations

import abc
import dataclasses


@dataclasses.dataclass(frozen=True)
class FailedDelivery:
    """A delivery whose handler raised."""

    message_id: str | None
    redelivered: bool
    error: BaseException


class RedeliveryPolicy(abc.ABC):
    """Port: decide between requeue and drop after a handler failure."""

    @abc.abstractmethod
    def should_requeue(self, delivery: FailedDelivery) -> bool: ...


class AlwaysRequeue(RedeliveryPolicy):
    """Requeue every failed delivery, without a retry cap."""

    def should_requeue(self, delivery: FailedDelivery) -> bool:  # noqa: ARG002
        return True


__all__ = ["AlwaysRequeue", "FailedDelivery", "RedeliveryPolicy"]
