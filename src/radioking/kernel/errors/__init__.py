"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError     → HTTP 400
    │   └── NotFoundError       → HTTP 404
    ├── ApplicationError     (application.py)
    │   ├── InternalError       → HTTP 500 (generic message)
    │   └── UnauthorizedError   → HTTP 401
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError

Broker transport errors live in :mod:`radioking.kernel.messaging.errors`
and are deliberately outside this hierarchy.
"""

from radioking.kernel.errors.application import (
    ApplicationError,
    InternalError,
    UnauthorizedError,
)
from radioking.kernel.errors.base import BaseError
from radioking.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from radioking.kernel.errors.infrastructure import (
    InfrastructureError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InternalError",
    "NotFoundError",
    "SerializationError",
    "UnauthorizedError",
    "ValidationError",
]
