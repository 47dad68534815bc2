"""
Coaster resource logic.

Contains the domain model, the store interface, id generation, random
selection and the service that maps all of it onto HTTP semantics.
"""

from .errors import (
    CoasterError,
    CoasterNotFoundError,
    CoasterRequestError,
    InvalidCoasterError,
    StorageError,
    UnsupportedMediaTypeError,
)
from .ids import (
    IdGenerator,
    SequentialIdGenerator,
    TimeOrderedIdGenerator,
    UuidIdGenerator,
    create_id_generator,
)
from .models import Coaster, CoasterPayload, parse_coaster_payload
from .selector import RandomSelector
from .service import CoasterService, ServiceResult
from .store import CoasterStore

__all__ = [
    "Coaster",
    "CoasterError",
    "CoasterNotFoundError",
    "CoasterPayload",
    "CoasterRequestError",
    "CoasterService",
    "CoasterStore",
    "IdGenerator",
    "InvalidCoasterError",
    "RandomSelector",
    "SequentialIdGenerator",
    "ServiceResult",
    "StorageError",
    "TimeOrderedIdGenerator",
    "UnsupportedMediaTypeError",
    "UuidIdGenerator",
    "create_id_generator",
    "parse_coaster_payload",
]
