"""
Coaster service: HTTP intents in, status codes out.

The service sits between the routes and the store. It:
1. Validates content type and body before any write reaches the store
2. Assigns ids (generator on create, request path on update)
3. Translates store outcomes into a ``ServiceResult`` the transport renders

It knows status codes but nothing about FastAPI, so the whole request
contract can be tested without an HTTP client.
"""

import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Optional

from .errors import (
    CoasterNotFoundError,
    CoasterRequestError,
    StorageError,
    UnsupportedMediaTypeError,
)
from .ids import IdGenerator
from .models import parse_coaster_payload
from .selector import RandomSelector
from .store import CoasterStore

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

NOT_FOUND_MESSAGE = "Coaster Not Found!"
EMPTY_MESSAGE = "No Coasters Found!"
DELETED_MESSAGE = "Coaster Deleted!"
STORAGE_FAILURE_MESSAGE = "Storage failure"


@dataclass
class ServiceResult:
    """
    Outcome of one service call.

    ``body`` is a dict or list for JSON responses, a string for plain text,
    or None for an empty body.
    """
    status_code: int
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_json(self) -> bool:
        return isinstance(self.body, (dict, list))


class CoasterService:
    """
    Application service for the coaster resource.

    Each public method corresponds to one route and never raises for
    expected failures; every outcome comes back as a ``ServiceResult``.
    """

    def __init__(
        self,
        store: CoasterStore,
        id_generator: IdGenerator,
        selector: Optional[RandomSelector] = None,
        location_prefix: str = "/coasters",
        expose_storage_errors: bool = True,
    ) -> None:
        self._store = store
        self._ids = id_generator
        self._selector = selector or RandomSelector()
        self._location_prefix = location_prefix.rstrip("/")
        self._expose_storage_errors = expose_storage_errors

    # -----------------------------------------------------------------------
    # Reads
    # -----------------------------------------------------------------------

    def list_coasters(self) -> ServiceResult:
        try:
            coasters = self._store.list()
        except StorageError as e:
            return self._storage_failure("list", e)

        return ServiceResult(HTTPStatus.OK, [c.to_dict() for c in coasters])

    def get_coaster(self, coaster_id: str) -> ServiceResult:
        try:
            coaster = self._store.get(coaster_id)
        except CoasterNotFoundError:
            logger.info("Coaster not found", extra={"coaster_id": coaster_id})
            return ServiceResult(HTTPStatus.NOT_FOUND, NOT_FOUND_MESSAGE)
        except StorageError as e:
            return self._storage_failure("get", e, coaster_id)

        return ServiceResult(HTTPStatus.OK, coaster.to_dict())

    def random_coaster(self) -> ServiceResult:
        """
        Redirect to a uniformly chosen coaster.

        Returns 302 with a ``Location`` header, or 404 when the store is empty.
        """
        try:
            ids = self._store.ids()
        except StorageError as e:
            return self._storage_failure("random", e)

        target = self._selector.choose(ids)
        if target is None:
            return ServiceResult(HTTPStatus.NOT_FOUND, EMPTY_MESSAGE)

        return ServiceResult(
            HTTPStatus.FOUND,
            headers={"Location": f"{self._location_prefix}/{target}"},
        )

    # -----------------------------------------------------------------------
    # Writes
    # -----------------------------------------------------------------------

    def create_coaster(self, content_type: Optional[str], body: bytes) -> ServiceResult:
        """
        Create a coaster from a JSON body.

        Any ``id`` in the body is ignored; the generator assigns one.
        """
        try:
            self._require_json(content_type)
            payload = parse_coaster_payload(body)
        except CoasterRequestError as e:
            return self._rejected("create", e)

        coaster = payload.to_coaster(self._ids.next_id())
        try:
            self._store.put(coaster.id, coaster)
        except StorageError as e:
            return self._storage_failure("create", e, coaster.id)

        logger.info("Coaster created", extra={"coaster_id": coaster.id})
        return ServiceResult(HTTPStatus.CREATED, coaster.to_dict())

    def update_coaster(
        self,
        coaster_id: str,
        content_type: Optional[str],
        body: bytes,
    ) -> ServiceResult:
        """
        Fully replace an existing coaster.

        The path id always wins over any ``id`` in the body. Updating a
        coaster that doesn't exist is a 404, same as get and delete.
        """
        try:
            self._require_json(content_type)
            payload = parse_coaster_payload(body)
        except CoasterRequestError as e:
            return self._rejected("update", e)

        coaster = payload.to_coaster(coaster_id)
        try:
            self._store.replace(coaster_id, coaster)
        except CoasterNotFoundError:
            logger.info("Update of missing coaster", extra={"coaster_id": coaster_id})
            return ServiceResult(HTTPStatus.NOT_FOUND, NOT_FOUND_MESSAGE)
        except StorageError as e:
            return self._storage_failure("update", e, coaster_id)

        logger.info("Coaster updated", extra={"coaster_id": coaster_id})
        return ServiceResult(HTTPStatus.OK, coaster.to_dict())

    def delete_coaster(self, coaster_id: str) -> ServiceResult:
        try:
            existed = self._store.delete(coaster_id)
        except StorageError as e:
            return self._storage_failure("delete", e, coaster_id)

        if not existed:
            logger.info("Delete of missing coaster", extra={"coaster_id": coaster_id})
            return ServiceResult(HTTPStatus.NOT_FOUND, NOT_FOUND_MESSAGE)

        logger.info("Coaster deleted", extra={"coaster_id": coaster_id})
        return ServiceResult(HTTPStatus.OK, DELETED_MESSAGE)

    def check_store(self) -> None:
        """Ask the store for its records; raises ``StorageError`` if it can't answer."""
        self._store.list()

    # -----------------------------------------------------------------------
    # Private Methods
    # -----------------------------------------------------------------------

    @staticmethod
    def _require_json(content_type: Optional[str]) -> None:
        if content_type != JSON_CONTENT_TYPE:
            raise UnsupportedMediaTypeError(content_type, JSON_CONTENT_TYPE)

    @staticmethod
    def _rejected(operation: str, error: CoasterRequestError) -> ServiceResult:
        status = (
            HTTPStatus.UNSUPPORTED_MEDIA_TYPE
            if isinstance(error, UnsupportedMediaTypeError)
            else HTTPStatus.BAD_REQUEST
        )
        logger.info(
            "Rejected coaster request",
            extra={"operation": operation, "status": int(status), "error": str(error)},
        )
        return ServiceResult(status, str(error))

    def _storage_failure(
        self,
        operation: str,
        error: StorageError,
        coaster_id: Optional[str] = None,
    ) -> ServiceResult:
        logger.error(
            "Coaster store failure",
            extra={"operation": operation, "coaster_id": coaster_id, "error": str(error)},
        )
        message = str(error) if self._expose_storage_errors else STORAGE_FAILURE_MESSAGE
        return ServiceResult(HTTPStatus.INTERNAL_SERVER_ERROR, message)
