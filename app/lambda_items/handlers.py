"""CRUD operations for the items table.

Each operation takes an ``ApiRequest`` and returns an ``Outcome``; none of
them build HTTP responses directly.
"""
import logging
from typing import Dict, Optional

from .codec import JsonCodec
from .events import ApiRequest
from .models import Item
from .outcomes import NotFound, Outcome, StorageFailure, Success, ValidationFailure
from .storage import ItemStore, exists

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input parameters"
MISSING_PARAMS = "Missing required parameters"


class ItemHandlers:
    def __init__(self, store: ItemStore, codec: Optional[JsonCodec] = None, strict_params: bool = True):
        self.store = store
        self.codec = codec or JsonCodec()
        self.strict_params = strict_params

    def create(self, request: ApiRequest) -> Outcome:
        params = request.query_parameters
        if not params or params.get("id") is None:
            logger.error("create: %s", INVALID_INPUT)
            return ValidationFailure(INVALID_INPUT)

        item_id = params.get("id")
        name = params.get("name")
        description = params.get("description")
        if item_id is None or name is None or description is None:
            logger.error("create: %s", MISSING_PARAMS)
            return ValidationFailure(MISSING_PARAMS)

        # No existence check: creating an existing id overwrites it.
        item = Item(id=item_id, name=name, description=description)
        try:
            self.store.put(item)
        except Exception as e:
            logger.error("create: error creating item %s: %s", item_id, e)
            return StorageFailure("creating", str(e))
        logger.info("create: item created: %s", item)
        return Success("Item created successfully")

    def read(self, request: ApiRequest) -> Outcome:
        params = request.query_parameters
        try:
            if params is not None and "id" in params:
                return self._read_one(params["id"])
            return self._read_all()
        except Exception as e:
            logger.error("read: error reading item: %s", e)
            return StorageFailure("reading", str(e))

    def _read_one(self, item_id: str) -> Outcome:
        item = self.store.get(item_id)
        if item is None:
            logger.warning("read: item %s not found", item_id)
            return NotFound()
        logger.info("read: item %s found", item_id)
        return Success(self.codec.encode_item(item), self.codec.content_type)

    def _read_all(self) -> Outcome:
        items = self.store.scan_all()
        body = self.codec.encode_items(items)
        logger.info("read: scanned %d items", len(items))
        return Success(body, self.codec.content_type)

    def update(self, request: ApiRequest) -> Outcome:
        params = request.query_parameters
        invalid = self._check_key(params, "update")
        if invalid:
            return invalid
        item_id = params.get("id")

        try:
            if not exists(self.store, item_id):
                logger.warning("update: item %s not found", item_id)
                return NotFound()
            # Full replace; absent fields are stored as null.
            self.store.put(Item(id=item_id, name=params.get("name"), description=params.get("description")))
        except Exception as e:
            logger.error("update: error updating item %s: %s", item_id, e)
            return StorageFailure("updating", str(e))
        logger.info("update: item %s updated", item_id)
        return Success("Item updated successfully")

    def delete(self, request: ApiRequest) -> Outcome:
        params = request.query_parameters
        invalid = self._check_key(params, "delete")
        if invalid:
            return invalid
        item_id = params.get("id")

        try:
            if not exists(self.store, item_id):
                logger.warning("delete: item %s not found", item_id)
                return NotFound()
            self.store.delete(item_id)
        except Exception as e:
            logger.error("delete: error deleting item %s: %s", item_id, e)
            return StorageFailure("deleting", str(e))
        logger.info("delete: item %s deleted", item_id)
        return Success("Item deleted successfully")

    def _check_key(self, params: Optional[Dict[str, str]], op: str) -> Optional[Outcome]:
        # In compat mode nothing is checked here; a missing query string then
        # fails on params.get() and is left to the dispatcher.
        if self.strict_params and (not params or params.get("id") is None):
            logger.error("%s: %s", op, INVALID_INPUT)
            return ValidationFailure(INVALID_INPUT)
        return None
