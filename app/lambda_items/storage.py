import logging
from typing import Any, Dict, List, Optional, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from .models import Item

logger = logging.getLogger(__name__)

KEY_ATTR = "id"


class StorageError(Exception):
    """Raised when the backing table rejects or fails a call."""


class ItemStore(Protocol):
    def get(self, item_id: str) -> Optional[Item]:
        ...

    def put(self, item: Item) -> None:
        ...

    def delete(self, item_id: str) -> None:
        ...

    def scan_all(self) -> List[Item]:
        ...


class DynamoItemStore:
    """ItemStore backed by a boto3 DynamoDB ``Table`` resource.

    The table is expected to use ``id`` (string) as its only key.
    """

    def __init__(self, table):
        self.table = table

    def get(self, item_id: str) -> Optional[Item]:
        res = self._call("get_item", Key={KEY_ATTR: item_id})
        data = res.get("Item")
        return Item.from_dict(data) if data else None

    def put(self, item: Item) -> None:
        self._call("put_item", Item=item.to_dict())

    def delete(self, item_id: str) -> None:
        self._call("delete_item", Key={KEY_ATTR: item_id})

    def scan_all(self) -> List[Item]:
        items: List[Item] = []
        scan_args: Dict[str, Any] = {}
        while True:
            res = self._call("scan", **scan_args)
            items.extend(Item.from_dict(it) for it in res.get("Items", []))
            lek = res.get("LastEvaluatedKey")
            if not lek:
                return items
            scan_args["ExclusiveStartKey"] = lek

    def _call(self, op: str, **kwargs) -> Dict[str, Any]:
        try:
            return getattr(self.table, op)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            logger.error("%s on %s failed: %s", op, getattr(self.table, "name", "?"), e)
            raise StorageError(str(e)) from e


def exists(store: ItemStore, item_id: str) -> bool:
    return store.get(item_id) is not None
