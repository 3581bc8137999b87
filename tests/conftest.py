import os
from typing import Dict, List, Optional

import pytest

# boto3 needs a region to build the module-level resource in app.py.
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")

from app.lambda_items.dispatcher import ItemDispatcher  # noqa: E402
from app.lambda_items.events import ApiRequest  # noqa: E402
from app.lambda_items.models import Item  # noqa: E402
from app.lambda_items.storage import StorageError  # noqa: E402


class InMemoryItemStore:
    def __init__(self):
        self.items: Dict[str, Item] = {}
        self.calls: List[str] = []

    def get(self, item_id: str) -> Optional[Item]:
        self.calls.append("get")
        return self.items.get(item_id)

    def put(self, item: Item) -> None:
        self.calls.append("put")
        self.items[item.id] = item

    def delete(self, item_id: str) -> None:
        self.calls.append("delete")
        self.items.pop(item_id, None)

    def scan_all(self) -> List[Item]:
        self.calls.append("scan")
        return list(self.items.values())


class FailingItemStore(InMemoryItemStore):
    def __init__(self, fail_on=("get", "put", "delete", "scan")):
        super().__init__()
        self.fail_on = set(fail_on)

    def _maybe_fail(self, op):
        if op in self.fail_on:
            raise StorageError(f"{op} exploded")

    def get(self, item_id):
        self._maybe_fail("get")
        return super().get(item_id)

    def put(self, item):
        self._maybe_fail("put")
        super().put(item)

    def delete(self, item_id):
        self._maybe_fail("delete")
        super().delete(item_id)

    def scan_all(self):
        self._maybe_fail("scan")
        return super().scan_all()


def req(method, **params):
    return ApiRequest(method=method, query_parameters=params or None)


@pytest.fixture
def store():
    return InMemoryItemStore()


@pytest.fixture
def dispatcher(store):
    return ItemDispatcher(store)
