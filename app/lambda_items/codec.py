import json
from decimal import Decimal
from typing import Any, Iterable

from .models import Item

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"


def _json_default(value: Any) -> Any:
    # boto3 hands back DynamoDB numbers as Decimal
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return str(value)


class JsonCodec:
    """Serializes items for response bodies."""

    content_type = JSON_CONTENT_TYPE

    def encode_item(self, item: Item) -> str:
        return json.dumps(item.to_dict(), default=_json_default)

    def encode_items(self, items: Iterable[Item]) -> str:
        return json.dumps([it.to_dict() for it in items], default=_json_default)
