from dataclasses import dataclass
from typing import Union

from .codec import TEXT_CONTENT_TYPE
from .events import Response

NOT_FOUND_MESSAGE = "Item Not Found"


@dataclass(frozen=True)
class Success:
    body: str
    content_type: str = TEXT_CONTENT_TYPE


@dataclass(frozen=True)
class ValidationFailure:
    message: str


@dataclass(frozen=True)
class NotFound:
    message: str = NOT_FOUND_MESSAGE


@dataclass(frozen=True)
class StorageFailure:
    action: str  # "creating", "reading", ...
    error: str

    @property
    def message(self) -> str:
        return f"Error {self.action} item: {self.error}"


Outcome = Union[Success, ValidationFailure, NotFound, StorageFailure]


def to_response(outcome: Outcome) -> Response:
    if isinstance(outcome, Success):
        return Response(200, outcome.body, {"Content-Type": outcome.content_type})
    if isinstance(outcome, (ValidationFailure, NotFound)):
        return Response(400, outcome.message)
    if isinstance(outcome, StorageFailure):
        return Response(500, outcome.message)
    raise TypeError(f"unexpected outcome: {outcome!r}")
