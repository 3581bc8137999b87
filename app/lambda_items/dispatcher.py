import logging
from typing import Any, Callable, Dict, Optional

from .codec import JsonCodec
from .events import ApiRequest, Response
from .handlers import ItemHandlers
from .outcomes import Outcome, ValidationFailure, to_response
from .storage import ItemStore

logger = logging.getLogger(__name__)


class ItemDispatcher:
    """Routes a request to the CRUD handler for its HTTP method.

    Every path out of ``handle`` is a ``Response``; exceptions that escape a
    handler become a 500.
    """

    def __init__(self, store: ItemStore, codec: Optional[JsonCodec] = None, strict_params: bool = True):
        self.handlers = ItemHandlers(store, codec=codec, strict_params=strict_params)
        self.routes: Dict[str, Callable[[ApiRequest], Outcome]] = {
            "POST": self.handlers.create,
            "GET": self.handlers.read,
            "PUT": self.handlers.update,
            "DELETE": self.handlers.delete,
        }

    def handle(self, request: Optional[ApiRequest]) -> Response:
        return self._guarded(lambda: self._dispatch(request))

    def handle_event(self, event: Any) -> Response:
        """Like ``handle``, but also converts the raw Lambda event."""
        return self._guarded(lambda: self._dispatch(ApiRequest.from_event(event)))

    def _guarded(self, dispatch: Callable[[], Outcome]) -> Response:
        try:
            return to_response(dispatch())
        except Exception as e:
            logger.exception("unhandled error")
            return Response(500, f"errorMessage: {e}")

    def _dispatch(self, request: Optional[ApiRequest]) -> Outcome:
        if request is None:
            return ValidationFailure("Request is null")
        if request.method is None:
            return ValidationFailure("HTTP method is null")
        route = self.routes.get(request.method)
        if route is None:
            logger.warning("unsupported method %s", request.method)
            return ValidationFailure("Unsupported HTTP method")
        return route(request)
