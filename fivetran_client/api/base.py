"""Shared plumbing for resource endpoints."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from ..core import UnknownApiError
from ..models import ApiModel
from ..runtime import Page, Paginator, RetryPolicy, paginate, retrying
from ..runtime.rest import RESTTransport

M = TypeVar("M", bound=ApiModel)


def pagination_params(cursor: str | None, limit: int | None) -> dict[str, Any]:
    """Query parameters for a list call, omitting unset values."""
    params: dict[str, Any] = {}
    if cursor is not None:
        params["cursor"] = cursor
    if limit is not None:
        params["limit"] = limit
    return params


def unwrap_data(body: Any) -> Any:
    """Return the ``data`` member of a response envelope."""
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    raise UnknownApiError("Response is missing the 'data' envelope")


def parse_resource(model: type[M], data: Any) -> M:
    """Build ``model`` from a decoded object.

    Raises:
        UnknownApiError: When ``data`` is not an object or does not fit the model
    """
    if not isinstance(data, dict):
        raise UnknownApiError(
            f"Invalid {model.__name__} payload: expected an object, got {type(data).__name__}"
        )
    try:
        return model.from_api(data)
    except ValidationError as e:
        raise UnknownApiError(
            f"Invalid {model.__name__} payload: {e.error_count()} validation error(s)"
        ) from e


def parse_page(body: Any, model: type[M]) -> Page[M]:
    """Build a Page from a ``{"data": {"items": [...], "next_cursor": ...}}`` envelope.

    A missing, null or empty-string ``next_cursor`` marks the last page. An
    empty cursor is never sent back, since requesting it would restart the
    listing from the first page.
    """
    data = unwrap_data(body)
    if not isinstance(data, dict) or not isinstance(data.get("items"), list):
        raise UnknownApiError("List response is missing 'items'")
    return Page(
        items=[parse_resource(model, item) for item in data["items"]],
        next_cursor=data.get("next_cursor") or None,
    )


class Resource:
    """Base class for an API resource bound to a transport."""

    def __init__(self, transport: RESTTransport, retry_policy: RetryPolicy | None = None) -> None:
        self._transport = transport
        self._retry_policy = retry_policy

    def _stream(self, fetch_page: Callable[[str | None], Any]) -> Paginator[Any]:
        # Each page fetch retries on its own; already yielded items are never refetched.
        if self._retry_policy is not None:
            fetch_page = retrying(fetch_page, self._retry_policy)
        return paginate(fetch_page)
