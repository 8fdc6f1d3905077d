"""Pagination parameters read from a request and kept in its context."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from edgeapi.apierrors import BadRequest

PAGINATION_KEY = "pagination"
DEFAULT_LIMIT = 100
DEFAULT_OFFSET = 0

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Pagination:
    """How many items to return and from which item to start."""

    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET


@dataclass
class EdgeAPIPaginatedResponse:
    """A page of data with the total count."""

    count: int
    data: Any


@dataclass
class ValidationError:
    """A key that failed validation and why."""

    key: str
    reason: str


def _to_int(text: str) -> int:
    if _INTEGER.fullmatch(text) is None:
        raise BadRequest(f'strconv.Atoi: parsing "{text}": invalid syntax')
    return int(text)


def paginate(
    query: Mapping[str, Sequence[str]], ctx: Mapping[str, Any]
) -> dict[str, Any]:
    """Return a new context holding the pagination read from the query.

    ``query`` maps parameter names to their values, as parse_qs gives them.
    Missing parameters take the defaults; a non-integer raises BadRequest.
    """
    limit = DEFAULT_LIMIT
    offset = DEFAULT_OFFSET
    if "limit" in query:
        limit = _to_int(query["limit"][0])
    if "offset" in query:
        offset = _to_int(query["offset"][0])
    return {**ctx, PAGINATION_KEY: Pagination(limit=limit, offset=offset)}


def get_pagination(ctx: Mapping[str, Any]) -> Pagination:
    """Return the pagination stored in the context, or the defaults."""
    pagination = ctx.get(PAGINATION_KEY)
    if isinstance(pagination, Pagination):
        return pagination
    return Pagination()