"""Query filters built from request parameters."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any

LAYOUT_ISO = "%Y-%m-%d"
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")

QueryParams = Mapping[str, Sequence[str]]


@dataclass(frozen=True)
class Filter:
    """An API filter: the query parameter it reads and the column it targets."""

    query_param: str
    db_field: str


def _render(clause: str, args: Sequence[Any]) -> tuple[str, list[Any]]:
    pieces = clause.split("?")
    if len(pieces) - 1 != len(args):
        raise ValueError(
            f"clause {clause!r} has {len(pieces) - 1} placeholders "
            f"but {len(args)} arguments were given"
        )
    text = pieces[0]
    params: list[Any] = []
    for arg, piece in zip(args, pieces[1:]):
        if isinstance(arg, (list, tuple)):
            text += "(" + ", ".join("?" for _ in arg) + ")" if arg else "(NULL)"
            params.extend(arg)
        else:
            text += "?"
            params.append(arg)
        text += piece
    return text, params


@dataclass(frozen=True)
class Query:
    """An immutable SELECT query built up from conditions and orderings."""

    conditions: tuple[tuple[str, str, tuple[Any, ...]], ...] = ()
    orders: tuple[str, ...] = ()

    def where(self, clause: str, *args: Any) -> Query:
        """Return a query with the clause added by AND."""
        return replace(self, conditions=(*self.conditions, ("AND", clause, args)))

    def or_(self, clause: str, *args: Any) -> Query:
        """Return a query with the clause added by OR."""
        return replace(self, conditions=(*self.conditions, ("OR", clause, args)))

    def order(self, expression: str) -> Query:
        """Return a query that also sorts by the expression."""
        return replace(self, orders=(*self.orders, expression))

    def to_sql(self, table: str) -> tuple[str, list[Any]]:
        """Return the SQL text with ? placeholders and its parameters."""
        sql = f"SELECT * FROM {table}"
        params: list[Any] = []
        parts: list[str] = []
        for connector, clause, args in self.conditions:
            text, values = _render(clause, args)
            if parts:
                parts.append(connector)
            parts.append(f"({text})")
            params.extend(values)
        if parts:
            sql += " WHERE " + " ".join(parts)
        if self.orders:
            sql += " ORDER BY " + ", ".join(self.orders)
        return sql, params


FilterFunc = Callable[[QueryParams, Query], Query]


def _first(query: QueryParams, key: str) -> str:
    values = query.get(key)
    return values[0] if values else ""


def contain_filter_handler(filter: Filter) -> FilterFunc:
    """Match rows whose column contains any of the given values."""

    def apply(query: QueryParams, tx: Query) -> Query:
        values = list(query.get(filter.query_param) or [])
        clause = f"{filter.db_field} LIKE ?"
        if len(values) > 1:
            tx = tx.where(clause, f"%{values[0]}%")
            for value in values[1:]:
                tx = tx.or_(clause, f"%{value}%")
        elif (value := _first(query, filter.query_param)) != "":
            tx = tx.where(clause, f"%{value}%")
        return tx

    return apply


def one_of_filter_handler(filter: Filter) -> FilterFunc:
    """Match rows whose column equals one of the given values."""
    clause = f"{filter.db_field} IN ?"

    def apply(query: QueryParams, tx: Query) -> Query:
        if filter.query_param in query:
            tx = tx.where(clause, list(query[filter.query_param]))
        return tx

    return apply


def created_at_filter_handler(filter: Filter) -> FilterFunc:
    """Match rows created on the given YYYY-MM-DD day; bad dates are ignored."""

    def apply(query: QueryParams, tx: Query) -> Query:
        value = _first(query, filter.query_param)
        if value == "":
            return tx
        if _ISO_DATE.fullmatch(value) is None:
            return tx
        try:
            current_day = datetime.strptime(value, LAYOUT_ISO)
        except ValueError:
            return tx
        next_day = current_day + timedelta(days=1)
        return tx.where(
            f"{filter.db_field} BETWEEN ? AND ?",
            current_day.strftime(LAYOUT_ISO),
            next_day.strftime(LAYOUT_ISO),
        )

    return apply


def sort_filter_handler(
    sort_table: str, default_sort_key: str, default_order: str
) -> FilterFunc:
    """Sort by the sort_by parameter; a leading '-' means descending."""

    def apply(query: QueryParams, tx: Query) -> Query:
        sort_by = default_sort_key
        sort_order = default_order
        value = _first(query, "sort_by")
        if value:
            if value.startswith("-"):
                sort_order, sort_by = "DESC", value[1:]
            else:
                sort_order, sort_by = "ASC", value
        return tx.order(f"{sort_table}.{sort_by} {sort_order}")

    return apply


def compose_filters(*args: FilterFunc) -> FilterFunc:
    """Combine filters into one that applies them in order."""

    def apply(query: QueryParams, tx: Query) -> Query:
        for f in args:
            tx = f(query, tx)
        return tx

    return apply