"""Carrying the caller's original identity header through a request context."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_RH_IDENTITY_KEY = "xRhIdentity"


def get_original_identity(ctx: Mapping[str, Any]) -> str:
    """Return the original identity stored in the context.

    Raises LookupError when there is none.
    """
    ident = ctx.get(_RH_IDENTITY_KEY)
    if not isinstance(ident, str):
        raise LookupError("no identity found")
    return ident


def set_original_identity(ctx: Mapping[str, Any], value: str) -> dict[str, Any]:
    """Return a new context holding the original identity."""
    return {**ctx, _RH_IDENTITY_KEY: value}