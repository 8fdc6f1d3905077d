"""Working out the account number for a request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

DEFAULT_ACCOUNT = "0000000"

IDENTITY_KEY = "identity"


def get_account_from_context(ctx: Mapping[str, Any], auth: bool) -> str:
    """Return the account number for the request context.

    Without authentication the default account is returned. Otherwise the
    decoded identity stored under IDENTITY_KEY must carry an account number,
    as in ``{"identity": {"account_number": "..."}}``; LookupError is raised
    when it does not.
    """
    if not auth:
        return DEFAULT_ACCOUNT
    xrhid = ctx.get(IDENTITY_KEY)
    if isinstance(xrhid, Mapping):
        identity = xrhid.get("identity")
        if isinstance(identity, Mapping):
            account = identity.get("account_number")
            if account:
                return account
    raise LookupError("cannot find account number")