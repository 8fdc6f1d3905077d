"""Headers passed on when calling other platform services."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from edgeapi.common.identity import get_original_identity

log = logging.getLogger(__name__)

REQUEST_ID_KEY = "request_id"
REQUEST_ID_HEADER = "x-rh-insights-request-id"
IDENTITY_HEADER = "x-rh-identity"


def get_outgoing_headers(ctx: Mapping[str, Any], auth: bool) -> dict[str, str]:
    """Return the platform headers of the incoming request for outgoing calls.

    The request id is always passed on; with authentication enabled the
    original identity is passed on too when the context holds one.
    """
    request_id = ctx.get(REQUEST_ID_KEY)
    headers = {REQUEST_ID_HEADER: request_id if isinstance(request_id, str) else ""}
    if auth:
        try:
            headers[IDENTITY_HEADER] = get_original_identity(ctx)
        except LookupError:
            log.error("Error getting x-rh-identity")
    return headers