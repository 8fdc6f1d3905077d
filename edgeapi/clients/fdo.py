"""Client for the FIDO device onboarding management server."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from http import HTTPStatus
from typing import Any

import requests

log = logging.getLogger(__name__)


class FDOClientError(Exception):
    """The onboarding server refused a request; ``body`` holds its reply."""

    def __init__(self, message: str, body: Any = None) -> None:
        super().__init__(message)
        self.body = body


def _decode_body(res: requests.Response) -> Any:
    try:
        return res.json()
    except ValueError:
        return None


class Client:
    """Uploads and deletes ownership vouchers on the onboarding server."""

    def __init__(
        self,
        url: str,
        api_version: str,
        authorization_bearer: str,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self.url = url
        self.api_version = api_version
        self.authorization_bearer = authorization_bearer
        self.headers = dict(headers or {})
        self._session = requests.Session()

    def _endpoint(self, suffix: str) -> str:
        return f"{self.url}/management/{self.api_version}/ownership_voucher{suffix}"

    def _request_headers(self, content_type: str) -> dict[str, str]:
        return {
            "Content-Type": content_type,
            "Authorization": f"Bearer {self.authorization_bearer}",
            "Accept": "application/json",
            **self.headers,
        }

    def batch_upload(self, ovs: bytes, num_of_ovs: int) -> Any:
        """Upload concatenated CBOR ownership vouchers; return the server's reply."""
        if not ovs or num_of_ovs == 0:
            log.error("No ownership vouchers provided", extra={"method": "fdo.BatchUpload"})
            raise FDOClientError("no ownership vouchers provided")
        headers = self._request_headers("application/cbor")
        headers["X-Number-Of-Vouchers"] = str(num_of_ovs)
        try:
            res = self._session.post(self._endpoint(""), data=bytes(ovs), headers=headers)
        except requests.RequestException as exc:
            log.error("Failed to perform api call to upload vouchers %s", exc)
            raise
        return self._handle(res, HTTPStatus.CREATED, "created")

    def batch_delete(self, fdo_uuid_list: Sequence[str]) -> Any:
        """Delete ownership vouchers by their GUIDs; return the server's reply."""
        if not fdo_uuid_list:
            log.error("No FDO UUIDs provided", extra={"method": "fdo.BatchDelete"})
            raise FDOClientError("no FDO UUIDs provided")
        body = json.dumps(list(fdo_uuid_list))
        headers = self._request_headers("application/json")
        try:
            res = self._session.post(self._endpoint("/delete"), data=body, headers=headers)
        except requests.RequestException as exc:
            log.error("Failed to perform api call to remove vouchers %s", exc)
            raise
        return self._handle(res, HTTPStatus.OK, "removed")

    @staticmethod
    def _handle(res: requests.Response, expected: HTTPStatus, action: str) -> Any:
        with res:
            body = _decode_body(res)
        if res.status_code == expected:
            log.info("Ownershipvouchers got %s successfully", action)
            return body
        if res.status_code == HTTPStatus.BAD_REQUEST:
            log.error("Ownershipvouchers couldn't be %s, bad request", action)
            raise FDOClientError("bad request", body)
        log.error(
            "Ownershipvouchers couldn't be %s, unknown error with status code: %d",
            action,
            res.status_code,
        )
        raise FDOClientError(f"unknown error with status code: {res.status_code}", body)