"""Client for sending playbook runs to the playbook dispatcher."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus

import requests

log = logging.getLogger(__name__)


@dataclass
class DispatcherPayload:
    """A playbook run for one recipient."""

    recipient: str
    playbook_url: str
    account: str

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {"recipient": self.recipient, "url": self.playbook_url, "account": self.account}


@dataclass
class Response:
    """The dispatcher's answer for one run."""

    status_code: int = 0
    playbook_dispatcher_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping) -> Response:
        """Build a response from its JSON mapping."""
        return cls(
            status_code=int(data.get("code", 0)),
            playbook_dispatcher_id=str(data.get("id", "")),
        )


class Client:
    """Sends dispatch requests authenticated by a pre-shared key."""

    def __init__(self, url: str, psk: str, headers: Mapping[str, str] | None = None) -> None:
        self.url = url
        self.psk = psk
        self.headers = dict(headers or {})
        self._session = requests.Session()

    def execute_dispatcher(self, payload: DispatcherPayload) -> list[Response]:
        """Send the payload to the dispatcher and return its responses.

        Raises requests.HTTPError unless the dispatcher answers 207.
        """
        body = json.dumps([payload.to_dict()]) + "\n"
        url = self.url + "/internal/dispatch"
        log.info("PlaybookDispatcher ExecuteDispatcher Request Started url=%s", url)
        headers = {
            "Content-Type": "application/json",
            **self.headers,
            "Authorization": f"PSK {self.psk}",
        }
        try:
            res = self._session.post(url, data=body, headers=headers)
        except requests.RequestException as exc:
            log.error("PlaybookDispatcher ExecuteDispatcher Request Error: %s", exc)
            raise
        with res:
            text = res.text
        log.info(
            "PlaybookDispatcher ExecuteDispatcher Response status=%d body=%s",
            res.status_code,
            text,
        )
        if res.status_code != HTTPStatus.MULTI_STATUS:
            raise requests.HTTPError(
                "error calling playbook dispatcher, got status code "
                f"{res.status_code} and body {text}",
                response=res,
            )
        try:
            items = json.loads(text)
        except ValueError:
            log.error("Error while trying to unmarshal %s", text)
            raise
        return [Response.from_dict(item) for item in items]