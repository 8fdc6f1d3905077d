"""Errors returned by the API, carrying a code, an HTTP status and a title."""

from __future__ import annotations

from http import HTTPStatus


class APIError(Exception):
    """Base class for every error the API reports to clients."""

    code = "ERROR"
    status = int(HTTPStatus.INTERNAL_SERVER_ERROR)

    def __init__(self, title: str) -> None:
        super().__init__(title)
        self.title = title

    def __str__(self) -> str:
        return self.title

    def to_dict(self) -> dict:
        """Return the JSON body for this error."""
        return {"Code": self.code, "Status": self.status, "Title": self.title}


class InternalServerError(APIError):
    """A generic failure inside the service."""

    code = "ERROR"
    status = int(HTTPStatus.INTERNAL_SERVER_ERROR)

    def __init__(self) -> None:
        super().__init__("Something went wrong.")


class BadRequest(APIError):
    """The client's input caused an error."""

    code = "BAD_REQUEST"
    status = int(HTTPStatus.BAD_REQUEST)


class NotFound(APIError):
    """An entity was not found in the database."""

    code = "NOT_FOUND"
    status = int(HTTPStatus.NOT_FOUND)