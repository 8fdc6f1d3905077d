"""Custom package repositories that customers provide per account."""

from __future__ import annotations

import re
from dataclasses import dataclass

from edgeapi.models.base import Model, _json_field

REPO_NAME_CANT_BE_INVALID_MESSAGE = (
    "name must start with alphanumeric characters and can contain "
    "underscore and hyphen characters"
)
REPO_URL_CANT_BE_NIL_MESSAGE = "repository URL can't be empty"
REPO_NAME_CANT_BE_NIL_MESSAGE = "repository name can't be empty"

_VALID_REPO_NAME = re.compile(r"[A-Za-z0-9]+[A-Za-z0-9\t\n\f\r _-]*")


@dataclass
class ThirdPartyRepo(Model):
    """A third party repository attached to an account."""

    name: str = _json_field("Name", "")
    url: str = _json_field("URL", "")
    description: str = _json_field("Description", "", omitempty=True)
    account: str = _json_field("Account", "")

    def validate_request(self) -> None:
        """Raise ValueError if the repository request is not acceptable."""
        if not self.name:
            raise ValueError(REPO_NAME_CANT_BE_NIL_MESSAGE)
        if not self.url:
            raise ValueError(REPO_URL_CANT_BE_NIL_MESSAGE)
        if _VALID_REPO_NAME.fullmatch(self.name) is None:
            raise ValueError(REPO_NAME_CANT_BE_INVALID_MESSAGE)