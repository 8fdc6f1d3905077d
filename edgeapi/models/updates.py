"""Update transactions and the playbook dispatches they make."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from edgeapi.models.base import Model, _json_field
from edgeapi.models.commits import Commit, Repo
from edgeapi.models.devices import Device

DEVICES_CANT_BE_EMPTY_MESSAGE = "devices can not be empty"


class UpdateStatus(str, Enum):
    """States of an update transaction."""

    CREATED = "CREATED"
    BUILDING = "BUILDING"
    ERROR = "ERROR"
    SUCCESS = "SUCCESS"


class DispatchRecordStatus(str, Enum):
    """States of a playbook dispatch."""

    CREATED = "CREATED"
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    ERROR = "ERROR"
    COMPLETE = "COMPLETE"


@dataclass
class DispatchRecord(Model):
    """A playbook dispatched to one device, with its status."""

    playbook_url: str = _json_field("PlaybookURL", "")
    device_id: int = _json_field("DeviceID", 0)
    device: Device | None = _json_field("Device", None, model=Device)
    status: str = _json_field("Status", "")
    playbook_dispatcher_id: str = _json_field("PlaybookDispatcherID", "")


@dataclass
class UpdateTransaction(Model):
    """A commit together with the devices it is to be deployed to."""

    commit: Commit | None = _json_field("Commit", None, model=Commit)
    commit_id: int = _json_field("CommitID", 0)
    account: str = _json_field("Account", "")
    old_commits: list[Commit] = _json_field("OldCommits", factory=list, model=Commit)
    devices: list[Device] = _json_field("Devices", factory=list, model=Device)
    tag: str = _json_field("Tag", "")
    status: str = _json_field("Status", "")
    repo_id: int = _json_field("RepoID", 0)
    repo: Repo | None = _json_field("Repo", None, model=Repo)
    dispatch_records: list[DispatchRecord] = _json_field(
        "DispatchRecords", factory=list, model=DispatchRecord
    )

    def validate_request(self) -> None:
        """Raise ValueError if the update names no devices."""
        if not self.devices:
            raise ValueError(DEVICES_CANT_BE_EMPTY_MESSAGE)