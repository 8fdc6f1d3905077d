"""Edge devices, device groups and the views built from them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from edgeapi.models.base import Model, _json_field, format_rfc3339nano
from edgeapi.models.images import ImageInfo, PackageDiff

if TYPE_CHECKING:
    from edgeapi.models.updates import UpdateTransaction

DEVICE_GROUP_NAME_INVALID_ERROR_MESSAGE = (
    "group name must start with alphanumeric characters and can contain "
    "underscore and hyphen characters"
)
DEVICE_GROUP_NAME_EMPTY_ERROR_MESSAGE = "group name cannot be empty"
DEVICE_GROUP_ACCOUNT_EMPTY_ERROR_MESSAGE = "group account can't be empty"
DEVICE_GROUP_TYPE_STATIC = "static"
DEVICE_GROUP_TYPE_DYNAMIC = "dynamic"
DEVICE_GROUP_TYPE_DEFAULT = DEVICE_GROUP_TYPE_STATIC
DEVICE_GROUP_TYPE_INVALID_ERROR_MESSAGE = 'group type must be "static" or "dynamic"'

_VALID_GROUP_NAME = re.compile(r"[A-Za-z0-9]+[A-Za-z0-9\t\n\f\r _-]*")


class DeviceViewStatus(str, Enum):
    """States of a device as shown to the user."""

    RUNNING = "RUNNING"
    UPDATING = "UPDATING"
    UPDATE_AVAILABLE = "UPDATE AVAILABLE"


def _update_transaction_model():
    from edgeapi.models.updates import UpdateTransaction

    return UpdateTransaction


def _encode_time(value: datetime | None) -> str | None:
    return None if value is None else format_rfc3339nano(value)


@dataclass
class Device(Model):
    """An edge device referenced by its inventory UUID."""

    uuid: str = _json_field("UUID", "")
    available_hash: str = _json_field("AvailableHash", "", omitempty=True)
    rhc_client_id: str = _json_field("RHCClientID", "")
    connected: bool = _json_field("Connected", True)
    name: str = _json_field("Name", "")
    last_seen: datetime | None = _json_field("LastSeen", None, time=True)
    current_hash: str = _json_field("CurrentHash", "", omitempty=True)
    account: str = _json_field("Account", "")
    image_id: int = _json_field("ImageID", 0)
    update_available: bool = _json_field("UpdateAvailable", False)
    devices_groups: list[DeviceGroup] = _json_field(
        "DevicesGroups", factory=list, model=lambda: DeviceGroup
    )
    update_transaction: list[UpdateTransaction] | None = _json_field(
        "UpdateTransaction", None, model=_update_transaction_model
    )


@dataclass
class DeviceGroup(Model):
    """A named group of devices within an account."""

    account: str = _json_field("Account", "")
    name: str = _json_field("Name", "")
    type: str = _json_field("Type", DEVICE_GROUP_TYPE_DEFAULT)
    devices: list[Device] = _json_field("Devices", factory=list, model=Device)

    def validate_request(self) -> None:
        """Raise ValueError if the device group request is not acceptable."""
        if not self.name:
            raise ValueError(DEVICE_GROUP_NAME_EMPTY_ERROR_MESSAGE)
        if not self.account:
            raise ValueError(DEVICE_GROUP_ACCOUNT_EMPTY_ERROR_MESSAGE)
        if _VALID_GROUP_NAME.fullmatch(self.name) is None:
            raise ValueError(DEVICE_GROUP_NAME_INVALID_ERROR_MESSAGE)
        if self.type not in (DEVICE_GROUP_TYPE_STATIC, DEVICE_GROUP_TYPE_DYNAMIC):
            raise ValueError(DEVICE_GROUP_TYPE_INVALID_ERROR_MESSAGE)


@dataclass
class EdgeDevice:
    """Inventory data of a device combined with the stored device record."""

    device: Device | None = None
    device_name: str = ""
    last_seen: str = ""
    booted: bool = False
    account: str = ""

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping; own fields shadow the device's."""
        result = self.device.to_dict() if self.device is not None else {}
        result.update(
            {
                "DeviceName": self.device_name,
                "LastSeen": self.last_seen,
                "Booted": self.booted,
                "Account": self.account,
            }
        )
        return result


@dataclass
class DeviceDetails:
    """A device with its image and update transactions."""

    device: EdgeDevice = field(default_factory=EdgeDevice)
    image: ImageInfo | None = None
    update_transactions: list[UpdateTransaction] | None = None
    devices_groups: list[DeviceGroup] | None = None

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        result: dict = {
            "Device": self.device.to_dict(),
            "ImageInfo": self.image.to_dict() if self.image is not None else None,
        }
        if self.update_transactions is not None:
            result["UpdateTransactions"] = [
                u.to_dict() for u in self.update_transactions
            ]
        if self.devices_groups is not None:
            result["DevicesGroups"] = [g.to_dict() for g in self.devices_groups]
        return result


@dataclass
class DeviceDetailsList:
    """A page of detailed devices."""

    total: int = 0
    count: int = 0
    devices: list[DeviceDetails] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {
            "total": self.total,
            "count": self.count,
            "data": [d.to_dict() for d in self.devices],
        }


@dataclass
class DeviceDeviceGroup:
    """The id and name of a group a device belongs to."""

    id: int = 0
    name: str = ""

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {"ID": self.id, "Name": self.name}


@dataclass
class DeviceView:
    """The device information the user interface needs."""

    device_id: int = 0
    device_name: str = ""
    device_uuid: str = ""
    image_id: int = 0
    image_name: str = ""
    last_seen: str = ""
    update_available: bool = False
    status: str = ""
    image_set_id: int = 0
    device_groups: list[DeviceDeviceGroup] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {
            "DeviceID": self.device_id,
            "DeviceName": self.device_name,
            "DeviceUUID": self.device_uuid,
            "ImageID": self.image_id,
            "ImageName": self.image_name,
            "LastSeen": self.last_seen,
            "UpdateAvailable": self.update_available,
            "Status": self.status,
            "ImageSetID": self.image_set_id,
            "DeviceGroups": [g.to_dict() for g in self.device_groups],
        }


@dataclass
class DeviceViewList:
    """The devices of an account, formatted for the user interface."""

    total: int = 0
    devices: list[DeviceView] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {"total": self.total, "devices": [d.to_dict() for d in self.devices]}


@dataclass
class DeviceImageInfo:
    """The image currently running on a device of a group."""

    name: str = ""
    version: int = 0
    distribution: str = ""
    created_at: datetime | None = None
    package_diff: PackageDiff = field(default_factory=PackageDiff)
    update_available: bool = False
    commit_id: int = 0

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        return {
            "Name": self.name,
            "Version": self.version,
            "Distribution": self.distribution,
            "CreatedAt": _encode_time(self.created_at),
            "PackageDiff": self.package_diff.to_dict(),
            "UpdateAvailable": self.update_available,
            "CommitID": self.commit_id,
        }


@dataclass
class DeviceGroupListDetail:
    """A device group with the images its devices run."""

    device_group: DeviceGroup = field(default_factory=DeviceGroup)
    device_image_info: list[DeviceImageInfo] | None = None

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        info = self.device_image_info
        return {
            "DeviceGroup": self.device_group.to_dict(),
            "DevicesImageInfo": None if info is None else [i.to_dict() for i in info],
        }


@dataclass
class DeviceGroupDetails:
    """A device group with the details of its devices."""

    device_group: DeviceGroup | None = None
    device_details: DeviceDetailsList | None = None

    def to_dict(self) -> dict:
        """Return the JSON-ready mapping."""
        group = self.device_group
        details = self.device_details
        return {
            "DeviceGroup": None if group is None else group.to_dict(),
            "Devices": None if details is None else details.to_dict(),
        }