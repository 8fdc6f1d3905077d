"""FIDO device onboarding records: devices, vouchers, users and SSH keys."""

from __future__ import annotations

from dataclasses import dataclass

from edgeapi.models.base import Model, _json_field


@dataclass
class OwnershipVoucherData(Model):
    """The data of an ownership voucher."""

    protocol_version: int = _json_field("protocol_version", 0)
    guid: str = _json_field("guid", "")
    device_name: str = _json_field("device_name", "")
    fdo_device_id: int = _json_field("fdo_device_id", 0)


@dataclass
class SSHKey(Model):
    """An SSH key of an onboarding user."""

    key: str = _json_field("key", "")
    fdo_user_id: int = _json_field("fdo_user_id", 0)


@dataclass
class FDOUser(Model):
    """The initial user of an onboarded device."""

    username: str = _json_field("username", "")
    ssh_keys: list[SSHKey] = _json_field("ssh_keys", factory=list, model=SSHKey)
    fdo_device_id: int = _json_field("fdo_device_id", 0)


@dataclass
class FDODevice(Model):
    """A device with its ownership voucher and initial user."""

    ownership_voucher_data: OwnershipVoucherData | None = _json_field(
        "ownership_voucher_data", None, model=OwnershipVoucherData
    )
    connected: bool = _json_field("connected", False)
    uuid: str = _json_field("uuid", "")
    subscription_identity_certificate: str = _json_field(
        "subscription_identity_certificate", ""
    )
    initial_user: FDOUser | None = _json_field("initial_user", None, model=FDOUser)