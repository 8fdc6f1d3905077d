import json

from edgeapi.models.ownershipvoucher import (
    FDODevice,
    FDOUser,
    OwnershipVoucherData,
    SSHKey,
)

GUID = "12345678-1234-1234-1234-123456789012"


def test_device_defaults_disconnected():
    device = FDODevice()
    assert device.connected is False
    assert device.to_dict()["connected"] is False


def test_voucher_json_keys():
    ov = OwnershipVoucherData(protocol_version=101, guid=GUID, device_name="test-device")
    data = ov.to_dict()
    assert data["protocol_version"] == 101
    assert data["guid"] == GUID
    assert data["device_name"] == "test-device"


def test_voucher_from_upload_response():
    payload = [{"protocol_version": 101, "guid": GUID, "device_name": "test-device"}]
    ovs = [OwnershipVoucherData.from_dict(item) for item in payload]
    assert ovs[0].protocol_version == 101
    assert ovs[0].guid == GUID
    assert ovs[0].device_name == "test-device"


def test_device_round_trip_nested():
    device = FDODevice(
        id=2,
        ownership_voucher_data=OwnershipVoucherData(guid=GUID, protocol_version=100),
        uuid=GUID,
        initial_user=FDOUser(
            username="root",
            ssh_keys=[SSHKey(key="ssh-rsa placeholder")],
        ),
    )
    data = json.loads(json.dumps(device.to_dict()))
    assert data["initial_user"]["ssh_keys"][0]["key"] == "ssh-rsa placeholder"
    assert FDODevice.from_dict(data) == device


def test_device_from_dict_without_user():
    device = FDODevice.from_dict({"uuid": GUID, "initial_user": None})
    assert device.initial_user is None
    assert device.ownership_voucher_data is None
    assert device.uuid == GUID