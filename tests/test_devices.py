from datetime import datetime, timezone

import pytest

from edgeapi.models.devices import (
    DEVICE_GROUP_ACCOUNT_EMPTY_ERROR_MESSAGE,
    DEVICE_GROUP_NAME_EMPTY_ERROR_MESSAGE,
    DEVICE_GROUP_NAME_INVALID_ERROR_MESSAGE,
    DEVICE_GROUP_TYPE_DEFAULT,
    DEVICE_GROUP_TYPE_DYNAMIC,
    DEVICE_GROUP_TYPE_INVALID_ERROR_MESSAGE,
    Device,
    DeviceDetails,
    DeviceDetailsList,
    DeviceDeviceGroup,
    DeviceGroup,
    DeviceGroupDetails,
    DeviceView,
    DeviceViewList,
    DeviceViewStatus,
    EdgeDevice,
)
from edgeapi.models.updates import UpdateTransaction


@pytest.mark.parametrize(
    "group, expected",
    [
        (
            DeviceGroup(account="111111", type="static"),
            DEVICE_GROUP_NAME_EMPTY_ERROR_MESSAGE,
        ),
        (
            DeviceGroup(name="test_group", account="111111", type="invalid type"),
            DEVICE_GROUP_TYPE_INVALID_ERROR_MESSAGE,
        ),
        (
            DeviceGroup(
                name="** test group", account="111111", type=DEVICE_GROUP_TYPE_DEFAULT
            ),
            DEVICE_GROUP_NAME_INVALID_ERROR_MESSAGE,
        ),
        (
            DeviceGroup(name="test_group", type="static"),
            DEVICE_GROUP_ACCOUNT_EMPTY_ERROR_MESSAGE,
        ),
    ],
)
def test_group_validate_request_errors(group, expected):
    with pytest.raises(ValueError) as exc:
        group.validate_request()
    assert str(exc.value) == expected


def test_group_validate_request_valid():
    group = DeviceGroup(
        name="test_group", account="111111", type=DEVICE_GROUP_TYPE_DEFAULT
    )
    assert group.validate_request() is None
    assert group.type == "static"


def test_group_dynamic_type_is_valid():
    group = DeviceGroup(name="g1", account="111111", type=DEVICE_GROUP_TYPE_DYNAMIC)
    assert group.validate_request() is None
    assert group.to_dict()["Type"] == "dynamic"


def test_group_default_type_is_static():
    assert DeviceGroup().type == DEVICE_GROUP_TYPE_DEFAULT


@pytest.mark.parametrize(
    "status, expected",
    [
        (DeviceViewStatus.RUNNING, "RUNNING"),
        (DeviceViewStatus.UPDATING, "UPDATING"),
        (DeviceViewStatus.UPDATE_AVAILABLE, "UPDATE AVAILABLE"),
    ],
)
def test_device_view_status_values(status, expected):
    assert DeviceView(device_uuid="u", status=status.value).to_dict()["Status"] == expected


def test_device_round_trip():
    seen = datetime(2022, 3, 4, 5, 6, 7, 123000, tzinfo=timezone.utc)
    device = Device(
        id=3,
        uuid="uuid-a",
        rhc_client_id="client-a",
        name="device-a",
        last_seen=seen,
        account="acct",
        image_id=9,
        update_available=True,
        devices_groups=[DeviceGroup(id=1, name="g", account="acct")],
        update_transaction=[UpdateTransaction(id=5, account="acct")],
    )
    data = device.to_dict()
    restored = Device.from_dict(data)
    assert restored == device
    assert isinstance(restored.devices_groups[0], DeviceGroup)
    assert isinstance(restored.update_transaction[0], UpdateTransaction)


def test_device_omits_empty_hashes():
    data = Device(uuid="u").to_dict()
    assert "AvailableHash" not in data
    assert "CurrentHash" not in data
    assert data["UpdateTransaction"] is None
    assert data["Connected"] is True


def test_edge_device_fields_shadow_device():
    edge = EdgeDevice(
        device=Device(uuid="u-1", name="inner", account="inner-acct"),
        device_name="outer",
        last_seen="yesterday",
        booted=True,
        account="outer-acct",
    )
    data = edge.to_dict()
    assert data["UUID"] == "u-1"
    assert data["Name"] == "inner"
    assert data["DeviceName"] == "outer"
    assert data["LastSeen"] == "yesterday"
    assert data["Account"] == "outer-acct"
    assert data["Booted"] is True


def test_device_details_list_keys():
    details = DeviceDetails(device=EdgeDevice(device=Device(uuid="u")))
    listing = DeviceDetailsList(total=1, count=1, devices=[details])
    data = listing.to_dict()
    assert data["total"] == 1
    assert data["count"] == 1
    assert data["data"][0]["ImageInfo"] is None
    assert "UpdateTransactions" not in data["data"][0]
    assert "DevicesGroups" not in data["data"][0]


def test_device_view_list():
    view = DeviceView(
        device_id=2,
        device_uuid="u",
        status=DeviceViewStatus.RUNNING.value,
        device_groups=[DeviceDeviceGroup(id=4, name="grp")],
    )
    data = DeviceViewList(total=1, devices=[view]).to_dict()
    assert data["devices"][0]["DeviceGroups"] == [{"ID": 4, "Name": "grp"}]
    assert data["devices"][0]["Status"] == "RUNNING"


def test_device_group_details_nulls():
    data = DeviceGroupDetails().to_dict()
    assert data == {"DeviceGroup": None, "Devices": None}