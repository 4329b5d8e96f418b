"""Tests for wireless LAN and access point commands."""

from theta_sdk import AccessPoint
from theta_sdk.enums import AuthModeEnum

from conftest import done


async def test_list_access_points(theta_client, fake_theta):
    results = {
        "accessPoints": [
            {
                "ssid": "home",
                "ssidStealth": False,
                "security": "WPA/WPA2 PSK",
                "connectionPriority": 1,
                "ipAddressAllocation": "dynamic",
            },
            {
                "ssid": "office",
                "ssidStealth": True,
                "security": "none",
                "connectionPriority": 3,
                "ipAddressAllocation": "static",
                "ipAddress": "192.168.0.10",
                "subnetMask": "255.255.255.0",
                "defaultGateway": "192.168.0.1",
            },
        ]
    }
    fake_theta.reply("camera._listAccessPoints", done("camera._listAccessPoints", results))

    access_points = await theta_client.list_access_points()

    assert access_points == [
        AccessPoint("home", False, AuthModeEnum.WPA, 1, True),
        AccessPoint(
            "office", True, AuthModeEnum.NONE, 3, False,
            ip_address="192.168.0.10", subnet_mask="255.255.255.0", default_gateway="192.168.0.1",
        ),
    ]


async def test_set_access_point_dynamically(theta_client, fake_theta):
    await theta_client.set_access_point_dynamically("home", auth_mode=AuthModeEnum.WPA, password="secret")

    assert fake_theta.parameters("camera._setAccessPoint") == [
        {
            "ssid": "home",
            "ssidStealth": False,
            "security": "WPA/WPA2 PSK",
            "connectionPriority": 1,
            "ipAddressAllocation": "dynamic",
            "password": "secret",
        }
    ]


async def test_set_access_point_statically(theta_client, fake_theta):
    await theta_client.set_access_point_statically(
        "office", "192.168.0.10", "255.255.255.0", "192.168.0.1", ssid_stealth=True, connection_priority=5
    )

    params = fake_theta.parameters("camera._setAccessPoint")[0]
    assert params["ipAddressAllocation"] == "static"
    assert params["ipAddress"] == "192.168.0.10"
    assert params["connectionPriority"] == 5
    assert params["ssidStealth"] is True
    assert "password" not in params


async def test_delete_access_point_and_finish_wlan(theta_client, fake_theta):
    await theta_client.delete_access_point("home")
    await theta_client.finish_wlan()

    assert fake_theta.commands() == ["camera._deleteAccessPoint", "camera._finishWlan"]
    assert fake_theta.parameters("camera._deleteAccessPoint") == [{"ssid": "home"}]


def test_access_point_table():
    from theta_sdk.rich_utils import create_access_point_table

    table = create_access_point_table(
        [AccessPoint("home", False, AuthModeEnum.WPA, 1, True), AccessPoint("x", False, None, 2, False)]
    )
    assert table.row_count == 2
