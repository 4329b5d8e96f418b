"""Tests for typed options, GPS info and Config wire conversion."""

from dataclasses import fields

import pytest

from theta_sdk import Config, GpsInfo, InvalidOptionValueError, OptionNameEnum, Options
from theta_sdk.enums import (
    ApertureEnum,
    CaptureModeEnum,
    FileFormatEnum,
    IsoEnum,
    LanguageEnum,
    OffDelayEnum,
    OffDelaySec,
    SleepDelayEnum,
    SleepDelaySec,
    WhiteBalanceEnum,
)
from theta_sdk.wire import WireGpsInfo, WireOptions


def test_every_option_name_has_a_field():
    option_fields = {f.name for f in fields(Options)}
    assert {name.attribute for name in OptionNameEnum} == option_fields


def test_option_wire_names_are_distinct():
    wire_names = [name.wire_name for name in OptionNameEnum]
    assert len(wire_names) == len(set(wire_names))


def test_options_round_trip_through_wire():
    options = Options(
        aperture=ApertureEnum.APERTURE_2_1,
        capture_mode=CaptureModeEnum.IMAGE,
        file_format=FileFormatEnum.IMAGE_6_7K,
        gps_info=GpsInfo(35.68, 139.76, 10.0, "2024:01:02 03:04:05+09:00"),
        is_gps_on=True,
        iso=IsoEnum.ISO_400,
        off_delay=OffDelaySec(1000),
        sleep_delay=SleepDelayEnum.SLEEP_DELAY_5M,
        shutter_volume=40,
        white_balance=WhiteBalanceEnum.SHADE,
    )

    data = options.to_wire().to_dict()
    assert data["fileFormat"] == {"type": "jpeg", "width": 6720, "height": 3360}
    assert data["_gpsTagRecording"] == "on"
    assert data["offDelay"] == 1000
    assert data["gpsInfo"]["_datum"] == "WGS84"

    assert Options.from_wire(WireOptions.from_dict(data)) == options


def test_to_wire_omits_unset_options():
    data = Options(iso=IsoEnum.ISO_AUTO, is_gps_on=False).to_wire().to_dict()
    assert data == {"iso": 0, "_gpsTagRecording": "off"}
    assert Options().to_wire().to_dict() == {}


def test_unknown_wire_values_are_dropped():
    wire = WireOptions.from_dict({"iso": 12345, "whiteBalance": "_moonlight", "_shutterVolume": 10})
    options = Options.from_wire(wire)

    assert options.iso is None
    assert options.white_balance is None
    assert options.shutter_volume == 10


@pytest.mark.parametrize("recording, is_gps_on", [("on", True), ("off", False), ("auto", None)])
def test_gps_tag_recording(recording, is_gps_on):
    options = Options.from_wire(WireOptions.from_dict({"_gpsTagRecording": recording}))

    assert options.is_gps_on is is_gps_on


def test_unlisted_delays_keep_their_seconds():
    options = Options.from_wire(WireOptions(off_delay=601, sleep_delay=65535))
    assert options.off_delay == OffDelaySec(601)
    assert options.sleep_delay is SleepDelayEnum.DISABLE


def test_get_and_set_value():
    options = Options()
    options.set_value(OptionNameEnum.ISO, IsoEnum.ISO_100)
    options.set_value(OptionNameEnum.OFF_DELAY, OffDelaySec(700))
    options.set_value(OptionNameEnum.OFF_DELAY, OffDelayEnum.OFF_DELAY_5M)
    options.set_value(OptionNameEnum.IS_GPS_ON, False)

    assert options.get_value(OptionNameEnum.ISO) is IsoEnum.ISO_100
    assert options.get_value(OptionNameEnum.OFF_DELAY) is OffDelayEnum.OFF_DELAY_5M
    assert options.get_value(OptionNameEnum.APERTURE) is None
    assert options.set_names() == [OptionNameEnum.IS_GPS_ON, OptionNameEnum.ISO, OptionNameEnum.OFF_DELAY]


@pytest.mark.parametrize(
    ("name", "value"),
    [
        (OptionNameEnum.ISO, 100),
        (OptionNameEnum.APERTURE, IsoEnum.ISO_100),
        (OptionNameEnum.SHUTTER_VOLUME, True),
        (OptionNameEnum.SHUTTER_VOLUME, "40"),
        (OptionNameEnum.IS_GPS_ON, 1),
        (OptionNameEnum.OFF_DELAY, SleepDelaySec(300)),
        (OptionNameEnum.GPS_INFO, WireGpsInfo(lat=1.0, lng=2.0)),
    ],
)
def test_set_value_rejects_wrong_type(name, value):
    options = Options(shutter_volume=50)

    with pytest.raises(InvalidOptionValueError):
        options.set_value(name, value)

    assert options == Options(shutter_volume=50)


def test_is_empty():
    assert Options().is_empty()
    assert not Options(language=LanguageEnum.JA).is_empty()


# ==================== GPS ====================


def test_disabled_gps_info():
    assert GpsInfo.DISABLED.is_disabled()
    assert GpsInfo(65535.0, 65535.0, 0.0, "").is_disabled()
    assert not GpsInfo(65535.0, 65535.0, 5.0, "").is_disabled()

    wire = GpsInfo.DISABLED.to_wire().to_dict()
    assert wire == {"lat": 65535.0, "lng": 65535.0, "_altitude": 0.0, "_dateTimeZone": "", "_datum": ""}


def test_gps_info_from_sparse_wire():
    gps = GpsInfo.from_wire(WireGpsInfo(lat=35.0, lng=139.0))
    assert gps == GpsInfo(35.0, 139.0, 0.0, "")
    assert not gps.is_disabled()


# ==================== Config ====================


def test_config_to_wire():
    config = Config(
        date_time="2024:05:01 10:00:00+09:00",
        language=LanguageEnum.EN_US,
        off_delay=OffDelayEnum.OFF_DELAY_10M,
        sleep_delay=SleepDelaySec(200),
        shutter_volume=0,
    )
    assert config.to_wire().to_dict() == {
        "dateTimeZone": "2024:05:01 10:00:00+09:00",
        "_language": "en-US",
        "offDelay": 600,
        "sleepDelay": 200,
        "_shutterVolume": 0,
    }


def test_config_from_wire_and_is_empty():
    config = Config.from_wire(WireOptions(language="ja", off_delay=65535, shutter_volume=20))

    assert config == Config(language=LanguageEnum.JA, off_delay=OffDelayEnum.DISABLE, shutter_volume=20)
    assert not config.is_empty()
    assert Config().is_empty()
    assert Config(shutter_volume=0).to_wire().to_dict() == {"_shutterVolume": 0}
