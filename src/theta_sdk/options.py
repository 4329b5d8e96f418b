"""Camera options: the sparse, typed option aggregate.

``Options`` holds any subset of the camera's settings. A field left at ``None``
is "unspecified": it is neither sent to the camera nor reset to a default.
"""

from __future__ import annotations

__all__ = ["GpsInfo", "OptionNameEnum", "Options"]

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar

from .enums import (
    ApertureEnum,
    CaptureModeEnum,
    ExposureCompensationEnum,
    ExposureDelayEnum,
    ExposureProgramEnum,
    FileFormatEnum,
    FilterEnum,
    GpsTagRecordingEnum,
    IsoAutoHighLimitEnum,
    IsoEnum,
    LanguageEnum,
    MaxRecordableTimeEnum,
    OffDelay,
    OffDelayEnum,
    OffDelaySec,
    SleepDelay,
    SleepDelayEnum,
    SleepDelaySec,
    WhiteBalanceEnum,
)
from .exceptions import InvalidOptionValueError
from .wire import WireGpsInfo, WireOptions

logger = logging.getLogger(__name__)

GPS_DATUM = "WGS84"


@dataclass(frozen=True)
class GpsInfo:
    """GPS location information.

    ``GpsInfo.DISABLED`` (latitude/longitude 65535) tells the camera not to tag
    captures with a location.
    """

    latitude: float
    longitude: float
    altitude: float
    date_time_zone: str

    DISABLED: ClassVar[GpsInfo]

    def is_disabled(self) -> bool:
        return self == GpsInfo.DISABLED

    @classmethod
    def from_wire(cls, gps_info: WireGpsInfo) -> GpsInfo:
        return cls(
            latitude=gps_info.lat if gps_info.lat is not None else 65535.0,
            longitude=gps_info.lng if gps_info.lng is not None else 65535.0,
            altitude=gps_info.altitude if gps_info.altitude is not None else 0.0,
            date_time_zone=gps_info.date_time_zone if gps_info.date_time_zone is not None else "",
        )

    def to_wire(self) -> WireGpsInfo:
        return WireGpsInfo(
            lat=self.latitude,
            lng=self.longitude,
            altitude=self.altitude,
            date_time_zone=self.date_time_zone,
            datum="" if self.is_disabled() else GPS_DATUM,
        )


GpsInfo.DISABLED = GpsInfo(65535.0, 65535.0, 0.0, "")


class OptionNameEnum(Enum):
    """Option names, with their wire key and the type their value must have."""

    APERTURE = ("aperture", ApertureEnum)
    CAPTURE_MODE = ("captureMode", CaptureModeEnum)
    COLOR_TEMPERATURE = ("_colorTemperature", int)
    DATE_TIME_ZONE = ("dateTimeZone", str)
    EXPOSURE_COMPENSATION = ("exposureCompensation", ExposureCompensationEnum)
    EXPOSURE_DELAY = ("exposureDelay", ExposureDelayEnum)
    EXPOSURE_PROGRAM = ("exposureProgram", ExposureProgramEnum)
    FILE_FORMAT = ("fileFormat", FileFormatEnum)
    FILTER = ("_filter", FilterEnum)
    GPS_INFO = ("gpsInfo", GpsInfo)
    IS_GPS_ON = ("_gpsTagRecording", bool)  # THETA X or later
    ISO = ("iso", IsoEnum)
    ISO_AUTO_HIGH_LIMIT = ("isoAutoHighLimit", IsoAutoHighLimitEnum)
    LANGUAGE = ("_language", LanguageEnum)
    MAX_RECORDABLE_TIME = ("_maxRecordableTime", MaxRecordableTimeEnum)
    OFF_DELAY = ("offDelay", (OffDelayEnum, OffDelaySec))
    SLEEP_DELAY = ("sleepDelay", (SleepDelayEnum, SleepDelaySec))
    REMAINING_PICTURES = ("remainingPictures", int)
    REMAINING_VIDEO_SECONDS = ("remainingVideoSeconds", int)
    REMAINING_SPACE = ("remainingSpace", int)
    TOTAL_SPACE = ("totalSpace", int)
    SHUTTER_VOLUME = ("_shutterVolume", int)
    WHITE_BALANCE = ("whiteBalance", WhiteBalanceEnum)

    def __init__(self, wire_name: str, value_type: type | tuple[type, ...]) -> None:
        self.wire_name = wire_name
        self.value_type = value_type

    @property
    def attribute(self) -> str:
        """Name of the matching ``Options`` field."""
        return self.name.lower()

    def accepts(self, value: Any) -> bool:
        """Whether ``value`` has the type declared for this option."""
        # bool is an int subclass; only IS_GPS_ON takes booleans
        if isinstance(value, bool) and self.value_type is not bool:
            return False
        return isinstance(value, self.value_type)


def _from_wire(enum_cls: Any, value: Any) -> Any:
    return None if value is None else enum_cls.get(value)


def _to_wire(member: Any) -> Any:
    return None if member is None else member.value


@dataclass
class Options:
    """Camera setting options.

    Attributes:
        aperture: Aperture value
        capture_mode: Shooting mode
        color_temperature: Color temperature in Kelvin (2500 to 10000, 100 K steps)
        date_time_zone: Camera clock, ``YYYY:MM:DD hh:mm:ss+(-)hh:mm``
        exposure_compensation: Exposure compensation (EV)
        exposure_delay: Self-timer delay
        exposure_program: Exposure program
        file_format: Capture file format, must match the capture mode
        filter: Image processing filter
        gps_info: GPS location attached to captures
        is_gps_on: Whether position information is recorded (THETA X)
        iso: ISO sensitivity
        iso_auto_high_limit: ISO upper limit in automatic ISO
        language: Camera OS language
        max_recordable_time: Maximum video length
        off_delay: Standby time before auto power-off
        sleep_delay: Standby time before sleep
        remaining_pictures: Estimated remaining shots (read-only)
        remaining_video_seconds: Estimated remaining video seconds (read-only)
        remaining_space: Remaining storage in bytes (read-only)
        total_space: Total storage in bytes (read-only)
        shutter_volume: Shutter volume, 0 to 100
        white_balance: White balance
    """

    aperture: ApertureEnum | None = None
    capture_mode: CaptureModeEnum | None = None
    color_temperature: int | None = None
    date_time_zone: str | None = None
    exposure_compensation: ExposureCompensationEnum | None = None
    exposure_delay: ExposureDelayEnum | None = None
    exposure_program: ExposureProgramEnum | None = None
    file_format: FileFormatEnum | None = None
    filter: FilterEnum | None = None
    gps_info: GpsInfo | None = None
    is_gps_on: bool | None = None
    iso: IsoEnum | None = None
    iso_auto_high_limit: IsoAutoHighLimitEnum | None = None
    language: LanguageEnum | None = None
    max_recordable_time: MaxRecordableTimeEnum | None = None
    off_delay: OffDelay | None = None
    sleep_delay: SleepDelay | None = None
    remaining_pictures: int | None = None
    remaining_video_seconds: int | None = None
    remaining_space: int | None = None
    total_space: int | None = None
    shutter_volume: int | None = None
    white_balance: WhiteBalanceEnum | None = None

    @classmethod
    def from_wire(cls, options: WireOptions) -> Options:
        """Convert wire options; unknown wire values are left unset."""
        is_gps_on = None
        gps_tag_recording = _from_wire(GpsTagRecordingEnum, options.gps_tag_recording)
        if gps_tag_recording is not None:
            is_gps_on = gps_tag_recording == GpsTagRecordingEnum.ON

        return cls(
            aperture=_from_wire(ApertureEnum, options.aperture),
            capture_mode=_from_wire(CaptureModeEnum, options.capture_mode),
            color_temperature=options.color_temperature,
            date_time_zone=options.date_time_zone,
            exposure_compensation=_from_wire(ExposureCompensationEnum, options.exposure_compensation),
            exposure_delay=_from_wire(ExposureDelayEnum, options.exposure_delay),
            exposure_program=_from_wire(ExposureProgramEnum, options.exposure_program),
            file_format=_from_wire(FileFormatEnum, options.file_format),
            filter=_from_wire(FilterEnum, options.filter),
            gps_info=GpsInfo.from_wire(options.gps_info) if options.gps_info is not None else None,
            is_gps_on=is_gps_on,
            iso=_from_wire(IsoEnum, options.iso),
            iso_auto_high_limit=_from_wire(IsoAutoHighLimitEnum, options.iso_auto_high_limit),
            language=_from_wire(LanguageEnum, options.language),
            max_recordable_time=_from_wire(MaxRecordableTimeEnum, options.max_recordable_time),
            off_delay=_from_wire(OffDelayEnum, options.off_delay),
            sleep_delay=_from_wire(SleepDelayEnum, options.sleep_delay),
            remaining_pictures=options.remaining_pictures,
            remaining_video_seconds=options.remaining_video_seconds,
            remaining_space=options.remaining_space,
            total_space=options.total_space,
            shutter_volume=options.shutter_volume,
            white_balance=_from_wire(WhiteBalanceEnum, options.white_balance),
        )

    def to_wire(self) -> WireOptions:
        """Convert to wire options containing only the fields that are set."""
        gps_tag_recording = None
        if self.is_gps_on is not None:
            gps_tag_recording = (GpsTagRecordingEnum.ON if self.is_gps_on else GpsTagRecordingEnum.OFF).value

        return WireOptions(
            aperture=_to_wire(self.aperture),
            capture_mode=_to_wire(self.capture_mode),
            color_temperature=self.color_temperature,
            date_time_zone=self.date_time_zone,
            exposure_compensation=_to_wire(self.exposure_compensation),
            exposure_delay=_to_wire(self.exposure_delay),
            exposure_program=_to_wire(self.exposure_program),
            file_format=_to_wire(self.file_format),
            filter=_to_wire(self.filter),
            gps_info=self.gps_info.to_wire() if self.gps_info is not None else None,
            gps_tag_recording=gps_tag_recording,
            iso=_to_wire(self.iso),
            iso_auto_high_limit=_to_wire(self.iso_auto_high_limit),
            language=_to_wire(self.language),
            max_recordable_time=_to_wire(self.max_recordable_time),
            off_delay=self.off_delay.sec if self.off_delay is not None else None,
            sleep_delay=self.sleep_delay.sec if self.sleep_delay is not None else None,
            remaining_pictures=self.remaining_pictures,
            remaining_video_seconds=self.remaining_video_seconds,
            remaining_space=self.remaining_space,
            total_space=self.total_space,
            shutter_volume=self.shutter_volume,
            white_balance=_to_wire(self.white_balance),
        )

    def get_value(self, name: OptionNameEnum) -> Any:
        """Get an option value.

        Args:
            name: Option name

        Returns:
            The value (its type is ``name.value_type``), or None if unset
        """
        return getattr(self, name.attribute)

    def set_value(self, name: OptionNameEnum, value: Any) -> None:
        """Set an option value.

        Args:
            name: Option name
            value: Value of the type declared by ``name``

        Raises:
            InvalidOptionValueError: ``value`` has the wrong type; the options are left unchanged
        """
        if not name.accepts(value):
            raise InvalidOptionValueError(
                f"Invalid value type for option {name.wire_name}: {type(value).__name__}"
            )
        setattr(self, name.attribute, value)

    def set_names(self) -> list[OptionNameEnum]:
        """Names of the options that are currently set."""
        return [name for name in OptionNameEnum if self.get_value(name) is not None]

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))
