"""Public enumerations and their wire values.

Every enumeration's member value is the exact value the camera uses on the wire,
so ``member.value`` is the reverse mapping. ``get(value)`` looks a wire value up
and returns ``None`` for values the SDK does not know about; new firmware values
are dropped instead of breaking the response.

Off-delay and sleep-delay also accept arbitrary seconds: their ``get`` falls back
to a raw ``OffDelaySec`` / ``SleepDelaySec`` wrapper.
"""

from __future__ import annotations

__all__ = [
    "ApertureEnum",
    "AuthModeEnum",
    "CaptureModeEnum",
    "ChargingStateEnum",
    "ExposureCompensationEnum",
    "ExposureDelayEnum",
    "ExposureProgramEnum",
    "FileFormatEnum",
    "FileFormatTypeEnum",
    "FileTypeEnum",
    "FilterEnum",
    "GpsTagRecordingEnum",
    "IsoAutoHighLimitEnum",
    "IsoEnum",
    "LanguageEnum",
    "MaxRecordableTimeEnum",
    "OffDelay",
    "OffDelayEnum",
    "OffDelaySec",
    "PhotoFileFormatEnum",
    "SleepDelay",
    "SleepDelayEnum",
    "SleepDelaySec",
    "VideoFileFormatEnum",
    "WhiteBalanceEnum",
]

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, Union

from .wire import MediaFileFormat

E = TypeVar("E", bound="WireEnum")

H264 = "H.264/MPEG-4 AVC"


class WireEnum(Enum):
    """Enumeration whose member values are wire values."""

    @classmethod
    def get(cls: type[E], value: Any) -> E | None:
        """Convert a wire value to a member.

        Args:
            value: Value as found in the camera's JSON

        Returns:
            Matching member, or None if the value is unknown
        """
        for member in cls:
            if member.value == value:
                return member
        return None


class ApertureEnum(WireEnum):
    APERTURE_AUTO = 0.0
    APERTURE_2_0 = 2.0  # THETA V or prior
    APERTURE_2_1 = 2.1  # Z1, manual or aperture priority
    APERTURE_2_4 = 2.4  # THETA X or later
    APERTURE_3_5 = 3.5
    APERTURE_5_6 = 5.6


class CaptureModeEnum(WireEnum):
    IMAGE = "image"
    VIDEO = "video"


class ExposureCompensationEnum(WireEnum):
    """Exposure compensation (EV)."""

    M2_0 = -2.0
    M1_7 = -1.7
    M1_3 = -1.3
    M1_0 = -1.0
    M0_7 = -0.7
    M0_3 = -0.3
    ZERO = 0.0
    P0_3 = 0.3
    P0_7 = 0.7
    P1_0 = 1.0
    P1_3 = 1.3
    P1_7 = 1.7
    P2_0 = 2.0


class ExposureDelayEnum(WireEnum):
    """Self-timer operating time."""

    DELAY_OFF = 0
    DELAY_1 = 1
    DELAY_2 = 2
    DELAY_3 = 3
    DELAY_4 = 4
    DELAY_5 = 5
    DELAY_6 = 6
    DELAY_7 = 7
    DELAY_8 = 8
    DELAY_9 = 9
    DELAY_10 = 10

    @property
    def sec(self) -> int:
        return self.value


class ExposureProgramEnum(WireEnum):
    MANUAL = 1
    NORMAL_PROGRAM = 2
    APERTURE_PRIORITY = 3
    SHUTTER_PRIORITY = 4
    ISO_PRIORITY = 9


class FileFormatTypeEnum(WireEnum):
    JPEG = "jpeg"
    MP4 = "mp4"
    RAW = "raw+"


class FileFormatEnum(WireEnum):
    """Image/video format. Each value is the complete ``fileFormat`` wire object."""

    IMAGE_2K = MediaFileFormat("jpeg", 2048, 1024)
    IMAGE_5K = MediaFileFormat("jpeg", 5376, 2688)
    IMAGE_6_7K = MediaFileFormat("jpeg", 6720, 3360)
    RAW_P_6_7K = MediaFileFormat("raw+", 6720, 3360)
    IMAGE_5_5K = MediaFileFormat("jpeg", 5504, 2752)
    IMAGE_11K = MediaFileFormat("jpeg", 11008, 5504)
    VIDEO_HD = MediaFileFormat("mp4", 1280, 720)
    VIDEO_FULL_HD = MediaFileFormat("mp4", 1920, 1080)
    VIDEO_2K = MediaFileFormat("mp4", 1920, 960, H264)
    VIDEO_4K = MediaFileFormat("mp4", 3840, 1920, H264)
    VIDEO_2K_30F = MediaFileFormat("mp4", 1920, 960, H264, 30)
    VIDEO_2K_60F = MediaFileFormat("mp4", 1920, 960, H264, 60)
    VIDEO_4K_30F = MediaFileFormat("mp4", 3840, 1920, H264, 30)
    VIDEO_4K_60F = MediaFileFormat("mp4", 3840, 1920, H264, 60)
    VIDEO_5_7K_2F = MediaFileFormat("mp4", 5760, 2880, H264, 2)
    VIDEO_5_7K_5F = MediaFileFormat("mp4", 5760, 2880, H264, 5)
    VIDEO_5_7K_30F = MediaFileFormat("mp4", 5760, 2880, H264, 30)
    VIDEO_7K_2F = MediaFileFormat("mp4", 7680, 3840, H264, 2)
    VIDEO_7K_5F = MediaFileFormat("mp4", 7680, 3840, H264, 5)
    VIDEO_7K_10F = MediaFileFormat("mp4", 7680, 3840, H264, 10)

    @property
    def file_type(self) -> FileFormatTypeEnum:
        return FileFormatTypeEnum(self.value.type)

    @property
    def width(self) -> int:
        return self.value.width

    @property
    def height(self) -> int:
        return self.value.height


class PhotoFileFormatEnum(WireEnum):
    """Still image subset of ``FileFormatEnum``."""

    IMAGE_2K = FileFormatEnum.IMAGE_2K
    IMAGE_5K = FileFormatEnum.IMAGE_5K
    IMAGE_6_7K = FileFormatEnum.IMAGE_6_7K
    RAW_P_6_7K = FileFormatEnum.RAW_P_6_7K
    IMAGE_5_5K = FileFormatEnum.IMAGE_5_5K
    IMAGE_11K = FileFormatEnum.IMAGE_11K

    @property
    def file_format(self) -> FileFormatEnum:
        return self.value


class VideoFileFormatEnum(WireEnum):
    """Video subset of ``FileFormatEnum``."""

    VIDEO_HD = FileFormatEnum.VIDEO_HD
    VIDEO_FULL_HD = FileFormatEnum.VIDEO_FULL_HD
    VIDEO_2K = FileFormatEnum.VIDEO_2K
    VIDEO_4K = FileFormatEnum.VIDEO_4K
    VIDEO_2K_30F = FileFormatEnum.VIDEO_2K_30F
    VIDEO_2K_60F = FileFormatEnum.VIDEO_2K_60F
    VIDEO_4K_30F = FileFormatEnum.VIDEO_4K_30F
    VIDEO_4K_60F = FileFormatEnum.VIDEO_4K_60F
    VIDEO_5_7K_2F = FileFormatEnum.VIDEO_5_7K_2F
    VIDEO_5_7K_5F = FileFormatEnum.VIDEO_5_7K_5F
    VIDEO_5_7K_30F = FileFormatEnum.VIDEO_5_7K_30F
    VIDEO_7K_2F = FileFormatEnum.VIDEO_7K_2F
    VIDEO_7K_5F = FileFormatEnum.VIDEO_7K_5F
    VIDEO_7K_10F = FileFormatEnum.VIDEO_7K_10F

    @property
    def file_format(self) -> FileFormatEnum:
        return self.value


class FilterEnum(WireEnum):
    """Image processing filter (still image mode only)."""

    OFF = "off"
    NOISE_REDUCTION = "Noise Reduction"
    HDR = "hdr"


class GpsTagRecordingEnum(WireEnum):
    ON = "on"
    OFF = "off"


class IsoEnum(WireEnum):
    ISO_AUTO = 0
    ISO_50 = 50
    ISO_64 = 64
    ISO_80 = 80
    ISO_100 = 100
    ISO_125 = 125
    ISO_160 = 160
    ISO_200 = 200
    ISO_250 = 250
    ISO_320 = 320
    ISO_400 = 400
    ISO_500 = 500
    ISO_640 = 640
    ISO_800 = 800
    ISO_1000 = 1000
    ISO_1250 = 1250
    ISO_1600 = 1600
    ISO_2000 = 2000
    ISO_2500 = 2500
    ISO_3200 = 3200
    ISO_4000 = 4000
    ISO_5000 = 5000
    ISO_6400 = 6400


class IsoAutoHighLimitEnum(WireEnum):
    """ISO upper limit when ISO is automatic."""

    ISO_100 = 100
    ISO_125 = 125
    ISO_160 = 160
    ISO_200 = 200
    ISO_250 = 250
    ISO_320 = 320
    ISO_400 = 400
    ISO_500 = 500
    ISO_640 = 640
    ISO_800 = 800
    ISO_1000 = 1000
    ISO_1250 = 1250
    ISO_1600 = 1600
    ISO_2000 = 2000
    ISO_2500 = 2500
    ISO_3200 = 3200
    ISO_4000 = 4000
    ISO_5000 = 5000
    ISO_6400 = 6400


class LanguageEnum(WireEnum):
    """Language used in the camera OS (THETA V or later)."""

    DE = "de"
    EN_GB = "en-GB"
    EN_US = "en-US"
    FR = "fr"
    IT = "it"
    JA = "ja"
    KO = "ko"
    ZH_CN = "zh-CN"
    ZH_TW = "zh-TW"


class MaxRecordableTimeEnum(WireEnum):
    RECORDABLE_TIME_180 = 180
    RECORDABLE_TIME_300 = 300
    RECORDABLE_TIME_1500 = 1500

    @property
    def sec(self) -> int:
        return self.value


class WhiteBalanceEnum(WireEnum):
    AUTO = "auto"
    DAYLIGHT = "daylight"
    SHADE = "shade"
    CLOUDY_DAYLIGHT = "cloudy-daylight"
    INCANDESCENT = "incandescent"
    WARM_WHITE_FLUORESCENT = "_warmWhiteFluorescent"
    DAYLIGHT_FLUORESCENT = "_dayLightFluorescent"
    DAYWHITE_FLUORESCENT = "_dayWhiteFluorescent"
    FLUORESCENT = "fluorescent"
    BULB_FLUORESCENT = "_bulbFluorescent"
    COLOR_TEMPERATURE = "_colorTemperature"
    UNDERWATER = "_underwater"


class FileTypeEnum(WireEnum):
    """File type filter for listing and bulk deletion."""

    ALL = "all"
    IMAGE = "image"
    VIDEO = "video"


class AuthModeEnum(WireEnum):
    """Wireless LAN security."""

    NONE = "none"
    WEP = "WEP"
    WPA = "WPA/WPA2 PSK"


class ChargingStateEnum(WireEnum):
    CHARGING = "charging"
    COMPLETED = "charged"
    NOT_CHARGING = "disconnect"


# ==================== Delays with raw-seconds fallback ====================


@dataclass(frozen=True)
class OffDelaySec:
    """Auto power-off delay that matches no ``OffDelayEnum`` member."""

    sec: int


class OffDelayEnum(WireEnum):
    """Standby time before the camera powers off."""

    DISABLE = 65535
    OFF_DELAY_5M = 300
    OFF_DELAY_10M = 600
    OFF_DELAY_15M = 900
    OFF_DELAY_30M = 1800

    @property
    def sec(self) -> int:
        return self.value

    @classmethod
    def get(cls, value: Any) -> OffDelayEnum | OffDelaySec:  # type: ignore[override]
        member = super().get(value)
        return member if member is not None else OffDelaySec(value)


@dataclass(frozen=True)
class SleepDelaySec:
    """Sleep delay that matches no ``SleepDelayEnum`` member."""

    sec: int


class SleepDelayEnum(WireEnum):
    """Standby time before the camera enters sleep mode."""

    SLEEP_DELAY_3M = 180
    SLEEP_DELAY_5M = 300
    SLEEP_DELAY_7M = 420
    SLEEP_DELAY_10M = 600
    DISABLE = 65535

    @property
    def sec(self) -> int:
        return self.value

    @classmethod
    def get(cls, value: Any) -> SleepDelayEnum | SleepDelaySec:  # type: ignore[override]
        member = super().get(value)
        return member if member is not None else SleepDelaySec(value)


OffDelay = Union[OffDelayEnum, OffDelaySec]
SleepDelay = Union[SleepDelayEnum, SleepDelaySec]
