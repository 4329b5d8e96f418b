"""Wire model: dataclasses mirroring the camera's JSON vocabulary.

Field names are snake_case; the JSON key of every field is kept in the field
metadata, so that ``from_dict`` / ``to_dict`` translate between the two.
``to_dict`` never emits a key whose value is ``None``: an absent key means
"unspecified" to the camera, which is not the same as a null value.
"""

from __future__ import annotations

__all__ = [
    "CameraFileInfo",
    "CameraState",
    "CommandError",
    "CommandProgress",
    "CommandResponse",
    "CommandState",
    "ConvertVideoFormatsResults",
    "Endpoints",
    "ExifInfo",
    "GetOptionsResults",
    "InfoResponse",
    "ListAccessPointsResults",
    "ListFilesResults",
    "MediaFileFormat",
    "MetadataResults",
    "SetBluetoothDeviceResults",
    "StartSessionResults",
    "StateResponse",
    "TakePictureResults",
    "WireAccessPoint",
    "WireGpsInfo",
    "WireObject",
    "WireOptions",
    "XmpInfo",
    "wire_field",
]

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, TypeVar

W = TypeVar("W", bound="WireObject")


def wire_field(key: str, *, nested: type[WireObject] | None = None, many: bool = False, **kwargs: Any) -> Any:
    """Declare a dataclass field with its JSON key.

    Args:
        key: JSON key on the wire
        nested: Wire class used to decode a nested object (or list items when ``many``)
        many: Whether the value is a list of ``nested`` objects
        **kwargs: Passed to ``dataclasses.field`` (``default``, ``default_factory``)
    """
    return field(metadata={"key": key, "nested": nested, "many": many}, **kwargs)


class WireObject:
    """Mixin giving wire dataclasses dict conversion."""

    @classmethod
    def from_dict(cls: type[W], data: Any) -> W:
        """Build from a decoded JSON object.

        Raises:
            TypeError: ``data`` is not an object or a required key is missing
            ValueError: A value is outside its closed set (see ``__post_init__``)
        """
        if not isinstance(data, dict):
            raise TypeError(f"{cls.__name__} expects a JSON object, got {type(data).__name__}")

        kwargs: dict[str, Any] = {}
        for f in fields(cls):  # type: ignore[arg-type]
            key = f.metadata.get("key", f.name)
            value = data.get(key)
            if value is None:
                continue
            nested = f.metadata.get("nested")
            if nested is not None:
                if f.metadata.get("many"):
                    value = [nested.from_dict(item) for item in value]
                else:
                    value = nested.from_dict(value)
            kwargs[f.name] = value
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict, omitting unset fields."""
        result: dict[str, Any] = {}
        for f in fields(self):  # type: ignore[arg-type]
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, WireObject):
                value = value.to_dict()
            elif isinstance(value, list):
                value = [item.to_dict() if isinstance(item, WireObject) else item for item in value]
            elif isinstance(value, Enum):
                value = value.value
            result[f.metadata.get("key", f.name)] = value
        return result


# ==================== Command envelope ====================


class CommandState(Enum):
    """Execution state of a command."""

    DONE = "done"
    IN_PROGRESS = "inProgress"
    ERROR = "error"


@dataclass
class CommandError(WireObject):
    """Error payload of an ``error`` envelope."""

    code: str = wire_field("code", default="")
    message: str = wire_field("message", default="")


@dataclass
class CommandProgress(WireObject):
    """Progress payload of an ``inProgress`` envelope."""

    completion: float | None = wire_field("completion", default=None)


@dataclass
class CommandResponse(WireObject):
    """Envelope returned by ``/osc/commands/execute`` and ``/osc/commands/status``."""

    name: str = wire_field("name")
    state: CommandState = wire_field("state")
    id: str | None = wire_field("id", default=None)
    results: dict[str, Any] | None = wire_field("results", default=None)
    error: CommandError | None = wire_field("error", nested=CommandError, default=None)
    progress: CommandProgress | None = wire_field("progress", nested=CommandProgress, default=None)

    def __post_init__(self) -> None:
        self.state = CommandState(self.state)


# ==================== Options ====================


@dataclass(frozen=True)
class MediaFileFormat(WireObject):
    """``fileFormat`` option value."""

    type: str = wire_field("type")
    width: int = wire_field("width")
    height: int = wire_field("height")
    codec: str | None = wire_field("_codec", default=None)
    frame_rate: int | None = wire_field("_frameRate", default=None)


@dataclass
class WireGpsInfo(WireObject):
    """``gpsInfo`` option value."""

    lat: float | None = wire_field("lat", default=None)
    lng: float | None = wire_field("lng", default=None)
    altitude: float | None = wire_field("_altitude", default=None)
    date_time_zone: str | None = wire_field("_dateTimeZone", default=None)
    datum: str | None = wire_field("_datum", default=None)


@dataclass
class WireOptions(WireObject):
    """Sparse options object used by ``camera.getOptions`` / ``camera.setOptions``."""

    aperture: float | None = wire_field("aperture", default=None)
    capture_mode: str | None = wire_field("captureMode", default=None)
    color_temperature: int | None = wire_field("_colorTemperature", default=None)
    date_time_zone: str | None = wire_field("dateTimeZone", default=None)
    exposure_compensation: float | None = wire_field("exposureCompensation", default=None)
    exposure_delay: int | None = wire_field("exposureDelay", default=None)
    exposure_program: int | None = wire_field("exposureProgram", default=None)
    file_format: MediaFileFormat | None = wire_field("fileFormat", nested=MediaFileFormat, default=None)
    filter: str | None = wire_field("_filter", default=None)
    gps_info: WireGpsInfo | None = wire_field("gpsInfo", nested=WireGpsInfo, default=None)
    gps_tag_recording: str | None = wire_field("_gpsTagRecording", default=None)
    iso: int | None = wire_field("iso", default=None)
    iso_auto_high_limit: int | None = wire_field("isoAutoHighLimit", default=None)
    language: str | None = wire_field("_language", default=None)
    max_recordable_time: int | None = wire_field("_maxRecordableTime", default=None)
    off_delay: int | None = wire_field("offDelay", default=None)
    sleep_delay: int | None = wire_field("sleepDelay", default=None)
    remaining_pictures: int | None = wire_field("remainingPictures", default=None)
    remaining_video_seconds: int | None = wire_field("remainingVideoSeconds", default=None)
    remaining_space: int | None = wire_field("remainingSpace", default=None)
    total_space: int | None = wire_field("totalSpace", default=None)
    shutter_volume: int | None = wire_field("_shutterVolume", default=None)
    white_balance: str | None = wire_field("whiteBalance", default=None)
    client_version: int | None = wire_field("clientVersion", default=None)


@dataclass
class GetOptionsResults(WireObject):
    options: WireOptions = wire_field("options", nested=WireOptions)


@dataclass
class StartSessionResults(WireObject):
    session_id: str = wire_field("sessionId")
    timeout: int | None = wire_field("timeout", default=None)


# ==================== Info / State ====================


@dataclass
class Endpoints(WireObject):
    http_port: int = wire_field("httpPort")
    http_updates_port: int = wire_field("httpUpdatesPort")


@dataclass
class InfoResponse(WireObject):
    """Body of ``GET /osc/info``."""

    manufacturer: str = wire_field("manufacturer")
    model: str = wire_field("model")
    serial_number: str = wire_field("serialNumber")
    firmware_version: str = wire_field("firmwareVersion")
    support_url: str = wire_field("supportUrl")
    gps: bool = wire_field("gps")
    gyro: bool = wire_field("gyro")
    uptime: int = wire_field("uptime")
    api: list[str] = wire_field("api")
    endpoints: Endpoints = wire_field("endpoints", nested=Endpoints)
    api_level: list[int] = wire_field("apiLevel")
    wlan_mac_address: str | None = wire_field("_wlanMacAddress", default=None)
    bluetooth_mac_address: str | None = wire_field("_bluetoothMacAddress", default=None)


@dataclass
class CameraState(WireObject):
    battery_level: float = wire_field("batteryLevel")
    battery_state: str = wire_field("_batteryState")
    api_version: int | None = wire_field("_apiVersion", default=None)
    current_storage: str | None = wire_field("_currentStorage", default=None)
    recorded_time: int | None = wire_field("_recordedTime", default=None)
    recordable_time: int | None = wire_field("_recordableTime", default=None)
    latest_file_url: str | None = wire_field("_latestFileUrl", default=None)
    capture_status: str | None = wire_field("_captureStatus", default=None)
    storage_uri: str | None = wire_field("storageUri", default=None)


@dataclass
class StateResponse(WireObject):
    """Body of ``POST /osc/state``."""

    fingerprint: str = wire_field("fingerprint")
    state: CameraState = wire_field("state", nested=CameraState)


# ==================== Files ====================


@dataclass
class CameraFileInfo(WireObject):
    name: str = wire_field("name")
    file_url: str = wire_field("fileUrl")
    size: int = wire_field("size")
    date_time_zone: str | None = wire_field("dateTimeZone", default=None)
    date_time: str | None = wire_field("dateTime", default=None)
    width: int | None = wire_field("width", default=None)
    height: int | None = wire_field("height", default=None)

    @property
    def thumbnail_url(self) -> str:
        return f"{self.file_url}?type=thumb"


@dataclass
class ListFilesResults(WireObject):
    entries: list[CameraFileInfo] = wire_field("entries", nested=CameraFileInfo, many=True)
    total_entries: int = wire_field("totalEntries")


@dataclass
class ExifInfo(WireObject):
    exif_version: str = wire_field("ExifVersion")
    date_time: str = wire_field("DateTime")
    image_width: int | None = wire_field("ImageWidth", default=None)
    image_length: int | None = wire_field("ImageLength", default=None)
    gps_latitude: float | None = wire_field("GPSLatitude", default=None)
    gps_longitude: float | None = wire_field("GPSLongitude", default=None)


@dataclass
class XmpInfo(WireObject):
    full_pano_width_pixels: int = wire_field("FullPanoWidthPixels")
    full_pano_height_pixels: int = wire_field("FullPanoHeightPixels")
    pose_heading_degrees: float | None = wire_field("PoseHeadingDegrees", default=None)


@dataclass
class MetadataResults(WireObject):
    exif: ExifInfo = wire_field("exif", nested=ExifInfo)
    xmp: XmpInfo = wire_field("xmp", nested=XmpInfo)


@dataclass
class ConvertVideoFormatsResults(WireObject):
    file_url: str = wire_field("fileUrl")


@dataclass
class TakePictureResults(WireObject):
    file_url: str = wire_field("fileUrl")


# ==================== Network ====================


@dataclass
class WireAccessPoint(WireObject):
    """Access point, as listed by ``camera._listAccessPoints`` and sent by ``camera._setAccessPoint``."""

    ssid: str = wire_field("ssid")
    ssid_stealth: bool = wire_field("ssidStealth", default=False)
    security: str = wire_field("security", default="none")
    connection_priority: int = wire_field("connectionPriority", default=1)
    ip_address_allocation: str = wire_field("ipAddressAllocation", default="dynamic")
    password: str | None = wire_field("password", default=None)
    ip_address: str | None = wire_field("ipAddress", default=None)
    subnet_mask: str | None = wire_field("subnetMask", default=None)
    default_gateway: str | None = wire_field("defaultGateway", default=None)


@dataclass
class ListAccessPointsResults(WireObject):
    access_points: list[WireAccessPoint] = wire_field("accessPoints", nested=WireAccessPoint, many=True)


@dataclass
class SetBluetoothDeviceResults(WireObject):
    device_name: str = wire_field("deviceName")
