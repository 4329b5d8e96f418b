"""Read-only snapshots returned by the client.

Each snapshot is built from one wire response and has no life of its own
beyond the call that produced it.
"""

from __future__ import annotations

__all__ = [
    "AccessPoint",
    "Exif",
    "FileInfo",
    "FileList",
    "ThetaInfo",
    "ThetaState",
    "Xmp",
]

from dataclasses import dataclass

from .enums import AuthModeEnum, ChargingStateEnum
from .wire import (
    CameraFileInfo,
    Endpoints,
    ExifInfo,
    InfoResponse,
    StateResponse,
    WireAccessPoint,
    XmpInfo,
)

STORAGE_SD = "SD"
IP_ALLOCATION_DYNAMIC = "dynamic"


@dataclass(frozen=True)
class ThetaInfo:
    """Static information about the camera (``GET /osc/info``)."""

    manufacturer: str
    model: str
    serial_number: str
    wlan_mac_address: str | None
    bluetooth_mac_address: str | None
    firmware_version: str
    support_url: str
    has_gps: bool
    has_gyro: bool
    uptime: int
    api: list[str]
    endpoints: Endpoints
    api_level: list[int]

    @classmethod
    def from_wire(cls, res: InfoResponse) -> ThetaInfo:
        return cls(
            manufacturer=res.manufacturer,
            model=res.model,
            serial_number=res.serial_number,
            wlan_mac_address=res.wlan_mac_address,
            bluetooth_mac_address=res.bluetooth_mac_address,
            firmware_version=res.firmware_version,
            support_url=res.support_url,
            has_gps=res.gps,
            has_gyro=res.gyro,
            uptime=res.uptime,
            api=res.api,
            endpoints=res.endpoints,
            api_level=res.api_level,
        )


@dataclass(frozen=True)
class ThetaState:
    """Mutable camera status (``POST /osc/state``).

    Attributes:
        fingerprint: Changes whenever the state changes
        battery_level: Battery level, 0.0 to 1.0
        charging_state: Charging state, or None for an unknown value
        is_sd_card: Whether the SD card is the current storage
        recorded_time: Elapsed recording time in seconds
        recordable_time: Remaining recordable time in seconds
        latest_file_url: URL of the last saved file, empty if none
    """

    fingerprint: str
    battery_level: float
    charging_state: ChargingStateEnum | None
    is_sd_card: bool
    recorded_time: int
    recordable_time: int
    latest_file_url: str

    @classmethod
    def from_wire(cls, res: StateResponse) -> ThetaState:
        state = res.state
        return cls(
            fingerprint=res.fingerprint,
            battery_level=float(state.battery_level),
            charging_state=ChargingStateEnum.get(state.battery_state),
            is_sd_card=state.current_storage == STORAGE_SD,
            recorded_time=state.recorded_time or 0,
            recordable_time=state.recordable_time or 0,
            latest_file_url=state.latest_file_url or "",
        )


@dataclass(frozen=True)
class FileInfo:
    """A file stored on the camera.

    ``date_time`` is ``YYYY:MM:DD HH:MM``, the device date with its time zone cut off.
    """

    name: str
    size: int
    date_time: str
    file_url: str
    thumbnail_url: str

    @classmethod
    def from_wire(cls, info: CameraFileInfo) -> FileInfo:
        return cls(
            name=info.name,
            size=info.size,
            date_time=(info.date_time_zone or info.date_time or "")[:16],
            file_url=info.file_url,
            thumbnail_url=info.thumbnail_url,
        )


@dataclass(frozen=True)
class FileList:
    """One page of ``camera.listFiles``.

    Attributes:
        files: Files on this page
        total_entries: Number of matching files on the camera, across all pages
    """

    files: list[FileInfo]
    total_entries: int


@dataclass(frozen=True)
class AccessPoint:
    """A wireless LAN access point registered on the camera (client mode)."""

    ssid: str
    ssid_stealth: bool
    auth_mode: AuthModeEnum | None
    connection_priority: int
    using_dhcp: bool
    ip_address: str | None = None
    subnet_mask: str | None = None
    default_gateway: str | None = None

    @classmethod
    def from_wire(cls, ap: WireAccessPoint) -> AccessPoint:
        return cls(
            ssid=ap.ssid,
            ssid_stealth=ap.ssid_stealth,
            auth_mode=AuthModeEnum.get(ap.security),
            connection_priority=ap.connection_priority,
            using_dhcp=ap.ip_address_allocation == IP_ALLOCATION_DYNAMIC,
            ip_address=ap.ip_address,
            subnet_mask=ap.subnet_mask,
            default_gateway=ap.default_gateway,
        )


@dataclass(frozen=True)
class Exif:
    exif_version: str
    date_time: str
    image_width: int | None
    image_length: int | None
    gps_latitude: float | None
    gps_longitude: float | None

    @classmethod
    def from_wire(cls, exif: ExifInfo) -> Exif:
        return cls(
            exif_version=exif.exif_version,
            date_time=exif.date_time,
            image_width=exif.image_width,
            image_length=exif.image_length,
            gps_latitude=exif.gps_latitude,
            gps_longitude=exif.gps_longitude,
        )


@dataclass(frozen=True)
class Xmp:
    pose_heading_degrees: float | None
    full_pano_width_pixels: int
    full_pano_height_pixels: int

    @classmethod
    def from_wire(cls, xmp: XmpInfo) -> Xmp:
        return cls(
            pose_heading_degrees=xmp.pose_heading_degrees,
            full_pano_width_pixels=xmp.full_pano_width_pixels,
            full_pano_height_pixels=xmp.full_pano_height_pixels,
        )
