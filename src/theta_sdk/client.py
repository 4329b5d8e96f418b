"""THETA client implementation.

Uses composition and delegation patterns to split functionality into independent modules:
- connection/: HTTP session management and error translation
- commands/: camera, media and network command implementations
- session.py: initialization handshake and per-model capabilities

The client acts as an "assembler", providing a unified and concise API.
"""

from __future__ import annotations

__all__ = ["ThetaClient"]

import logging
from collections.abc import AsyncIterator, Coroutine, Iterable
from typing import Any, overload

from .capture import PhotoCaptureBuilder, VideoCaptureBuilder
from .commands import CameraCommands, CommandExecutor, CommandPoller, MediaCommands, NetworkCommands
from .config import Config, TimeoutConfig
from .connection import HttpConnectionManager
from .enums import AuthModeEnum, FileTypeEnum
from .models import AccessPoint, Exif, FileList, ThetaInfo, ThetaState, Xmp
from .options import OptionNameEnum, Options
from .preview import FrameHandler, LivePreview
from .session import CameraModel, SessionCoordinator

logger = logging.getLogger(__name__)


class ThetaClient:
    """THETA client.

    Design principles:
    - One client per camera endpoint; all session state belongs to the instance
    - Composition over inheritance (holds command interface instances)
    - Delegation pattern (provides concise API)

    Usage examples:
        Method 1 - Async context manager (initializes on entry, closes on exit):
        >>> async with ThetaClient("http://192.168.1.1") as client:
        ...     info = await client.get_theta_info()

        Method 2 - Factory:
        >>> client = await ThetaClient.create("http://192.168.1.1", config=Config(shutter_volume=50))
        >>> try:
        ...     url = await (await client.get_photo_capture_builder().build()).take_picture()
        ... finally:
        ...     await client.close()
    """

    def __init__(
        self,
        endpoint: str = "http://192.168.1.1",
        config: Config | None = None,
        timeout_config: TimeoutConfig | None = None,
    ) -> None:
        """Initialize the client. No request is sent until ``initialize()``.

        Args:
            endpoint: Camera base URL
            config: Configuration applied at the end of initialization
            timeout_config: Timeout configuration
        """
        self.endpoint = endpoint
        self._timeout = timeout_config or TimeoutConfig()

        # Connection manager
        self.http = HttpConnectionManager(endpoint, self._timeout)

        # Command interfaces (composition)
        self.executor = CommandExecutor(self.http)
        self.poller = CommandPoller(self.executor, self._timeout.status_poll_interval)
        self.camera_commands = CameraCommands(self.executor)
        self.media_commands = MediaCommands(self.executor, self.poller)
        self.network_commands = NetworkCommands(self.executor)
        self.session = SessionCoordinator(self.camera_commands, config)
        self.preview = LivePreview(self.http)

        logger.info(f"Initializing ThetaClient, endpoint: {endpoint}")

    @classmethod
    async def create(
        cls,
        endpoint: str = "http://192.168.1.1",
        config: Config | None = None,
        timeout_config: TimeoutConfig | None = None,
    ) -> ThetaClient:
        """Create a client and run the initialization handshake.

        The HTTP session is closed if initialization fails.

        Raises:
            ThetaWebApiError: The camera rejected a step or runs unsupported firmware
            NotConnectedError: The camera could not be reached
        """
        client = cls(endpoint, config, timeout_config)
        try:
            await client.initialize()
        except BaseException:
            await client.close()
            raise
        return client

    async def __aenter__(self) -> ThetaClient:
        """Async context manager entry point (initializes the client)."""
        try:
            await self.initialize()
        except BaseException:
            await self.close()
            raise
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit point (closes the HTTP session)."""
        await self.close()

    # ==================== Session ====================

    async def initialize(self) -> None:
        """Run the initialization handshake (see ``SessionCoordinator``)."""
        await self.session.initialize()

    async def close(self) -> None:
        """Close the HTTP session."""
        await self.http.disconnect()

    @property
    def camera_model(self) -> CameraModel | None:
        """Last known camera model, None before initialization or if unknown."""
        return self.session.model

    @property
    def init_config(self) -> Config | None:
        return self.session.init_config

    @property
    def restore_config(self) -> Config | None:
        """Configuration read at initialization, None before."""
        return self.session.restore_config

    async def restore_settings(self) -> None:
        """Restore the configuration read at initialization.

        Raises:
            NotConnectedError: The client has not been initialized
            ThetaWebApiError: The camera rejected a setting
        """
        await self.session.restore_settings()

    # ==================== Camera (delegated to camera_commands) ====================

    async def get_theta_info(self) -> ThetaInfo:
        """Get static camera information. Also refreshes the known camera model."""
        info = await self.camera_commands.get_theta_info()
        self.session.update_model(info.model)
        return info

    async def get_theta_state(self) -> ThetaState:
        return await self.camera_commands.get_theta_state()

    async def get_options(self, option_names: Iterable[OptionNameEnum]) -> Options:
        """Get camera options.

        Args:
            option_names: Options to read

        Returns:
            Options with the requested fields set
        """
        return await self.camera_commands.get_options(option_names)

    async def set_options(self, options: Options) -> None:
        """Set camera options. Fields left at None are not sent."""
        await self.camera_commands.set_options(options)

    async def reset(self) -> None:
        """Reset all device and capture settings. The camera restarts."""
        await self.camera_commands.reset()

    async def stop_self_timer(self) -> None:
        await self.camera_commands.stop_self_timer()

    async def set_bluetooth_device(self, uuid: str) -> str:
        """Register a Bluetooth device, returning the device name."""
        return await self.camera_commands.set_bluetooth_device(uuid)

    # ==================== Capture ====================

    def get_photo_capture_builder(self) -> PhotoCaptureBuilder:
        return PhotoCaptureBuilder(self.camera_commands, self.poller)

    def get_video_capture_builder(self) -> VideoCaptureBuilder:
        return VideoCaptureBuilder(self.camera_commands, self.poller)

    @overload
    def get_live_preview(self) -> AsyncIterator[bytes]: ...

    @overload
    def get_live_preview(self, frame_handler: FrameHandler) -> Coroutine[Any, Any, None]: ...

    def get_live_preview(
        self, frame_handler: FrameHandler | None = None
    ) -> AsyncIterator[bytes] | Coroutine[Any, Any, None]:
        """Get the live preview.

        Without a handler, returns an async iterator of JPEG frames:
            >>> async for frame in client.get_live_preview():
            ...     show(frame)

        With a handler, returns a coroutine that feeds frames to it until it returns False:
            >>> await client.get_live_preview(lambda frame: keep_running)
        """
        if frame_handler is None:
            return self.preview.frames()
        return self.preview.run(frame_handler)

    # ==================== Media Management (delegated to media_commands) ====================

    async def list_files(self, file_type: FileTypeEnum, start_position: int = 0, entry_count: int = 100) -> FileList:
        """List files stored on the camera.

        Args:
            file_type: Type of files to list
            start_position: Position of the first file to return
            entry_count: Maximum number of files to return
        """
        return await self.media_commands.list_files(file_type, start_position, entry_count)

    async def delete_files(self, file_urls: list[str]) -> None:
        await self.media_commands.delete_files(file_urls)

    async def delete_all_files(self) -> None:
        await self.media_commands.delete_all_files()

    async def delete_all_image_files(self) -> None:
        await self.media_commands.delete_all_image_files()

    async def delete_all_video_files(self) -> None:
        await self.media_commands.delete_all_video_files()

    async def get_metadata(self, file_url: str) -> tuple[Exif, Xmp]:
        """Get Exif and XMP metadata of a still image."""
        return await self.media_commands.get_metadata(file_url)

    async def convert_video_formats(
        self, file_url: str, to_low_resolution: bool, apply_top_bottom_correction: bool = True
    ) -> str:
        """Convert a video on the camera and wait for the result.

        What is converted depends on the camera model: THETA S, SC and SC2 return
        ``file_url`` unchanged; THETA X converts only to low resolution (4K).

        Returns:
            URL of the converted file
        """
        return await self.media_commands.convert_video_formats(
            file_url,
            to_low_resolution,
            apply_top_bottom_correction,
            conversion=self.session.capabilities.video_conversion,
        )

    async def cancel_video_convert(self) -> None:
        await self.media_commands.cancel_video_convert()

    # ==================== Network (delegated to network_commands) ====================

    async def finish_wlan(self) -> None:
        await self.network_commands.finish_wlan()

    async def list_access_points(self) -> list[AccessPoint]:
        return await self.network_commands.list_access_points()

    async def set_access_point_dynamically(
        self,
        ssid: str,
        ssid_stealth: bool = False,
        auth_mode: AuthModeEnum = AuthModeEnum.NONE,
        password: str = "",
        connection_priority: int = 1,
    ) -> None:
        """Register an access point whose IP address is assigned by DHCP."""
        await self.network_commands.set_access_point_dynamically(
            ssid, ssid_stealth, auth_mode, password, connection_priority
        )

    async def set_access_point_statically(
        self,
        ssid: str,
        ip_address: str,
        subnet_mask: str,
        default_gateway: str,
        ssid_stealth: bool = False,
        auth_mode: AuthModeEnum = AuthModeEnum.NONE,
        password: str | None = None,
        connection_priority: int = 1,
    ) -> None:
        """Register an access point with a static IP address."""
        await self.network_commands.set_access_point_statically(
            ssid,
            ip_address,
            subnet_mask,
            default_gateway,
            ssid_stealth=ssid_stealth,
            auth_mode=auth_mode,
            password=password,
            connection_priority=connection_priority,
        )

    async def delete_access_point(self, ssid: str) -> None:
        await self.network_commands.delete_access_point(ssid)
