"""Capture builders and capture handles.

A builder collects capture options, sends them in a single
``camera.setOptions`` call on ``build()`` and returns a handle for the capture:

    >>> capture = await client.get_photo_capture_builder().set_iso(IsoEnum.ISO_200).build()
    >>> file_url = await capture.take_picture()
"""

from __future__ import annotations

__all__ = [
    "PhotoCapture",
    "PhotoCaptureBuilder",
    "VideoCapture",
    "VideoCaptureBuilder",
    "VideoCapturing",
]

import logging
from typing import TypeVar

from .commands.base import api_call
from .commands.camera_commands import CameraCommands
from .commands.executor import decode
from .commands.poller import CommandPoller
from .enums import (
    ApertureEnum,
    CaptureModeEnum,
    ExposureCompensationEnum,
    ExposureDelayEnum,
    ExposureProgramEnum,
    FilterEnum,
    GpsTagRecordingEnum,
    IsoAutoHighLimitEnum,
    IsoEnum,
    MaxRecordableTimeEnum,
    PhotoFileFormatEnum,
    VideoFileFormatEnum,
    WhiteBalanceEnum,
)
from .options import GpsInfo, Options
from .wire import TakePictureResults

logger = logging.getLogger(__name__)

B = TypeVar("B", bound="CaptureBuilder")


class CaptureBuilder:
    """Options shared by photo and video capture. Every setter returns the builder."""

    capture_mode: CaptureModeEnum

    def __init__(self, camera: CameraCommands, poller: CommandPoller) -> None:
        self.camera = camera
        self.poller = poller
        self.options = Options()

    def set_aperture(self: B, aperture: ApertureEnum) -> B:
        self.options.aperture = aperture
        return self

    def set_color_temperature(self: B, kelvin: int) -> B:
        """Color temperature (2500 to 10000 K), used with ``WhiteBalanceEnum.COLOR_TEMPERATURE``."""
        self.options.color_temperature = kelvin
        return self

    def set_exposure_compensation(self: B, value: ExposureCompensationEnum) -> B:
        self.options.exposure_compensation = value
        return self

    def set_exposure_delay(self: B, delay: ExposureDelayEnum) -> B:
        self.options.exposure_delay = delay
        return self

    def set_exposure_program(self: B, program: ExposureProgramEnum) -> B:
        self.options.exposure_program = program
        return self

    def set_gps_info(self: B, gps_info: GpsInfo) -> B:
        self.options.gps_info = gps_info
        return self

    def set_gps_tag_recording(self: B, value: GpsTagRecordingEnum) -> B:
        """Whether to record the position (THETA X or later)."""
        self.options.is_gps_on = value == GpsTagRecordingEnum.ON
        return self

    def set_iso(self: B, iso: IsoEnum) -> B:
        self.options.iso = iso
        return self

    def set_iso_auto_high_limit(self: B, iso: IsoAutoHighLimitEnum) -> B:
        self.options.iso_auto_high_limit = iso
        return self

    def set_white_balance(self: B, white_balance: WhiteBalanceEnum) -> B:
        self.options.white_balance = white_balance
        return self

    async def _send_options(self) -> None:
        self.options.capture_mode = self.capture_mode
        logger.info(f"Configuring {self.capture_mode.value} capture...")
        await self.camera.set_options(self.options)


class PhotoCaptureBuilder(CaptureBuilder):
    capture_mode = CaptureModeEnum.IMAGE

    def __init__(self, camera: CameraCommands, poller: CommandPoller) -> None:
        super().__init__(camera, poller)
        self.file_format: PhotoFileFormatEnum | None = None

    def set_file_format(self, file_format: PhotoFileFormatEnum) -> PhotoCaptureBuilder:
        self.file_format = file_format
        self.options.file_format = file_format.file_format
        return self

    def set_filter(self, value: FilterEnum) -> PhotoCaptureBuilder:
        self.options.filter = value
        return self

    @api_call
    async def build(self) -> PhotoCapture:
        """Send the collected options and return the photo capture.

        Raises:
            ThetaWebApiError: The camera rejected an option
            NotConnectedError: The camera could not be reached
        """
        await self._send_options()
        return PhotoCapture(self.poller, self.options, self.file_format)


class VideoCaptureBuilder(CaptureBuilder):
    capture_mode = CaptureModeEnum.VIDEO

    def __init__(self, camera: CameraCommands, poller: CommandPoller) -> None:
        super().__init__(camera, poller)
        self.file_format: VideoFileFormatEnum | None = None

    def set_file_format(self, file_format: VideoFileFormatEnum) -> VideoCaptureBuilder:
        self.file_format = file_format
        self.options.file_format = file_format.file_format
        return self

    def set_max_recordable_time(self, time: MaxRecordableTimeEnum) -> VideoCaptureBuilder:
        self.options.max_recordable_time = time
        return self

    @api_call
    async def build(self) -> VideoCapture:
        """Send the collected options and return the video capture.

        Raises:
            ThetaWebApiError: The camera rejected an option
            NotConnectedError: The camera could not be reached
        """
        await self._send_options()
        return VideoCapture(self.poller, self.options, self.file_format)


class PhotoCapture:
    """Still image capture, configured by ``PhotoCaptureBuilder``."""

    def __init__(self, poller: CommandPoller, options: Options, file_format: PhotoFileFormatEnum | None) -> None:
        self.poller = poller
        self.options = options
        self.file_format = file_format

    @api_call
    async def take_picture(self) -> str:
        """Take a picture and wait until it is saved.

        Returns:
            URL of the saved image

        Raises:
            ThetaWebApiError: The capture failed
            NotConnectedError: The camera could not be reached
        """
        logger.info("📸 Taking picture...")
        response = await self.poller.execute("camera.takePicture")
        results = decode(TakePictureResults, response.results)
        logger.info(f"✅ Picture saved: {results.file_url}")
        return results.file_url


class VideoCapture:
    """Video capture, configured by ``VideoCaptureBuilder``."""

    def __init__(self, poller: CommandPoller, options: Options, file_format: VideoFileFormatEnum | None) -> None:
        self.poller = poller
        self.options = options
        self.file_format = file_format

    @api_call
    async def start_capture(self) -> VideoCapturing:
        """Start recording.

        Returns:
            Handle used to stop the recording
        """
        logger.info("🎬 Starting video capture...")
        await self.poller.executor.execute("camera.startCapture")
        return VideoCapturing(self.poller)


class VideoCapturing:
    """A running video capture."""

    def __init__(self, poller: CommandPoller) -> None:
        self.poller = poller

    @api_call
    async def stop_capture(self) -> None:
        """Stop recording. The camera saves the file after this returns."""
        logger.info("Stopping video capture...")
        await self.poller.executor.execute("camera.stopCapture")
