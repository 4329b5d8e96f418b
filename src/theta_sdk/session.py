"""Session and capability coordination.

Runs the one-time initialization handshake against a camera and keeps the
per-model protocol dialect in one place:

1. Read ``/osc/info`` and derive the model's capabilities (this also rejects
   THETA S firmware older than 01.62).
2. For THETA S and SC, read ``/osc/state``; if the camera still speaks protocol
   level 1, open a session and switch it to client version 2.
3. Read the restorable configuration (clock, language, delays, volume).
4. Apply the configuration given by the caller, if any.

Nothing is rolled back when a step fails.
"""

from __future__ import annotations

__all__ = ["CameraModel", "Capabilities", "SessionCoordinator", "capabilities_for"]

import logging
from dataclasses import dataclass, replace
from enum import Enum

from .commands.base import api_call
from .commands.camera_commands import CameraCommands
from .commands.executor import convert
from .commands.media_commands import VideoConversion
from .config import Config
from .exceptions import NotConnectedError, ThetaWebApiError
from .options import OptionNameEnum
from .wire import WireOptions

logger = logging.getLogger(__name__)

THETA_S_MIN_FIRMWARE = "01.62"
PROTOCOL_LEVEL_1 = 1


class CameraModel(Enum):
    """Camera models, by the exact model string reported in ``/osc/info``."""

    THETA_S = "RICOH THETA S"
    THETA_SC = "RICOH THETA SC"
    THETA_V = "RICOH THETA V"
    THETA_Z1 = "RICOH THETA Z1"
    THETA_X = "RICOH THETA X"
    THETA_SC2 = "RICOH THETA SC2"

    @classmethod
    def get(cls, model: str | None) -> CameraModel | None:
        for member in cls:
            if member.value == model:
                return member
        return None


@dataclass(frozen=True)
class Capabilities:
    """Protocol dialect of one camera model.

    Attributes:
        supports_language: Whether the ``_language`` option exists
        needs_session_upgrade: Whether the camera may start at protocol level 1
        min_firmware: Oldest supported firmware version, if there is one
        video_conversion: What ``camera._convertVideoFormats`` supports
    """

    supports_language: bool = True
    needs_session_upgrade: bool = False
    min_firmware: str | None = None
    video_conversion: VideoConversion = VideoConversion.FULL


def capabilities_for(model: CameraModel | None, firmware_version: str | None = None) -> Capabilities:
    """Capabilities of a camera model.

    Unknown models get the capabilities of current cameras.

    Args:
        model: Camera model, None if unknown
        firmware_version: Reported firmware version; checked against ``min_firmware``

    Raises:
        ThetaWebApiError: The firmware is older than the model's minimum.
            Versions compare as plain strings, the way the camera reports them.
    """
    if model == CameraModel.THETA_S:
        capabilities = Capabilities(
            supports_language=False,
            needs_session_upgrade=True,
            min_firmware=THETA_S_MIN_FIRMWARE,
            video_conversion=VideoConversion.NONE,
        )
    elif model == CameraModel.THETA_SC:
        capabilities = Capabilities(
            supports_language=False,
            needs_session_upgrade=True,
            video_conversion=VideoConversion.NONE,
        )
    elif model == CameraModel.THETA_SC2:
        capabilities = Capabilities(supports_language=False, video_conversion=VideoConversion.NONE)
    elif model == CameraModel.THETA_X:
        capabilities = Capabilities(video_conversion=VideoConversion.LOW_RESOLUTION_ONLY)
    else:
        capabilities = Capabilities()

    if (
        capabilities.min_firmware is not None
        and firmware_version is not None
        and firmware_version < capabilities.min_firmware
    ):
        raise ThetaWebApiError(f"Unsupported {model.value if model else 'camera'} firmware version {firmware_version}")

    return capabilities


class SessionCoordinator:
    """Owns the per-client session state: model, capabilities and the two configs.

    ``init_config`` is supplied by the caller; ``restore_config`` is read from
    the camera during initialization. Both belong to this instance only.
    """

    def __init__(self, camera: CameraCommands, init_config: Config | None = None) -> None:
        """Initialize session coordinator.

        Args:
            camera: Camera command interface
            init_config: Configuration to apply at the end of initialization
        """
        self.camera = camera
        self._init_config = init_config
        self._restore_config: Config | None = None

        self.model_name: str | None = None
        self.firmware_version: str | None = None
        self.capabilities = capabilities_for(None)

    @property
    def model(self) -> CameraModel | None:
        return CameraModel.get(self.model_name)

    @property
    def is_initialized(self) -> bool:
        return self._restore_config is not None

    @property
    def init_config(self) -> Config | None:
        return self._init_config

    @property
    def restore_config(self) -> Config | None:
        return self._restore_config

    def update_model(self, model_name: str) -> None:
        """Record the model reported by a later ``/osc/info`` query."""
        self.model_name = model_name
        self.capabilities = capabilities_for(self.model)

    @api_call
    async def initialize(self) -> None:
        """Run the initialization handshake.

        Raises:
            ThetaWebApiError: The camera rejected a step or runs unsupported firmware
            NotConnectedError: The camera could not be reached
        """
        info = await self.camera.executor.get_info()
        self.model_name = info.model
        self.firmware_version = info.firmware_version
        logger.info(f"Initializing {info.model} (firmware {info.firmware_version})...")

        self.capabilities = capabilities_for(self.model, info.firmware_version)

        if self.capabilities.needs_session_upgrade:
            state = await self.camera.executor.get_state()
            if state.state.api_version == PROTOCOL_LEVEL_1:
                logger.info("Camera speaks protocol level 1, upgrading session...")
                session_id = await self.camera.start_session()
                await self.camera.upgrade_client_version(session_id)

        self._restore_config = await self._read_config()
        logger.debug(f"Restore config: {self._restore_config}")

        if self._init_config is not None:
            await self.apply_config(self._init_config)

        logger.info(f"✅ {info.model} initialized")

    @api_call
    async def restore_settings(self) -> None:
        """Apply the configuration read from the camera at initialization.

        Raises:
            NotConnectedError: The client has not been initialized
            ThetaWebApiError: The camera rejected a setting
        """
        if self._restore_config is None:
            raise NotConnectedError("Client is not initialized, nothing to restore")

        logger.info("Restoring camera settings...")
        await self.apply_config(self._restore_config)

    async def apply_config(self, config: Config) -> None:
        """Apply a configuration.

        The clock is set on its own first; some cameras reject it combined with
        other options. The remaining fields are sent only if any is set.
        """
        if not self.capabilities.supports_language:
            config = replace(config, language=None)

        if config.date_time is not None:
            await self.camera.set_wire_options(WireOptions(date_time_zone=config.date_time))

        remaining = replace(config, date_time=None)
        if not remaining.is_empty():
            await self.camera.set_wire_options(remaining.to_wire())

    async def _read_config(self) -> Config:
        names = [OptionNameEnum.DATE_TIME_ZONE]
        # Only known models that have the option are asked for it
        if self.model is not None and self.capabilities.supports_language:
            names.append(OptionNameEnum.LANGUAGE)
        names += [OptionNameEnum.OFF_DELAY, OptionNameEnum.SLEEP_DELAY, OptionNameEnum.SHUTTER_VOLUME]

        wire_options = await self.camera.get_wire_options(name.wire_name for name in names)
        return convert(Config.from_wire, wire_options)
