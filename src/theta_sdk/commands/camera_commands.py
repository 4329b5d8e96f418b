"""Camera commands: information, state, options and device control."""

from __future__ import annotations

__all__ = ["CameraCommands"]

import logging
from collections.abc import Iterable

from ..models import ThetaInfo, ThetaState
from ..options import OptionNameEnum, Options
from ..wire import GetOptionsResults, SetBluetoothDeviceResults, StartSessionResults, WireOptions
from .base import api_call
from .executor import CommandExecutor, convert

logger = logging.getLogger(__name__)

# Protocol level requested from cameras that start at API v2.0 level 1
CLIENT_VERSION_2 = 2


class CameraCommands:
    """Camera command interface."""

    def __init__(self, executor: CommandExecutor) -> None:
        """Initialize camera command interface.

        Args:
            executor: Command executor
        """
        self.executor = executor

    # ==================== Information ====================

    @api_call
    async def get_theta_info(self) -> ThetaInfo:
        """Get static camera information.

        Raises:
            ThetaWebApiError: Unreadable response
            NotConnectedError: Camera unreachable
        """
        info = await self.executor.get_info()
        logger.debug(f"Camera info: {info.model} firmware {info.firmware_version}")
        return convert(ThetaInfo.from_wire, info)

    @api_call
    async def get_theta_state(self) -> ThetaState:
        """Get the mutable camera state.

        Raises:
            ThetaWebApiError: Unreadable response
            NotConnectedError: Camera unreachable
        """
        return convert(ThetaState.from_wire, await self.executor.get_state())

    # ==================== Options ====================

    @api_call
    async def get_options(self, option_names: Iterable[OptionNameEnum]) -> Options:
        """Get camera options.

        Args:
            option_names: Options to read; duplicates are requested once

        Returns:
            Options with the requested fields set, where the camera knows the value
        """
        wire_options = await self.get_wire_options([name.wire_name for name in option_names])
        return convert(Options.from_wire, wire_options)

    @api_call
    async def set_options(self, options: Options) -> None:
        """Set camera options. Fields left at None are not sent."""
        logger.info(f"Setting options: {', '.join(name.wire_name for name in options.set_names())}")
        await self.set_wire_options(options.to_wire())

    async def get_wire_options(self, names: Iterable[str]) -> WireOptions:
        unique_names = list(dict.fromkeys(names))
        results = await self.executor.execute_for(GetOptionsResults, "camera.getOptions", {"optionNames": unique_names})
        return results.options

    async def set_wire_options(self, options: WireOptions, session_id: str | None = None) -> None:
        parameters: dict = {"options": options.to_dict()}
        if session_id is not None:
            parameters["sessionId"] = session_id
        await self.executor.execute("camera.setOptions", parameters)

    # ==================== Session (API v2.0 level 1) ====================

    async def start_session(self) -> str:
        """Start a session, returning its id."""
        results = await self.executor.execute_for(StartSessionResults, "camera.startSession")
        logger.debug(f"Session started: {results.session_id}")
        return results.session_id

    async def upgrade_client_version(self, session_id: str) -> None:
        """Switch the camera to protocol level 2 for the given session."""
        await self.set_wire_options(WireOptions(client_version=CLIENT_VERSION_2), session_id=session_id)
        logger.info("✅ Camera switched to client version 2")

    # ==================== Device control ====================

    @api_call
    async def reset(self) -> None:
        """Reset all device settings and capture settings.

        After reset the camera restarts and the connection is lost.
        """
        logger.warning("⚠️ Resetting camera settings...")
        await self.executor.execute("camera._reset")

    @api_call
    async def stop_self_timer(self) -> None:
        """Stop the running self-timer. Succeeds even if no timer is running."""
        logger.info("Stopping self-timer...")
        await self.executor.execute("camera._stopSelfTimer")

    @api_call
    async def set_bluetooth_device(self, uuid: str) -> str:
        """Register identification information (UUID) of a Bluetooth device.

        Args:
            uuid: UUID of the device, in ``XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX`` form

        Returns:
            Device name generated by the camera from the serial number
        """
        results = await self.executor.execute_for(
            SetBluetoothDeviceResults, "camera._setBluetoothDevice", {"uuid": uuid}
        )
        logger.info(f"✅ Bluetooth device registered: {results.device_name}")
        return results.device_name
