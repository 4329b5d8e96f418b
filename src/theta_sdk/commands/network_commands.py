"""Network commands: wireless LAN and client-mode access points."""

from __future__ import annotations

__all__ = ["NetworkCommands"]

import logging

from ..enums import AuthModeEnum
from ..models import AccessPoint
from ..wire import ListAccessPointsResults, WireAccessPoint
from .base import api_call
from .executor import CommandExecutor, convert

logger = logging.getLogger(__name__)


class NetworkCommands:
    """Wireless LAN command interface."""

    def __init__(self, executor: CommandExecutor) -> None:
        self.executor = executor

    @api_call
    async def finish_wlan(self) -> None:
        """Turn the camera's wireless LAN off. The connection is lost afterwards."""
        logger.info("Finishing wireless LAN...")
        await self.executor.execute("camera._finishWlan")

    @api_call
    async def list_access_points(self) -> list[AccessPoint]:
        """List the access points registered for client mode."""
        results = await self.executor.execute_for(ListAccessPointsResults, "camera._listAccessPoints")
        access_points = [convert(AccessPoint.from_wire, ap) for ap in results.access_points]
        logger.debug(f"Found {len(access_points)} access points")
        return access_points

    async def set_access_point_dynamically(
        self,
        ssid: str,
        ssid_stealth: bool = False,
        auth_mode: AuthModeEnum = AuthModeEnum.NONE,
        password: str = "",
        connection_priority: int = 1,
    ) -> None:
        """Register an access point whose IP address is assigned by DHCP.

        Args:
            ssid: SSID of the access point
            ssid_stealth: Whether the SSID is hidden
            auth_mode: Authentication mode
            password: Password, unused when ``auth_mode`` is NONE
            connection_priority: Connection priority, 1 to 5
        """
        await self._set_access_point(
            WireAccessPoint(
                ssid=ssid,
                ssid_stealth=ssid_stealth,
                security=auth_mode.value,
                password=password,
                connection_priority=connection_priority,
                ip_address_allocation="dynamic",
            )
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
        """Register an access point with a static IP address.

        Args:
            ssid: SSID of the access point
            ip_address: Camera IP address
            subnet_mask: Subnet mask
            default_gateway: Default gateway
            ssid_stealth: Whether the SSID is hidden
            auth_mode: Authentication mode
            password: Password, unused when ``auth_mode`` is NONE
            connection_priority: Connection priority, 1 to 5
        """
        await self._set_access_point(
            WireAccessPoint(
                ssid=ssid,
                ssid_stealth=ssid_stealth,
                security=auth_mode.value,
                password=password,
                connection_priority=connection_priority,
                ip_address_allocation="static",
                ip_address=ip_address,
                subnet_mask=subnet_mask,
                default_gateway=default_gateway,
            )
        )

    @api_call
    async def _set_access_point(self, access_point: WireAccessPoint) -> None:
        logger.info(f"Registering access point {access_point.ssid} ({access_point.ip_address_allocation})...")
        await self.executor.execute("camera._setAccessPoint", access_point.to_dict())
        logger.info(f"✅ Access point {access_point.ssid} registered")

    @api_call
    async def delete_access_point(self, ssid: str) -> None:
        logger.info(f"Deleting access point {ssid}...")
        await self.executor.execute("camera._deleteAccessPoint", {"ssid": ssid})
