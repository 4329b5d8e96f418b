"""Camera configuration and timeout settings."""

from __future__ import annotations

__all__ = ["Config", "TimeoutConfig"]

import logging
from dataclasses import dataclass

import aiohttp

from .enums import LanguageEnum, OffDelay, OffDelayEnum, SleepDelay, SleepDelayEnum
from .wire import WireOptions

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Settings applied to the camera at initialization and restorable afterwards.

    Each field is optional; ``None`` leaves the camera's value unchanged.

    Attributes:
        date_time: Camera clock, ``YYYY:MM:DD hh:mm:ss+(-)hh:mm``
        language: Camera OS language (ignored by THETA S, SC and SC2)
        off_delay: Standby time before auto power-off
        sleep_delay: Standby time before sleep
        shutter_volume: Shutter volume, 0 to 100
    """

    date_time: str | None = None
    language: LanguageEnum | None = None
    off_delay: OffDelay | None = None
    sleep_delay: SleepDelay | None = None
    shutter_volume: int | None = None

    @classmethod
    def from_wire(cls, options: WireOptions) -> Config:
        """Create from options read back from the camera."""
        return cls(
            date_time=options.date_time_zone,
            language=LanguageEnum.get(options.language) if options.language is not None else None,
            off_delay=OffDelayEnum.get(options.off_delay) if options.off_delay is not None else None,
            sleep_delay=SleepDelayEnum.get(options.sleep_delay) if options.sleep_delay is not None else None,
            shutter_volume=options.shutter_volume,
        )

    def to_wire(self) -> WireOptions:
        """Convert to wire options, leaving unset fields out."""
        return WireOptions(
            date_time_zone=self.date_time,
            language=self.language.value if self.language is not None else None,
            off_delay=self.off_delay.sec if self.off_delay is not None else None,
            sleep_delay=self.sleep_delay.sec if self.sleep_delay is not None else None,
            shutter_volume=self.shutter_volume,
        )

    def is_empty(self) -> bool:
        return (
            self.date_time is None
            and self.language is None
            and self.off_delay is None
            and self.sleep_delay is None
            and self.shutter_volume is None
        )


@dataclass
class TimeoutConfig:
    """Timeout configuration (seconds). Scoped to one client."""

    connect_timeout: float = 20.0  # TCP connection establishment
    request_timeout: float = 20.0  # whole request, including reading the response
    socket_timeout: float = 20.0  # idle time between two reads
    status_poll_interval: float = 1.0  # delay between two camera.commands/status polls
    preview_read_timeout: float = 20.0  # idle time between two live preview chunks

    def to_client_timeout(self) -> aiohttp.ClientTimeout:
        return aiohttp.ClientTimeout(
            total=self.request_timeout,
            sock_connect=self.connect_timeout,
            sock_read=self.socket_timeout,
        )

    def to_preview_timeout(self) -> aiohttp.ClientTimeout:
        """Timeout for the live preview stream, which has no overall limit."""
        return aiohttp.ClientTimeout(
            total=None,
            sock_connect=self.connect_timeout,
            sock_read=self.preview_read_timeout,
        )
