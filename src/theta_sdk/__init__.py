"""THETA SDK - A Python SDK for controlling RICOH THETA 360° cameras.

Talks to the camera's Open Spherical Camera (OSC) Web API over HTTP, with asyncio.

Main components:
- connection/: HTTP session management and error translation
- commands/: command executor, status poller and command implementations
- client.py: Main client interface (composition + delegation pattern)
- session.py: Initialization handshake and per-model capabilities
- options.py / enums.py: Typed camera options
- capture.py / preview.py: Photo/video capture and live preview

Key features:
- Typed options mapped onto each model's wire format
- Legacy (API level 1) session upgrade handled at initialization
- Long-running commands polled to completion
"""

from importlib.metadata import version

__version__ = version("theta-sdk-py")

from . import enums
from .capture import PhotoCapture, PhotoCaptureBuilder, VideoCapture, VideoCaptureBuilder, VideoCapturing
from .client import ThetaClient
from .config import Config, TimeoutConfig
from .enums import *  # noqa: F403
from .exceptions import InvalidOptionValueError, NotConnectedError, ThetaError, ThetaWebApiError
from .logging_config import setup_logging
from .models import AccessPoint, Exif, FileInfo, FileList, ThetaInfo, ThetaState, Xmp
from .options import GpsInfo, OptionNameEnum, Options
from .rich_utils import Console, Table, console, create_file_table, create_options_table, create_table
from .session import CameraModel, Capabilities, capabilities_for

__all__ = [
    "AccessPoint",
    "CameraModel",
    "Capabilities",
    "Config",
    "Console",
    "Exif",
    "FileInfo",
    "FileList",
    "GpsInfo",
    "InvalidOptionValueError",
    "NotConnectedError",
    "OptionNameEnum",
    "Options",
    "PhotoCapture",
    "PhotoCaptureBuilder",
    "Table",
    "ThetaClient",
    "ThetaError",
    "ThetaInfo",
    "ThetaState",
    "ThetaWebApiError",
    "TimeoutConfig",
    "VideoCapture",
    "VideoCaptureBuilder",
    "VideoCapturing",
    "Xmp",
    "capabilities_for",
    "console",
    "create_file_table",
    "create_options_table",
    "create_table",
    "setup_logging",
    *enums.__all__,
]
