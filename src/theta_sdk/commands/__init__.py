"""THETA command module.

Commands categorized by function:
- Executor and poller: envelope handling and long-running commands
- Camera commands: info, state, options, device control
- Media commands: list, delete, metadata, video conversion
- Network commands: wireless LAN and access points
"""

from .base import *  # noqa: F403
from .camera_commands import *  # noqa: F403
from .executor import *  # noqa: F403
from .media_commands import *  # noqa: F403
from .network_commands import *  # noqa: F403
from .poller import *  # noqa: F403
