"""THETA connection management module.

Contains:
- HTTP session management and error translation
"""

from .http_manager import *  # noqa: F403
