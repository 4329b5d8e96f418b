"""Rich utilities for formatting and display."""

from collections.abc import Iterable
from enum import Enum

from rich.console import Console
from rich.table import Table

from .models import AccessPoint, FileList
from .options import OptionNameEnum, Options

# Global console instance
console = Console()


def create_table(title: str, *columns: str, **kwargs) -> Table:
    """
    Create a table with standard styling.

    Args:
        title: Table title
        *columns: Column names
        **kwargs: Additional Table arguments

    Returns:
        Table instance
    """
    table = Table(title=title, **kwargs)
    for col in columns:
        table.add_column(col)
    return table


def format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    value = size / 1024
    for unit in ("KB", "MB"):
        if value < 1024:
            return f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


def format_value(value: object) -> str:
    """Display form of an option value."""
    if isinstance(value, Enum):
        return value.name
    return str(value)


def create_file_table(file_list: FileList, title: str = "Camera files") -> Table:
    """
    Create a table listing files on the camera.

    Args:
        file_list: Result of ``list_files``
        title: Table title

    Returns:
        Table instance, captioned with the total number of entries
    """
    table = create_table(title, "Name", "Size", "Date", "URL", caption=f"{file_list.total_entries} files in total")
    for file in file_list.files:
        table.add_row(file.name, format_size(file.size), file.date_time, file.file_url)
    return table


def create_options_table(options: Options, names: Iterable[OptionNameEnum] | None = None) -> Table:
    """
    Create a table of option values.

    Args:
        options: Options to show
        names: Options to include; defaults to the ones that are set

    Returns:
        Table instance
    """
    table = create_table("Camera options", "Option", "Value")
    for name in names if names is not None else options.set_names():
        value = options.get_value(name)
        table.add_row(name.wire_name, "-" if value is None else format_value(value))
    return table


def create_access_point_table(access_points: list[AccessPoint]) -> Table:
    table = create_table("Access points", "SSID", "Auth", "Priority", "DHCP", "IP address")
    for ap in access_points:
        table.add_row(
            ap.ssid,
            ap.auth_mode.value if ap.auth_mode is not None else "?",
            str(ap.connection_priority),
            "yes" if ap.using_dhcp else "no",
            ap.ip_address or "",
        )
    return table


__all__ = [
    "console",
    "Console",
    "Table",
    "create_access_point_table",
    "create_file_table",
    "create_options_table",
    "create_table",
    "format_size",
    "format_value",
]
