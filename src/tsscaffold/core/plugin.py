"""Base class for service plugins."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .service import IGNORE_FILE, Service


@dataclass(frozen=True)
class MakeFileEntry:
    """A file that can be created with the `make` command.

    ``method`` is an unbound service method; it is called with the service
    instance as its only argument.
    """

    name: str
    file: str
    method: Callable[[Any], Any]

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for display."""
        return {"name": self.name, "file": self.file, "method": self.method.__name__}


class ServicePlugin:
    """Base class for plugins.

    Plugins declare the services they provide and the files those services
    can create on demand.
    """

    NAME: str = "base"
    LABEL: str = "Base"

    @classmethod
    def get_services(cls) -> list[type[Service]]:
        """Return the services provided by the plugin."""
        return []

    @classmethod
    def get_make_files(cls) -> list[MakeFileEntry]:
        """Return the files that can be created with the `make` command."""
        return [MakeFileEntry(name="ignore", file=IGNORE_FILE, method=Service.create_ignore_file)]
