"""Generic service abstraction.

Holds the service identity, its working directory and the lifecycle hooks
that specializations extend.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from .lifecycle import POST_INIT, POST_VERSION_BUMP, LifecycleHooks

logger = logging.getLogger(__name__)

SERVICE_INFO_FILE = "service.yaml"
IGNORE_FILE = ".gitignore"


@dataclass
class User:
    """Owning user of a service."""

    name: str
    email: str


@dataclass
class ExecutionContext:
    """Context of the code execution."""

    user: User | None = None


class ServiceInfo(BaseModel):
    """Identity of a service."""

    identifier: str
    description: str | None = None
    version: str | None = None
    license: str | None = None


def load_service_info(path: str | Path) -> ServiceInfo | None:
    """Load a service identity record.

    Args:
        path: Path to the YAML record.

    Returns:
        ServiceInfo or None if the file doesn't exist.
    """
    path = Path(path)
    if not path.exists():
        return None
    with open(path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}
    return ServiceInfo(**data)


def save_service_info(info: ServiceInfo, path: str | Path) -> None:
    """Save a service identity record as YAML."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(info.model_dump(exclude_none=True), f, sort_keys=False)


class Service:
    """Base class for services.

    Specializations call ``super().__init__`` and then register their own
    lifecycle steps on ``self.hooks``.
    """

    NAME = "service"

    def __init__(self, context: ExecutionContext, info: ServiceInfo, directory: str | Path):
        """Initialize the service.

        Args:
            context: Context of the code execution.
            info: Identity of the service.
            directory: Working directory of the service.
        """
        self.context = context
        self.info = info
        self.service_directory = Path(directory)
        self.hooks = LifecycleHooks()
        self.hooks.register(POST_INIT, self.create_service_directory)
        self.hooks.register(POST_VERSION_BUMP, self.log_version_bump)

    def post_init(self) -> None:
        """Run the post initialization steps of every layer."""
        logger.info(f"Initializing service {self.info.identifier} in {self.service_directory}")
        self.hooks.run(POST_INIT)

    def post_version_bump(self) -> None:
        """Run the post version bump steps of every layer."""
        self.hooks.run(POST_VERSION_BUMP)

    def create_service_directory(self) -> Path:
        """Create the service directory if it is missing."""
        self.service_directory.mkdir(parents=True, exist_ok=True)
        return self.service_directory

    def log_version_bump(self) -> None:
        logger.info(f"Service {self.info.identifier} bumped to {self.info.version}")

    def make_ignore_components(self) -> list[str]:
        """Make the ignore components for the ignore file.

        Returns:
            Ignore components.
        """
        return ["linux", "macos", "windows"]

    def create_ignore_file(self) -> None:
        """Write the ignore components, one per line, as a comment block."""
        lines = [f"# {component}" for component in self.make_ignore_components()]
        (self.service_directory / IGNORE_FILE).write_text("\n".join(lines) + "\n", encoding="utf-8")

    def make_file_header_lines(self, file_name: str) -> list[str]:
        """Make the lines of a standard source file header.

        Args:
            file_name: File name for the header.

        Returns:
            Header lines without comment markers.
        """
        lines = [f"File: {file_name}", f"Service: {self.info.identifier}"]
        if self.info.description:
            lines.append(f"Description: {self.info.description}")
        if self.info.version:
            lines.append(f"Version: {self.info.version}")
        if self.context.user is not None:
            lines.append(f"Author: {self.context.user.name} <{self.context.user.email}>")
        if self.info.license:
            lines.append(f"License: {self.info.license}")
        return lines
