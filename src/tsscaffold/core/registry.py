"""Plugin registry and `make` command dispatch."""

import logging
from pathlib import Path

from .plugin import MakeFileEntry, ServicePlugin
from .service import Service

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Keeps the registered plugins and dispatches `make` requests."""

    def __init__(self) -> None:
        self.plugins: dict[str, type[ServicePlugin]] = {}

    def register(self, plugin: type[ServicePlugin]) -> None:
        """Register a plugin under its NAME, replacing any previous one."""
        if plugin.NAME in self.plugins:
            logger.warning(f"Replacing registered plugin {plugin.NAME}")
        self.plugins[plugin.NAME] = plugin

    def get_plugin(self, name: str) -> type[ServicePlugin]:
        """Get a plugin by name.

        Raises:
            KeyError: If no plugin has that name.
        """
        try:
            return self.plugins[name]
        except KeyError:
            raise KeyError(f"Unknown plugin: {name}") from None

    def list_plugins(self) -> list[type[ServicePlugin]]:
        """List all plugins in registration order."""
        return list(self.plugins.values())

    def get_make_file(self, plugin_name: str, entry_name: str) -> MakeFileEntry:
        """Find a make-file entry of a plugin.

        The first entry with a matching name wins.

        Raises:
            KeyError: If the plugin or the entry is unknown.
        """
        for entry in self.get_plugin(plugin_name).get_make_files():
            if entry.name == entry_name:
                return entry
        raise KeyError(f"Plugin {plugin_name} has no make file named {entry_name}")

    def make_file(self, service: Service, plugin_name: str, entry_name: str) -> Path:
        """Create a file on a service through a make-file entry.

        Args:
            service: Service instance the entry method is called on.
            plugin_name: Name of the plugin providing the entry.
            entry_name: Display name of the entry.

        Returns:
            Path of the target file.
        """
        entry = self.get_make_file(plugin_name, entry_name)
        logger.info(f"Making {entry.file} for {service.info.identifier}")
        entry.method(service)
        return service.service_directory / entry.file
