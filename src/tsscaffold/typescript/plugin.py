"""Typescript plugin."""

from tsscaffold.core.plugin import MakeFileEntry, ServicePlugin
from tsscaffold.core.service import Service

from .constants import ESLINT_FILE, PACKAGE_FILE, TSCONFIG_FILE
from .service import TypescriptService


class TypescriptPlugin(ServicePlugin):
    """Plugin providing Typescript services."""

    NAME = "typescript"
    LABEL = "Typescript"

    @classmethod
    def get_services(cls) -> list[type[Service]]:
        """Return the services of the plugin."""
        return [TypescriptService]

    @classmethod
    def get_make_files(cls) -> list[MakeFileEntry]:
        """Return the files that can be created with the `make` command.

        Base entries come first. No check is made for file names that
        collide with them.
        """
        return super().get_make_files() + [
            MakeFileEntry(name="package", file=PACKAGE_FILE, method=TypescriptService.create_package_file),
            MakeFileEntry(name="eslint", file=ESLINT_FILE, method=TypescriptService.create_eslint_config),
            MakeFileEntry(name="tsconfig", file=TSCONFIG_FILE, method=TypescriptService.create_ts_config),
        ]


def get_plugin() -> type[ServicePlugin]:
    """Return the plugin."""
    return TypescriptPlugin
