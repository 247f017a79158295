"""Typescript service.

Generates package.json, tsconfig.json, tsconfig.build.json, .eslintrc.json
and src/index.ts for a service, installs its packages and keeps
package.json in step with version bumps.
"""

import json
import logging
import subprocess
from pathlib import Path

from pydantic import ValidationError

from tsscaffold.config import ScaffoldSettings, get_settings
from tsscaffold.core.lifecycle import POST_INIT, POST_VERSION_BUMP
from tsscaffold.core.service import ExecutionContext, Service, ServiceInfo

from .constants import (
    DEFAULT_SCRIPTS,
    ESLINT_FILE,
    IGNORE_COMPONENT,
    INDEX_FILE,
    PACKAGE_FILE,
    PACKAGES,
    SOURCE_DIR,
    TSCONFIG_BUILD_FILE,
    TSCONFIG_FILE,
)
from .models import CompilerOptions, ESLintConfig, PackageManifest, TSConfig, to_json

logger = logging.getLogger(__name__)


class ManifestParseError(ValueError):
    """Raised when package.json exists but cannot be parsed."""


def merge_packages(base: dict[str, str], defaults: dict[str, str]) -> dict[str, str]:
    """Merge default packages on top of service supplied ones.

    Args:
        base: Packages supplied by the service.
        defaults: Packages every Typescript service gets. Wins on collision.

    Returns:
        New mapping of package name to version.
    """
    return {**base, **defaults}


def resolve(value: str | None, fallback: str) -> str:
    """Return value, or fallback when value is None or empty."""
    return value or fallback


class TypescriptService(Service):
    """Typescript service."""

    NAME = "typescript"

    def __init__(
        self,
        context: ExecutionContext,
        info: ServiceInfo,
        directory: str | Path,
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        scripts: dict[str, str] | None = None,
        settings: ScaffoldSettings | None = None,
    ):
        """Initialize the Typescript service.

        Args:
            context: Context of the code execution.
            info: Identity of the service.
            directory: Working directory of the service.
            dependencies: Package name to version.
            dev_dependencies: Dev package name to version.
            scripts: Service defined scripts for package.json.
            settings: Settings, defaults to the environment.
        """
        super().__init__(context, info, directory)
        self._dependencies = dict(dependencies or {})
        self._dev_dependencies = dict(dev_dependencies or {})
        self._scripts = dict(scripts or {})
        self.settings = settings or get_settings()

        self.hooks.register(POST_INIT, self.create_package_file)
        self.hooks.register(POST_INIT, self.create_source_files)
        self.hooks.register(POST_INIT, self.create_ts_config)
        self.hooks.register(POST_INIT, self.create_eslint_config)
        self.hooks.register(POST_INIT, self.install_packages)
        self.hooks.register(POST_VERSION_BUMP, self.update_package_version)

    @property
    def dependencies(self) -> dict[str, str]:
        return merge_packages(self._dependencies, PACKAGES["typescript"]["pkg"])

    @property
    def dev_dependencies(self) -> dict[str, str]:
        return merge_packages(self._dev_dependencies, PACKAGES["typescript"]["dev"])

    @property
    def scripts(self) -> dict[str, str]:
        return merge_packages(self._scripts, DEFAULT_SCRIPTS)

    @property
    def package_path(self) -> Path:
        return self.service_directory / PACKAGE_FILE

    # package.json

    def read_package_file(self) -> PackageManifest | None:
        """Read package.json.

        Returns:
            PackageManifest or None if package.json doesn't exist.

        Raises:
            ManifestParseError: If package.json is not a valid manifest.
        """
        if not self.package_path.exists():
            logger.debug(f"No package file at {self.package_path}")
            return None
        content = self.package_path.read_text(encoding="utf-8")
        try:
            return PackageManifest.model_validate(json.loads(content))
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Invalid package file {self.package_path}: {e}")
            raise ManifestParseError(f"Invalid package file {self.package_path}: {e}") from e

    def make_package_content(self) -> PackageManifest:
        """Construct the package.json content from the service info."""
        pkg = PackageManifest(
            name=self.info.identifier,
            description=resolve(self.info.description, ""),
            version=resolve(self.info.version, self.settings.default_version),
            main=self.settings.main_entry,
            license=resolve(self.info.license, self.settings.default_license),
            dependencies=self.dependencies,
            dev_dependencies=self.dev_dependencies,
            scripts=self.scripts,
        )
        user = self.context.user
        if user is not None:
            pkg.author = f"{user.name} <{user.email}>"
        return pkg

    def write_package_file(self, pkg: PackageManifest) -> None:
        """Overwrite package.json with pkg."""
        self.package_path.write_text(to_json(pkg), encoding="utf-8")
        logger.info(f"Wrote {self.package_path}")

    def create_package_file(self) -> None:
        """Create the package.json file."""
        self.write_package_file(self.make_package_content())

    def update_package_version(self) -> None:
        """Set the package.json version to the service version.

        Does nothing when package.json doesn't exist or the service has
        no version.
        """
        pkg = self.read_package_file()
        if pkg is None:
            return
        if not self.info.version:
            logger.debug(f"Service {self.info.identifier} has no version, keeping {self.package_path}")
            return
        pkg.version = self.info.version
        self.write_package_file(pkg)

    # tsconfig

    def make_ts_config(self) -> TSConfig:
        """Make the tsconfig.json content."""
        return TSConfig(
            compiler_options=CompilerOptions(
                target="es2019",
                module="commonjs",
                lib=["es2019"],
                source_map=True,
                out_dir="./dist",
                module_resolution="node",
                declaration=True,
                remove_comments=True,
                no_implicit_any=True,
                strict_null_checks=True,
                strict_function_types=True,
                no_implicit_this=True,
                no_unused_locals=True,
                no_unused_parameters=True,
                no_implicit_returns=True,
                no_fallthrough_cases_in_switch=True,
                allow_synthetic_default_imports=True,
                emit_decorator_metadata=True,
                experimental_decorators=True,
                base_url=".",
            ),
            include=[f"{SOURCE_DIR}/**/*"],
            exclude=["node_modules"],
        )

    def make_build_ts_config(self) -> TSConfig:
        """Make the tsconfig.build.json content.

        Extends tsconfig.json and only narrows the files that get compiled.
        """
        return TSConfig(
            extends=f"./{TSCONFIG_FILE}",
            include=[f"{SOURCE_DIR}/**/*"],
            exclude=["node_modules", "dist", "test", "**/*.spec.ts"],
        )

    def create_ts_config(self) -> None:
        """Create tsconfig.json and tsconfig.build.json."""
        for file_name, config in (
            (TSCONFIG_FILE, self.make_ts_config()),
            (TSCONFIG_BUILD_FILE, self.make_build_ts_config()),
        ):
            path = self.service_directory / file_name
            path.write_text(to_json(config), encoding="utf-8")
            logger.info(f"Wrote {path}")

    # eslint

    def make_eslint_config(self) -> ESLintConfig:
        """Make the .eslintrc.json content."""
        return ESLintConfig(
            env={"node": True, "es6": True},
            extends=["eslint:recommended", "plugin:@typescript-eslint/recommended"],
            parser="@typescript-eslint/parser",
            parser_options={"ecmaVersion": 12, "sourceType": "module"},
            plugins=["@typescript-eslint", "jsdoc"],
            rules={
                "@typescript-eslint/ban-ts-comment": 1,
                "@typescript-eslint/no-unused-vars": [2, {"argsIgnorePattern": "^_"}],
                "@typescript-eslint/explicit-module-boundary-types": 2,
                "no-warning-comments": [
                    1,
                    {"terms": ["todo", "fixme", "xxx"], "location": "start"},
                ],
                "jsdoc/require-jsdoc": [
                    2,
                    {
                        "require": {
                            "FunctionDeclaration": True,
                            "MethodDefinition": True,
                            "ClassDeclaration": True,
                            "ArrowFunctionExpression": False,
                            "FunctionExpression": False,
                        },
                    },
                ],
                "jsdoc/require-description": 2,
                "jsdoc/require-description-complete-sentence": 2,
                "jsdoc/implements-on-classes": 2,
                "jsdoc/check-types": 2,
                "jsdoc/valid-types": 2,
                "jsdoc/require-param": 2,
                "jsdoc/require-param-name": 2,
                "jsdoc/require-param-type": 2,
                "jsdoc/require-param-description": 2,
                "jsdoc/check-param-names": 2,
                "jsdoc/require-returns": 2,
                "jsdoc/require-returns-type": 2,
                "jsdoc/require-returns-description": 2,
                "jsdoc/check-tag-names": 2,
            },
        )

    def create_eslint_config(self) -> None:
        """Create the .eslintrc.json file."""
        path = self.service_directory / ESLINT_FILE
        path.write_text(to_json(self.make_eslint_config()), encoding="utf-8")
        logger.info(f"Wrote {path}")

    # sources

    def make_file_header(self, file_name: str) -> str:
        """Return the file header as a block comment.

        Args:
            file_name: File name for the header.

        Returns:
            Header for the Typescript file.
        """
        body = "\n".join(f" * {line}" for line in self.make_file_header_lines(file_name))
        return f"/*\n{body}\n*/\n"

    def create_source_directory(self) -> Path:
        """Create `src/` if it is missing.

        Returns:
            Path to the source directory.
        """
        source_dir = self.service_directory / SOURCE_DIR
        if not source_dir.exists():
            source_dir.mkdir()
        return source_dir

    def make_main_index_file_content(self) -> str:
        return self.make_file_header(INDEX_FILE)

    def create_source_files(self) -> None:
        """Create all the files in `src/`."""
        source_dir = self.create_source_directory()
        (source_dir / INDEX_FILE).write_text(self.make_main_index_file_content(), encoding="utf-8")
        logger.info(f"Wrote {source_dir / INDEX_FILE}")

    # packages

    def install_packages(self) -> None:
        """Install all packages with the configured package manager.

        Raises:
            subprocess.CalledProcessError: If the package manager fails.
        """
        command = [self.settings.package_manager, "--cwd", str(self.service_directory)]
        logger.info(f"Installing packages: {' '.join(command)}")
        subprocess.run(command, check=True)

    def make_ignore_components(self) -> list[str]:
        """Make the ignore components, adding node to the base ones."""
        return super().make_ignore_components() + [IGNORE_COMPONENT]
