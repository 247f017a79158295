"""Typescript services."""

from .models import CompilerOptions, ESLintConfig, PackageManifest, TSConfig
from .plugin import TypescriptPlugin, get_plugin
from .service import ManifestParseError, TypescriptService, merge_packages, resolve

__all__ = [
    "CompilerOptions",
    "ESLintConfig",
    "PackageManifest",
    "TSConfig",
    "TypescriptPlugin",
    "get_plugin",
    "ManifestParseError",
    "TypescriptService",
    "merge_packages",
    "resolve",
]
