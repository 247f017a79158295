"""Generic service, plugin and lifecycle layer."""

from .lifecycle import POST_INIT, POST_VERSION_BUMP, LifecycleHooks
from .plugin import MakeFileEntry, ServicePlugin
from .registry import PluginRegistry
from .service import (
    ExecutionContext,
    Service,
    ServiceInfo,
    User,
    load_service_info,
    save_service_info,
)

__all__ = [
    "POST_INIT",
    "POST_VERSION_BUMP",
    "LifecycleHooks",
    "MakeFileEntry",
    "ServicePlugin",
    "PluginRegistry",
    "ExecutionContext",
    "Service",
    "ServiceInfo",
    "User",
    "load_service_info",
    "save_service_info",
]
