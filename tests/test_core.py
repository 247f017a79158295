"""Tests for the generic service, plugin and registry layer."""

from pathlib import Path

import pytest

from tsscaffold.core import (
    ExecutionContext,
    PluginRegistry,
    Service,
    ServiceInfo,
    ServicePlugin,
    User,
    load_service_info,
    save_service_info,
)


@pytest.fixture
def service(tmp_path: Path) -> Service:
    """Create a generic service in a temporary directory."""
    info = ServiceInfo(identifier="demo", description="Demo service", version="0.1.0", license="MIT")
    context = ExecutionContext(user=User(name="Ada", email="ada@example.com"))
    return Service(context, info, tmp_path / "demo")


def test_post_init_creates_service_directory(service: Service) -> None:
    """Base post init creates the working directory."""
    assert not service.service_directory.exists()
    service.post_init()
    assert service.service_directory.is_dir()


def test_file_header_lines(service: Service) -> None:
    """Header lines describe the file and the service."""
    lines = service.make_file_header_lines("index.ts")
    assert lines[0] == "File: index.ts"
    assert "Service: demo" in lines
    assert "Author: Ada <ada@example.com>" in lines
    assert "License: MIT" in lines


def test_file_header_lines_skip_missing_fields(tmp_path: Path) -> None:
    """Missing identity fields are left out of the header."""
    service = Service(ExecutionContext(), ServiceInfo(identifier="bare"), tmp_path)
    assert service.make_file_header_lines("a.ts") == ["File: a.ts", "Service: bare"]


def test_create_ignore_file(service: Service) -> None:
    """The ignore file lists the ignore components."""
    service.post_init()
    service.create_ignore_file()
    content = (service.service_directory / ".gitignore").read_text()
    for component in service.make_ignore_components():
        assert f"# {component}" in content


def test_service_info_round_trip(tmp_path: Path) -> None:
    """Service info survives a save and load."""
    path = tmp_path / "service.yaml"
    info = ServiceInfo(identifier="demo", version="1.2.3")
    save_service_info(info, path)

    assert load_service_info(path) == info
    assert "description" not in path.read_text()


def test_load_service_info_missing(tmp_path: Path) -> None:
    """A missing record loads as None."""
    assert load_service_info(tmp_path / "service.yaml") is None


class DemoPlugin(ServicePlugin):
    """Plugin used by the registry tests."""

    NAME = "demo"
    LABEL = "Demo"


class TestPluginRegistry:
    """Tests for PluginRegistry."""

    def test_register_and_get(self) -> None:
        """Registered plugins can be looked up by name."""
        registry = PluginRegistry()
        registry.register(DemoPlugin)
        assert registry.get_plugin("demo") is DemoPlugin
        assert registry.list_plugins() == [DemoPlugin]

    def test_unknown_plugin(self) -> None:
        """Unknown plugins raise KeyError."""
        with pytest.raises(KeyError):
            PluginRegistry().get_plugin("missing")

    def test_unknown_entry(self) -> None:
        """Unknown make file entries raise KeyError."""
        registry = PluginRegistry()
        registry.register(DemoPlugin)
        with pytest.raises(KeyError):
            registry.get_make_file("demo", "missing")

    def test_make_file_dispatches_to_service(self, service: Service) -> None:
        """make_file calls the entry method on the service."""
        registry = PluginRegistry()
        registry.register(DemoPlugin)
        service.post_init()

        path = registry.make_file(service, "demo", "ignore")

        assert path == service.service_directory / ".gitignore"
        assert path.exists()
