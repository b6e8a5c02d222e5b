"""Tests for static route configuration loading."""

from pathlib import Path

import pytest

from static_route_server.adapters.config import AppConfig, StaticRouteConfigurationLoader
from static_route_server.domain.models import StaticRoute


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create a config directory with a public folder."""
    (tmp_path / "public").mkdir()
    return tmp_path


def test_loader_resolves_relative_paths_against_config_file(config_dir: Path) -> None:
    """Given a relative file_path, when loading, then it is resolved next to the TOML file."""
    config_file = config_dir / "config.toml"
    config_file.write_text('[[static_routes]]\nfile_path = "public"\n')

    routes = StaticRouteConfigurationLoader.load(AppConfig(config_file=str(config_file)))

    assert routes == [StaticRoute(file_path=str(config_dir.resolve() / "public"))]


def test_loader_keeps_absolute_paths(config_dir: Path) -> None:
    """Given an absolute file_path, when loading, then it is kept as is."""
    config_file = config_dir / "config.toml"
    config_file.write_text('[[static_routes]]\nfile_path = "/srv/content"\n')

    routes = StaticRouteConfigurationLoader.load(AppConfig(config_file=str(config_file)))

    assert routes[0].file_path == "/srv/content"


def test_loader_fills_in_defaults_and_keeps_params(config_dir: Path) -> None:
    """Given a partial route table, when loading, then defaults fill the gaps."""
    config_file = config_dir / "config.toml"
    config_file.write_text(
        """
[[static_routes]]
file_path = "/srv/assets"
route = "/assets/*"

[static_routes.params]
max_age = 60
"""
    )

    routes = StaticRouteConfigurationLoader.load(AppConfig(config_file=str(config_file)))

    assert routes == [
        StaticRoute(
            file_path="/srv/assets",
            default_file="index.html",
            route="/assets/*",
            route_strip="/",
            params={"max_age": 60},
        )
    ]


def test_loader_keeps_declaration_order(config_dir: Path) -> None:
    """Given several routes, when loading, then their order is preserved."""
    config_file = config_dir / "config.toml"
    config_file.write_text(
        """
[[static_routes]]
file_path = "/srv/a"
route = "/a/*"

[[static_routes]]
file_path = "/srv/b"
route = "/b/*"
"""
    )

    routes = StaticRouteConfigurationLoader.load(AppConfig(config_file=str(config_file)))

    assert [route.route for route in routes] == ["/a/*", "/b/*"]


def test_loader_rejects_non_string_file_path(config_dir: Path) -> None:
    """Given a numeric file_path, when loading, then ValueError is raised."""
    config_file = config_dir / "config.toml"
    config_file.write_text("[[static_routes]]\nfile_path = 42\n")

    with pytest.raises(ValueError, match="'file_path' must be a non-empty string"):
        StaticRouteConfigurationLoader.load(AppConfig(config_file=str(config_file)))


def test_loader_rejects_non_table_params(config_dir: Path) -> None:
    """Given params that are not a table, when loading, then ValueError is raised."""
    config_file = config_dir / "config.toml"
    config_file.write_text('[[static_routes]]\nfile_path = "/srv/a"\nparams = "fast"\n')

    with pytest.raises(ValueError, match="'params' must be a table"):
        StaticRouteConfigurationLoader.load(AppConfig(config_file=str(config_file)))


def test_example_config_declares_existing_public_directory() -> None:
    """Given the shipped example config, when loading, then its route points at public/."""
    example = Path(__file__).parent.parent / "config.example.toml"

    routes = StaticRouteConfigurationLoader.load(AppConfig(config_file=str(example)))

    assert len(routes) == 1
    assert Path(routes[0].file_path).is_dir()
    assert (Path(routes[0].file_path) / routes[0].default_file).is_file()
