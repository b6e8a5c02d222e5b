"""Tests for domain models."""

import dataclasses

import pytest

from static_route_server.domain.models import (
    DEFAULT_FILE,
    DEFAULT_ROUTE,
    DEFAULT_ROUTE_STRIP,
    StaticRoute,
)


def test_static_route_creation() -> None:
    """Given route data, when creating a StaticRoute, then all fields are set correctly."""
    route = StaticRoute(
        file_path="/srv/content",
        default_file="about.html",
        route="/content/*",
        route_strip="/content/",
        params={"max_age": 60},
    )

    assert route.file_path == "/srv/content"
    assert route.default_file == "about.html"
    assert route.route == "/content/*"
    assert route.route_strip == "/content/"
    assert route.params == {"max_age": 60}


def test_static_route_defaults() -> None:
    """Given only a file path, when creating a StaticRoute, then defaults are used."""
    route = StaticRoute(file_path="/srv/content")

    assert route.default_file == DEFAULT_FILE == "index.html"
    assert route.route == DEFAULT_ROUTE == "/*"
    assert route.route_strip == DEFAULT_ROUTE_STRIP == "/"
    assert route.params == {}


def test_static_route_is_immutable() -> None:
    """Given a StaticRoute, when assigning a field, then FrozenInstanceError is raised."""
    route = StaticRoute(file_path="/srv/content")

    with pytest.raises(dataclasses.FrozenInstanceError):
        route.route = "/other/*"  # type: ignore[misc]


def test_static_route_with_defaults_replaces_none_and_empty() -> None:
    """Given None and empty values, when building with defaults, then defaults replace them."""
    assert StaticRoute.with_defaults("/srv/content", None, "", None, None) == StaticRoute(
        file_path="/srv/content"
    )


def test_static_route_with_defaults_copies_params() -> None:
    """Given a params dict, when building with defaults, then the record holds a copy."""
    params = {"max_age": 1}

    route = StaticRoute.with_defaults("/srv/content", params=params)
    params["max_age"] = 2

    assert route.params == {"max_age": 1}


def test_static_route_is_hashable_with_params() -> None:
    """Given records with params, when hashing, then equal records collapse in a set."""
    first = StaticRoute(file_path="/srv/content", params={"max_age": 60})
    same = StaticRoute.with_defaults("/srv/content", params={"max_age": 60})
    other_params = StaticRoute(file_path="/srv/content", params={"max_age": 1})

    assert hash(first) == hash(same)
    assert {first, same} == {first}
    assert first != other_params
    assert len({first, other_params}) == 2
