"""Shared host doubles for runner and build feature tests."""

from __future__ import annotations

import pytest


class FakePluginDescriptor:
    def get_plugin_resources_path(self, name: str) -> str:
        return f"/plugins/unity/{name}"


class FakeRunTypeRegistry:
    def __init__(self, existing: dict[str, object] | None = None) -> None:
        self.run_types: dict[str, object] = dict(existing or {})
        self.registered: list[object] = []

    def find_run_type(self, run_type: str) -> object | None:
        return self.run_types.get(run_type)

    def register_run_type(self, run_type: object) -> None:
        self.registered.append(run_type)


@pytest.fixture
def plugin_descriptor() -> FakePluginDescriptor:
    return FakePluginDescriptor()


@pytest.fixture
def run_type_registry() -> FakeRunTypeRegistry:
    return FakeRunTypeRegistry()
