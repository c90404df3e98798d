"""Host-agnostic Unity run type definition.

The host supplies a run type registry and a plugin descriptor; this module
only relies on the small protocols declared here.
"""

from __future__ import annotations

from collections.abc import Collection
from functools import cached_property
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from unity_runner_config.config import RunnerSettings
from unity_runner_config.constants import (
    DOCKER_WRAPPER_ID,
    LEGACY_RUNNER_TYPE,
    PARAM_UNITY_VERSION,
    RUNNER_DESCRIPTION,
    RUNNER_DISPLAY_NAME,
    RUNNER_TYPE,
)
from unity_runner_config.describe import describe_parameters
from unity_runner_config.diagnostics import validate_runner_parameters
from unity_runner_config.requirements import resolve_requirements
from unity_runner_config.schema import ParameterMapping, Requirement


@runtime_checkable
class PluginDescriptor(Protocol):
    """Resolves plugin resource names to host paths."""

    def get_plugin_resources_path(self, name: str) -> str: ...


@runtime_checkable
class RunTypeRegistry(Protocol):
    """Host registry of build runner types."""

    def find_run_type(self, run_type: str) -> object | None: ...

    def register_run_type(self, run_type: object) -> None: ...


@runtime_checkable
class PositionAware(Protocol):
    """Extension that declares its position among other extensions."""

    @property
    def order_id(self) -> str: ...


@runtime_checkable
class RunTypeExtension(Protocol):
    """Extension that applies to a set of run types."""

    @property
    def run_types(self) -> Collection[str]: ...


class InvalidProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    property_name: str
    reason: str


class UnityRunnerRunType:
    """Unity build runner registered with the host on construction."""

    def __init__(
        self,
        plugin_descriptor: PluginDescriptor,
        run_type_registry: RunTypeRegistry,
        settings: RunnerSettings | None = None,
    ) -> None:
        self._plugin_descriptor = plugin_descriptor
        self._run_type_registry = run_type_registry
        self._settings = settings or RunnerSettings()
        run_type_registry.register_run_type(self)

    @property
    def type(self) -> str:
        return RUNNER_TYPE

    @cached_property
    def display_name(self) -> str:
        # Another Unity plugin may already own the plain display name.
        if self._run_type_registry.find_run_type(LEGACY_RUNNER_TYPE) is None:
            return RUNNER_DISPLAY_NAME
        return f"{RUNNER_DISPLAY_NAME} (JetBrains plugin)"

    @property
    def description(self) -> str:
        return RUNNER_DESCRIPTION

    @property
    def edit_runner_params_path(self) -> str:
        return self._plugin_descriptor.get_plugin_resources_path(self._settings.edit_runner_resource)

    @property
    def view_runner_params_path(self) -> str:
        return self._plugin_descriptor.get_plugin_resources_path(self._settings.view_runner_resource)

    def default_runner_properties(self) -> dict[str, str]:
        return dict(self._settings.default_properties)

    def process_properties(self, parameters: ParameterMapping) -> list[InvalidProperty]:
        """Return the blocking problems in a runner configuration."""
        report = validate_runner_parameters(parameters)
        return [
            InvalidProperty(property_name=issue.field, reason=issue.message)
            for issue in report.errors
        ]

    def describe_parameters(self, parameters: ParameterMapping) -> str:
        return describe_parameters(parameters)

    def get_runner_specific_requirements(self, parameters: ParameterMapping) -> list[Requirement]:
        """Requirements for a runner step; a step without a Unity version has none.

        Only the build feature asks for "any installed editor".
        """
        if parameters.get(PARAM_UNITY_VERSION) is None:
            return []
        return resolve_requirements(parameters)

    def supports(self, extension: object) -> bool:
        """Whether a run type extension applies to Unity build steps.

        The docker wrapper is always supported so steps can run inside images.
        """
        if isinstance(extension, PositionAware) and extension.order_id == DOCKER_WRAPPER_ID:
            return True
        if isinstance(extension, RunTypeExtension):
            return self.type in extension.run_types
        return False
