"""Unity build feature: build-level settings shared by all Unity steps."""

from __future__ import annotations

from unity_runner_config.config import RunnerSettings
from unity_runner_config.constants import BUILD_FEATURE_DISPLAY_NAME, BUILD_FEATURE_TYPE
from unity_runner_config.describe import describe_parameters
from unity_runner_config.requirements import resolve_requirements
from unity_runner_config.run_type import PluginDescriptor
from unity_runner_config.schema import ParameterMapping, Requirement


class UnityBuildFeature:
    def __init__(self, plugin_descriptor: PluginDescriptor, settings: RunnerSettings | None = None) -> None:
        self._plugin_descriptor = plugin_descriptor
        self._settings = settings or RunnerSettings()

    @property
    def type(self) -> str:
        return BUILD_FEATURE_TYPE

    @property
    def display_name(self) -> str:
        return BUILD_FEATURE_DISPLAY_NAME

    @property
    def edit_parameters_url(self) -> str:
        return self._plugin_descriptor.get_plugin_resources_path(self._settings.edit_feature_resource)

    def is_multiple_features_per_build_type_allowed(self) -> bool:
        return False

    def describe_parameters(self, parameters: ParameterMapping) -> str:
        return describe_parameters(parameters)

    def get_requirements(self, parameters: ParameterMapping) -> list[Requirement]:
        return resolve_requirements(parameters)
