"""Public API for unity-runner-config."""

from unity_runner_config.build_feature import UnityBuildFeature
from unity_runner_config.config import RunnerSettings, default_runner_properties, load_runner_parameters
from unity_runner_config.describe import DESCRIPTION_RULES, describe_lines, describe_parameters
from unity_runner_config.diagnostics import ValidationIssue, ValidationReport, validate_runner_parameters
from unity_runner_config.rendering import render_configuration
from unity_runner_config.requirements import create_unity_requirement, escape_regex, resolve_requirements
from unity_runner_config.run_type import (
    InvalidProperty,
    PluginDescriptor,
    PositionAware,
    RunTypeExtension,
    RunTypeRegistry,
    UnityRunnerRunType,
)
from unity_runner_config.schema import (
    STANDALONE_PLAYER_REGISTRY,
    DetectionMode,
    ParameterMapping,
    Requirement,
    StandalonePlayer,
    UnityRunnerError,
    parse_bool,
    parse_detection_mode,
    try_parse_detection_mode,
)

__all__ = [
    # Value types
    "DetectionMode",
    "ParameterMapping",
    "Requirement",
    "StandalonePlayer",
    "STANDALONE_PLAYER_REGISTRY",
    "UnityRunnerError",
    "parse_bool",
    "parse_detection_mode",
    "try_parse_detection_mode",
    # Requirements
    "create_unity_requirement",
    "escape_regex",
    "resolve_requirements",
    # Description
    "DESCRIPTION_RULES",
    "describe_lines",
    "describe_parameters",
    # Configuration
    "RunnerSettings",
    "default_runner_properties",
    "load_runner_parameters",
    # Diagnostics
    "ValidationIssue",
    "ValidationReport",
    "validate_runner_parameters",
    # Host facades
    "InvalidProperty",
    "PluginDescriptor",
    "PositionAware",
    "RunTypeExtension",
    "RunTypeRegistry",
    "UnityBuildFeature",
    "UnityRunnerRunType",
    # Rendering
    "render_configuration",
]
