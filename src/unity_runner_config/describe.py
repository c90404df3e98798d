"""Human-readable summary of a Unity build step configuration.

Each parameter is described by an independent rule; rules run in a fixed order
and a rule that does not apply contributes nothing.
"""

from __future__ import annotations

from collections.abc import Callable

from unity_runner_config.constants import (
    DETECTION_MODE_AUTO,
    DETECTION_MODE_MANUAL,
    PARAM_ACTIVATE_LICENSE,
    PARAM_BUILD_PLAYER,
    PARAM_BUILD_TARGET,
    PARAM_CACHE_SERVER,
    PARAM_DETECTION_MODE,
    PARAM_EXECUTE_METHOD,
    PARAM_PROJECT_PATH,
    PARAM_RUN_EDITOR_TESTS,
    PARAM_UNITY_ROOT,
    PARAM_UNITY_VERSION,
)
from unity_runner_config.schema import (
    ParameterMapping,
    StandalonePlayer,
    is_blank,
    parse_bool,
    try_parse_detection_mode,
)

DescriptionRule = Callable[[ParameterMapping], "str | None"]


def _text_rule(key: str, label: str) -> DescriptionRule:
    def rule(parameters: ParameterMapping) -> str | None:
        value = parameters.get(key)
        if is_blank(value):
            return None
        return f"{label}: {value}"
    return rule


def _flag_rule(key: str, label: str) -> DescriptionRule:
    def rule(parameters: ParameterMapping) -> str | None:
        if parse_bool(parameters.get(key)):
            return f"{label}: ON"
        return None
    return rule


def _describe_build_player(parameters: ParameterMapping) -> str | None:
    player = StandalonePlayer.try_parse(parameters.get(PARAM_BUILD_PLAYER))
    if player is None:
        return None
    return f"Build player: {player.description}"


def _describe_unity_location(parameters: ParameterMapping) -> str | None:
    # Only an explicitly selected mode is described.
    mode = try_parse_detection_mode(parameters.get(PARAM_DETECTION_MODE))
    version = parameters.get(PARAM_UNITY_VERSION)
    root = parameters.get(PARAM_UNITY_ROOT)

    if mode == DETECTION_MODE_AUTO:
        if is_blank(version):
            return None
        if is_blank(root):
            return f"Unity version: {version}"
        return f"Unity version: {version}, installation root: {root}"

    if mode == DETECTION_MODE_MANUAL:
        if is_blank(root):
            return None
        return f"Unity installation root: {root}"

    return None


DESCRIPTION_RULES: tuple[DescriptionRule, ...] = (
    _text_rule(PARAM_PROJECT_PATH, "Project path"),
    _text_rule(PARAM_EXECUTE_METHOD, "Execute method"),
    _text_rule(PARAM_BUILD_TARGET, "Build target"),
    _describe_build_player,
    _flag_rule(PARAM_RUN_EDITOR_TESTS, "Run editor tests"),
    _flag_rule(PARAM_ACTIVATE_LICENSE, "Activate license"),
    _text_rule(PARAM_CACHE_SERVER, "Cache server"),
    _describe_unity_location,
)


def describe_lines(parameters: ParameterMapping) -> list[str]:
    """Return the description lines that apply, in rule order."""
    lines: list[str] = []
    for rule in DESCRIPTION_RULES:
        line = rule(parameters)
        if line is not None:
            lines.append(line)
    return lines


def describe_parameters(parameters: ParameterMapping) -> str:
    """Describe a build step configuration, one line per configured parameter.

    Returns an empty string when nothing is configured.
    """
    buffer: list[str] = []
    for line in describe_lines(parameters):
        if buffer:
            buffer.append(" ")
        buffer.append(line)
        buffer.append("\n")
    return "".join(buffer).strip()
