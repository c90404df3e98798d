"""Agent requirement resolution for Unity build steps."""

from __future__ import annotations

import logging

from unity_runner_config.constants import (
    DETECTION_MODE_MANUAL,
    EXISTS_QUALIFIER,
    PARAM_DETECTION_MODE,
    PARAM_UNITY_VERSION,
    PLUGIN_DOCKER_IMAGE,
    UNITY_PATH_PROPERTY_PREFIX,
)
from unity_runner_config.schema import ParameterMapping, Requirement, parse_detection_mode

logger = logging.getLogger(__name__)


def escape_regex(value: str) -> str:
    """Escape dots in a version so it only matches itself.

    Values containing ``%`` are host parameter references (``%unity.version%``)
    and are resolved before matching, so they are left untouched.
    """
    if "%" in value:
        return value
    return value.replace(".", "\\.")


def create_unity_requirement(version: str | None) -> Requirement:
    """Build the requirement for an agent with a Unity editor installed.

    An empty or missing version matches any installed editor.
    """
    prefix = escape_regex(UNITY_PATH_PROPERTY_PREFIX)
    return Requirement(
        property_name=f"{EXISTS_QUALIFIER}{prefix}{escape_regex(version or '')}.*",
        type="exists",
    )


def resolve_requirements(parameters: ParameterMapping) -> list[Requirement]:
    """Resolve the agent requirements for a Unity build step.

    Rules:
    - manual detection → no requirement (the step names its own install root)
    - docker image set → no requirement (the image provides the editor)
    - otherwise → exactly one Unity requirement, constrained by the version
      when one is configured
    """
    detection_mode = parse_detection_mode(parameters.get(PARAM_DETECTION_MODE))
    if detection_mode == DETECTION_MODE_MANUAL:
        logger.debug("Skipping Unity requirement: detection mode is manual")
        return []

    docker_image = parameters.get(PLUGIN_DOCKER_IMAGE)
    if docker_image:
        logger.debug("Skipping Unity requirement: step runs in docker image %s", docker_image)
        return []

    return [create_unity_requirement(parameters.get(PARAM_UNITY_VERSION))]
