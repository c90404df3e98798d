"""Runner settings and YAML parameter loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from unity_runner_config.constants import (
    DETECTION_MODE_AUTO,
    EDIT_BUILD_FEATURE_RESOURCE,
    EDIT_RUNNER_PARAMETERS_RESOURCE,
    PARAM_DETECTION_MODE,
    VIEW_RUNNER_PARAMETERS_RESOURCE,
)
from unity_runner_config.schema import UnityRunnerError

logger = logging.getLogger(__name__)


class RunnerSettings(BaseModel):
    """Static settings for the runner and build feature host integration."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    default_properties: dict[str, str] = Field(
        default_factory=lambda: {PARAM_DETECTION_MODE: DETECTION_MODE_AUTO}
    )
    edit_runner_resource: str = EDIT_RUNNER_PARAMETERS_RESOURCE
    view_runner_resource: str = VIEW_RUNNER_PARAMETERS_RESOURCE
    edit_feature_resource: str = EDIT_BUILD_FEATURE_RESOURCE


def default_runner_properties() -> dict[str, str]:
    """Properties pre-filled for a newly added Unity build step."""
    return dict(RunnerSettings().default_properties)


# YAML spellings of null; BaseLoader leaves them as text.
_NULL_SCALARS = frozenset({"", "~", "null", "Null", "NULL"})


def _to_parameter_value(key: str, value: Any, path: Path) -> str | None:
    if not isinstance(value, str):
        raise UnityRunnerError(
            f"Parameter '{key}' must be a scalar value, got {type(value).__name__}: {path}"
        )
    if value in _NULL_SCALARS:
        return None
    return value


def load_runner_parameters(path: Path | str) -> dict[str, str]:
    """Load a flat parameter mapping from a YAML file.

    Scalars keep their source text (``2020.10`` stays ``2020.10``, ``0755``
    stays ``0755``), the same strings the host stores. Null entries are
    treated as not configured.
    """
    path = Path(path)
    if not path.exists():
        raise UnityRunnerError(f"Runner parameters file not found: {path}")

    with open(path, "r", encoding="utf-8") as handle:
        raw = yaml.load(handle, Loader=yaml.BaseLoader) or {}

    if not isinstance(raw, dict):
        raise UnityRunnerError(f"Runner parameters must be a mapping: {path}")

    parameters: dict[str, str] = {}
    for key, value in raw.items():
        converted = _to_parameter_value(str(key), value, path)
        if converted is None:
            continue
        parameters[str(key)] = converted

    logger.debug("Loaded %d runner parameters from %s", len(parameters), path)
    return parameters
