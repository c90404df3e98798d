"""Validation diagnostics for Unity runner parameters.

Hosts call ``validate_runner_parameters`` when a build step is saved. The
function never raises; problems are reported as issues on the returned
``ValidationReport``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from unity_runner_config.constants import (
    BOOLEAN_PARAMETERS,
    DETECTION_MODE_MANUAL,
    KNOWN_PARAMETERS,
    PARAM_BUILD_PLAYER,
    PARAM_DETECTION_MODE,
    PARAM_UNITY_ROOT,
)
from unity_runner_config.schema import (
    ParameterMapping,
    StandalonePlayer,
    is_blank,
    try_parse_detection_mode,
)


class ValidationIssue(BaseModel):
    """A single problem found in a parameter mapping."""

    model_config = ConfigDict(frozen=True)

    code: str
    field: str
    message: str
    severity: Literal["error", "warning"]


class ValidationReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    issues: list[ValidationIssue]

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == "warning"]


def validate_runner_parameters(parameters: ParameterMapping) -> ValidationReport:
    """Check a parameter mapping for settings that would break the build step.

    Checks, in order:
    1. ``detectionMode`` is ``auto`` or ``manual`` when set
    2. manual detection has a non-blank ``unityRoot``
    3. ``buildPlayer`` names a known standalone player when set
    4. boolean parameters are ``true`` or ``false`` when set
    5. every key belongs to the Unity parameter vocabulary
    """
    issues: list[ValidationIssue] = []

    raw_mode = parameters.get(PARAM_DETECTION_MODE)
    mode = try_parse_detection_mode(raw_mode)
    if not is_blank(raw_mode) and mode is None:
        issues.append(ValidationIssue(
            code="UNKNOWN_DETECTION_MODE",
            field=PARAM_DETECTION_MODE,
            message=f"Detection mode '{raw_mode}' is not recognized; 'auto' is assumed",
            severity="warning",
        ))

    if mode == DETECTION_MODE_MANUAL and is_blank(parameters.get(PARAM_UNITY_ROOT)):
        issues.append(ValidationIssue(
            code="MISSING_UNITY_ROOT",
            field=PARAM_UNITY_ROOT,
            message="Unity installation root must be set when detection mode is manual",
            severity="error",
        ))

    player = parameters.get(PARAM_BUILD_PLAYER)
    if not is_blank(player) and StandalonePlayer.try_parse(player) is None:
        issues.append(ValidationIssue(
            code="UNKNOWN_BUILD_PLAYER",
            field=PARAM_BUILD_PLAYER,
            message=f"Unknown standalone player '{player}'",
            severity="error",
        ))

    for key in BOOLEAN_PARAMETERS:
        value = parameters.get(key)
        if value is not None and value.lower() not in {"true", "false"}:
            issues.append(ValidationIssue(
                code="INVALID_BOOLEAN",
                field=key,
                message=f"'{key}' should be 'true' or 'false', got '{value}'; treated as false",
                severity="warning",
            ))

    for key in sorted(set(parameters) - KNOWN_PARAMETERS):
        issues.append(ValidationIssue(
            code="UNKNOWN_PARAMETER",
            field=key,
            message=f"Parameter '{key}' is not used by the Unity runner and is ignored",
            severity="warning",
        ))

    is_valid = not any(issue.severity == "error" for issue in issues)
    return ValidationReport(is_valid=is_valid, issues=issues)
