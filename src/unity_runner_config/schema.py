"""Core value types for Unity runner configuration.

- DetectionMode: how the Unity installation is located (auto/manual)
- StandalonePlayer: fixed registry of desktop player build targets
- Requirement: agent-capability declaration consumed by the scheduling host

All models use ConfigDict(frozen=True, extra="forbid").
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from unity_runner_config.constants import DETECTION_MODE_AUTO, DETECTION_MODE_MANUAL

ParameterMapping = Mapping[str, str]


class UnityRunnerError(RuntimeError):
    """Raised for parameter loading and host wiring errors."""


# ---------------------------------------------------------------------------
# Detection mode
# ---------------------------------------------------------------------------

DetectionMode = Literal["auto", "manual"]

_DETECTION_MODES: frozenset[str] = frozenset({DETECTION_MODE_AUTO, DETECTION_MODE_MANUAL})


def try_parse_detection_mode(value: str | None) -> DetectionMode | None:
    """Return the detection mode named by ``value``, or None if unrecognized.

    Matching is exact: ``MANUAL`` is not a recognized mode.
    """
    if value in _DETECTION_MODES:
        return value  # type: ignore[return-value]
    return None


def parse_detection_mode(value: str | None) -> DetectionMode:
    """Return the detection mode named by ``value``, defaulting to ``auto``."""
    return try_parse_detection_mode(value) or DETECTION_MODE_AUTO


# ---------------------------------------------------------------------------
# Standalone player registry
# ---------------------------------------------------------------------------

class StandalonePlayer(BaseModel):
    """A desktop player build target passed to Unity as ``-<id> <path>``."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)

    @classmethod
    def try_parse(cls, value: str | None) -> StandalonePlayer | None:
        """Look up a player by id. Unknown or malformed values yield None."""
        if not value:
            return None
        return _PLAYERS_BY_LOWER_ID.get(value.strip().lower())


STANDALONE_PLAYER_REGISTRY: dict[str, StandalonePlayer] = {
    "buildLinux64Player": StandalonePlayer(
        id="buildLinux64Player",
        description="Linux 64-bit",
    ),
    "buildOSXUniversalPlayer": StandalonePlayer(
        id="buildOSXUniversalPlayer",
        description="Mac OS X",
    ),
    "buildWindowsPlayer": StandalonePlayer(
        id="buildWindowsPlayer",
        description="Windows 32-bit",
    ),
    "buildWindows64Player": StandalonePlayer(
        id="buildWindows64Player",
        description="Windows 64-bit",
    ),
}

_PLAYERS_BY_LOWER_ID = {key.lower(): player for key, player in STANDALONE_PLAYER_REGISTRY.items()}


# ---------------------------------------------------------------------------
# Requirements
# ---------------------------------------------------------------------------

class Requirement(BaseModel):
    """Capability constraint evaluated by the host against agent properties.

    ``property_name`` is a regex pattern (prefixed with ``exists=>``) when the
    requirement targets a family of versioned properties.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    property_name: str = Field(..., min_length=1)
    property_value: str | None = None
    type: Literal["exists", "equals", "matches"] = "exists"


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------

def parse_bool(value: str | None) -> bool:
    """Host boolean semantics: only a case-insensitive ``true`` is true."""
    return value is not None and value.lower() == "true"


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()
