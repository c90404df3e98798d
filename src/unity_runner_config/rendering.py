"""Operator-facing rendering of an effective Unity step configuration."""

from __future__ import annotations

import json

from unity_runner_config.describe import describe_lines
from unity_runner_config.requirements import resolve_requirements
from unity_runner_config.schema import ParameterMapping


def render_configuration(parameters: ParameterMapping, format: str = "text") -> str:
    """Render the configuration summary and agent requirements for logs."""
    if format not in {"text", "json"}:
        raise ValueError(f"Unsupported render format: {format}")

    lines = describe_lines(parameters)
    requirements = resolve_requirements(parameters)

    if format == "json":
        payload = {
            "description": lines,
            "requirements": [r.model_dump(mode="json") for r in requirements],
        }
        return json.dumps(payload, sort_keys=True, separators=(",", ":"))

    out = ["Unity build step"]
    if lines:
        out.extend(f"  {line}" for line in lines)
    else:
        out.append("  (no parameters configured)")
    out.append("Agent requirements")
    if requirements:
        out.extend(f"  {r.type}: {r.property_name}" for r in requirements)
    else:
        out.append("  (none)")
    return "\n".join(out)
