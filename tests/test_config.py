"""Tests for runner settings and YAML parameter loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from unity_runner_config.config import RunnerSettings, default_runner_properties, load_runner_parameters
from unity_runner_config.describe import describe_parameters
from unity_runner_config.requirements import resolve_requirements
from unity_runner_config.schema import UnityRunnerError

FIXTURES = Path(__file__).parent / "fixtures"


def test_default_runner_properties_select_auto_detection():
    assert default_runner_properties() == {"detectionMode": "auto"}


def test_default_runner_properties_returns_fresh_copy():
    props = default_runner_properties()
    props["detectionMode"] = "manual"
    assert default_runner_properties() == {"detectionMode": "auto"}


def test_settings_resource_names():
    settings = RunnerSettings()
    assert settings.edit_runner_resource == "editUnityParameters.jsp"
    assert settings.view_runner_resource == "viewUnityParameters.jsp"


def test_settings_reject_unknown_fields():
    with pytest.raises(ValidationError):
        RunnerSettings(unknown="x")


def test_load_fixture_converts_scalars():
    parameters = load_runner_parameters(FIXTURES / "runner-parameters.yaml")

    assert parameters["unityVersion"] == "2021.3.16"
    assert parameters["runEditorTests"] == "true"
    assert parameters["activateLicense"] == "false"
    assert "unityRoot" not in parameters


def test_loaded_fixture_describes():
    parameters = load_runner_parameters(FIXTURES / "runner-parameters.yaml")
    description = describe_parameters(parameters)

    assert "Build player: Windows 64-bit" in description
    assert "Run editor tests: ON" in description
    assert "Activate license" not in description
    assert "Unity version: 2021.3.16" in description


def test_load_accepts_str_path(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("projectPath: game\n", encoding="utf-8")
    assert load_runner_parameters(str(path)) == {"projectPath": "game"}


def test_load_numeric_version_becomes_string(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("unityVersion: 2019.4\n", encoding="utf-8")
    assert load_runner_parameters(path) == {"unityVersion": "2019.4"}


def test_load_empty_file_returns_empty_mapping(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("", encoding="utf-8")
    assert load_runner_parameters(path) == {}


def test_load_missing_file_raises(tmp_path: Path):
    with pytest.raises(UnityRunnerError, match="not found"):
        load_runner_parameters(tmp_path / "missing.yaml")


def test_load_non_mapping_raises(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("- projectPath\n- game\n", encoding="utf-8")
    with pytest.raises(UnityRunnerError, match="must be a mapping"):
        load_runner_parameters(path)


def test_load_nested_value_raises(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text(textwrap.dedent("""\
        projectPath:
          nested: game
    """), encoding="utf-8")
    with pytest.raises(UnityRunnerError, match="projectPath"):
        load_runner_parameters(path)


def test_load_keeps_version_source_text(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("unityVersion: 2020.10\n", encoding="utf-8")
    assert load_runner_parameters(path) == {"unityVersion": "2020.10"}


def test_loaded_version_reaches_requirement_unchanged(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("unityVersion: 2020.10\n", encoding="utf-8")

    requirements = resolve_requirements(load_runner_parameters(path))

    assert requirements[0].property_name == "exists=>unity\\.path\\.2020\\.10.*"


def test_load_keeps_leading_zeros(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("buildTarget: 0755\n", encoding="utf-8")
    assert load_runner_parameters(path) == {"buildTarget": "0755"}


def test_load_keeps_boolean_spelling(tmp_path: Path):
    path = tmp_path / "params.yaml"
    path.write_text("runEditorTests: True\nactivateLicense: yes\n", encoding="utf-8")
    assert load_runner_parameters(path) == {"runEditorTests": "True", "activateLicense": "yes"}


@pytest.mark.parametrize("value", ["null", "~", "NULL", ""])
def test_load_null_spellings_are_absent(tmp_path: Path, value):
    path = tmp_path / "params.yaml"
    path.write_text(f"projectPath: game\nunityRoot: {value}\n", encoding="utf-8")
    assert load_runner_parameters(path) == {"projectPath": "game"}
