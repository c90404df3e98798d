"""Parameter vocabulary and plugin metadata shared by the runner and build feature."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Runner / feature metadata
# ---------------------------------------------------------------------------

RUNNER_TYPE = "unity"
RUNNER_DISPLAY_NAME = "Unity"
RUNNER_DESCRIPTION = "Provides Unity build support"

# Run type id used by the older third-party Unity plugin.
LEGACY_RUNNER_TYPE = "unityRunner"

BUILD_FEATURE_TYPE = "UnityBuildFeature"
BUILD_FEATURE_DISPLAY_NAME = "Unity Build Settings"

DOCKER_WRAPPER_ID = "dockerWrapper"

# ---------------------------------------------------------------------------
# Parameter keys
# ---------------------------------------------------------------------------

PARAM_DETECTION_MODE = "detectionMode"
PARAM_UNITY_VERSION = "unityVersion"
PARAM_UNITY_ROOT = "unityRoot"
PARAM_PROJECT_PATH = "projectPath"
PARAM_EXECUTE_METHOD = "executeMethod"
PARAM_BUILD_TARGET = "buildTarget"
PARAM_BUILD_PLAYER = "buildPlayer"
PARAM_RUN_EDITOR_TESTS = "runEditorTests"
PARAM_ACTIVATE_LICENSE = "activateLicense"
PARAM_CACHE_SERVER = "cacheServer"
PLUGIN_DOCKER_IMAGE = "plugin.docker.imageId"

KNOWN_PARAMETERS = frozenset({
    PARAM_DETECTION_MODE,
    PARAM_UNITY_VERSION,
    PARAM_UNITY_ROOT,
    PARAM_PROJECT_PATH,
    PARAM_EXECUTE_METHOD,
    PARAM_BUILD_TARGET,
    PARAM_BUILD_PLAYER,
    PARAM_RUN_EDITOR_TESTS,
    PARAM_ACTIVATE_LICENSE,
    PARAM_CACHE_SERVER,
    PLUGIN_DOCKER_IMAGE,
})

BOOLEAN_PARAMETERS = (PARAM_RUN_EDITOR_TESTS, PARAM_ACTIVATE_LICENSE)

DETECTION_MODE_AUTO = "auto"
DETECTION_MODE_MANUAL = "manual"

# ---------------------------------------------------------------------------
# Agent properties
# ---------------------------------------------------------------------------

# Agents report one property per installed editor: unity.path.<version>
UNITY_PATH_PROPERTY_PREFIX = "unity.path."
EXISTS_QUALIFIER = "exists=>"

# ---------------------------------------------------------------------------
# Plugin resources
# ---------------------------------------------------------------------------

EDIT_RUNNER_PARAMETERS_RESOURCE = "editUnityParameters.jsp"
VIEW_RUNNER_PARAMETERS_RESOURCE = "viewUnityParameters.jsp"
EDIT_BUILD_FEATURE_RESOURCE = "editUnityBuildFeature.jsp"
