"""Shared fixtures for integration tests."""

import os

import pytest


# Keep Dagster from writing run storage into the user's DAGSTER_HOME.
@pytest.fixture(scope="session", autouse=True)
def _dagster_home_env(tmp_path_factory):
    tmp_home = tmp_path_factory.mktemp("dagster_home")
    os.environ["DAGSTER_HOME"] = str(tmp_home)
    return str(tmp_home)


@pytest.fixture
def clear_feature_env(monkeypatch):
    for name in ("TARGETING_FEATURES_FILE", "TARGETING_ENABLE_FEATURES", "TARGETING_DISABLE_FEATURES"):
        monkeypatch.delenv(name, raising=False)
