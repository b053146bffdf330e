from __future__ import annotations

import os
from typing import Any

from dagster import Definitions

from targeting_experiments.assets import purchase_intent_settings
from targeting_experiments.resources.experiment_config import ExperimentConfig

FEATURES_FILE_ENV = "TARGETING_FEATURES_FILE"
ENABLE_FEATURES_ENV = "TARGETING_ENABLE_FEATURES"
DISABLE_FEATURES_ENV = "TARGETING_DISABLE_FEATURES"

EXPERIMENT_ASSETS = (purchase_intent_settings,)


def _experiment_config_from_env() -> ExperimentConfig:
    return ExperimentConfig(
        features_file=os.environ.get(FEATURES_FILE_ENV) or None,
        enable_features=os.environ.get(ENABLE_FEATURES_ENV, ""),
        disable_features=os.environ.get(DISABLE_FEATURES_ENV, ""),
    )


def build_definitions(*, experiment_config: ExperimentConfig | None = None) -> Definitions:
    resources: dict[str, Any] = {
        "experiment_config": experiment_config or _experiment_config_from_env(),
    }
    return Definitions(assets=[*EXPERIMENT_ASSETS], resources=resources)


defs = build_definitions()
