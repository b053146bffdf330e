"""Purchase-intent targeting experiment.

Declares the ``PurchaseIntent`` feature with its params and resolves them
once into ``PurchaseIntentSettings``. The targeting model receives a
``PurchaseIntentExperiment`` and reads the typed values from it.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from pydantic import BaseModel, ConfigDict

from targeting_experiments.features import Feature, FeatureList, FeatureState, duration_param, int_param

logger = logging.getLogger(__name__)

PURCHASE_INTENT = Feature("PurchaseIntent", FeatureState.ENABLED_BY_DEFAULT)

RESOURCE_VERSION_PARAM = "resource_version"
THRESHOLD_PARAM = "threshold"
TIME_WINDOW_PARAM = "time_window"

DEFAULT_RESOURCE_VERSION = 1
DEFAULT_THRESHOLD = 3
DEFAULT_TIME_WINDOW = timedelta(days=7)

RESOURCE_VERSION = int_param(PURCHASE_INTENT, RESOURCE_VERSION_PARAM, DEFAULT_RESOURCE_VERSION)
THRESHOLD = int_param(PURCHASE_INTENT, THRESHOLD_PARAM, DEFAULT_THRESHOLD)
TIME_WINDOW = duration_param(PURCHASE_INTENT, TIME_WINDOW_PARAM, DEFAULT_TIME_WINDOW)


class PurchaseIntentSettings(BaseModel):
    enabled: bool = True
    resource_version: int = DEFAULT_RESOURCE_VERSION
    threshold: int = DEFAULT_THRESHOLD
    time_window: timedelta = DEFAULT_TIME_WINDOW

    model_config = ConfigDict(frozen=True)

    @classmethod
    def resolve(cls, features: FeatureList) -> "PurchaseIntentSettings":
        settings = cls(
            enabled=features.is_enabled(PURCHASE_INTENT),
            resource_version=RESOURCE_VERSION.get(features),
            threshold=THRESHOLD.get(features),
            time_window=TIME_WINDOW.get(features),
        )
        logger.debug("resolved %s settings: %s", PURCHASE_INTENT.name, settings)
        return settings


class PurchaseIntentExperiment:
    """Typed view of the purchase-intent experiment for one process.

    Accessors never raise; every disabled, missing or malformed value has
    already been replaced by its default.
    """

    def __init__(self, features: FeatureList) -> None:
        self._settings = PurchaseIntentSettings.resolve(features)

    def is_enabled(self) -> bool:
        return self._settings.enabled

    def get_resource_version(self) -> int:
        return self._settings.resource_version

    def get_threshold(self) -> int:
        return self._settings.threshold

    def get_time_window(self) -> timedelta:
        return self._settings.time_window

    def settings(self) -> PurchaseIntentSettings:
        return self._settings
