from __future__ import annotations

from typing import Optional

from dagster import ConfigurableResource
from pydantic import PrivateAttr

from targeting_experiments.features import FeatureList, resolve_feature_list
from targeting_experiments.purchase_intent import PurchaseIntentExperiment


class ExperimentConfig(ConfigurableResource):
    """Experiment-assignment state for targeting consumers.

    Attributes:
        features_file: Optional YAML/JSON file with ``enabled``/``disabled`` sections.
        enable_features: Command-line style enable list, layered over the file
            (e.g. ``PurchaseIntent:threshold/5``).
        disable_features: Comma separated feature names to force off.
    """

    features_file: Optional[str] = None
    enable_features: str = ""
    disable_features: str = ""

    _cache: dict[str, FeatureList] = PrivateAttr(default_factory=dict)

    def feature_list(self) -> FeatureList:
        cached = self._cache.get("features")
        if cached is None:
            cached = resolve_feature_list(
                self.features_file,
                self.enable_features,
                self.disable_features,
            )
            self._cache["features"] = cached
        return cached

    def purchase_intent(self) -> PurchaseIntentExperiment:
        return PurchaseIntentExperiment(self.feature_list())
