from __future__ import annotations

from targeting_experiments import definitions as defs_module
from targeting_experiments.resources.experiment_config import ExperimentConfig


def test_definitions_wire_experiment_config(clear_feature_env):
    defs = defs_module.build_definitions()

    asset_names = {key.path[-1] for key in defs.resolve_all_asset_keys()}
    assert asset_names == {"purchase_intent_settings"}
    assert isinstance(defs.resources["experiment_config"], ExperimentConfig)
    assert defs.resources["experiment_config"].features_file is None


def test_definitions_read_environment(monkeypatch):
    monkeypatch.setenv("TARGETING_ENABLE_FEATURES", "PurchaseIntent:threshold/4")
    monkeypatch.setenv("TARGETING_DISABLE_FEATURES", "Legacy")
    monkeypatch.delenv("TARGETING_FEATURES_FILE", raising=False)

    config = defs_module.build_definitions().resources["experiment_config"]

    assert config.enable_features == "PurchaseIntent:threshold/4"
    assert config.purchase_intent().get_threshold() == 4


def test_explicit_resource_wins_over_environment(monkeypatch):
    monkeypatch.setenv("TARGETING_DISABLE_FEATURES", "PurchaseIntent")
    explicit = ExperimentConfig()

    defs = defs_module.build_definitions(experiment_config=explicit)

    config = defs.resources["experiment_config"]
    assert config.disable_features == ""
    assert config.purchase_intent().is_enabled()
