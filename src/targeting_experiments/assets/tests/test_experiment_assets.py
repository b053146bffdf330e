from datetime import timedelta

from dagster import materialize

from targeting_experiments.assets import purchase_intent_settings
from targeting_experiments.assets.experiments import build_settings_metadata
from targeting_experiments.purchase_intent import PurchaseIntentSettings
from targeting_experiments.resources.experiment_config import ExperimentConfig


def test_build_settings_metadata_types():
    md = build_settings_metadata(
        PurchaseIntentSettings(enabled=True, resource_version=0, threshold=5, time_window=timedelta(days=1))
    )

    assert md["enabled"].value is True
    assert md["resource_version"].value == 0
    assert md["threshold"].value == 5
    assert md["time_window_seconds"].value == 86400
    assert "time_window" not in md


def test_purchase_intent_settings_asset_materializes():
    result = materialize(
        [purchase_intent_settings],
        resources={"experiment_config": ExperimentConfig(enable_features="PurchaseIntent:threshold/5")},
    )

    assert result.success
    output = result.output_for_node("purchase_intent_settings")
    assert output == {
        "enabled": True,
        "resource_version": 1,
        "threshold": 5,
        "time_window": timedelta(days=7),
    }
    materialization = result.asset_materializations_for_node("purchase_intent_settings")[0]
    assert materialization.metadata["threshold"].value == 5
    assert materialization.metadata["enabled"].value is True


def test_purchase_intent_settings_asset_fails_on_bad_config(tmp_path):
    result = materialize(
        [purchase_intent_settings],
        resources={"experiment_config": ExperimentConfig(features_file=str(tmp_path / "missing.yaml"))},
        raise_on_error=False,
    )

    assert not result.success
