"""Assets reporting the experiment settings a run resolved."""

from datetime import timedelta
from typing import Any, Dict

from dagster import MetadataValue

from ..purchase_intent import PurchaseIntentSettings
from ..resources.experiment_config import ExperimentConfig
from ._decorators import asset_with_boundary


def _assign_metadata_value(md: Dict[str, MetadataValue], key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool):
        md[key] = MetadataValue.bool(value)
    elif isinstance(value, int):
        md[key] = MetadataValue.int(value)
    elif isinstance(value, timedelta):
        md[f"{key}_seconds"] = MetadataValue.int(int(value.total_seconds()))
    else:
        md[key] = MetadataValue.text(str(value))


def build_settings_metadata(settings: PurchaseIntentSettings) -> Dict[str, MetadataValue]:
    md: Dict[str, MetadataValue] = {}
    for key, value in settings.model_dump().items():
        _assign_metadata_value(md, key, value)
    return md


@asset_with_boundary(
    stage="purchase_intent",
    group_name="experiments",
    description="Purchase-intent experiment settings resolved for this run",
    compute_kind="python",
)
def purchase_intent_settings(context, experiment_config: ExperimentConfig) -> dict:
    settings = experiment_config.purchase_intent().settings()
    context.add_output_metadata(build_settings_metadata(settings))
    state = "enabled" if settings.enabled else "disabled"
    context.log.info(
        f"purchase intent {state} (resource_version={settings.resource_version} "
        f"threshold={settings.threshold} time_window={settings.time_window})"
    )
    return settings.model_dump()
