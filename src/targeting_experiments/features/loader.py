"""Load a ``FeatureList`` from a YAML or JSON file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import yaml

from targeting_experiments.utils.errors import Err, TEError

from .feature_list import FeatureList


def _invalid(error: str, *, source: Path | None, **ctx: Any) -> TEError:
    payload: dict[str, Any] = {"error": error, **ctx}
    if source is not None:
        payload["path"] = str(source)
    return TEError(Err.INVALID_CONFIG, ctx=payload)


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _parse_file(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise _invalid("unsupported feature file format", source=path, suffix=suffix)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TEError(Err.IO_ERROR, ctx={"path": str(path)}, cause=exc)

    try:
        if suffix == ".json":
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw) or {}
    except (ValueError, yaml.YAMLError) as exc:
        raise TEError(
            Err.INVALID_CONFIG,
            ctx={"path": str(path), "error": "unparsable feature file"},
            cause=exc,
        )

    if not isinstance(data, Mapping):
        raise _invalid("top-level must be mapping", source=path)
    return data


def parse_feature_mapping(data: Mapping[str, Any], *, source: Path | None = None) -> FeatureList:
    """Build a ``FeatureList`` from ``{"enabled": {...}, "disabled": [...]}``."""

    unknown = set(data) - {"enabled", "disabled"}
    if unknown:
        raise _invalid("unknown sections", source=source, sections=sorted(unknown))

    enabled_section = data.get("enabled") or {}
    if isinstance(enabled_section, (list, tuple)):
        enabled_section = {name: {} for name in enabled_section}
    if not isinstance(enabled_section, Mapping):
        raise _invalid("enabled must be mapping or list", source=source)

    enabled: dict[str, dict[str, str]] = {}
    for name, params in enabled_section.items():
        params = params or {}
        if not isinstance(params, Mapping):
            raise _invalid("params must be mapping", source=source, feature=str(name))
        enabled[str(name)] = {str(k): _param_value(v) for k, v in params.items()}

    disabled_section = data.get("disabled") or []
    if isinstance(disabled_section, str) or not isinstance(disabled_section, (list, tuple)):
        raise _invalid("disabled must be list", source=source)

    try:
        return FeatureList.build(enabled=enabled, disabled=[str(n) for n in disabled_section])
    except TEError as err:
        if source is not None and err.ctx is not None:
            err.ctx.setdefault("path", str(source))
        raise


def load_feature_list(path: Path | str) -> FeatureList:
    feature_path = Path(path)
    return parse_feature_mapping(_parse_file(feature_path), source=feature_path)


def resolve_feature_list(
    features_file: Path | str | None = None,
    enable_features: str = "",
    disable_features: str = "",
) -> FeatureList:
    """Load the optional file, then layer command-line style overrides on top."""

    base = load_feature_list(features_file) if features_file else FeatureList()
    overrides = FeatureList.from_command_line(enable_features, disable_features)
    return base.with_overrides(enabled=overrides.enabled, disabled=overrides.disabled)


__all__ = ["load_feature_list", "parse_feature_mapping", "resolve_feature_list"]
