"""Experiment-assignment state: which features are on and their parameters.

A ``FeatureList`` is immutable. Build one at startup (from code, command-line
style strings, or a file via ``loader``) and pass it to consumers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping
from urllib.parse import unquote

from targeting_experiments.utils.errors import Err, TEError

from .models import Feature

_EMPTY: Mapping[str, str] = MappingProxyType({})


def _feature_name(feature: Feature | str) -> str:
    name = feature.name if isinstance(feature, Feature) else str(feature)
    if not name:
        raise TEError(Err.INVALID_CONFIG, ctx={"error": "feature name missing"})
    return name


def _freeze_params(name: str, params: Mapping[str, object] | None) -> Mapping[str, str]:
    if not params:
        return _EMPTY
    if not isinstance(params, Mapping):
        raise TEError(
            Err.INVALID_CONFIG,
            ctx={"feature": name, "error": "params must be mapping"},
        )
    return MappingProxyType({str(k): str(v) for k, v in params.items()})


@dataclass(frozen=True)
class FeatureList:
    enabled: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: _EMPTY)
    disabled: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        overlap = set(self.enabled) & set(self.disabled)
        if overlap:
            raise TEError(
                Err.INVALID_CONFIG,
                ctx={"error": "feature both enabled and disabled", "features": sorted(overlap)},
            )

    def is_enabled(self, feature: Feature) -> bool:
        if feature.name in self.disabled:
            return False
        if feature.name in self.enabled:
            return True
        return feature.enabled_by_default

    def get_params(self, feature: Feature) -> Mapping[str, str]:
        if not self.is_enabled(feature):
            return _EMPTY
        return self.enabled.get(feature.name, _EMPTY)

    def get_param(self, feature: Feature, name: str) -> str | None:
        return self.get_params(feature).get(name)

    def with_overrides(
        self,
        *,
        enabled: Mapping[Feature | str, Mapping[str, object] | None] | None = None,
        disabled: Iterable[Feature | str] = (),
    ) -> "FeatureList":
        """Return a new list with ``enabled``/``disabled`` layered on top.

        An override replaces whatever this list says about the same feature,
        including its params.
        """

        new_enabled = {
            _feature_name(feature): _freeze_params(_feature_name(feature), params)
            for feature, params in (enabled or {}).items()
        }
        new_disabled = {_feature_name(feature) for feature in disabled}

        merged_enabled = {
            name: params
            for name, params in self.enabled.items()
            if name not in new_disabled
        }
        merged_enabled.update(new_enabled)
        merged_disabled = (set(self.disabled) - set(new_enabled)) | new_disabled

        return FeatureList(
            enabled=MappingProxyType(merged_enabled),
            disabled=frozenset(merged_disabled),
        )

    @classmethod
    def build(
        cls,
        *,
        enabled: Mapping[Feature | str, Mapping[str, object] | None] | None = None,
        disabled: Iterable[Feature | str] = (),
    ) -> "FeatureList":
        return cls().with_overrides(enabled=enabled, disabled=disabled)

    @classmethod
    def from_command_line(cls, enable_features: str = "", disable_features: str = "") -> "FeatureList":
        """Parse ``--enable-features`` / ``--disable-features`` style strings.

        Entries are comma separated. An enabled entry may carry a trial name
        and params: ``PurchaseIntent<Study:threshold/5/time_window/1d``.
        Param keys and values are percent-decoded.
        """

        enabled: dict[str, Mapping[str, str]] = {}
        for entry in _split_entries(enable_features):
            name, params = _parse_enabled_entry(entry)
            enabled[name] = params

        disabled: set[str] = set()
        for entry in _split_entries(disable_features):
            name, params = _parse_enabled_entry(entry)
            if params:
                raise TEError(
                    Err.INVALID_CONFIG,
                    ctx={"entry": entry, "error": "disabled features take no params"},
                )
            disabled.add(name)

        return cls(enabled=MappingProxyType(enabled), disabled=frozenset(disabled))


def _split_entries(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_enabled_entry(entry: str) -> tuple[str, Mapping[str, str]]:
    head, _, params_part = entry.partition(":")
    name, _, _trial = head.partition("<")
    name = name.strip().lstrip("*")
    if not name:
        raise TEError(Err.INVALID_CONFIG, ctx={"entry": entry, "error": "feature name missing"})

    if not params_part:
        return name, _EMPTY

    tokens = params_part.split("/")
    if len(tokens) % 2:
        raise TEError(
            Err.INVALID_CONFIG,
            ctx={"entry": entry, "error": "params must be key/value pairs"},
        )
    params = {
        unquote(tokens[i]): unquote(tokens[i + 1])
        for i in range(0, len(tokens), 2)
    }
    return name, MappingProxyType(params)


__all__ = ["FeatureList"]
