"""Declarations for feature flags and their typed parameters."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from targeting_experiments.utils.errors import TEError

from .params import parse_duration, parse_int

if TYPE_CHECKING:  # pragma: no cover
    from .feature_list import FeatureList

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FeatureState(Enum):
    ENABLED_BY_DEFAULT = "enabled_by_default"
    DISABLED_BY_DEFAULT = "disabled_by_default"


@dataclass(frozen=True)
class Feature:
    """Identity of an experiment plus its state when nothing overrides it."""

    name: str
    default_state: FeatureState = FeatureState.DISABLED_BY_DEFAULT

    @property
    def enabled_by_default(self) -> bool:
        return self.default_state is FeatureState.ENABLED_BY_DEFAULT


@dataclass(frozen=True)
class FeatureParam(Generic[T]):
    """A named parameter of ``feature`` with a hard-coded default.

    ``get`` never raises: a disabled feature, a missing value and a value the
    parser rejects all resolve to ``default``.
    """

    feature: Feature
    name: str
    default: T
    parser: Callable[[str], T]

    def get(self, features: "FeatureList") -> T:
        if not features.is_enabled(self.feature):
            return self.default

        raw = features.get_param(self.feature, self.name)
        if raw is None:
            return self.default

        try:
            return self.parser(raw)
        except TEError as err:
            logger.warning(
                "ignoring invalid value %r for %s.%s (%s); using default %r",
                raw,
                self.feature.name,
                self.name,
                err.code.name,
                self.default,
            )
            return self.default


def int_param(feature: Feature, name: str, default: int) -> FeatureParam[int]:
    return FeatureParam(feature=feature, name=name, default=default, parser=parse_int)


def duration_param(feature: Feature, name: str, default: timedelta) -> FeatureParam[timedelta]:
    return FeatureParam(feature=feature, name=name, default=default, parser=parse_duration)


__all__ = [
    "Feature",
    "FeatureParam",
    "FeatureState",
    "duration_param",
    "int_param",
]
