"""Feature flags, their typed parameters, and the assignment state."""

from .feature_list import FeatureList
from .loader import load_feature_list, parse_feature_mapping, resolve_feature_list
from .models import Feature, FeatureParam, FeatureState, duration_param, int_param
from .params import parse_duration, parse_int

__all__ = [
    "Feature",
    "FeatureList",
    "FeatureParam",
    "FeatureState",
    "duration_param",
    "int_param",
    "load_feature_list",
    "parse_duration",
    "parse_feature_mapping",
    "parse_int",
    "resolve_feature_list",
]
