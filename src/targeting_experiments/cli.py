"""Command-line entry point printing the resolved experiment settings."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Iterable

from targeting_experiments.features import resolve_feature_list
from targeting_experiments.purchase_intent import PurchaseIntentExperiment
from targeting_experiments.utils.errors import TEError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve targeting experiment settings")
    parser.add_argument("--features-file", help="YAML/JSON file with enabled/disabled features")
    parser.add_argument(
        "--enable-features",
        default="",
        help="Comma separated features to enable, e.g. 'PurchaseIntent:threshold/5'",
    )
    parser.add_argument(
        "--disable-features",
        default="",
        help="Comma separated features to disable",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log parameter resolution")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    features = resolve_feature_list(args.features_file, args.enable_features, args.disable_features)

    settings = PurchaseIntentExperiment(features).settings()
    payload = settings.model_dump(exclude={"time_window"})
    payload["time_window_seconds"] = int(settings.time_window.total_seconds())
    print(json.dumps({"purchase_intent": payload}, indent=2, sort_keys=True))
    return 0


def entrypoint() -> None:  # pragma: no cover - console entry
    try:
        raise SystemExit(main())
    except TEError as exc:  # pragma: no cover - console behavior
        raise SystemExit(f"error: {exc}")
