from __future__ import annotations

from functools import wraps
from typing import Any

from dagster import Failure, MetadataValue, get_dagster_logger

from targeting_experiments.utils.errors import TEError


__all__ = ["with_asset_error_boundary"]


def with_asset_error_boundary(stage: str):
    """Wrap an asset so configuration errors surface as dagster.Failure.

    functools.wraps keeps the wrapped signature so Dagster still binds the
    context and resources.
    """

    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except Failure:
                raise
            except TEError as err:
                description = f"[{stage}] {err}"
                get_dagster_logger().error(description)
                metadata: dict[str, MetadataValue] = {
                    "error_code": MetadataValue.text(err.code.name)
                }
                if err.ctx:
                    metadata.update(_ctx_to_metadata(err.ctx))
                raise Failure(description=description, metadata=metadata) from err

        return wrapper

    return deco


def _ctx_to_metadata(ctx: dict[str, Any]) -> dict[str, MetadataValue]:
    try:
        return {"error_ctx": MetadataValue.json(ctx)}
    except TypeError:
        return {"error_ctx_repr": MetadataValue.text(repr(ctx))}
