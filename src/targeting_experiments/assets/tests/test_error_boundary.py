import pytest
from dagster import Failure

from targeting_experiments.assets._error_boundary import with_asset_error_boundary
from targeting_experiments.utils.errors import Err, TEError


class _StubLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def error(self, message: str) -> None:
        self.calls.append(("error", message))


def test_error_boundary_converts_te_error_to_failure(monkeypatch):
    stub = _StubLogger()
    monkeypatch.setattr(
        "targeting_experiments.assets._error_boundary.get_dagster_logger",
        lambda: stub,
    )

    @with_asset_error_boundary(stage="purchase_intent")
    def _asset():
        raise TEError(Err.INVALID_CONFIG, ctx={"detail": "bad"})

    with pytest.raises(Failure) as failure_info:
        _asset()

    failure = failure_info.value
    assert "INVALID_CONFIG" in failure.description
    assert failure.metadata["error_code"].value == "INVALID_CONFIG"
    assert failure.metadata["error_ctx"].value == {"detail": "bad"}
    assert stub.calls == [("error", "[purchase_intent] INVALID_CONFIG: {'detail': 'bad'}")]


def test_error_boundary_passes_through_existing_failure(monkeypatch):
    stub = _StubLogger()
    monkeypatch.setattr(
        "targeting_experiments.assets._error_boundary.get_dagster_logger",
        lambda: stub,
    )

    @with_asset_error_boundary(stage="purchase_intent")
    def _asset():
        raise Failure(description="boom")

    with pytest.raises(Failure) as failure_info:
        _asset()

    assert failure_info.value.description == "boom"
    assert stub.calls == []


def test_error_boundary_returns_value():
    @with_asset_error_boundary(stage="purchase_intent")
    def _asset(x):
        return x * 2

    assert _asset(3) == 6
