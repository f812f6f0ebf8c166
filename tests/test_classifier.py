import pytest

from budget_reconciler.classifier import Status, StatusThresholds, classify, status_label


def test_boundaries_are_inclusive():
    assert classify(100, 100).status is Status.EXCEEDED
    assert classify(80, 100).status is Status.WARNING
    assert classify(30, 100).status is Status.UNDER_BUDGET


def test_statuses_between_boundaries():
    assert classify(99.99, 100).status is Status.WARNING
    assert classify(79.99, 100).status is Status.ON_TRACK
    assert classify(30.01, 100).status is Status.ON_TRACK
    assert classify(0, 100).status is Status.UNDER_BUDGET
    assert classify(250, 100).status is Status.EXCEEDED


def test_percentage_is_raw_and_progress_is_clamped():
    result = classify(5200, 5000)
    assert result.percentage == pytest.approx(104.0)
    assert result.progress == 100.0
    assert result.remaining == -200.0


def test_negative_spend_keeps_progress_at_zero():
    result = classify(-50, 100)
    assert result.percentage == pytest.approx(-50.0)
    assert result.progress == 0.0
    assert result.status is Status.UNDER_BUDGET
    assert result.remaining == 150


@pytest.mark.parametrize("budgeted", [0, 0.0, -100, float("nan")])
def test_non_positive_budget_is_on_track_at_zero_percent(budgeted):
    result = classify(750, budgeted)
    assert result.percentage == 0.0
    assert result.progress == 0.0
    assert result.status is Status.ON_TRACK


def test_remaining_can_go_negative():
    assert classify(5200, 5000).remaining == -200.0
    assert classify(4200, 5000).remaining == 800.0


def test_custom_thresholds():
    legacy = StatusThresholds(warning=70, exceeded=90, under_budget=10)
    assert classify(75, 100, legacy).status is Status.WARNING
    assert classify(90, 100, legacy).status is Status.EXCEEDED
    assert classify(50, 100, legacy).status is Status.ON_TRACK


@pytest.mark.parametrize(
    "kwargs",
    [
        {"warning": 80, "exceeded": 70},
        {"warning": 30, "under_budget": 30},
        {"under_budget": -1},
    ],
)
def test_inconsistent_thresholds_are_rejected(kwargs):
    with pytest.raises(ValueError):
        StatusThresholds(**kwargs)


def test_thresholds_to_dict():
    assert StatusThresholds().to_dict() == {"warning": 80.0, "exceeded": 100.0, "under_budget": 30.0}


def test_status_label():
    assert status_label(Status.EXCEEDED, 104) == "Budget Exceeded"
    assert status_label("warning", 84.4) == "84% Used"
    assert status_label(Status.ON_TRACK, 50) == "On Track"
    assert status_label(Status.UNDER_BUDGET, 10) == "On Track"


def test_status_serializes_as_its_value():
    assert Status.WARNING == "warning"
    assert Status("exceeded") is Status.EXCEEDED
