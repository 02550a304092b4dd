import pytest

from medipredict.config import VALIDATION_MESSAGE
from medipredict.errors import ValidationError
from medipredict.inputs import InputModel, awareness_tier, parse_reading


def _model(**readings):
    model = InputModel(month=5)
    for name, raw in readings.items():
        model.set_reading(name, raw)
    return model


def test_defaults():
    model = InputModel(month=3)
    assert model.selection.category == "all"
    assert model.selection.month == 3
    assert model.selection.month_label == "March"
    assert model.readings.humidity is None
    assert model.indicators.festive is False
    assert model.indicators.awareness == 0.5


def test_default_month_is_current_month():
    import datetime as dt

    assert InputModel().selection.month == dt.date.today().month


def test_setters_replace_one_field_only():
    model = _model(humidity="70", rainfall="10", temperature="28")
    before = (model.selection, model.indicators)
    model.set_reading("humidity", "71")
    assert (model.selection, model.indicators) == before
    assert model.readings.rainfall == "10"

    model.set_category("Fever")
    assert model.selection.month == 5
    assert model.readings.humidity == "71"


def test_set_month_reports_change():
    model = InputModel(month=5)
    assert model.set_month(6) is True
    assert model.set_month(6) is False
    assert model.selection.month == 6


@pytest.mark.parametrize("month", [0, 13, -1])
def test_set_month_rejects_out_of_domain(month):
    with pytest.raises(ValueError):
        InputModel(month=5).set_month(month)


def test_set_category_rejects_unknown():
    with pytest.raises(ValueError):
        InputModel(month=5).set_category("Malaria")


def test_set_awareness_rejects_out_of_range():
    with pytest.raises(ValueError):
        InputModel(month=5).set_awareness(1.2)


def test_submittable_when_all_readings_numeric():
    model = _model(humidity="78.5", rainfall="0", temperature="-2")
    assert model.is_submittable()
    assert model.validation_message() is None
    model.validate()


@pytest.mark.parametrize(
    "readings",
    [
        {},
        {"humidity": "78.5", "rainfall": "215.4"},
        {"humidity": "78.5", "rainfall": "", "temperature": "31.2"},
        {"humidity": "wet", "rainfall": "215.4", "temperature": "31.2"},
        {"humidity": "78.5", "rainfall": "nan", "temperature": "31.2"},
        {"humidity": "78.5", "rainfall": "215.4", "temperature": "inf"},
    ],
)
def test_not_submittable_when_a_reading_is_missing_or_not_numeric(readings):
    model = _model(**readings)
    assert not model.is_submittable()
    assert model.validation_message() == VALIDATION_MESSAGE
    with pytest.raises(ValidationError) as exc:
        model.validate()
    assert str(exc.value) == VALIDATION_MESSAGE


@pytest.mark.parametrize("festive", [True, False])
@pytest.mark.parametrize("awareness", [0.0, 0.5, 1.0])
def test_submittable_ignores_indicators(festive, awareness):
    model = _model(humidity="1", rainfall="2", temperature="3")
    model.set_festive(festive)
    model.set_awareness(awareness)
    assert model.is_submittable()


def test_parse_reading():
    assert parse_reading(" 31.2 ") == 31.2
    assert parse_reading(None) is None
    assert parse_reading("abc") is None


def test_out_of_range_is_advisory():
    model = _model(humidity="120", rainfall="-1", temperature="-40")
    assert model.out_of_range() == ["humidity", "rainfall"]
    assert model.is_submittable()


@pytest.mark.parametrize(
    "value, label",
    [(0.0, "Low"), (0.33, "Low"), (0.34, "Moderate"), (0.66, "Moderate"), (0.67, "High"), (1.0, "High")],
)
def test_awareness_tier_boundaries(value, label):
    assert awareness_tier(value)[0] == label


def test_awareness_tier_on_model():
    model = InputModel(month=1)
    model.set_awareness(0.8)
    assert model.awareness_tier == ("High", "#10b981")
