import typing as ty
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockFixture

from thds.tracking import TrackingData


@pytest.fixture
def prop_data() -> ty.Dict[str, ty.Any]:
    return dict(
        event_fields={
            "datepicker.close": {"who": "you"},
            "datepicker.open": {"who": "you"},
            "datepicker.blur": {"when": "today"},
        },
        event_options={
            "datepicker.close": {"doitnow": "yes"},
            "datepicker.open": {"doitnow": "yes"},
            "datepicker.perf": {"pain": "always"},
        },
        event_schema={
            "datepicker.close": {"schema_name": "test"},
            "datepicker.open": {"schema_name": "test"},
            "datepicker.perf": {"version": 1},
        },
        fields={"location": "top", "action": "test", "language": "english"},
        options={"delay": "100", "jump": "yolo"},
        schema={"schema_name": "foo", "version": 100},
    )


@pytest.fixture
def context_data() -> ty.Dict[str, ty.Any]:
    return dict(
        event_fields={
            "datepicker.close": {"who": "me"},
            "datepicker.open": {"who": "me"},
            "generic.click": {"dummy": "ohyeah"},
        },
        event_options={
            "datepicker.close": {"doitnow": "no"},
            "datepicker.open": {"doitnow": "no"},
            "generic.event": {"waitforever": "sure"},
        },
        event_schema={"datepicker.close": {"schema_name": "another", "version": 2}},
        fields={"location": "bottom", "action": "failure", "zombie": "walking"},
        options={"delay": "404", "up": "down"},
        schema={"schema_name": "test", "version": 1},
    )


@pytest.fixture
def merged_data(prop_data, context_data) -> ty.Dict[str, ty.Any]:
    """Built by hand so that the expectation doesn't depend on the code under test."""
    merged: ty.Dict[str, ty.Any] = dict()
    for name in ("event_fields", "event_options", "event_schema"):
        events = {**context_data[name], **prop_data[name]}
        merged[name] = {
            event: {**context_data[name].get(event, {}), **prop_data[name].get(event, {})}
            for event in events
        }
    for name in ("fields", "options", "schema"):
        merged[name] = {**context_data[name], **prop_data[name]}
    return merged


@pytest.fixture
def props(prop_data) -> TrackingData:
    return TrackingData(**prop_data)


@pytest.fixture
def ancestor(context_data) -> TrackingData:
    return TrackingData(**context_data)


@pytest.fixture
def downstream(mocker: MockFixture) -> MagicMock:
    return mocker.MagicMock(name="downstream_trigger", return_value=None)
