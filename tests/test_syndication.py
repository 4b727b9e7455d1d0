import pytest

from rsskit.extension.base import Extension
from rsskit.extension.syndication import (
    NAMESPACE,
    SyndicationExtension,
    UpdatePeriod,
)


def _ext(value):
    return [Extension(name="sy:x", value=value)]


def test_builder_equivalent():
    ext = SyndicationExtension(
        period=UpdatePeriod.WEEKLY, frequency=2, base="2021-01-01T00:00+00:00"
    )
    assert ext == SyndicationExtension(
        period=UpdatePeriod.WEEKLY,
        frequency=2,
        base="2021-01-01T00:00+00:00",
    )


def test_defaults():
    ext = SyndicationExtension()
    assert ext.period is UpdatePeriod.DAILY
    assert ext.frequency == 1
    assert ext.base == "1970-01-01T00:00+00:00"


@pytest.mark.parametrize(
    "text, period",
    [
        ("hourly", UpdatePeriod.HOURLY),
        ("daily", UpdatePeriod.DAILY),
        ("weekly", UpdatePeriod.WEEKLY),
        ("monthly", UpdatePeriod.MONTHLY),
        ("yearly", UpdatePeriod.YEARLY),
    ],
)
def test_period_parse_and_str_round_trip(text, period):
    assert UpdatePeriod.parse(text) is period
    assert str(period) == text


@pytest.mark.parametrize("text", ["Daily", "", "fortnightly"])
def test_period_parse_rejects_unknown(text):
    with pytest.raises(ValueError):
        UpdatePeriod.parse(text)


def test_from_map_reads_values():
    ext = SyndicationExtension.from_map(
        {
            "updatePeriod": _ext("weekly"),
            "updateFrequency": _ext("2"),
            "updateBase": _ext("2021-01-01T00:00+00:00"),
        }
    )
    assert ext == SyndicationExtension(UpdatePeriod.WEEKLY, 2, "2021-01-01T00:00+00:00")


def test_from_map_keeps_defaults_for_bad_values():
    ext = SyndicationExtension.from_map(
        {"updatePeriod": _ext("never"), "updateFrequency": _ext("-3")}
    )
    assert ext == SyndicationExtension()


def test_from_map_rejects_overflowing_frequency():
    ext = SyndicationExtension.from_map({"updateFrequency": _ext("4294967296")})
    assert ext.frequency == 1


def test_from_map_uses_first_value_and_ignores_empty():
    ext = SyndicationExtension.from_map(
        {"updateFrequency": _ext("5") + _ext("7"), "updateBase": []}
    )
    assert ext.frequency == 5
    assert ext.base == SyndicationExtension().base


def test_to_xml_uses_bound_prefix():
    ext = SyndicationExtension(UpdatePeriod.HOURLY, 3, "2000-01-01T00:00+00:00")
    elements = ext.to_xml({"sy": NAMESPACE, "dc": "http://purl.org/dc/elements/1.1/"})
    assert [(e.tag, e.text) for e in elements] == [
        ("sy:updatePeriod", "hourly"),
        ("sy:updateFrequency", "3"),
        ("sy:updateBase", "2000-01-01T00:00+00:00"),
    ]


def test_to_xml_without_namespace_is_empty():
    assert SyndicationExtension().to_xml({}) == []


def test_round_trip_through_map():
    original = SyndicationExtension(UpdatePeriod.MONTHLY, 4, "2010-05-05T00:00+00:00")
    mapping = {
        element.tag.split(":", 1)[1]: _ext(element.text)
        for element in original.to_xml({"sy": NAMESPACE})
    }
    assert SyndicationExtension.from_map(mapping) == original