# tests/unit/test_location_classifier.py
import pytest

from jdfilter.extractors.location import classify_location, collect_location_hints, is_remote
from jdfilter.models.location import LocationResult


@pytest.mark.parametrize("text,expected", [
    ("This role is Remote", True),
    ("REMOTE (US timezones)", True),
    ("Fully remote-first team", True),
    ("This is a non-remote role", False),
    ("No remote work available. Remote candidates need not apply.", False),
    ("Not remote", False),
    ("Sorry, no-remote positions", False),
    ("Remoteness is not a word we use", False),
    ("Office in Berlin", False),
    ("", False),
])
def test_is_remote(text, expected):
    assert is_remote(text) is expected


def test_classify_remote_ignores_hints():
    result = classify_location("Remote", ["Austin, TX"])
    assert result == LocationResult.remote_role()
    assert result.hints == []


def test_classify_non_remote_without_hints():
    result = classify_location("This is a non-remote role", [])
    assert result.remote is False
    assert result.hints == []


def test_classify_city_state_hint():
    result = classify_location("Join our team", ["Austin, TX"])
    assert result.remote is False
    assert "Austin, TX" in result.hints


def test_remote_result_does_not_consume_nodes():
    def nodes():
        raise AssertionError("hint nodes should not be scanned for remote roles")
        yield

    assert classify_location("Remote", nodes()).remote is True


@pytest.mark.parametrize("node_text", [
    "On-site in our HQ",
    "onsite",
    "Work on site daily",
    "In-office 3 days",
    "in office",
    "Hybrid",
])
def test_on_site_descriptors_are_hints(node_text):
    assert collect_location_hints([node_text]) == [node_text]


def test_state_city_hint():
    assert collect_location_hints(["CA, San Jose"]) == ["CA, San Jose"]


def test_city_state_hint_is_matched_substring():
    assert collect_location_hints(["Office: Denver, CO (downtown)"]) == ["Denver, CO"]


def test_node_can_contribute_descriptor_and_city_hint():
    hints = collect_location_hints(["Hybrid - Seattle, WA"])
    assert hints == ["Hybrid - Seattle, WA", "Seattle, WA"]


@pytest.mark.parametrize("node_text", [
    "NYC",                 # too short
    "x" * 101 + " Hybrid",  # too long
    "Austin TX",           # no comma
    "austin, tx",          # lowercase code
    "Apples, oranges",     # no state code
])
def test_nodes_that_are_not_hints(node_text):
    assert collect_location_hints([node_text]) == []


def test_hints_are_trimmed_deduplicated_and_ordered():
    nodes = [
        "  Austin, TX  ",
        "Hybrid",
        "Austin, TX",
        "Boston, MA",
        "Hybrid",
    ]
    assert collect_location_hints(nodes) == ["Austin, TX", "Hybrid", "Boston, MA"]


def test_hint_length_upper_bound_is_inclusive():
    at_limit = "Hybrid " + "a" * 93
    over_limit = "Hybrid " + "a" * 94
    assert len(at_limit) == 100
    assert collect_location_hints([at_limit]) == [at_limit]
    assert collect_location_hints([over_limit]) == []


def test_location_result_rendering():
    assert str(LocationResult.remote_role()) == "Remote"
    assert str(LocationResult.not_remote()) == "Not Remote"
    assert str(LocationResult.not_remote(["Austin, TX", "Hybrid"])) == "Not Remote\nAustin, TX / Hybrid"


def test_remote_location_cannot_have_hints():
    with pytest.raises(Exception):
        LocationResult(remote=True, hints=["Austin, TX"])
