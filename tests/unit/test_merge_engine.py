import pytest

from eventcontent.dataset.loader import load_bundle
from eventcontent.errors import MissingDerivedEventError, StructuralDriftError
from eventcontent.merge.engine import merge_bundles, merge_schedules


@pytest.fixture()
def source(events_dir):
    return load_bundle(events_dir, "pt")


@pytest.fixture()
def derived(generated_dir):
    return load_bundle(generated_dir, "en")


def test_merges_sample_bundles(source, derived):
    merged = merge_bundles(source, derived).to_wire()

    assert [event["id"] for event in merged["events"]] == [1, 2]
    first = merged["events"][0]
    assert first["translations"]["pt"]["title"] == "AI Boost Day #1"
    assert first["translations"]["en"]["heroCtaLabel"] == "Secure my spot"
    assert first["schedule"]["periods"][0] == {
        "start": "08:30",
        "end": "12:30",
        "label": {"pt": "Manhã:", "en": "Morning:"},
    }
    assert set(first["sections"]["plans"]) == {"pt", "en"}
    assert first["sections"]["intro"]["en"]["title"] == "Before the event: your steps"


def test_missing_derived_event(source, derived):
    derived.events = [event for event in derived.events if event.slug != "2"]

    with pytest.raises(MissingDerivedEventError) as exc:
        merge_bundles(source, derived)

    assert exc.value.slug == "2"
    assert 'Missing derived event for slug "2"' in str(exc.value)


def test_timezone_mismatch(source, derived):
    derived.shared.schedules["br"].timezone_id = "America/Recife"

    with pytest.raises(StructuralDriftError, match="Schedule timezone mismatch"):
        merge_bundles(source, derived)


def test_period_count_mismatch(source, derived):
    derived.shared.schedules["pt"].periods.pop()

    with pytest.raises(StructuralDriftError, match="Schedule period count mismatch"):
        merge_bundles(source, derived)


def test_period_time_mismatch(source, derived):
    derived.shared.schedules["pt"].periods[1].start = "14:15"

    with pytest.raises(StructuralDriftError, match="Schedule periods must match start/end times"):
        merge_bundles(source, derived)


def test_derived_event_date_drift(source, derived):
    derived.events[0].date = "2025-12-14"

    with pytest.raises(StructuralDriftError, match='Derived event "1" date does not match source'):
        merge_bundles(source, derived)


def test_merged_events_sorted_by_id(source, derived):
    source.events.reverse()
    merged = merge_bundles(source, derived)
    assert [event.id for event in merged.events] == [1, 2]


def test_merge_schedules_keeps_source_timing(source, derived):
    merged = merge_schedules(source.shared.schedules["pt"], derived.shared.schedules["pt"], "pt", "en")
    assert [(p.start, p.end) for p in merged.periods] == [("09:00", "13:00"), ("14:00", "18:00")]
    assert merged.periods[1].label == {"pt": "Tarde:", "en": "Afternoon:"}
