import pytest

from zoneprof.aggregator import SampleAggregator, split_callstack
from zoneprof.dto import ZoneStatistics
from zoneprof.errors import UnknownModeError


@pytest.mark.fast
def test_split_callstack_drops_empty_frames():
    assert split_callstack("f @ a.lua:1;g @ a.lua:2;") == ["f @ a.lua:1", "g @ a.lua:2"]
    assert split_callstack(";;f;") == ["f"]
    assert split_callstack("") == []
    assert split_callstack(None) == []


@pytest.mark.fast
def test_split_callstack_keeps_repeated_frames():
    assert split_callstack("f;f;g;") == ["f", "f", "g"]


@pytest.mark.fast
def test_record_without_zones_is_a_noop():
    statistics = {1: ZoneStatistics()}
    aggregator = SampleAggregator(statistics)

    assert aggregator.record((), "f;", 3, "I") == 0
    assert statistics[1] == ZoneStatistics()


@pytest.mark.fast
def test_record_fans_out_to_every_active_zone():
    statistics = {1: ZoneStatistics(), 2: ZoneStatistics()}
    aggregator = SampleAggregator(statistics)

    assert aggregator.record((1, 2), "f;g;", 4, "N") == 4

    for zone in statistics.values():
        assert zone.n_compiled_samples == 4
        assert zone.function_to_count == {"f": 4, "g": 4}
        assert zone.n_samples == 1


@pytest.mark.fast
@pytest.mark.parametrize(
    "vmstate, counter",
    [
        ("N", "n_compiled_samples"),
        ("I", "n_interpreted_samples"),
        ("C", "n_c_code_samples"),
        ("J", "n_jit_samples"),
        ("G", "n_gc_samples"),
    ],
)
def test_record_increments_exactly_one_mode_counter(vmstate, counter):
    statistics = {1: ZoneStatistics()}
    SampleAggregator(statistics).record((1,), "f;", 2, vmstate)

    zone = statistics[1]
    assert getattr(zone, counter) == 2
    assert zone.n_ticks == 2


@pytest.mark.fast
@pytest.mark.parametrize("vmstate", ["J", "G"])
def test_frames_are_ignored_for_gc_and_jit(vmstate):
    statistics = {1: ZoneStatistics()}
    SampleAggregator(statistics).record((1,), "f;g;", 1, vmstate)

    assert statistics[1].function_to_count == {}
    assert statistics[1].n_samples == 1


@pytest.mark.fast
def test_unknown_mode_raises_before_counting():
    statistics = {1: ZoneStatistics()}
    aggregator = SampleAggregator(statistics)

    with pytest.raises(UnknownModeError) as excinfo:
        aggregator.record((1,), "f;", 1, "X")

    assert excinfo.value.vmstate == "X"
    assert statistics[1] == ZoneStatistics()


@pytest.mark.fast
def test_counts_accumulate_over_samples():
    statistics = {1: ZoneStatistics()}
    aggregator = SampleAggregator(statistics)

    aggregator.record((1,), "f;g;", 1, "I")
    aggregator.record((1,), "f;", 2, "I")

    assert statistics[1].function_to_count == {"f": 3, "g": 1}
    assert statistics[1].n_samples == 2
    assert statistics[1].n_interpreted_samples == 3


@pytest.mark.fast
def test_custom_delimiter():
    statistics = {1: ZoneStatistics()}
    SampleAggregator(statistics, delimiter="|").record((1,), "f|g|", 1, "C")

    assert statistics[1].function_to_count == {"f": 1, "g": 1}
