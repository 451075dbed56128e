import pytest

from zoneprof.errors import DuplicateZoneError, EmptyStackError


@pytest.mark.fast
def test_push_without_name_generates_run_names(session):
    session.push()
    session.push()

    assert session.active_zones() == ["Run #1", "Run #2"]

    session.pop()
    session.pop()
    session.push()

    # The counter keeps increasing, names are never recycled
    assert session.active_zones() == ["Run #3"]


@pytest.mark.fast
def test_push_active_name_raises(session):
    session.push("frame")
    session.push("update")

    with pytest.raises(DuplicateZoneError) as excinfo:
        session.push("frame")

    assert excinfo.value.zone_name == "frame"
    assert "frame" in str(excinfo.value)
    assert session.active_zones() == ["frame", "update"]


@pytest.mark.fast
def test_pop_empty_stack_raises(session):
    with pytest.raises(EmptyStackError):
        session.pop()

    session.push("a")
    session.pop()

    with pytest.raises(EmptyStackError):
        session.pop()


@pytest.mark.fast
def test_pop_is_lifo_and_balanced_calls_empty_the_stack(session):
    session.push("a")
    session.push("b")
    session.push("c")

    assert session.pop() == "c"
    assert session.pop() == "b"
    assert session.pop() == "a"
    assert session.active_zones() == []


@pytest.mark.fast
def test_popped_zone_can_be_pushed_again_and_keeps_its_id(session):
    session.push("a")
    first_stats = session.statistics("a")
    session.pop()
    session.push("a")

    assert session.statistics("a") is first_stats
    assert session.zone_names() == ["a"]


@pytest.mark.fast
def test_duration_accumulates_over_activations(session, clock):
    clock.now = 10.0
    session.push("a")
    clock.now = 11.0
    session.pop()

    clock.now = 20.0
    session.push("a")
    clock.now = 22.5
    session.pop()

    timing = session.timing("a")
    assert timing.duration == pytest.approx(3.5)
    assert timing.start_time is None
    assert [(i.start, i.end) for i in timing.intervals] == [(10.0, 11.0), (20.0, 22.5)]


@pytest.mark.fast
def test_start_time_is_set_only_while_active(session, clock):
    clock.now = 4.0
    session.push("a")
    assert session.timing("a").start_time == 4.0

    session.pop()
    assert session.timing("a").start_time is None


@pytest.mark.fast
def test_sampler_is_started_once_per_session(session, sampler):
    assert not session.is_running

    session.push("a")
    session.pop()
    session.push("b")
    session.pop()

    assert session.is_running
    assert sampler.start_count == 1
    assert session.start_date is not None


@pytest.mark.fast
def test_pop_does_not_stop_the_sampler(session, sampler):
    session.push("a")
    session.pop()

    assert session.is_running
    assert sampler.is_started


@pytest.mark.fast
def test_zone_context_manager_pops_on_error(session):
    with pytest.raises(RuntimeError):
        with session.zone("work"):
            assert session.active_zones() == ["work"]
            raise RuntimeError("boom")

    assert session.active_zones() == []


@pytest.mark.fast
def test_non_string_name_is_rejected(session):
    with pytest.raises(TypeError):
        session.push(42)

    assert session.active_zones() == []
