import itertools

import pytest

from shiftword.schedwork import DEMO_AVAILABILITY, format_schedule, main, schedule


def _assert_valid(avail, need, max_shifts, sched):
    assert len(sched) == len(avail)
    counts = {}
    for day, workers in enumerate(sched):
        assert len(workers) == need
        assert len(set(workers)) == need
        for w in workers:
            assert avail[day][w]
            counts[w] = counts.get(w, 0) + 1
    assert all(c <= max_shifts for c in counts.values())


def test_empty_availability_has_no_solution():
    assert schedule([], 1, 1) is None


def test_demo_matrix_unique_solution():
    sched = schedule(DEMO_AVAILABILITY, 2, 2)
    _assert_valid(DEMO_AVAILABILITY, 2, 2, sched)
    assert [set(d) for d in sched] == [{1, 2}, {0, 2}, {1, 3}, {0, 3}]


def test_single_day_takes_lowest_workers_first():
    assert schedule([[1, 1, 1]], 2, 1) == [[0, 1]]


def test_unavailable_worker_skipped():
    assert schedule([[0, 1, 1]], 1, 1) == [[1]]


def test_shift_limit_makes_problem_impossible():
    avail = [[1, 0], [1, 0]]
    assert schedule(avail, 1, 1) is None


def test_not_enough_workers_per_day():
    assert schedule([[1, 0, 1]], 3, 5) is None


def test_zero_need_gives_empty_days():
    assert schedule([[1], [0]], 0, 0) == [[], []]


@pytest.mark.parametrize("need,max_shifts", [(1, 1), (1, 2), (2, 2), (2, 3)])
def test_found_schedules_are_valid(need, max_shifts):
    avail = [
        [1, 1, 0, 1, 0],
        [0, 1, 1, 1, 1],
        [1, 0, 1, 0, 1],
        [1, 1, 1, 1, 1],
    ]
    sched = schedule(avail, need, max_shifts)
    exists = any(
        True
        for _ in [0]
        if _brute_force_exists(avail, need, max_shifts)
    )
    assert (sched is not None) == exists
    if sched is not None:
        _assert_valid(avail, need, max_shifts, sched)


def _brute_force_exists(avail, need, max_shifts):
    per_day = [
        [c for c in itertools.combinations(range(len(row)), need)
         if all(row[w] for w in c)]
        for row in avail
    ]
    for choice in itertools.product(*per_day):
        counts = {}
        for combo in choice:
            for w in combo:
                counts[w] = counts.get(w, 0) + 1
        if all(c <= max_shifts for c in counts.values()):
            return True
    return False


def test_format_schedule_layout():
    assert format_schedule([[0, 1], [2, 3]]) == "Day 0: 0 1 \nDay 1: 2 3 \n"


def test_format_empty_schedule():
    assert format_schedule([]) == ""


def test_main_prints_demo_schedule(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "No solution found!" not in out
    assert out == format_schedule(schedule(DEMO_AVAILABILITY, 2, 2))