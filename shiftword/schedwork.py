"""Assign workers to daily shifts under availability and shift limits."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

Schedule = list[list[int]]

DEMO_AVAILABILITY = (
    (1, 1, 1, 1),
    (1, 0, 1, 0),
    (1, 1, 0, 1),
    (1, 0, 0, 1),
)


def schedule(
    avail: Sequence[Sequence[int]], daily_need: int, max_shifts: int
) -> Optional[Schedule]:
    """Return a schedule of *daily_need* distinct workers per day, or None.

    ``avail[day][worker]`` is truthy when the worker can work that day. No
    worker may be given more than *max_shifts* shifts in total. Workers are
    tried in ascending order and the first valid schedule found is returned.
    """
    if not avail:
        return None
    num_days = len(avail)
    num_workers = len(avail[0])
    sched: Schedule = [[] for _ in range(num_days)]
    shifts = [0] * num_workers

    def fill(day: int, slot: int) -> bool:
        if day == num_days:
            return True
        if slot == daily_need:
            return fill(day + 1, 0)
        today = sched[day]
        for worker in range(num_workers):
            if (
                avail[day][worker]
                and shifts[worker] < max_shifts
                and worker not in today
            ):
                today.append(worker)
                shifts[worker] += 1
                if fill(day, slot + 1):
                    return True
                shifts[worker] -= 1
                today.pop()
        return False

    return sched if fill(0, 0) else None


def format_schedule(sched: Sequence[Sequence[int]]) -> str:
    """Render a schedule as one ``Day N: ...`` line per day."""
    return "".join(
        f"Day {day}: " + "".join(f"{worker} " for worker in workers) + "\n"
        for day, workers in enumerate(sched)
    )


def main(argv=None) -> int:
    """Solve the built-in example and print the schedule."""
    result = schedule(DEMO_AVAILABILITY, 2, 2)
    if result is None:
        print("No solution found!")
    else:
        sys.stdout.write(format_schedule(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())