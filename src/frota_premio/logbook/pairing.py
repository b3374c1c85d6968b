from __future__ import annotations

from typing import Iterable

from ..core.enums import Direction
from .model import LogbookEntry, RoundTrip


def _same_place(a: str, b: str) -> bool:
    return (a or "").strip().casefold() == (b or "").strip().casefold()


def pair_round_trips(entries: Iterable[LogbookEntry]) -> list[RoundTrip]:
    """Group legs into round trips in a single greedy pass.

    An outbound leg is paired with the leg right after it when that leg is a
    return on the same date starting where the outbound one ended. Anything
    else stays a single leg. Input order is kept; callers sort by date and
    start time.
    """
    items = list(entries)
    grouped: list[RoundTrip] = []
    i = 0
    while i < len(items):
        current = items[i]
        nxt = items[i + 1] if i + 1 < len(items) else None
        if (
            nxt is not None
            and current.direction == Direction.OUTBOUND
            and nxt.direction == Direction.RETURN
            and nxt.trip_date == current.trip_date
            and _same_place(nxt.origin, current.destination)
        ):
            grouped.append(RoundTrip(outbound=current, inbound=nxt))
            i += 2
        else:
            grouped.append(RoundTrip(outbound=current))
            i += 1
    return grouped
