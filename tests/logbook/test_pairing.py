from __future__ import annotations

from datetime import date, time

from frota_premio.core.enums import Direction
from frota_premio.logbook.model import LogbookEntry
from frota_premio.logbook.pairing import pair_round_trips


def leg(entry_id, direction, origin, destination, *, day=date(2024, 3, 11), hour=8):
    return LogbookEntry(
        entry_id=entry_id,
        driver_id=1,
        trip_date=day,
        direction=direction,
        origin=origin,
        km_start=1000.0 + entry_id,
        start_time=time(hour, 0),
        destination=destination,
        end_time=time(hour + 1, 0),
        week="2024-W11",
    )


def test_outbound_followed_by_matching_return_is_one_round_trip():
    grouped = pair_round_trips(
        [leg(1, Direction.OUTBOUND, "Santos", "Cubatão"), leg(2, Direction.RETURN, " cubatão ", "Santos", hour=12)]
    )

    assert len(grouped) == 1
    assert grouped[0].is_paired
    assert [e.entry_id for e in grouped[0].legs] == [1, 2]


def test_mismatched_origin_keeps_single_legs():
    grouped = pair_round_trips(
        [leg(1, Direction.OUTBOUND, "Santos", "Cubatão"), leg(2, Direction.RETURN, "Guarujá", "Santos", hour=12)]
    )

    assert [g.is_paired for g in grouped] == [False, False]


def test_return_on_another_day_is_not_paired():
    grouped = pair_round_trips(
        [
            leg(1, Direction.OUTBOUND, "Santos", "Cubatão"),
            leg(2, Direction.RETURN, "Cubatão", "Santos", day=date(2024, 3, 12)),
        ]
    )

    assert len(grouped) == 2


def test_greedy_single_pass_preserves_order():
    grouped = pair_round_trips(
        [
            leg(1, Direction.RETURN, "Cubatão", "Santos", hour=6),
            leg(2, Direction.OUTBOUND, "Santos", "Cubatão", hour=8),
            leg(3, Direction.RETURN, "Cubatão", "Santos", hour=10),
            leg(4, Direction.OUTBOUND, "Santos", "Guarujá", hour=12),
        ]
    )

    assert [[e.entry_id for e in g.legs] for g in grouped] == [[1], [2, 3], [4]]


def test_empty_day():
    assert pair_round_trips([]) == []
