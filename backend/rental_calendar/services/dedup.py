"""Merging of reservation collections fetched from more than one source."""

from collections.abc import Iterable

from rental_calendar.models import Reservation


def merge_reservations(lists: Iterable[Iterable[Reservation]]) -> list[Reservation]:
    """Concatenate ``lists`` keeping only the first reservation seen per id.

    Relative order of first occurrences is preserved. Records without an id
    cannot be matched to each other and are all kept.
    """
    seen: set[int] = set()
    merged: list[Reservation] = []
    for reservations in lists:
        for reservation in reservations:
            if reservation.id is not None:
                if reservation.id in seen:
                    continue
                seen.add(reservation.id)
            merged.append(reservation)
    return merged
