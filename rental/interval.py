"""Relationship between two rental periods."""

from enum import Enum

from .date import Date


class Relation(Enum):
    """
    How period A = [a_start, a_end) sits relative to period B = [b_start, b_end).

    Both periods are assumed non-empty (start strictly before end).
    """

    BEFORE = "before"  # A ends before B starts, at least one free day between
    MEETS = "meets"  # A ends on the day B starts
    OVERLAPS = "overlaps"  # A starts first, ends inside B
    STARTS = "starts"  # same start, A ends first
    DURING = "during"  # A strictly inside B
    FINISHES = "finishes"  # same end, A starts later
    EQUALS = "equals"
    FINISHED_BY = "finished by"  # same end, A starts first
    CONTAINS = "contains"  # B strictly inside A
    STARTED_BY = "started by"  # same start, B ends first
    OVERLAPPED_BY = "overlapped by"  # B starts first, ends inside A
    MET_BY = "met by"  # B ends on the day A starts
    AFTER = "after"  # B ends before A starts, at least one free day between


DISJOINT = frozenset({Relation.BEFORE, Relation.AFTER})


def _cmp(a: Date, b: Date) -> int:
    return (a.ordinal > b.ordinal) - (a.ordinal < b.ordinal)


def classify(a_start: Date, a_end: Date, b_start: Date, b_end: Date) -> Relation:
    """Classify two periods, checking the disjoint and touching cases first."""
    if a_end.before(b_start):
        return Relation.BEFORE
    if b_end.before(a_start):
        return Relation.AFTER
    if a_end == b_start:
        return Relation.MEETS
    if b_end == a_start:
        return Relation.MET_BY

    # From here on the periods share at least one day
    starts = _cmp(a_start, b_start)
    ends = _cmp(a_end, b_end)
    if starts == 0 and ends == 0:
        return Relation.EQUALS
    if starts == 0:
        return Relation.STARTS if ends < 0 else Relation.STARTED_BY
    if ends == 0:
        return Relation.FINISHES if starts > 0 else Relation.FINISHED_BY
    if starts < 0:
        return Relation.OVERLAPS if ends < 0 else Relation.CONTAINS
    return Relation.DURING if ends < 0 else Relation.OVERLAPPED_BY


def is_disjoint(relation: Relation) -> bool:
    """True when the periods neither share a day nor touch."""
    return relation in DISJOINT
