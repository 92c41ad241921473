"""Scripted random sources for deterministic placement tests."""

from __future__ import annotations


class FirstVacancy:
    """Random source that always picks the first remaining vacancy."""

    def integers(self, low: int, high: int) -> int:
        return low


class LastVacancy:
    """Random source that always picks the last remaining vacancy."""

    def integers(self, low: int, high: int) -> int:
        return high - 1
