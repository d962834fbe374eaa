from __future__ import annotations

import pytest

from falling_blocks.game import ScoringRules


@pytest.mark.parametrize(
    ("lines", "level", "expected"),
    [(0, 1, 0), (1, 1, 100), (2, 1, 200), (2, 3, 600), (4, 2, 800)],
)
def test_score_for_lines(lines: int, level: int, expected: int) -> None:
    assert ScoringRules().score_for_lines(lines, level) == expected


@pytest.mark.parametrize(("level", "expected"), [(1, 1000), (2, 900), (5, 600), (10, 100), (15, 100)])
def test_drop_interval_floors_at_minimum(level: int, expected: int) -> None:
    assert ScoringRules().drop_interval(level) == expected


def test_next_level_advances_at_most_one_step() -> None:
    rules = ScoringRules()
    assert rules.next_level(999, 1) == 1
    assert rules.next_level(1000, 1) == 2
    assert rules.next_level(2500, 1) == 2
    assert rules.next_level(2500, 2) == 3
