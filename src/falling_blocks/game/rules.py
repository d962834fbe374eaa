from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    points_per_line: int = 100
    level_threshold: int = 1000
    base_drop_interval_ms: int = 1000
    min_drop_interval_ms: int = 100
    drop_interval_step_ms: int = 100

    def score_for_lines(self, lines: int, level: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.points_per_line * level

    def next_level(self, score: int, level: int) -> int:
        # One step per lock, even when the score jumps past several thresholds.
        if score >= level * self.level_threshold:
            return level + 1
        return level

    def drop_interval(self, level: int) -> int:
        interval = self.base_drop_interval_ms - (level - 1) * self.drop_interval_step_ms
        return max(self.min_drop_interval_ms, interval)
