"""
config.py — Tunable engine settings.
"""

from __future__ import annotations

from dataclasses import dataclass

from zombie_escape.constants import PURSUER_STEPS


@dataclass(frozen=True)
class EngineConfig:
    """Knobs for the turn resolver."""

    pursuer_steps: int = PURSUER_STEPS  # zombie sub-steps per accepted move

    def __post_init__(self) -> None:
        if self.pursuer_steps < 1:
            raise ValueError("pursuer_steps must be >= 1")
