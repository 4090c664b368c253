"""Tests for zombie_escape.engine: legality, chase rule, turn resolution."""

from __future__ import annotations

from typing import Optional, get_type_hints

import pytest

from zombie_escape.config import EngineConfig
from zombie_escape.engine import (
    can_zombie_enter,
    is_valid_player_move,
    move_player,
    step_zombies,
    zombie_candidates,
)
from zombie_escape.entities import MoveResult, Status, Zombie
from zombie_escape.level_manager import load_level
from zombie_escape.levels import LEVELS


def _positions(state) -> list[tuple[int, int]]:
    return [z.position for z in state.zombies]


class TestPlayerMoveLegality:
    def test_open_cell(self) -> None:
        state = load_level(["P.E"])
        assert is_valid_player_move(state, 1, 0)

    @pytest.mark.parametrize("x,y", [(-1, 0), (3, 0), (0, -1), (0, 1)])
    def test_out_of_bounds(self, x: int, y: int) -> None:
        state = load_level(["P.E"])
        assert not is_valid_player_move(state, x, y)

    def test_wall(self) -> None:
        state = load_level(["P#E"])
        assert not is_valid_player_move(state, 1, 0)

    def test_zombie_cell_is_legal(self) -> None:
        state = load_level(["PZE"])
        assert is_valid_player_move(state, 1, 0)


class TestZombieEntry:
    def test_player_cell_is_enterable(self) -> None:
        state = load_level(["PZE"])
        assert can_zombie_enter(state, 0, 0, 0)

    def test_exit_cell_is_enterable(self) -> None:
        state = load_level(["PZE"])
        assert can_zombie_enter(state, 2, 0, 0)

    def test_wall_blocks(self) -> None:
        state = load_level(["P#Z", "..E"])
        assert not can_zombie_enter(state, 1, 0, 0)

    def test_bounds_block(self) -> None:
        state = load_level(["PZE"])
        assert not can_zombie_enter(state, 1, 1, 0)
        assert not can_zombie_enter(state, 1, -1, 0)

    def test_other_zombie_blocks(self) -> None:
        state = load_level(["PZZE"])
        assert not can_zombie_enter(state, 2, 0, 0)
        assert not can_zombie_enter(state, 1, 0, 1)

    def test_own_cell_does_not_block(self) -> None:
        state = load_level(["PZZE"])
        assert can_zombie_enter(state, 1, 0, 0)


class TestZombieCandidates:
    def test_horizontal_gap_larger(self) -> None:
        assert zombie_candidates(Zombie(0, 0, 0), (3, 1)) == ((1, 0), (0, 1))

    def test_vertical_gap_larger(self) -> None:
        assert zombie_candidates(Zombie(0, 4, 4), (3, 0)) == ((0, -1), (-1, 0))

    def test_tie_prefers_vertical(self) -> None:
        assert zombie_candidates(Zombie(0, 0, 0), (2, 2)) == ((0, 1), (1, 0))

    def test_aligned_horizontally_has_no_secondary(self) -> None:
        assert zombie_candidates(Zombie(0, 5, 2), (1, 2)) == ((-1, 0), None)

    def test_aligned_vertically_has_no_secondary(self) -> None:
        assert zombie_candidates(Zombie(0, 1, 0), (1, 4)) == ((0, 1), None)


class TestStepZombies:
    def test_tie_moves_vertically(self) -> None:
        state = load_level(["Z..", "...", "E.P"])
        trapped = step_zombies(state)
        assert _positions(state) == [(0, 1)]
        assert trapped == 0

    def test_falls_back_to_secondary(self) -> None:
        # Primary (down) is a wall, secondary (right) is open.
        state = load_level(["Z...", "#...", "....", "E.P."])
        step_zombies(state)
        assert _positions(state) == [(1, 0)]

    def test_trapped_when_both_blocked(self) -> None:
        state = load_level(["Z#..", "#...", "....", "E.P."])
        assert step_zombies(state) == 1
        assert _positions(state) == [(0, 0)]

    def test_trapped_when_aligned_and_blocked(self) -> None:
        state = load_level(["P#Z", "..E"])
        assert step_zombies(state) == 1
        assert _positions(state) == [(2, 0)]

    def test_lower_id_wins_contested_cell(self) -> None:
        # Zombie 0 steps down into (1,1) first; zombie 1 wanted the same
        # cell, is aligned on its row, and so has nowhere else to go.
        state = load_level([".Z..", "P.Z.", "...E"])
        trapped = step_zombies(state)
        assert _positions(state) == [(1, 1), (2, 1)]
        assert trapped == 1

    def test_loser_takes_secondary(self) -> None:
        state = load_level([".Z..", "..Z.", "P..E"])
        trapped = step_zombies(state)
        assert _positions(state) == [(1, 1), (2, 2)]
        assert trapped == 0

    def test_vacated_cell_is_free_in_same_sub_step(self) -> None:
        # Zombie 0 leaves (1,0); zombie 1 below it may then move up.
        state = load_level(["PZ..", ".Z..", "...E"])
        step_zombies(state)
        assert _positions(state) == [(0, 0), (1, 0)]

    def test_never_stacks(self) -> None:
        state = load_level(LEVELS[-1]["grid"])
        for _ in range(10):
            step_zombies(state)
            positions = _positions(state)
            assert len(positions) == len(set(positions))
            assert not any(p in state.walls for p in positions)


class TestMovePlayer:
    def test_walk_into_zombie(self) -> None:
        state = load_level(["PZE"])
        result = move_player(state, 1, 0)
        assert result == MoveResult(moved=True, status=Status.CAUGHT)
        assert state.player == (1, 0)
        assert state.turn == 1

    def test_reach_exit(self) -> None:
        state = load_level(["P.E"])
        first = move_player(state, 1, 0)
        assert first.moved and first.status is Status.IN_PROGRESS
        assert state.turn == 1
        second = move_player(state, 1, 0)
        assert second == MoveResult(moved=True, status=Status.ESCAPED)
        assert state.turn == 2

    def test_no_zombies_reports_zero_trapped(self) -> None:
        state = load_level(["P.E"])
        assert move_player(state, 1, 0).trapped_count == 0

    @pytest.mark.parametrize("dx,dy", [(-1, 0), (0, -1), (0, 1)])
    def test_out_of_bounds_is_rejected(self, dx: int, dy: int) -> None:
        state = load_level(["PZ.E"])
        result = move_player(state, dx, dy)
        assert result == MoveResult(moved=False, status=Status.IN_PROGRESS)
        assert state.turn == 0
        assert state.player == (0, 0)
        assert _positions(state) == [(1, 0)]

    def test_wall_is_rejected(self) -> None:
        state = load_level(["P#.", "..E", "Z.."])
        before = state.snapshot()
        result = move_player(state, 1, 0)
        assert not result.moved
        assert state == before

    def test_both_candidates_walled(self) -> None:
        state = load_level(["P...", "..#.", ".#Z.", "...E"])
        result = move_player(state, 1, 0)
        assert result == MoveResult(True, Status.IN_PROGRESS, trapped_count=2)
        assert _positions(state) == [(2, 2)]

    def test_trapped_counted_once_per_sub_step(self) -> None:
        state = load_level(["P...", "..#.", ".#Z.", "...E"])
        result = move_player(state, 1, 0, EngineConfig(pursuer_steps=1))
        assert result.trapped_count == 1

    def test_zombies_take_configured_steps(self) -> None:
        layout = ["P.....", "......", ".....Z", "E....."]
        for steps, expected in [(1, (4, 2)), (2, (3, 2)), (3, (2, 2))]:
            state = load_level(layout)
            move_player(state, 0, 1, EngineConfig(pursuer_steps=steps))
            assert _positions(state) == [expected]

    def test_caught_during_zombie_phase_stops_sub_steps(self) -> None:
        state = load_level(["..P.Z", "E...Z"])
        result = move_player(state, 1, 0)
        assert result == MoveResult(True, Status.CAUGHT, trapped_count=0)
        # Zombie 1 moved up in sub-step 1; sub-step 2 never ran.
        assert _positions(state) == [(3, 0), (4, 0)]

    def test_capture_beats_exit(self) -> None:
        state = load_level(["PEZ"])
        state.zombies[0].x = 1
        result = move_player(state, 1, 0)
        assert result.status is Status.CAUGHT

    def test_exit_skips_zombie_phase(self) -> None:
        state = load_level(["PE.Z"])
        result = move_player(state, 1, 0)
        assert result == MoveResult(True, Status.ESCAPED)
        assert result.trapped_count is None
        assert _positions(state) == [(3, 0)]


    def test_config_is_optional(self) -> None:
        assert get_type_hints(move_player)["config"] == Optional[EngineConfig]
        state = load_level(["P.E"])
        assert move_player(state, 1, 0, None).trapped_count == 0


class TestTerminalStatus:
    @pytest.mark.parametrize(
        "layout,status",
        [(["PZE"], Status.CAUGHT), (["PE."], Status.ESCAPED)],
    )
    def test_frozen_after_end(self, layout: list[str], status: Status) -> None:
        state = load_level(layout)
        move_player(state, 1, 0)
        assert state.status is status
        frozen = state.snapshot()
        for dx, dy in [(1, 0), (-1, 0), (0, 1), (0, -1)]:
            assert move_player(state, dx, dy) == MoveResult(False, status)
        assert state == frozen
        assert state.turn == 1


class TestDeterminism:
    def test_identical_runs_match(self) -> None:
        intents = [(1, 0), (0, 1), (0, 1), (-1, 0), (0, -1), (1, 0), (1, 0), (0, 1)]
        for level in LEVELS:
            a = load_level(level["grid"])
            b = load_level(level["grid"])
            for dx, dy in intents:
                assert move_player(a, dx, dy) == move_player(b, dx, dy)
                assert a == b
