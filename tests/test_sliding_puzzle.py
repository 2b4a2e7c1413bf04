from itertools import permutations

import pytest

from astar_search.domains.sliding_puzzle import Board, SlideAction, SlidingPuzzle, SlidingPuzzleProblem
from astar_search.search.problem import FunctionProblem, StepAction
from conftest import GOAL_3x3, SCENARIO, true_distances


def test_board_from_rows_round_trip():
    b = Board.from_rows(SCENARIO)
    assert b.rows == 3 and b.cols == 3
    assert b.as_rows() == SCENARIO
    assert str(b).splitlines()[0] == "1 4 8"


def test_equal_boards_hash_equal():
    a = Board.from_rows(SCENARIO)
    b = Board(tuple(t for row in SCENARIO for t in row), 3)
    assert a == b and hash(a) == hash(b)
    assert len({a, b}) == 1


@pytest.mark.parametrize("rows", [
    [[1, 2, 3], [4, 5]],            # ragged
    [[1, 1, 2], [3, 4, 5], [6, 7, 8]],  # duplicate tile
    [[1, 2], [3, 4]],               # no blank
    [[0, 1.5], [2, 3]],             # non-integer cell
    [[0, "1"], [2, 3]],             # string cell
    [[0, True], [2, 3]],            # bool cell
    [],
])
def test_malformed_boards_are_rejected(rows):
    with pytest.raises(ValueError):
        Board.from_rows(rows)


def test_problem_rejects_board_of_wrong_size():
    with pytest.raises(ValueError):
        SlidingPuzzleProblem(SlidingPuzzle(3, 3), Board.from_rows([[0, 1], [2, 3]]))


def test_problem_rejects_unknown_heuristic():
    with pytest.raises(ValueError):
        SlidingPuzzleProblem.from_rows(SCENARIO, heuristic="euclid")


def test_puzzle_must_be_at_least_2x2():
    with pytest.raises(ValueError):
        SlidingPuzzle(1, 4)


def test_negative_action_cost_is_rejected():
    with pytest.raises(ValueError):
        StepAction("bad", lambda s: s, cost=-1)


def test_unhashable_initial_state_is_rejected():
    with pytest.raises(ValueError):
        FunctionProblem([1, 2], lambda s: [], lambda s: True)


def test_slide_action_is_pure():
    board = Board.from_rows(SCENARIO)
    before = board.tiles
    action = SlidingPuzzle(3, 3).actions(board)[0]
    after = action.enact(board)
    assert board.tiles == before
    assert after != board
    assert after.tiles.index(0) == action.target
    assert action.cost == 1


def test_actions_from_corner_and_centre():
    puzzle = SlidingPuzzle(3, 3)
    corner = Board.from_rows(GOAL_3x3)
    centre = Board.from_rows([[1, 2, 3], [4, 0, 5], [6, 7, 8]])
    assert len(puzzle.actions(corner)) == 2
    assert len(puzzle.actions(centre)) == 4
    assert all(isinstance(a, SlideAction) for a in puzzle.actions(centre))
    assert str(puzzle.actions(corner)[0]) == "move to (0, 1)"


def test_scramble_is_seeded_and_solvable():
    puzzle = SlidingPuzzle(3, 3)
    assert puzzle.scramble(20, seed=7) == puzzle.scramble(20, seed=7)
    for seed in range(20):
        assert puzzle.is_solvable(puzzle.scramble(15, seed))


def test_scramble_depth_zero_is_goal():
    puzzle = SlidingPuzzle(3, 4)
    assert puzzle.scramble(0, seed=1) == puzzle.goal


@pytest.mark.parametrize("rows,cols", [(2, 2), (3, 3), (2, 3), (3, 4), (4, 4)])
def test_unsolvable_variant_flips_solvability(rows, cols):
    puzzle = SlidingPuzzle(rows, cols)
    board = puzzle.scramble(12, seed=3)
    assert puzzle.is_solvable(board)
    assert not puzzle.is_solvable(puzzle.unsolvable_variant(board))


def test_exactly_half_of_2x2_layouts_are_solvable():
    puzzle = SlidingPuzzle(2, 2)
    boards = [Board(p, 2) for p in permutations(range(4))]
    solvable = {b for b in boards if puzzle.is_solvable(b)}
    assert len(solvable) == 12
    assert solvable == set(true_distances(puzzle))


def test_solvability_matches_reachability_on_2x3():
    puzzle = SlidingPuzzle(2, 3)
    reachable = set(true_distances(puzzle))
    assert len(reachable) == 360
    for p in permutations(range(6)):
        b = Board(p, 3)
        assert puzzle.is_solvable(b) == (b in reachable)


def test_custom_goal():
    goal = [[1, 2, 3], [4, 5, 6], [7, 8, 0]]
    problem = SlidingPuzzleProblem.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]], goal=goal)
    assert problem.heuristic(problem.initial_state) == 1
    assert problem.is_terminal(Board.from_rows(goal))
    assert not problem.is_terminal(problem.initial_state)
