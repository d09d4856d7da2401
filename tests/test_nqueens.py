import pytest

from nqueens import BoardState, format_board, main, solve


def is_valid(board):
    size = len(board)
    queens = [(x, y) for x in range(size) for y in range(size) if board[x][y]]
    if len(queens) != size:
        return False
    for i, (x1, y1) in enumerate(queens):
        for x2, y2 in queens[i + 1:]:
            if x1 == x2 or y1 == y2 or abs(x1 - x2) == abs(y1 - y2):
                return False
    return True


@pytest.mark.parametrize("size,expected", [(1, 1), (2, 0), (3, 0), (4, 2), (5, 10)])
def test_solution_counts(size, expected):
    solutions, stats = solve(size)
    assert len(solutions) == expected
    assert all(is_valid(board) for board in solutions)
    assert len({format_board(b) for b in solutions}) == expected
    total = 2 ** (size * size + 1) - 1
    assert stats.visited + stats.skipped == total


def test_board_state_fork_is_independent():
    state = BoardState(4)
    state.place(0, 1)
    child = state.fork()
    child.place(2, 0)
    assert state.queens == [(0, 1)]
    assert child.attacked(3, 0)
    assert not state.attacked(3, 0)


def test_main_summary(capsys):
    assert main(["4", "--quiet"]) == 0
    assert capsys.readouterr().out.startswith("solutions = 2,")


def test_main_reads_config(tmp_path, capsys):
    run = tmp_path / "queens.yaml"
    run.write_text("size: 4\n", encoding="utf-8")
    assert main(["--config", str(run)]) == 0
    out = capsys.readouterr().out
    assert "0 1 0 0" in out or "0 0 1 0" in out


@pytest.mark.parametrize("text", ["size: queen\n", "size: [4]\n", "size: {\n"])
def test_main_rejects_bad_config(tmp_path, text):
    run = tmp_path / "queens.yaml"
    run.write_text(text, encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(run)])
    assert "Invalid run file" in str(exc_info.value.code)

