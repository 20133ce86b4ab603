import io
import random

import pytest

from pushswap.algorithm import solve
from pushswap.checker import check, main, read_instructions


def _run(capsys, monkeypatch, args, stdin_text):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    status = main(args)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


def test_read_instructions_keeps_terminated_lines():
    stream = io.StringIO("sa\npb\nra")
    assert list(read_instructions(stream)) == ["sa\n", "pb\n"]


def test_read_instructions_empty_stream():
    assert list(read_instructions(io.StringIO(""))) == []


def test_check_swap_sorts_pair():
    assert check([2, 1], ["sa\n"]) is True


def test_check_without_instructions_on_unsorted():
    assert check([2, 1], []) is False


def test_check_sorted_without_instructions():
    assert check([1, 2, 3], []) is True


def test_check_requires_all_values_on_a():
    assert check([1, 2, 3], ["pb\n"]) is False


def test_check_push_back_restores():
    assert check([1, 2, 3], ["pb\n", "pa\n"]) is True


@pytest.mark.parametrize("line", ["xx\n", "sa \n", "SA\n", "\n"])
def test_check_rejects_unknown_instruction(line):
    with pytest.raises(ValueError):
        check([2, 1], [line])


@pytest.mark.parametrize("size", [2, 3, 5, 8, 50])
def test_check_accepts_solver_output(size):
    values = random.Random(size).sample(range(1000), size)
    lines = [f"{op}\n" for op in solve(values)]
    assert check(values, lines) is True


def test_main_ok(capsys, monkeypatch):
    status, out, err = _run(capsys, monkeypatch, ["2", "1"], "sa\n")
    assert (status, out, err) == (0, "", "OK\n")


def test_main_ko(capsys, monkeypatch):
    status, out, err = _run(capsys, monkeypatch, ["2", "1"], "")
    assert (status, out, err) == (0, "", "KO\n")


def test_main_unterminated_last_line_ignored(capsys, monkeypatch):
    _, _, err = _run(capsys, monkeypatch, ["2", "1"], "sa")
    assert err == "KO\n"


def test_main_invalid_instruction(capsys, monkeypatch):
    _, _, err = _run(capsys, monkeypatch, ["2", "1"], "sa\nfoo\n")
    assert err == "Error\n"


def test_main_invalid_arguments(capsys, monkeypatch):
    _, _, err = _run(capsys, monkeypatch, ["1", "1"], "sa\n")
    assert err == "Error\n"


def test_main_no_arguments(capsys, monkeypatch):
    status, out, err = _run(capsys, monkeypatch, [], "sa\n")
    assert (status, out, err) == (0, "", "")


def test_main_solver_round_trip(capsys, monkeypatch):
    values = random.Random(7).sample(range(-100, 100), 30)
    text = "".join(f"{op}\n" for op in solve(values))
    _, _, err = _run(capsys, monkeypatch, [str(v) for v in values], text)
    assert err == "OK\n"