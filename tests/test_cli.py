import io

import pytest

from arraydrills.cli import main
from arraydrills.search import linear_search
from arraydrills.subarrays import max_subarray_sum


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_search_with_arguments(capsys):
    assert main(["search", "5", "4", "22", "-t", "22"]) == 0
    expected = linear_search([5, 4, 22], 22)
    assert _lines(capsys) == [f"Element is present at the index {expected}"]


def test_search_missing_value_reports_minus_one(capsys):
    main(["search", "1", "2", "3", "--target", "9"])
    assert _lines(capsys) == ["Element is present at the index -1"]


def test_search_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7 8 9 -1\n8\n"))
    assert main(["search"]) == 0
    expected = linear_search([7, 8, 9], 8)
    assert _lines(capsys) == [f"Element is present at the index {expected}"]


def test_search_stdin_without_sentinel_fails(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 2 3"))
    with pytest.raises(SystemExit) as info:
        main(["search"])
    assert info.value.code == 2


def test_search_requires_target(monkeypatch):
    with pytest.raises(SystemExit) as info:
        main(["search", "1", "2"])
    assert info.value.code == 2


def test_max_subarray_with_arguments(capsys):
    values = [-2, 1, -3, 4, -1, 2, 1, -5, 4]
    assert main(["max-subarray", *map(str, values)]) == 0
    lines = _lines(capsys)
    assert lines[0] == f"Maximum subarray sum = {max_subarray_sum(values)}"
    assert lines[1].startswith("Time taken by Kadane's Algorithm: ")
    assert lines[1].endswith(" ms")
    assert float(lines[1].split(": ")[1].split()[0]) >= 0.0


def test_max_subarray_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n-4 -1 -7\n"))
    main(["max-subarray"])
    lines = _lines(capsys)
    assert lines[0] == f"Maximum subarray sum = {max_subarray_sum([-4, -1, -7])}"


def test_max_subarray_stdin_short_fails(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 2\n"))
    with pytest.raises(SystemExit) as info:
        main(["max-subarray"])
    assert info.value.code == 2


def test_bad_stdin_token_fails(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 x 3"))
    with pytest.raises(SystemExit) as info:
        main(["max-subarray"])
    assert info.value.code == 2


def test_command_is_required():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2