import pytest

from rankstencil.gs_cli import GridConfig, InputError, handle_input, main
from rankstencil.stencil import allocate_array3d, format_array3d


def test_defaults_when_no_arguments():
    config = handle_input([])
    assert config == GridConfig(num_iters=1000, kmax=4, jmax=6, imax=8)


def test_custom_arguments_are_parsed():
    config = handle_input(["10", "5", "7", "9"])
    assert (config.num_iters, config.kmax, config.jmax, config.imax) == (10, 5, 7, 9)


def test_leading_digits_are_used_like_atoi():
    config = handle_input(["12abc", " 3", "+4", "5x"])
    assert (config.num_iters, config.kmax, config.jmax, config.imax) == (12, 3, 4, 5)


@pytest.mark.parametrize(
    "args",
    [
        ["0", "4", "6", "8"],
        ["10", "2", "6", "8"],
        ["10", "4", "0", "8"],
        ["10", "4", "6", "-1"],
        ["abc", "4", "6", "8"],
    ],
)
def test_invalid_values_raise(args):
    with pytest.raises(InputError):
        handle_input(args)


@pytest.mark.parametrize("args", [["1"], ["1", "4", "6"], ["1", "4", "6", "8", "9"]])
def test_wrong_argument_count_raises(args):
    with pytest.raises(InputError):
        handle_input(args)


def test_input_error_is_value_error():
    with pytest.raises(ValueError):
        handle_input(["1", "2"])


def test_main_prints_initial_grids_and_summary(capsys):
    code = main(["300", "4", "4", "4"])
    out = capsys.readouterr().out
    assert code == 0
    grid_text = format_array3d(allocate_array3d(4, 4, 4))
    assert "Initial values of arr1:\n" + grid_text in out
    assert "Initial values of arr2::\n" + grid_text in out
    summary = [line for line in out.splitlines() if line.startswith("num iters=")]
    assert len(summary) == 1
    assert summary[0].startswith("num iters=300, kmax=4, jmax=4, imax=4, diff=")


def test_main_sweeps_converge_to_same_solution(capsys):
    assert main(["500", "4", "4", "4"]) == 0
    line = capsys.readouterr().out.strip().splitlines()[-1]
    diff = float(line.rsplit("diff=", 1)[1])
    assert 0.0 <= diff < 1e-6


def test_main_default_run_prints_notice(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "No args provided. Using default values: num_iters=1000, kmax=4, jmax=6, imax=8" in out
    assert "num iters=1000, kmax=4, jmax=6, imax=8, diff=" in out


def test_main_rejects_bad_input(capsys):
    code = main(["10", "1", "6", "8"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Invalid input values" in captured.err
    assert "num iters=" not in captured.out


def test_main_rejects_wrong_count(capsys):
    code = main(["10", "4"])
    captured = capsys.readouterr()
    assert code == 1
    assert "Invalid number of arguments" in captured.err