import io

import snail_cli
from tests import harness


def _write(tmp_path, text):
    path = tmp_path / "input.txt"
    path.write_text(text)
    return str(path)


def test_cli_reports_both_parts(tmp_path, capsys):
    path = _write(tmp_path, harness.HOMEWORK_EXAMPLE)
    assert snail_cli.main([path]) == 0
    out = capsys.readouterr().out
    assert "10 numbers" in out
    assert "Sum     : 3488" in out
    assert "Best    : 3805" in out


def test_cli_single_part(tmp_path, capsys):
    path = _write(tmp_path, harness.HOMEWORK_EXAMPLE)
    assert snail_cli.main(["--part", "1", path]) == 0
    out = capsys.readouterr().out
    assert "3488" in out
    assert "Best" not in out


def test_cli_chunk_size_flag(tmp_path, capsys):
    path = _write(tmp_path, harness.HOMEWORK_EXAMPLE)
    assert snail_cli.main(["--part=2", "--chunk-size=16", path]) == 0
    out = capsys.readouterr().out
    assert "Best    : 3805" in out
    assert "Sum" not in out


def test_cli_parse_error_exit_code(tmp_path, capsys):
    path = _write(tmp_path, "[1,2]\n[3,x]\n")
    assert snail_cli.main([path]) == 1
    err = capsys.readouterr().err
    assert "ERROR" in err
    assert "line 2" in err


def test_cli_missing_file(tmp_path, capsys):
    assert snail_cli.main([str(tmp_path / "nope.txt")]) == 1
    assert "ERROR" in capsys.readouterr().err


def test_cli_usage_errors(capsys):
    assert snail_cli.main([]) == 2
    assert snail_cli.main(["--part", "3", "x"]) == 2
    assert snail_cli.main(["--chunk-size", "0", "x"]) == 2
    assert snail_cli.main(["--part", "one", "x"]) == 2
    err = capsys.readouterr().err
    assert "usage" in err


def test_run_homework_lines_returns_result():
    out = io.StringIO()
    result = snail_cli.run_homework_lines(
        harness.HOMEWORK_EXAMPLE.splitlines(), out=out
    )
    assert result.sum_magnitude == 3488
    assert result.best_pair_magnitude == 3805
    assert out.getvalue().splitlines()[-1].startswith("   └─ Best")


def test_run_homework_lines_empty_input():
    out = io.StringIO()
    result = snail_cli.run_homework_lines([], out=out)
    assert result.count == 0
    assert "n/a" in out.getvalue()
