import pytest

from philosophers.cli import main


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["5", "800"],
        ["0", "800", "200", "200"],
        ["5", "0", "200", "200"],
        ["5", "800", "200", "200", "0"],
    ],
)
def test_bad_arguments_report_error(capsys, argv):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Argument error\n"
    assert captured.out == ""


def test_run_prints_header_and_death(capsys):
    assert main(["1", "40", "10", "10"]) == 0
    out_lines = capsys.readouterr().out.splitlines()
    header = out_lines[0]
    assert header.startswith("Num philos:1, start time:")
    assert header.endswith(", time to die:40")
    start = header.split("start time:")[1].split(",")[0]
    assert int(start) > 0
    assert out_lines[-1].endswith(" 1 is dead")


def test_main_reads_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["philo", "abc"])
    assert main() == 1
    assert capsys.readouterr().err == "Argument error\n"