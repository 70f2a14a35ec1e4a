import subprocess
from unittest import mock

import pytest

from kata.listing import list_root, main


def _completed(stdout):
    return subprocess.CompletedProcess(args=["ls", "-l", "-a"], returncode=0, stdout=stdout)


@mock.patch("kata.listing.subprocess.run")
def test_list_root_runs_ls_in_root(run):
    run.return_value = _completed("listing\n")
    assert list_root() == "listing\n"
    args, kwargs = run.call_args
    assert args[0] == ["ls", "-l", "-a"]
    assert kwargs["cwd"] == "/"
    assert kwargs["check"] is True


@mock.patch("kata.listing.subprocess.run")
def test_list_root_missing_command(run):
    run.side_effect = FileNotFoundError("ls")
    with pytest.raises(FileNotFoundError):
        list_root()


@mock.patch("kata.listing.subprocess.run")
def test_main_prints_listing(run, capsys):
    run.return_value = _completed("a\nb\n")
    assert main([]) == 0
    assert capsys.readouterr().out == "a\nb\n"


@mock.patch("kata.listing.subprocess.run")
def test_main_reports_failure(run, capsys):
    run.side_effect = subprocess.CalledProcessError(2, ["ls", "-l", "-a"])
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("failed!")