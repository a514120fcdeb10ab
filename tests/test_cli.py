import os
from unittest import mock

import psutil
import pytest

from turf.cli import MAX_PIDS, enum_proc, main
from turf.process import Process


def _missing_pid():
    pid = max(psutil.pids()) + 100000
    while psutil.pid_exists(pid):
        pid += 1
    return pid


def test_enum_proc_returns_ints_within_limit():
    pids = enum_proc()
    assert 0 < len(pids) <= MAX_PIDS
    assert all(isinstance(pid, int) for pid in pids)


def test_enum_proc_truncates_to_capacity():
    with mock.patch("psutil.pids", return_value=list(range(2000))):
        pids = enum_proc()
    assert len(pids) == 1024
    assert pids == list(range(1024))


def test_enum_proc_failure_raises_os_error():
    with mock.patch("psutil.pids", side_effect=psutil.Error()):
        with pytest.raises(OSError):
            enum_proc()


def test_main_prints_pid_and_name(capsys):
    pid = os.getpid()
    with Process.open(pid) as proc:
        expected_name = proc.name
    with mock.patch("psutil.pids", return_value=[pid]):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert out == f"{pid}: {expected_name}\n"


def test_main_reports_unopenable_process(capsys):
    missing = _missing_pid()
    with mock.patch("psutil.pids", return_value=[missing]):
        assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(f"failed to open {missing}: ")