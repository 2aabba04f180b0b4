import pytest

from linproc.process_cmdline import read_process_cmdline


def _write(tmp_path, data):
    path = tmp_path / "cmdline"
    path.write_bytes(data)
    return path


def test_read_process_cmdline_simple(tmp_path):
    path = _write(tmp_path, b"proftpd: (accepting connections)" + b"\x00" * 12)
    assert read_process_cmdline(path) == "proftpd: (accepting connections)"


def test_read_process_cmdline_complex(tmp_path):
    args = [
        b"/home/c9s/.config/sublime-text-2/Packages/User/GoSublime/linux-x64/bin/"
        b"gosublime.margo_r14.12.06-1_go1.4.2.exe",
        b"-oom",
        b"1000",
        b"-poll",
        b"30",
        b"-tag",
        b"r14.12.06-1",
    ]
    path = _write(tmp_path, b"\x00".join(args) + b"\x00")
    expected = (
        "/home/c9s/.config/sublime-text-2/Packages/User/GoSublime/linux-x64/bin/"
        "gosublime.margo_r14.12.06-1_go1.4.2.exe -oom 1000 -poll 30 -tag r14.12.06-1"
    )
    assert read_process_cmdline(path) == expected


def test_empty_cmdline(tmp_path):
    assert read_process_cmdline(_write(tmp_path, b"")) == ""


def test_only_last_of_repeated_nuls_becomes_space(tmp_path):
    assert read_process_cmdline(_write(tmp_path, b"a\x00\x00b\x00")) == "a\x00 b"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_process_cmdline(tmp_path / "absent")