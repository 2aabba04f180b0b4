import pytest

from linproc.process_statm import ProcessStatm, read_process_statm


def test_read_process_statm(tmp_path):
    path = tmp_path / "statm"
    path.write_text("4053 522 174 174 0 286 0\n")
    expected = ProcessStatm(
        size=4053, resident=522, share=174, text=174, lib=0, data=286, dirty=0
    )
    assert read_process_statm(path) == expected


def test_short_file_leaves_rest_zero(tmp_path):
    path = tmp_path / "statm"
    path.write_text("10 20\n")
    assert read_process_statm(path) == ProcessStatm(size=10, resident=20)


def test_invalid_number_raises(tmp_path):
    path = tmp_path / "statm"
    path.write_text("4053 abc 174\n")
    with pytest.raises(ValueError):
        read_process_statm(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_process_statm(tmp_path / "absent")