import pytest

from linproc.interrupts import Interrupt, read_interrupts

SAMPLE = """\
           CPU0       CPU1
  0:         44          0   IO-APIC-edge      timer
  1:          9          3   IO-APIC-edge      i8042
NMI:          0          0   Non-maskable interrupts
ERR:          0
"""


def test_read_interrupts(tmp_path):
    path = tmp_path / "interrupts"
    path.write_text(SAMPLE)
    assert read_interrupts(path) == [
        Interrupt("0", [44, 0], "IO-APIC-edge timer"),
        Interrupt("1", [9, 3], "IO-APIC-edge i8042"),
        Interrupt("NMI", [0, 0], "Non-maskable interrupts"),
        Interrupt("ERR", [0], ""),
    ]


def test_blank_lines_are_skipped(tmp_path):
    path = tmp_path / "interrupts"
    path.write_text("  CPU0\n\n  7: 5 edge\n\n")
    assert read_interrupts(path) == [Interrupt("7", [5], "edge")]


def test_non_numeric_count_is_an_error(tmp_path):
    path = tmp_path / "interrupts"
    path.write_text("  CPU0  CPU1\n  9:  1 IO-APIC acpi\n")
    with pytest.raises(ValueError):
        read_interrupts(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_interrupts(tmp_path / "absent")