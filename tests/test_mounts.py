import pytest

from linproc.mounts import Mount, read_mounts

MOUNTS = (
    "rootfs / rootfs rw 0 0\n"
    "proc /proc proc rw,nosuid,nodev,noexec,relatime 0 0\n"
    "/dev/sda1 /boot ext4 rw,relatime,data=ordered 0 0"
)


def test_read_mounts(tmp_path):
    path = tmp_path / "mounts"
    path.write_text(MOUNTS)
    mounts = read_mounts(path)
    assert mounts[0].device == "rootfs"
    assert mounts[1].fs_type == "proc"
    assert mounts[2] == Mount("/dev/sda1", "/boot", "ext4", "rw,relatime,data=ordered")
    assert len(mounts) == 3


def test_empty_file(tmp_path):
    path = tmp_path / "mounts"
    path.write_text("")
    assert read_mounts(path) == []


def test_short_line_raises(tmp_path):
    path = tmp_path / "mounts"
    path.write_text("rootfs / rootfs rw 0 0\n\n")
    with pytest.raises(ValueError, match="Cannot parse mount line"):
        read_mounts(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_mounts(tmp_path / "absent")