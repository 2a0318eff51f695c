import pytest


# ln01\n ... ln19\n followed by "ln20." -- 100 bytes, the last one at index 99
NUMBERED_LINES = "".join(f"ln{i:02d}\n" for i in range(1, 20)) + "ln20."


@pytest.fixture
def numbered_file(tmp_path):
    path = tmp_path / "text2.txt"
    path.write_bytes(NUMBERED_LINES.encode("ascii"))
    return path


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    return path


@pytest.fixture
def numbered_text():
    return NUMBERED_LINES
