import logging
from datetime import datetime

import pytest
from jgfmt_cli.files import backup_timestamp, create_backup, read_source


@pytest.fixture
def log():
    return logging.getLogger("tests.files")


@pytest.mark.parametrize(
    "moment, expected",
    [
        (datetime(2024, 3, 5, 14, 7, 9), "03_05_2024_2_07_09"),
        (datetime(2024, 1, 1, 0, 0, 0), "01_01_2024_12_00_00"),
        (datetime(2023, 12, 31, 12, 30, 5), "12_31_2023_12_30_05"),
        (datetime(2023, 7, 4, 9, 15, 59), "07_04_2023_9_15_59"),
    ],
)
def test_backup_timestamp(moment, expected):
    assert backup_timestamp(moment) == expected


def test_create_backup_is_verbatim(tmp_path, log):
    path = tmp_path / "A.java"
    content = "class A {\r\n  int x;  \r\n}"
    moment = datetime(2024, 3, 5, 14, 7, 9)

    backup = create_backup(path, content, log, moment)

    assert backup == tmp_path / "A.java_BACKUP_03_05_2024_2_07_09"
    assert backup.read_bytes() == content.encode()


def test_create_backup_same_second_overwrites(tmp_path, log):
    path = tmp_path / "A.java"
    moment = datetime(2024, 3, 5, 14, 7, 9)

    first = create_backup(path, "first", log, moment)
    second = create_backup(path, "second", log, moment)

    assert first == second
    assert second.read_text() == "second"
    assert len(list(tmp_path.iterdir())) == 1


def test_create_backup_failure_is_logged(tmp_path, log, caplog):
    path = tmp_path / "missing_dir" / "A.java"

    with caplog.at_level(logging.ERROR, logger="tests.files"):
        assert create_backup(path, "content", log) is None

    assert "Error occurred when creating backup" in caplog.text


def test_read_source_keeps_line_endings(tmp_path, log):
    path = tmp_path / "A.java"
    path.write_bytes(b"a\r\nb\n")

    assert read_source(path, log) == "a\r\nb\n"


def test_read_source_missing_file(tmp_path, log, caplog):
    path = tmp_path / "missing.java"

    with caplog.at_level(logging.ERROR, logger="tests.files"):
        assert read_source(path, log) is None

    assert "missing.java" in caplog.text
