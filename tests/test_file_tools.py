import pytest

from convsim.file_tools import (
    check_for_directories,
    check_for_file,
    get_files,
    write_vector_file,
)


def test_get_files_filters_by_extension(tmp_path):
    (tmp_path / "a.txt").write_text("x")
    (tmp_path / "b.txt").write_text("y")
    (tmp_path / "c.csv").write_text("z")
    (tmp_path / "d.txt").mkdir()
    assert get_files(tmp_path, ".txt") == ["a.txt", "b.txt"]


def test_get_files_no_match(tmp_path):
    (tmp_path / "c.csv").write_text("z")
    assert get_files(tmp_path, ".txt") == []


def test_get_files_missing_folder(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_files(tmp_path / "missing", ".txt")


def test_check_for_directories_concatenates_names(tmp_path):
    base = str(tmp_path / "data")
    created = check_for_directories(base, ["", "/inner"])
    assert created == [base, base + "/inner"]
    assert (tmp_path / "data" / "inner").is_dir()


def test_check_for_directories_keeps_existing(tmp_path):
    (tmp_path / "exists").mkdir()
    marker = tmp_path / "exists" / "keep.txt"
    marker.write_text("kept")
    created = check_for_directories(str(tmp_path), ["/exists", "/fresh"])
    assert created == [str(tmp_path) + "/fresh"]
    assert marker.read_text() == "kept"


def test_check_for_file_creates_empty_file(tmp_path):
    path = tmp_path / "out.txt"
    assert check_for_file(path) is True
    assert path.read_text() == ""


def test_check_for_file_leaves_existing_content(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("data")
    assert check_for_file(path) is False
    assert path.read_text() == "data"


def test_check_for_file_missing_parent(tmp_path):
    with pytest.raises(OSError):
        check_for_file(tmp_path / "nowhere" / "out.txt")


def test_write_vector_file_integers(tmp_path):
    path = tmp_path / "v.txt"
    write_vector_file(path, [1, 2, 3])
    assert path.read_text() == "3\n\n1\n2\n3\n"


def test_write_vector_file_floats(tmp_path):
    path = tmp_path / "v.txt"
    write_vector_file(path, [0.0, 0.25, 1 / 3])
    assert path.read_text().splitlines() == ["3", "", "0", "0.25", "0.333333"]


def test_write_vector_file_empty(tmp_path):
    path = tmp_path / "v.txt"
    write_vector_file(path, [])
    assert path.read_text() == "0\n\n"


def test_write_vector_file_overwrites(tmp_path):
    path = tmp_path / "v.txt"
    path.write_text("old content\n")
    write_vector_file(path, [7])
    assert path.read_text() == "1\n\n7\n"


def test_write_vector_file_missing_parent(tmp_path):
    with pytest.raises(OSError):
        write_vector_file(tmp_path / "nowhere" / "v.txt", [1])