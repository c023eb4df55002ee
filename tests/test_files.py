import pytest

from quadlite import files
from quadlite.files import FileError, FileLoader


def test_load_file_reads_bytes(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"\x00\x01abc")
    assert FileLoader().load_file(str(target)) == b"\x00\x01abc"


def test_load_string_roundtrip(tmp_path):
    target = tmp_path / "text.txt"
    target.write_text("héllo", encoding="utf-8")
    assert FileLoader().load_string(str(target)) == "héllo"


def test_load_string_is_lossy(tmp_path):
    target = tmp_path / "bad.txt"
    target.write_bytes(b"a\xffb")
    assert FileLoader().load_string(str(target)) == "a\ufffdb"


def test_assets_folder_prefix(tmp_path):
    (tmp_path / "tex.png").write_bytes(b"img")
    loader = FileLoader()
    loader.set_pc_assets_folder(str(tmp_path))
    assert loader.load_file("tex.png") == b"img"


def test_missing_file_raises_with_path(tmp_path):
    loader = FileLoader(str(tmp_path))
    with pytest.raises(FileError) as info:
        loader.load_file("missing.txt")
    expected_path = f"{tmp_path}/missing.txt"
    assert info.value.path == expected_path
    assert str(info.value).startswith(f"Couldn't load file {expected_path}: ")
    assert isinstance(info.value.kind, OSError)


def test_missing_string_raises(tmp_path):
    with pytest.raises(FileError):
        FileLoader().load_string(str(tmp_path / "nope"))


def test_module_level_functions(tmp_path):
    (tmp_path / "m.txt").write_text("module", encoding="utf-8")
    files.set_pc_assets_folder(str(tmp_path))
    try:
        assert files.load_string("m.txt") == "module"
        assert files.load_file("m.txt") == b"module"
    finally:
        files.set_pc_assets_folder(None)


def test_file_error_message():
    error = FileError("not found", "a/b.txt")
    assert str(error) == "Couldn't load file a/b.txt: not found"