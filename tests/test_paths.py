import pytest

from boundcrypt.paths import (
    MAX_FILE_PATH_SIZE,
    append_extension,
    ensure_file_extension,
    get_file_name,
    remove_extension,
    split_paths,
    strequal,
    suffix_file_name,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("help", "help", True),
        ("HELP", "help", True),
        ("DeCrypt", "decrypt", True),
        ("help", "HELP", False),
        ("help", "hel", False),
        ("hel", "help", False),
        ("", "", True),
    ],
)
def test_strequal(a, b, expected):
    assert strequal(a, b) is expected


def test_strequal_rejects_long_strings():
    text = "a" * 300
    assert strequal(text, text) is False


@pytest.mark.parametrize(
    "path, expected",
    [
        ("dir/sub/file.txt", "file.txt"),
        ("C:\\dir\\key.png", "key.png"),
        ("mixed/dir\\name.bin", "name.bin"),
        ("plain", "plain"),
        ("dir/", ""),
    ],
)
def test_get_file_name(path, expected):
    assert get_file_name(path) == expected


def test_get_file_name_rejects_overlong_path():
    with pytest.raises(ValueError):
        get_file_name("a" * MAX_FILE_PATH_SIZE)


def test_suffix_file_name_before_extension():
    assert suffix_file_name("photo.png", "-decrypted") == "photo-decrypted.png"


def test_suffix_file_name_uses_last_period():
    assert suffix_file_name("a.tar.gz", "-d") == "a.tar-d.gz"


def test_suffix_file_name_without_period_appends():
    assert suffix_file_name("README", "-x") == "README" + "-x"


def test_suffix_file_name_keeps_all_characters():
    name, suffix = "dir/archive.data.bin", "-copy"
    result = suffix_file_name(name, suffix)
    assert len(result) == len(name) + len(suffix)
    assert result.endswith(".bin")
    assert result.startswith("dir/archive.data")


def test_suffix_file_name_rejects_long_suffix():
    with pytest.raises(ValueError):
        suffix_file_name("x.txt", "s" * 256)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a;b;c", ["a", "b", "c"]),
        ("single", ["single"]),
        ("a;", ["a"]),
        ("a;;b", ["a", "", "b"]),
        ("a;;", ["a", ""]),
        (";a", ["", "a"]),
        ("", []),
    ],
)
def test_split_paths(text, expected):
    assert split_paths(text) == expected


def test_split_paths_custom_separator():
    assert split_paths("x,y", ",") == ["x", "y"]


def test_ensure_file_extension_adds_when_missing():
    assert ensure_file_extension("out", ".lenc") == "out" + ".lenc"


def test_ensure_file_extension_keeps_existing():
    assert ensure_file_extension("out.bin", ".lenc") == "out.bin"


def test_append_extension():
    assert append_extension("x.txt", ".lenc") == "x.txt" + ".lenc"


def test_append_extension_rejects_long_extension():
    with pytest.raises(ValueError):
        append_extension("x", "." + "e" * 300)


@pytest.mark.parametrize(
    "path",
    ["x.txt", "dir/name", "noext", "a.b.c"],
)
def test_remove_extension_undoes_append(path):
    assert remove_extension(append_extension(path, ".lenc"), ".lenc") == path


@pytest.mark.parametrize("path", ["x.txt", "x", "x.lencx", "x.len"])
def test_remove_extension_leaves_other_names(path):
    assert remove_extension(path, ".lenc") == path