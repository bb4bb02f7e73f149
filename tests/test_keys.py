import hashlib
import io

import pytest

from boundcrypt.keys import KEY_SIZE, derive_key, hash_file_sha512, key_for_file


@pytest.mark.parametrize("size", [0, 1, 8191, 8192, 8193, 20000])
def test_hash_file_sha512_matches_hashlib(size):
    data = bytes(i % 251 for i in range(size))
    assert hash_file_sha512(io.BytesIO(data)) == hashlib.sha512(data).digest()


def test_hash_file_sha512_reads_from_current_position():
    stream = io.BytesIO(b"skipped-payload")
    stream.read(8)
    assert hash_file_sha512(stream) == hashlib.sha512(b"payload").digest()


def test_derive_key_default_length():
    assert len(derive_key(b"material")) == KEY_SIZE == 64


def test_derive_key_is_deterministic():
    keys = {derive_key(b"material") for _ in range(5)}
    assert len(keys) == 1
    (key,) = keys
    assert len(key) == KEY_SIZE
    assert key != b"material".ljust(KEY_SIZE, b"\0")
    assert derive_key(bytearray(b"material")) == key


def test_derive_key_depends_on_input():
    assert derive_key(b"material-a") != derive_key(b"material-b")


def test_derive_key_shorter_output_is_prefix():
    ikm = hashlib.sha512(b"abc").digest()
    assert derive_key(ikm, 32) == derive_key(ikm)[:32]


def test_derive_key_rejects_excessive_length():
    with pytest.raises(ValueError):
        derive_key(b"material", 255 * 64 + 1)


def test_key_for_file(tmp_path):
    content = b"licensed content" * 1000
    path = tmp_path / "key.bin"
    path.write_bytes(content)
    assert key_for_file(path) == derive_key(hashlib.sha512(content).digest())


def test_key_for_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        key_for_file(tmp_path / "absent.bin")