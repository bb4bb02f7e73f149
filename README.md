# boundcrypt

Encrypt and decrypt files using another file as the key.

The key file can be any file that you and the recipient both already have,
such as a licensed, paid or private original. You can then share a modified
version without the original content. Only someone who holds the same key file
can decrypt it.

The key comes from the key file's SHA-512 digest, passed through HKDF-SHA512.
The data is encrypted with AES-256-GCM. Each encrypted file holds, in order:

1. the key file's name, followed by a NUL byte;
2. a random 12-byte IV;
3. the ciphertext, which is a short proof-of-knowledge marker followed by the file data;
4. a 16-byte GCM tag.

Decryption checks the marker first. If it does not match, the key file is not
the one used for encryption and decryption stops. Decryption then checks the GCM
tag, so a changed or truncated file is rejected.

## Installation

```
pip install .
```

## Command line

```
boundcrypt encrypt <key input file> <decrypted input file(s)> [encrypted output file(s)]
boundcrypt decrypt <key input file> <encrypted input file(s)> [decrypted output file(s)]
boundcrypt info <encrypted input file>
boundcrypt help
```

Running `boundcrypt` with no arguments prints the same help.

To give several inputs or outputs, put them in one argument, separated by `;`.

If you leave out the output paths, each output name comes from its input name:

- `encrypt` adds `.lenc` to the input name.
- `decrypt` removes the input name's extension when that extension is exactly `.lenc`.

If you give output paths, they are used as written. Inputs and outputs are
paired in order, and pairing stops at the end of the shorter list.

Each file is reported on standard output as it succeeds or fails. Error
details go to standard error. The decrypt command will not write its output
over its own encrypted input.

`info` prints the name of the key file that was used for encryption and the
size the decrypted data will have. A file whose payload is empty counts as
invalid for `info`.

Exit status:

| Status | Meaning |
| --- | --- |
| 0 | success |
| -1 | unknown command or wrong number of arguments |
| -2 | a decrypt failed |
| -3 | an encrypt failed |
| -4 | `info` could not read the file |

The shell shows negative statuses modulo 256. For example, -2 appears as 254.

### Example

```
boundcrypt encrypt original.png "edit1.png;edit2.png"
boundcrypt info edit1.png.lenc
boundcrypt decrypt original.png "edit1.png.lenc;edit2.png.lenc"
```

In this example, the last command writes its output to `edit1.png` and `edit2.png`.

## Library use

```python
from boundcrypt.container import (
    ContainerError,
    decrypt_with_original,
    encrypt_with_original,
)
from boundcrypt.info import read_info

encrypt_with_original("original.png", "edit.png", "edit.png.lenc")

info = read_info("edit.png.lenc")
print(info.key_name, info.data_size)

try:
    decrypt_with_original("original.png", "edit.png.lenc", "edit-out.png")
except ContainerError as exc:
    print("decryption failed:", exc)
```

- `boundcrypt.container`
  - `encrypt_with_original` and `decrypt_with_original` raise `ContainerError` on failure.
  - `encrypt_many` and `decrypt_many` take lists or `;`-separated strings of paths. They apply the default naming rules described above and print one line per file. They return `True` only if every file succeeded.
- `boundcrypt.info`
  - `read_info` returns an `EncryptedInfo` with `file_name`, `key_name` and `data_size`.
  - `log_info` prints the same details and returns `False` on failure.
- `boundcrypt.keys`
  - `hash_file_sha512` computes the digest of a file's contents.
  - `derive_key` derives key material from that digest.
  - `key_for_file` combines the two for a file path.
- `boundcrypt.paths`
  - File-name helpers: `get_file_name`, `split_paths`, `append_extension`, `remove_extension`, `ensure_file_extension`, `suffix_file_name` and `strequal`.
- `boundcrypt.cli`
  - `main(argv=None)` runs the command line and returns the exit status.

## Running the tests

```
pip install .[test]
pytest
```