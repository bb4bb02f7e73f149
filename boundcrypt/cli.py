"""Command-line entry point."""

from __future__ import annotations

import sys

from .container import decrypt_many, encrypt_many
from .info import log_info
from .paths import get_file_name, strequal

_DESCRIPTION = (
    "Licensed Content Bound Encryptor:  Encrypts and decrypts files that contain "
    "sensitive or licenced content using another file as a key.\n"
    "The input file may be a secret file, a licenced file or a file behind a paywall.\n"
    "One use could be to use the original licenced/paid file as a key, and encrypt "
    "a modified file to distribute to other users."
)


def _print_help(program: str) -> None:
    print(_DESCRIPTION)
    print()
    print("Command usage:")
    print(f"\t{program} decrypt <key input file> <encrypted input file(s)> [decrypted output file(s)]")
    print(f"\t{program} encrypt <key input file> <decrypted input file(s)> [encrypted output file(s)]")
    print(f"\t{program} info <encrypted input file>")
    print(
        "\t\tShows information about the input file such as estimated decrypt size "
        "and key file name at encryption."
    )
    print(f"\t{program} help")


def main(argv=None) -> int:
    """Run the command given by ``argv`` (without the program name); return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = get_file_name(sys.argv[0]) if sys.argv and sys.argv[0] else "boundcrypt"

    if not args or strequal(args[0], "help"):
        _print_help(program)
        return 0

    command = args[0]
    if len(args) in (3, 4) and strequal(command, "decrypt"):
        outputs = args[3] if len(args) == 4 else None
        return 0 if decrypt_many(args[1], args[2], outputs) else -2
    if len(args) in (3, 4) and strequal(command, "encrypt"):
        outputs = args[3] if len(args) == 4 else None
        return 0 if encrypt_many(args[1], args[2], outputs) else -3
    if len(args) == 2 and strequal(command, "info"):
        if not log_info(args[1]):
            print("Is this input file a valid encrypted file by this program?", file=sys.stderr)
            return -4
        return 0

    print(
        f"Unkown command '{command}' with {len(args)} arguments.  "
        "Use 'help' for a list of commands.",
        file=sys.stderr,
    )
    return -1


if __name__ == "__main__":
    sys.exit(main())