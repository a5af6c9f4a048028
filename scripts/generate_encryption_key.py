"""Generate a column encryption key.

Usage:
    python -m scripts.generate_encryption_key
    python -m scripts.generate_encryption_key --write ~/.config/connhub/.key
"""

import argparse
import os

from connhub.core.paths import resolve_home_path
from connhub.core.security import generate_encryption_key


def write_key(path: str, force: bool) -> None:
    """Write a new key file readable only by the current user."""
    target = resolve_home_path(path)
    if os.path.exists(target) and not force:
        print(f"Key file already exists: {target} (use --force to replace it)")
        return
    os.makedirs(os.path.dirname(target), exist_ok=True)
    fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(generate_encryption_key() + "\n")
    print(f"Encryption key written to {target}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate an encryption key")
    parser.add_argument("--write", metavar="PATH", help="Write the key to a file")
    parser.add_argument("--force", action="store_true", help="Replace an existing file")
    args = parser.parse_args()

    if args.write:
        write_key(args.write, args.force)
    else:
        print(generate_encryption_key())


if __name__ == "__main__":
    main()
