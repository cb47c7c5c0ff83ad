"""
Minimal .env file parser.

Reads KEY=value lines; blank lines and # comments are skipped and matching
surrounding quotes are stripped from values.
"""

import re
from pathlib import Path

KEY_PATTERN = re.compile(r'^[A-Z][A-Z0-9_]*$')


def load_env(filepath: Path | str) -> dict:
    """
    Parse env file, return dict.

    Raises:
        FileNotFoundError: if file doesn't exist
        ValueError: if a line is not KEY=value or the key is invalid
    """
    result = {}
    path = Path(filepath)

    if not path.exists():
        raise FileNotFoundError(f"Env file not found: {filepath}")

    for lineno, line in enumerate(path.read_text().splitlines(), 1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue

        key, sep, value = line.partition('=')
        if not sep:
            raise ValueError(f"{path.name} line {lineno}: expected KEY=value")

        key = key.strip()
        if key.startswith('export '):
            key = key[len('export '):].strip()
        if not KEY_PATTERN.match(key):
            raise ValueError(f"{path.name} line {lineno}: invalid key '{key}'")

        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]

        result[key] = value

    return result
