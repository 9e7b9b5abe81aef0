#!/usr/bin/env python3
r"""
Env Modifier

Create or update the .env file in the project root. The content handed to
write_env_file is written verbatim, replacing whatever the file held before.
The CLI collects values (interactively or from flags) and renders them as
KEY=value lines.

Usage examples:

  python env_modifier.py
  python env_modifier.py --set API_COC_KEY=abc --set DISCORD_BOT_TOKEN=xyz
  python env_modifier.py --content $'DEBUG=1\n' --dir path/to/project
  python env_modifier.py --key OPENAI_API_KEY --key OPENAI_BASE_URL
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Mapping

ENV_FILENAME = ".env"


def _non_empty(value: str) -> bool:
    return bool(value)


@dataclass(frozen=True)
class EnvKey:
    """A variable to ask the user for, with the check its value must pass."""

    key: str
    prompt_text: str
    validate: Callable[[str], bool] = field(default=_non_empty, compare=False)


DEFAULT_KEYS: tuple[EnvKey, ...] = (
    EnvKey("API_COC_KEY", "Enter your Clash of Clans API Key: "),
    EnvKey("DISCORD_BOT_TOKEN", "Enter your Discord Bot Token: "),
)


def env_file_path(directory: Path | str | None = None) -> Path:
    # Resolved per call so a chdir between calls moves the target.
    root = Path(directory) if directory else Path.cwd()
    return root / ENV_FILENAME


def write_env_file(content: str, directory: Path | str | None = None) -> Path:
    """Replace the contents of ``<directory>/.env`` with ``content``.

    ``directory`` defaults to the current working directory. The file is
    created if missing and truncated otherwise. The bytes on disk are
    ``content`` encoded as UTF-8 with no newline translation; surrogate
    escapes (undecodable argv bytes) are written back as the original bytes.

    Encoding happens before the file is opened, so a UnicodeEncodeError
    leaves an existing .env untouched. OSError from opening, writing or
    closing propagates to the caller.
    """

    data = content.encode("utf-8", errors="surrogateescape")
    path = env_file_path(directory)
    with open(path, "wb") as f:
        f.write(data)
    return path


def format_env_content(values: Mapping[str, str]) -> str:
    return "".join(f"{key}={value}\n" for key, value in values.items())


def mask_secret(value: str) -> str:
    if len(value) > 8:
        return value[:4] + "…" + value[-4:]
    return "*" * len(value)


def validate_env_values(keys: Iterable[EnvKey], values: Mapping[str, str]) -> list[str]:
    """Return the names of keys whose value is missing or rejected."""

    invalid = []
    for env_key in keys:
        value = (values.get(env_key.key) or "").strip()
        if not env_key.validate(value):
            invalid.append(env_key.key)
    return invalid


def prompt_for_env_key(env_key: EnvKey, input_fn: Callable[[str], str] | None = None) -> str | None:
    reader = input_fn or input
    value = reader(env_key.prompt_text).strip()
    if not env_key.validate(value):
        print(f"Error: Value for {env_key.key} is invalid. Please try again.", file=sys.stderr)
        return None
    return value


def prompt_for_env_keys(
    keys: Iterable[EnvKey],
    input_fn: Callable[[str], str] | None = None,
) -> dict[str, str]:
    """Ask for each key in order, repeating a prompt until its value validates."""

    results: dict[str, str] = {}
    for env_key in keys:
        value = None
        while value is None:
            value = prompt_for_env_key(env_key, input_fn)
        results[env_key.key] = value
    return results


def _assignment(raw: str) -> tuple[str, str]:
    key, sep, value = raw.partition("=")
    key = key.strip()
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {raw!r}")
    return key, value


def _key_name(raw: str) -> str:
    name = raw.strip()
    if not name or "=" in name:
        raise argparse.ArgumentTypeError(f"expected a key name without '=', got {raw!r}")
    return name


def _keys_from_names(names: list[str]) -> list[EnvKey]:
    return [EnvKey(_key_name(name), f"Enter a value for {name.strip()}: ") for name in names]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Create or update the .env file in the project root.")
    ap.add_argument("--dir", dest="directory", default="", help="Directory holding .env (default: current directory)")
    source = ap.add_mutually_exclusive_group()
    source.add_argument("--content", default=None, help="Exact text to write to .env")
    source.add_argument(
        "--set",
        dest="assignments",
        action="append",
        type=_assignment,
        default=[],
        metavar="KEY=VALUE",
        help="Value to write without prompting (repeatable)",
    )
    source.add_argument(
        "--key",
        dest="keys",
        action="append",
        type=_key_name,
        default=[],
        metavar="KEY",
        help="Prompt for this key instead of the defaults (repeatable)",
    )
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    values: dict[str, str] = {}
    if args.content is not None:
        content = args.content
    else:
        if args.assignments:
            values = dict(args.assignments)
        else:
            keys = _keys_from_names(args.keys) if args.keys else list(DEFAULT_KEYS)
            try:
                values = prompt_for_env_keys(keys)
            except (EOFError, KeyboardInterrupt):
                print("\nAborted.", file=sys.stderr)
                sys.exit(1)
        content = format_env_content(values)

    try:
        path = write_env_file(content, args.directory or None)
    except (OSError, UnicodeError) as e:
        print(f"Failed to create/update .env file: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"✓ .env file created/updated: {path}")
    for key, value in values.items():
        print(f"  {key}={mask_secret(value)}")


if __name__ == "__main__":
    main()
