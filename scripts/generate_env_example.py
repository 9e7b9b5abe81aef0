#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from env_modifier import DEFAULT_KEYS, format_env_content

ROOT = Path(__file__).resolve().parents[1]

HEADER = (
    "# Example environment\n"
    "# Run env-modifier (or copy this file to .env) and fill in locally. Never commit real secrets.\n\n"
)


def render_template() -> str:
    return HEADER + format_env_content({env_key.key: "" for env_key in DEFAULT_KEYS})


def main() -> None:
    out = ROOT / ".env.example"
    if out.exists():
        print(f"Exists: {out}")
        return
    out.write_text(render_template(), encoding="utf-8")
    print(f"Wrote: {out}")


if __name__ == "__main__":
    main()
