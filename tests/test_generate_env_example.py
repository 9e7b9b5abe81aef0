from __future__ import annotations

import importlib.util
from pathlib import Path

from dotenv import dotenv_values

REPO_ROOT = Path(__file__).resolve().parents[1]


def load_script_module():
    spec = importlib.util.spec_from_file_location(
        "generate_env_example", REPO_ROOT / "scripts" / "generate_env_example.py"
    )
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


def test_writes_template_with_default_keys(tmp_path, monkeypatch, capsys):
    script = load_script_module()
    monkeypatch.setattr(script, "ROOT", tmp_path)

    script.main()

    out = tmp_path / ".env.example"
    assert out.read_text(encoding="utf-8").startswith("# Example environment\n")
    assert dotenv_values(out) == {"API_COC_KEY": "", "DISCORD_BOT_TOKEN": ""}
    assert f"Wrote: {out}" in capsys.readouterr().out


def test_existing_template_is_left_alone(tmp_path, monkeypatch, capsys):
    script = load_script_module()
    monkeypatch.setattr(script, "ROOT", tmp_path)
    out = tmp_path / ".env.example"
    out.write_text("CUSTOM=1\n", encoding="utf-8")

    script.main()

    assert out.read_text(encoding="utf-8") == "CUSTOM=1\n"
    assert f"Exists: {out}" in capsys.readouterr().out
