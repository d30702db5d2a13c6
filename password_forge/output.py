"""Output formatting: canonical JSON serialization + Rich table rendering."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from password_forge.models import GenerationResult
from password_forge.security import check_output_permissions, redact_password
from password_forge.strength import analyze, assess

_STATUS_COLORS = {
    "ok": "green",
    "empty_alphabet": "red",
    "constraints_unsatisfiable": "yellow",
}

_STRENGTH_COLORS = {1: "red", 2: "yellow", 3: "blue", 4: "green", 5: "green bold"}


def render_table(
    results: list[GenerationResult],
    console: Optional[Console] = None,
    redaction_level: str = "none",
) -> None:
    """Print a Rich table summary to the console."""
    console = console or Console()
    table = Table(title="Generated Passwords", show_lines=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Password", style="cyan")
    table.add_column("Strength")
    table.add_column("Composition")
    table.add_column("Status")
    table.add_column("Attempts", justify="right")
    table.add_column("Violations")

    for i, r in enumerate(results, 1):
        # Text() keeps brackets in passwords from being read as Rich markup
        pw = Text(redact_password(r.password, redaction_level) if r.password else "")
        if r.password:
            st = assess(r.password)
            strength = f"[{_STRENGTH_COLORS[st.level]}]{st.label}[/{_STRENGTH_COLORS[st.level]}]"
            a = analyze(r.password)
            composition = (f"A-Z {a.uppercase} · a-z {a.lowercase} · 0-9 {a.digits} · sym {a.symbols}\n"
                           f"{a.unique} unique · {a.entropy_bits} bits · {a.crack_time}")
        else:
            strength = composition = ""
        color = _STATUS_COLORS.get(r.status, "white")
        table.add_row(str(i), pw, strength, composition, f"[{color}]{r.status}[/{color}]",
                      str(r.attempts), Text("\n".join(r.violations)))

    console.print(table)


def to_payload(results: list[GenerationResult], redaction_level: str = "none") -> list[dict]:
    payload = []
    for r in results:
        d = r.to_dict(redaction_level)
        d["strength"] = assess(r.password).to_dict() if r.password else None
        d["analysis"] = analyze(r.password).to_dict() if r.password else None
        payload.append(d)
    return payload


def write_json(
    results: list[GenerationResult],
    path: Path,
    force_insecure: bool = False,
    console: Optional[Console] = None,
    redaction_level: str = "none",
) -> bool:
    """Write canonical JSON output readable by the owner only. Returns True on success."""
    console = console or Console(stderr=True)
    if not check_output_permissions(path, force=force_insecure):
        console.print(
            f"[red]Refusing to write to {path}: symlink or world-readable location. "
            f"Use --force-insecure-output to override.[/red]"
        )
        return False
    path.write_text(json.dumps(to_payload(results, redaction_level), indent=2, ensure_ascii=False) + "\n")
    os.chmod(path, 0o600)
    console.print(f"[green]Results written to {path}[/green]")
    return True
