"""CLI entry point: python -m password_forge.

Usage:
    python -m password_forge --length 20
    python -m password_forge --preset secure --count 5
    python -m password_forge --preset pin --json
    python -m password_forge --env .env --output ~/.private/passwords.json
    python -m password_forge --output passwords.json --force-insecure-output  # world-readable directory
    python -m password_forge --self-test
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from password_forge.config import load_options
from password_forge.errors import wrap_main
from password_forge.generation_log import GenerationLog
from password_forge.generator import build_alphabet, generate_many
from password_forge.models import MAX_LENGTH, MIN_LENGTH
from password_forge.presets import DESCRIPTIONS, PRESETS
from password_forge.random_source import seeded, system
from password_forge.strength import entropy_bits

# CLI flag -> options field, for value-taking overrides
_VALUE_FLAGS = {
    "length": "length",
    "custom": "custom_characters",
    "min_uppercase": "min_uppercase",
    "min_lowercase": "min_lowercase",
    "min_digits": "min_digits",
    "min_symbols": "min_symbols",
}

# CLI flag -> (options field, value when the flag is given)
_SWITCH_FLAGS = {
    "no_uppercase": ("uppercase", False),
    "no_lowercase": ("lowercase", False),
    "no_digits": ("digits", False),
    "no_symbols": ("symbols", False),
    "exclude_similar": ("exclude_similar", True),
    "exclude_ambiguous": ("exclude_ambiguous", True),
    "custom_only": ("use_custom_only", True),
    "no_repeating": ("no_repeating", True),
    "no_sequential": ("no_sequential", True),
}


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="password_forge",
        description="Constrained random password generator.",
    )
    p.add_argument("--preset", choices=sorted(PRESETS), help="Start from a named preset")
    p.add_argument("--env", type=Path, help="Read PASSWORD_FORGE_* settings from a .env file")
    p.add_argument("--length", "-l", type=int, help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH})")
    p.add_argument("--no-uppercase", action="store_true", help="Disable uppercase letters")
    p.add_argument("--no-lowercase", action="store_true", help="Disable lowercase letters")
    p.add_argument("--no-digits", action="store_true", help="Disable digits")
    p.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    p.add_argument("--exclude-similar", action="store_true", help="Drop look-alike characters (I L i l 1 0)")
    p.add_argument("--exclude-ambiguous", action="store_true", help="Drop ambiguous symbols ({}[]()<>,;.)")
    p.add_argument("--custom", metavar="CHARS", help="Extra characters to add to the alphabet")
    p.add_argument("--custom-only", action="store_true", help="Use only the --custom characters")
    p.add_argument("--min-uppercase", type=int, metavar="N", help="Minimum uppercase letters")
    p.add_argument("--min-lowercase", type=int, metavar="N", help="Minimum lowercase letters")
    p.add_argument("--min-digits", type=int, metavar="N", help="Minimum digits")
    p.add_argument("--min-symbols", type=int, metavar="N", help="Minimum symbols")
    p.add_argument("--no-repeating", action="store_true", help="Forbid identical adjacent characters")
    p.add_argument("--no-sequential", action="store_true", help="Forbid runs like abc or 321")
    p.add_argument("--count", "-n", type=int, default=1, help="Number of passwords to generate (default: 1)")
    p.add_argument("--seed", type=int, help="Seed a deterministic (NOT secure) random source")
    p.add_argument("--json", action="store_true", help="Print JSON results to stdout")
    p.add_argument("--table", action="store_true", help="Show a table with strength and attempts")
    p.add_argument("--output", type=Path,
                   help="Write JSON results to file (world-readable locations need --force-insecure-output)")
    p.add_argument("--redaction-level", choices=["none", "partial", "full", "hash"], default="none",
                   help="Password redaction in table/JSON output (default: none)")
    p.add_argument("--force-insecure-output", action="store_true", help="Skip file permission check")
    p.add_argument("--log", type=Path, help="Append a JSON-lines generation log (no passwords)")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    p.add_argument("--quiet", "-q", action="store_true", help="Suppress output, only exit code")
    p.add_argument("--list-presets", action="store_true", help="List available presets and exit")
    p.add_argument("--self-test", action="store_true", help="Run the self-test suite")
    p.add_argument("--version", action="store_true", help="Show version and exit")
    return p


def _apply_flags(options, args: argparse.Namespace):
    changes: dict[str, object] = {}
    for flag, field_name in _VALUE_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            changes[field_name] = value
    for flag, (field_name, value) in _SWITCH_FLAGS.items():
        if getattr(args, flag):
            changes[field_name] = value
    return options.replace(**changes) if changes else options


def run(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    console = Console(quiet=args.quiet)
    err_console = Console(stderr=True, quiet=args.quiet)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s",
                            handlers=[RichHandler(console=Console(stderr=True))])

    if args.version:
        from password_forge import __version__
        console.print(f"password_forge {__version__}")
        return 0

    if args.list_presets:
        t = Table(title=f"Available Presets ({len(PRESETS)})", show_lines=True)
        t.add_column("Preset", style="cyan")
        t.add_column("Description")
        t.add_column("Length", justify="right")
        for name, preset in sorted(PRESETS.items()):
            t.add_row(name, DESCRIPTIONS.get(name, ""), str(preset.length))
        console.print(t)
        return 0

    if args.self_test:
        from password_forge.self_test import run_self_test
        return 0 if run_self_test(console) else 1

    if args.env and not args.env.exists():
        err_console.print(f"[red]File not found: {args.env}[/red]")
        return 2
    if args.count < 1:
        err_console.print("[red]--count must be at least 1[/red]")
        return 2

    options = _apply_flags(load_options(args.env, preset=args.preset), args)

    rng = seeded(args.seed) if args.seed is not None else system()
    log = GenerationLog(args.log) if args.log else None
    try:
        results = generate_many(options, args.count, rng=rng, log=log)
    finally:
        if log:
            log.flush()

    if args.json:
        from password_forge.output import to_payload
        print(json.dumps(to_payload(results, args.redaction_level), indent=2, ensure_ascii=False))
    elif args.table:
        from password_forge.output import render_table
        render_table(results, console, args.redaction_level)
        alphabet = build_alphabet(options)
        bits = entropy_bits(options.length, len(set(alphabet)))
        console.print(f"  [dim]alphabet {len(set(alphabet))} chars · ~{bits:.0f} bits per password[/dim]")
    elif not args.quiet:
        for r in results:
            if r.password:
                print(r.password)
            if not r.ok:
                for violation in r.violations:
                    err_console.print(f"[yellow]warning:[/yellow] {violation}")

    if args.output:
        from password_forge.output import write_json
        if not write_json(results, args.output, force_insecure=args.force_insecure_output,
                          console=err_console, redaction_level=args.redaction_level):
            return 2

    if any(r.status == "empty_alphabet" for r in results):
        return 2
    return 0 if all(r.ok for r in results) else 1


def main() -> int:
    return wrap_main(run, "generating passwords")


if __name__ == "__main__":
    sys.exit(main())
