"""Error taxonomy and user-friendly error messages with recovery steps.

Generation failures are normally returned as structured results; these
exceptions surface only through GenerationResult.raise_for_status() and
option validation.
"""

from __future__ import annotations

from typing import Callable


class PasswordForgeError(Exception):
    """Base class for all password_forge errors."""


class OptionsError(PasswordForgeError, ValueError):
    """Generation options are outside their documented domain."""


class EmptyAlphabet(PasswordForgeError):
    """The configuration leaves no usable characters."""

    def __init__(self, message: str = "No character types selected"):
        super().__init__(message)


class ConstraintsUnsatisfiable(PasswordForgeError):
    """All attempts were exhausted without a fully valid candidate."""

    def __init__(self, violations: list[str], best_effort: str = "", attempts: int = 0):
        self.violations = list(violations)
        self.best_effort = best_effort
        self.attempts = attempts
        detail = "; ".join(self.violations) or "unknown constraint"
        super().__init__(f"Could not generate password meeting all criteria after {attempts} attempts: {detail}")


# Map error types to (friendly_message, recovery_steps)
_ERRORS: dict[str, tuple[str, list[str]]] = {
    "EmptyAlphabet": (
        "There are no characters to build a password from.",
        [
            "Enable at least one character class (uppercase, lowercase, digits, symbols)",
            "Or pass --custom with the characters you want to use",
        ],
    ),
    "ConstraintsUnsatisfiable": (
        "We couldn't find a password that meets every rule.",
        [
            "Make sure the minimum counts add up to no more than --length",
            "Try turning off --no-repeating or --no-sequential",
            "Try a longer password or a larger character set",
        ],
    ),
    "OptionsError": (
        "One of the generator settings is not valid.",
        [
            "Length must be between 1 and 256",
            "Minimum counts must be zero or positive whole numbers",
            "Check PASSWORD_FORGE_* values in your .env file",
        ],
    ),
    "FileNotFoundError": (
        "We couldn't find that file.",
        [
            "Check for typos in the file name",
            "Try: python -m password_forge --env /full/path/to/your/.env",
        ],
    ),
    "PermissionError": (
        "We don't have permission to access that file.",
        [
            "Run: chmod 600 <file>  (makes it readable by you only)",
            "Make sure you own the file: ls -la <file>",
        ],
    ),
    "KeyboardInterrupt": (
        "You stopped the process, and that's fine.",
        ["Just run the command again whenever you're ready."],
    ),
    "IsADirectoryError": (
        "That path is a folder, not a file.",
        ["Point --env or --output at a file, not a folder"],
    ),
}


def friendly_error(exc: BaseException, context: str = "") -> str:
    """Return a user-friendly error message with recovery steps."""
    etype = type(exc).__name__
    match = _ERRORS.get(etype)

    # Fall back to the nearest known base class
    if not match:
        for base in type(exc).__mro__:
            match = _ERRORS.get(base.__name__)
            if match:
                break

    if match:
        msg, steps = match
    else:
        msg = "Something unexpected went wrong."
        steps = ["Try running the command again"]

    lines = [f"\n  {msg}"]
    if context:
        lines.append(f"     (while {context})")
    lines.append("")
    lines.append("  Let's fix it:")
    for i, step in enumerate(steps, 1):
        lines.append(f"    {i}. {step}")
    lines.append("")
    lines.append(f"     Technical detail: {etype}: {exc}")
    lines.append("")
    return "\n".join(lines)


def print_friendly_error(exc: BaseException, context: str = "") -> None:
    """Print a user-friendly error message."""
    print(friendly_error(exc, context))


def wrap_main(func: Callable[[], int], context: str = "generating passwords") -> int:
    """Run func(), catching exceptions and printing friendly messages. Returns exit code."""
    try:
        return func()
    except KeyboardInterrupt:
        print_friendly_error(KeyboardInterrupt(), context)
        return 130
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except PasswordForgeError as e:
        print_friendly_error(e, context)
        return 2 if isinstance(e, OptionsError) else 1
    except Exception as e:
        print_friendly_error(e, context)
        return 1
