"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class SignerError(Exception):
    """Base exception for ignition-signer."""

    exit_code: int = 1


class ResourceLoadError(SignerError):
    """The resource manifest is missing or unreadable."""

    exit_code = 2


class ManifestParseError(ResourceLoadError):
    """The resource manifest is not a valid manifest document."""

    exit_code = 3


class MissingResourceFileError(ResourceLoadError):
    """A file listed in the manifest does not exist on disk."""

    exit_code = 4

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        message = f"Referenced file '{name}' could not be read"
        super().__init__(f"{message}: {detail}" if detail else message)


class MissingResourceDataError(SignerError):
    """A file listed in the manifest has no entry in the data map."""

    exit_code = 5

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No data for referenced file '{name}'")


class SignatureMismatchError(SignerError):
    """The stored signature does not match the recomputed digest."""

    exit_code = 6

    def __init__(self, stored: str | None, computed: str) -> None:
        self.stored = stored
        self.computed = computed
        if stored is None:
            message = f"Resource is not signed (computed {computed})"
        else:
            message = f"Signature mismatch: stored {stored}, computed {computed}"
        super().__init__(message)


class ConfigurationError(SignerError):
    """Invalid CLI configuration."""

    exit_code = 7


def error_handler(func: F) -> F:
    """Decorator that catches SignerError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SignerError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
