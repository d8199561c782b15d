"""
Central Logging and Console Utilities.

Two Rich consoles sit behind one proxy:

*   the status console (stdout) prints the per-file status line, unwrapped and
    unpadded so it stays a single line whatever the terminal width;
*   the log console (stderr) renders the standard `logging` records (debug
    traces, errors) through a `RichHandler`.

Tests (or an embedding tool) can swap both at runtime via `set_console` while
modules keep importing the same `console` object.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_THEME = Theme(
  {
    "info": "dim cyan",
    "success": "green",
    "error": "bold red",
  }
)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  Printing is forwarded to a swappable status backend. Swapping the backends
  also re-points the root logger's `RichHandler`, so `logging.info(...)` follows.

  Attributes:
      _backend (Console): The active status (stdout) console.
      _log_backend (Console): The console log records are rendered to.
  """

  def __init__(self) -> None:
    """Initializes the proxy with standard output and standard error consoles."""
    self._backend: Console = Console(theme=_THEME)
    self._log_backend: Console = Console(theme=_THEME, stderr=True)
    self._configure_logging()

  def set_backend(self, new_console: Console, log_console: Optional[Console] = None) -> None:
    """
    Injects new Console backends and updates logging handlers.

    Args:
        new_console (Console): The console status lines are printed to.
        log_console (Optional[Console]): The console for log records.
            Defaults to ``new_console``.
    """
    self._backend = new_console
    self._log_backend = log_console or new_console
    self._configure_logging()

  def reset(self) -> None:
    """
    Resets the proxy to fresh standard output / standard error consoles.
    """
    self._backend = Console(theme=_THEME)
    self._log_backend = Console(theme=_THEME, stderr=True)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    """
    Access the raw status console.

    Returns:
        Console: The currently active implementation.
    """
    return self._backend

  @property
  def log_backend(self) -> Console:
    """
    Access the console log records are rendered to.

    Returns:
        Console: The currently active log console.
    """
    return self._log_backend

  def _configure_logging(self) -> None:
    """
    Directs the root logger at the current log console.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._log_backend,
      show_time=False,
      show_level=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    """
    Forwards `print` calls to the active status backend.

    Args:
        *args: Positional arguments for Rich print.
        **kwargs: Keyword arguments for Rich print.
    """
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    """
    Fallback to forward any other attributes/methods to the backend.

    Args:
        name (str): Attribute name.

    Returns:
        Any: The attribute from the backend console.
    """
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console, log_console: Optional[Console] = None) -> None:
  """
  Global helper to inject specific console instances.

  Args:
      new_console (Console): The configured Rich console for status lines.
      log_console (Optional[Console]): Console for log records (defaults to ``new_console``).
  """
  console.set_backend(new_console, log_console)


def reset_console() -> None:
  """
  Global helper to reset logging and console to the standard streams.
  """
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active status console.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def set_verbose(enabled: bool) -> None:
  """
  Toggles DEBUG output on the root logger.

  Args:
      enabled (bool): True for DEBUG, False for the default INFO level.
  """
  logging.getLogger().setLevel(logging.DEBUG if enabled else logging.INFO)


def _print_status(line: str, style: str) -> None:
  # soft_wrap keeps long file names on one line with no trailing padding.
  console.print(f"[{style}]{line}[/{style}]", soft_wrap=True, highlight=False)


def print_success(msg: str) -> None:
  """
  Prints a "file rewritten" status line.

  Args:
      msg (str): The message content. Can include rich markup like [bold].
  """
  _print_status(f"✅ {msg}", "success")


def print_skip(msg: str) -> None:
  """
  Prints a "nothing to do" status line.

  Args:
      msg (str): The message content.
  """
  _print_status(f"⏭️  {msg}", "info")


def print_info(msg: str) -> None:
  """
  Prints a neutral status line (used for dry runs).

  Args:
      msg (str): The message content.
  """
  _print_status(f"ℹ️  {msg}", "info")


def log_error(msg: str) -> None:
  """
  Logs an error message via standard logging (standard error).

  Args:
      msg (str): The message content, already escaped for rich markup.
  """
  logging.error(f"[error]❌ {msg}[/error]", extra={"markup": True})
