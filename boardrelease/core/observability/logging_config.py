"""
Logging configuration for the boardrelease CLI.

``release`` writes its three result lines to stdout; everything logged
goes to stderr so the two never mix.  ``setup_logging`` runs once per
CLI invocation and replaces whatever the previous run installed.

Levels, highest precedence first:
    --debug / --verbose / --quiet  >  BOARDRELEASE_LOG_LEVEL  >  WARNING

BOARDRELEASE_LOG_FILE adds a file handler, at BOARDRELEASE_LOG_FILE_LEVEL
if set.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Mapping

ENV_LOG_LEVEL = "BOARDRELEASE_LOG_LEVEL"
ENV_LOG_FILE = "BOARDRELEASE_LOG_FILE"
ENV_LOG_FILE_LEVEL = "BOARDRELEASE_LOG_FILE_LEVEL"

# Console format per level; WARNING stays bare so errors read like messages
_CONSOLE_FORMATS = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_FMT_MINIMAL = "%(message)s"

_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"

# Set by setup_logging; marks the handlers it owns on the root logger
_OWNED_ATTR = "_boardrelease_owned"


@dataclass(frozen=True)
class LogSettings:
    """Resolved logging options for one run."""

    level: str = "WARNING"
    log_file: str | None = None
    log_file_level: str | None = None


class _StderrHandler(logging.StreamHandler):
    """Writes to the current ``sys.stderr``, looked up at emit time."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def resolve_level(debug: bool, verbose: bool, quiet: bool, env_level: str | None) -> str:
    """Pick the console level from CLI flags, falling back to the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return env_level or "WARNING"


def settings_from_cli(
    debug: bool,
    verbose: bool,
    quiet: bool,
    environ: Mapping[str, str],
) -> LogSettings:
    """Combine CLI flags with the BOARDRELEASE_LOG_* environment."""
    return LogSettings(
        level=resolve_level(debug, verbose, quiet, environ.get(ENV_LOG_LEVEL)),
        log_file=environ.get(ENV_LOG_FILE) or None,
        log_file_level=environ.get(ENV_LOG_FILE_LEVEL) or None,
    )


def setup_logging(settings: LogSettings) -> None:
    """Install console (and optional file) handlers on the root logger.

    Handlers from an earlier call are closed first, so repeated CLI
    invocations in one process do not pile up open log files.
    """
    console_level = _parse_level(settings.level)
    root = logging.getLogger()
    _remove_owned_handlers(root)

    if console_level <= logging.DEBUG:
        fmt, datefmt = _CONSOLE_FORMATS[logging.DEBUG]
    elif console_level <= logging.INFO:
        fmt, datefmt = _CONSOLE_FORMATS[logging.INFO]
    else:
        fmt, datefmt = _FMT_MINIMAL, None

    console = _StderrHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    _install(root, console)

    effective_level = console_level
    if settings.log_file:
        file_level = (
            _parse_level(settings.log_file_level) if settings.log_file_level else console_level
        )
        effective_level = min(effective_level, file_level)

        fh = logging.FileHandler(settings.log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        _install(root, fh)

    root.setLevel(effective_level)

    # YAML parsing is chatty at DEBUG and says nothing about the release
    logging.getLogger("yaml").setLevel(
        logging.DEBUG if console_level <= logging.DEBUG else logging.WARNING
    )


def _install(root: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _OWNED_ATTR, True)
    root.addHandler(handler)


def _remove_owned_handlers(root: logging.Logger) -> None:
    for handler in list(root.handlers):
        if getattr(handler, _OWNED_ATTR, False):
            root.removeHandler(handler)
            handler.close()


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
