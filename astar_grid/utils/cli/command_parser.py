"""Command parsing for the headless development CLI."""

from __future__ import annotations

import logging
import queue
import sys
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, TextIO

logger = logging.getLogger(__name__)


@dataclass
class CLICommand:
    """Result of parsing a command string."""
    name: str
    args: List[str]


_cli_command_queue: queue.Queue[CLICommand] = queue.Queue()
_cli_thread_stop_event = threading.Event()


def parse_command(text: str) -> Optional[CLICommand]:
    """Return a :class:`CLICommand` from ``text`` if it starts with ``/``."""
    text = text.strip()
    if not text.startswith("/"):
        return None
    parts = text[1:].split()
    if not parts:
        return None
    return CLICommand(name=parts[0].lower(), args=parts[1:])


def parse_coord(args: Sequence[str]) -> Optional[tuple[int, int]]:
    """Return ``(row, col)`` from the first two ``args`` or ``None`` if malformed."""
    if len(args) < 2:
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        return None


def _cli_input_thread_func(stream: TextIO) -> None:
    """Read commands from ``stream`` until EOF or a stop request."""
    logger.info("CLI ready. Type commands prefixed with '/' (try /help).")
    while not _cli_thread_stop_event.is_set():
        # readline() blocks, which is fine in a dedicated thread.
        line = stream.readline()
        if not line:
            logger.info("CLI input stream closed.")
            _cli_command_queue.put(CLICommand(name="quit", args=[]))
            break
        parsed = parse_command(line)
        if parsed:
            _cli_command_queue.put(parsed)
        elif line.strip():
            logger.error("Commands must start with '/': %s", line.strip())


def start_cli_thread(stream: TextIO | None = None) -> threading.Thread:
    """Start the daemon thread feeding :func:`poll_command`."""
    _cli_thread_stop_event.clear()
    thread = threading.Thread(
        target=_cli_input_thread_func,
        args=(stream if stream is not None else sys.stdin,),
        daemon=True,
        name="CLIInputThread",
    )
    thread.start()
    return thread


def stop_cli_thread() -> None:
    """Signal the CLI input thread to stop after its current read."""
    _cli_thread_stop_event.set()


def poll_command() -> Optional[CLICommand]:
    """Return a command from the internal queue if available, else ``None``."""
    try:
        return _cli_command_queue.get_nowait()
    except queue.Empty:
        return None


__all__ = [
    "CLICommand",
    "parse_command",
    "parse_coord",
    "poll_command",
    "start_cli_thread",
    "stop_cli_thread",
]
