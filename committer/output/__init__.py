"""
Terminal output for the CLI.

Styling is plain ANSI SGR codes, switched off when the stream is not a
terminal or NO_COLOR is set. Everything written here is for a person at a
terminal; the message printed by ``output-message`` goes through
format_commit_message() and is never styled.
"""

import os
import sys
import threading

_STYLES = {"bold": "1", "dim": "2", "red": "31", "green": "32"}


def use_color(stream=None) -> bool:
    stream = stream or sys.stdout
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    return hasattr(stream, "isatty") and stream.isatty()


def paint(text: str, style: str, stream=None) -> str:
    if not use_color(stream):
        return text
    return f"\033[{_STYLES[style]}m{text}\033[0m"


def bold(text: str) -> str:
    return paint(text, "bold")


def dim(text: str, stream=None) -> str:
    return paint(text, "dim", stream)


def print_success(message: str) -> None:
    print(f"{paint('Done:', 'green')} {message}")


def print_error(message: str) -> None:
    print(paint(f"Error: {message}", "red", sys.stderr), file=sys.stderr)


def format_commit_message(summary: str, body: str | None) -> str:
    """Plain text form: summary, blank line, body (blank when there is none)."""
    return f"{summary}\n\n{body or ''}".rstrip("\n") + "\n"


class Spinner:
    """Shows a spinner on stderr while a request is in flight. Silent unless stderr is a TTY."""

    FRAMES = "|/-\\"

    def __init__(self, label: str = ""):
        self.label = label
        self._done = threading.Event()
        self._thread = None
        self._active = hasattr(sys.stderr, "isatty") and sys.stderr.isatty()

    def _run(self):
        tick = 0
        while not self._done.wait(0.1):
            frame = self.FRAMES[tick % len(self.FRAMES)]
            sys.stderr.write(f"\r{frame} {dim(self.label, sys.stderr)}")
            sys.stderr.flush()
            tick += 1

    def __enter__(self):
        if self._active:
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info):
        self._done.set()
        if self._thread:
            self._thread.join()
            sys.stderr.write("\r\033[K")
            sys.stderr.flush()
