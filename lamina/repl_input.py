"""Interactive line input with cursor editing, history and reverse search."""

from __future__ import annotations

import contextlib
import enum
import os
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, TextIO, Union

try:
    import termios
except ImportError:
    termios = None

try:
    import msvcrt
except ImportError:
    msvcrt = None

HISTORY_LIMIT = 100
_SEARCH_LABEL = "(reverse-i-search): "


class CtrlCInterrupt(Exception):
    """Raised when the user presses Ctrl+C while a line is being read."""

    def __init__(self, message: str = "Ctrl+C interrupt") -> None:
        super().__init__(message)


class Key(enum.Enum):
    """Editing keys; printable characters are passed as one-character strings."""

    ENTER = "enter"
    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    UP = "up"
    DOWN = "down"
    ESCAPE = "escape"
    CTRL_C = "ctrl-c"
    CTRL_R = "ctrl-r"


KeyPress = Union[Key, str]

_SIMPLE_KEYS = {
    "\x03": Key.CTRL_C,
    "\x12": Key.CTRL_R,
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}
_CSI_LETTERS = {
    "A": Key.UP,
    "B": Key.DOWN,
    "C": Key.RIGHT,
    "D": Key.LEFT,
    "H": Key.HOME,
    "F": Key.END,
}
_CSI_TILDE = {"1": Key.HOME, "4": Key.END, "5": Key.UP, "6": Key.DOWN}
_WINDOWS_SCAN = {
    75: Key.LEFT,
    77: Key.RIGHT,
    71: Key.HOME,
    79: Key.END,
    72: Key.UP,
    73: Key.UP,
    80: Key.DOWN,
    81: Key.DOWN,
}


def _is_printable(ch: str) -> bool:
    return len(ch) == 1 and " " <= ch <= "~"


def decode_keys(chars: Iterable[str]) -> Iterator[KeyPress]:
    """Turn raw terminal characters into key presses.

    ANSI escape sequences become arrow, Home and End keys; a lone escape
    becomes ``Key.ESCAPE``. Unknown sequences and non-printable characters
    are dropped. Characters are read lazily, one key at a time.
    """
    stream = iter(chars)
    pushed: list[str] = []

    def take() -> str | None:
        if pushed:
            return pushed.pop()
        return next(stream, None)

    while True:
        ch = take()
        if ch is None:
            return
        if ch in _SIMPLE_KEYS:
            yield _SIMPLE_KEYS[ch]
        elif ch == "\x1b":
            follow = take()
            if follow != "[":
                yield Key.ESCAPE
                if follow is None:
                    return
                pushed.append(follow)
                continue
            code = take()
            if code is None:
                return
            if code in _CSI_LETTERS:
                yield _CSI_LETTERS[code]
            elif code in _CSI_TILDE and take() == "~":
                yield _CSI_TILDE[code]
        elif _is_printable(ch):
            yield ch


class History:
    """Previously entered lines, oldest first, bounded in size."""

    def __init__(self, limit: int = HISTORY_LIMIT) -> None:
        if limit < 1:
            raise ValueError("history limit must be positive")
        self._limit = limit
        self._lines: list[str] = []

    def add(self, line: str) -> None:
        """Record a line unless it is empty or repeats the latest entry."""
        if not line or (self._lines and self._lines[-1] == line):
            return
        self._lines.append(line)
        if len(self._lines) > self._limit:
            del self._lines[0]

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def search(self, text: str, start: int = 0) -> tuple[int, str] | None:
        """Find the newest entry containing ``text``, skipping ``start`` entries.

        Returns ``(age, entry)`` where age 0 is the most recent line, or
        None when nothing matches or ``text`` is empty.
        """
        if not text:
            return None
        for age in range(max(start, 0), len(self._lines)):
            entry = self._lines[-1 - age]
            if text in entry:
                return age, entry
        return None


@dataclass
class _SearchState:
    text: str = ""
    match: tuple[int, str] | None = None
    last_len: int = 0


class LineEditor:
    """Edits one line from key presses, echoing to a text stream."""

    def __init__(
        self,
        prompt: str = "",
        history: History | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.prompt = prompt
        self.history = history if history is not None else History()
        self._out = output if output is not None else sys.stdout
        self._chars: list[str] = []
        self._cursor = 0
        self._maxlen = 0
        self._history_index = -1
        self._current_edit = ""
        self._search: _SearchState | None = None
        self._write(prompt)

    @property
    def buffer(self) -> str:
        return "".join(self._chars)

    @property
    def cursor(self) -> int:
        return self._cursor

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _interrupt(self) -> None:
        self._write("^C\n")
        raise CtrlCInterrupt()

    def _set_buffer(self, text: str) -> None:
        self._chars = list(text)
        self._cursor = len(self._chars)
        self._maxlen = max(self._maxlen, len(self._chars))

    def _redraw_line(self) -> None:
        self._write("\r" + self.prompt + " " * self._maxlen + "\r" + self.prompt + self.buffer)

    def handle_key(self, key: KeyPress) -> bool:
        """Apply one key press; return True once the line is complete."""
        if key is Key.CTRL_C:
            self._interrupt()
        if self._search is not None:
            self._handle_search_key(key)
            return False
        if key is Key.CTRL_R:
            self._search = _SearchState()
            self._render_search()
        elif key is Key.ENTER:
            self._write("\n")
            return True
        elif key is Key.BACKSPACE:
            self._backspace()
        elif key is Key.LEFT:
            if self._cursor > 0:
                self._write("\b")
                self._cursor -= 1
        elif key is Key.RIGHT:
            if self._cursor < len(self._chars):
                self._write(self._chars[self._cursor])
                self._cursor += 1
        elif key is Key.HOME:
            if self._cursor > 0:
                self._write("\b" * self._cursor)
                self._cursor = 0
        elif key is Key.END:
            if self._cursor < len(self._chars):
                self._write("".join(self._chars[self._cursor:]))
                self._cursor = len(self._chars)
        elif key is Key.UP:
            self._history_older()
        elif key is Key.DOWN:
            self._history_newer()
        elif isinstance(key, str) and _is_printable(key):
            self._insert(key)
        return False

    def _insert(self, ch: str) -> None:
        self._chars.insert(self._cursor, ch)
        self._cursor += 1
        self._maxlen = max(self._maxlen, len(self._chars))
        self._write(
            "".join(self._chars[self._cursor - 1:])
            + " " * (self._maxlen - len(self._chars))
            + "\b" * (self._maxlen - self._cursor)
        )
        self._history_index = -1

    def _backspace(self) -> None:
        if self._cursor == 0:
            return
        del self._chars[self._cursor - 1]
        self._cursor -= 1
        self._write(
            "\b"
            + "".join(self._chars[self._cursor:])
            + " " * (self._maxlen - len(self._chars))
            + "\b" * (self._maxlen - self._cursor)
        )

    def _history_older(self) -> None:
        entries = self.history.entries
        if self._history_index + 1 >= len(entries):
            return
        if self._history_index == -1:
            self._current_edit = self.buffer
        self._history_index += 1
        self._set_buffer(entries[-1 - self._history_index])
        self._redraw_line()

    def _history_newer(self) -> None:
        entries = self.history.entries
        if self._history_index > 0:
            self._history_index -= 1
            self._set_buffer(entries[-1 - self._history_index])
            self._redraw_line()
        elif self._history_index == 0:
            self._history_index = -1
            self._chars = list(self._current_edit)
            self._cursor = len(self._chars)
            self._redraw_line()

    def _handle_search_key(self, key: KeyPress) -> None:
        state = self._search
        assert state is not None
        if key in (Key.UP, Key.DOWN, Key.ESCAPE):
            self._leave_search()
            return
        if key is Key.ENTER:
            if state.match is not None:
                self._set_buffer(state.match[1])
            self._leave_search()
            return
        if key is Key.BACKSPACE:
            state.text = state.text[:-1]
            state.match = self.history.search(state.text)
        elif key is Key.CTRL_R:
            start = state.match[0] + 1 if state.match is not None else 0
            older = self.history.search(state.text, start)
            if older is not None:
                state.match = older
        elif isinstance(key, str) and _is_printable(key):
            state.text += key
            state.match = self.history.search(state.text)
        self._render_search()

    def _render_search(self) -> None:
        state = self._search
        assert state is not None
        label = _SEARCH_LABEL + state.text
        display = label
        shown = label
        if state.match is not None:
            display += "  " + state.match[1]
            shown += "  \033[36m" + state.match[1] + "\033[0m"
        self._write("\r" + " " * max(state.last_len, len(display)) + "\r" + shown)
        state.last_len = len(display)

    def _leave_search(self) -> None:
        state = self._search
        assert state is not None
        self._write("\r" + " " * state.last_len + "\r" + self.prompt + self.buffer)
        self._search = None

    def finish(self) -> str:
        """Record the line in the history and return it."""
        line = self.buffer
        self.history.add(line)
        return line


_HISTORY = History()


def _posix_chars(fd: int) -> Iterator[str]:
    while True:
        data = os.read(fd, 1)
        if not data:
            return
        yield chr(data[0])


def _windows_keys() -> Iterator[KeyPress]:
    while True:
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            key = _WINDOWS_SCAN.get(ord(msvcrt.getwch()))
            if key is not None:
                yield key
            continue
        yield from decode_keys(ch)


@contextlib.contextmanager
def _raw_keys() -> Iterator[Iterator[KeyPress]]:
    if sys.platform == "win32" and msvcrt is not None:
        yield _windows_keys()
        return
    if termios is None:
        raise OSError("raw terminal input is not available on this platform")
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    raw = termios.tcgetattr(fd)
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSANOW, raw)
    try:
        yield decode_keys(_posix_chars(fd))
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, saved)


def repl_readline(prompt: str = "") -> str:
    """Read one line from the terminal with editing and shared history.

    Raises CtrlCInterrupt on Ctrl+C and EOFError when input ends.
    """
    if not sys.stdin.isatty():
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            raise EOFError("end of input")
        line = line.rstrip("\r\n")
        _HISTORY.add(line)
        return line

    editor = LineEditor(prompt, _HISTORY)
    interrupted = False
    try:
        with _raw_keys() as keys:
            for key in keys:
                if editor.handle_key(key):
                    break
            else:
                raise EOFError("end of input")
    except KeyboardInterrupt:
        interrupted = True
    if interrupted:
        sys.stdout.write("^C\n")
        sys.stdout.flush()
        raise CtrlCInterrupt()
    return editor.finish()