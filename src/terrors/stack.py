"""Call stack capture for error construction sites."""

import inspect
import traceback
from dataclasses import dataclass
from types import TracebackType

# Frames recorded per capture
MAX_STACK_DEPTH = 32


@dataclass(frozen=True)
class Frame:
    """A single call-site location."""

    function: str
    file: str
    line: int

    def format(self) -> str:
        return f'  File "{self.file}", line {self.line}, in {self.function}'

    def __str__(self) -> str:
        return f"{self.function} ({self.file}:{self.line})"


class StackTrace(tuple):
    """
    Immutable sequence of frames, most recent call first.

    Frame 0 is the call site that constructed the error, the last frame is
    the outermost caller that was recorded.
    """

    __slots__ = ()

    def __new__(cls, frames=()):
        return super().__new__(cls, frames)

    def format(self) -> str:
        """Render one frame per line, each line prefixed with a newline."""
        return "".join("\n" + frame.format() for frame in self)

    def __repr__(self) -> str:
        return f"StackTrace({list(self)!r})"


def _frame_of(code, lineno: int) -> Frame:
    # co_qualname is only available on 3.11+ code objects
    name = getattr(code, "co_qualname", code.co_name)
    return Frame(function=name, file=code.co_filename, line=lineno)


def capture_stack(skip: int = 0, depth: int = MAX_STACK_DEPTH) -> StackTrace:
    """
    Capture the active call stack.

    The frame of capture_stack itself is never included. Use skip to drop
    further frames, e.g. skip=1 from inside a constructor so that the trace
    starts at the constructor's caller.

    Args:
        skip: Number of additional frames to drop above capture_stack
        depth: Maximum number of frames to record

    Returns:
        StackTrace, empty if the interpreter cannot introspect frames
    """
    frame = inspect.currentframe()
    if frame is None:
        return StackTrace()

    try:
        frame = frame.f_back
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back

        frames = []
        while frame is not None and len(frames) < depth:
            frames.append(_frame_of(frame.f_code, frame.f_lineno))
            frame = frame.f_back
        return StackTrace(frames)
    finally:
        del frame


def stack_from_traceback(
    tb: TracebackType | None, depth: int = MAX_STACK_DEPTH
) -> StackTrace:
    """
    Convert a traceback into a StackTrace.

    Tracebacks run from the handler down to the raise site, so the order is
    reversed to match captured stacks.
    """
    if tb is None:
        return StackTrace()

    frames = [_frame_of(f.f_code, lineno) for f, lineno in traceback.walk_tb(tb)]
    frames.reverse()
    return StackTrace(frames[:depth])
