"""
Rendering of error values.

Format specs understood by the error variants:
    "", "s", "v"  the message only
    "q"           the message, double-quoted
    "+v"          the message followed by the stack trace, with the causal
                  chain rendered first for wrapper variants

Any other spec is applied to the message string, so width and alignment
specs behave the way they do for str.
"""

import json

from terrors.stack import stack_from_traceback

VERBOSE = "+v"


def quote(message: str) -> str:
    """Double-quote a message, escaping quotes and control characters."""
    return json.dumps(message, ensure_ascii=False)


def format_message(message: str, spec: str) -> str:
    """Render a message for every spec except the verbose one."""
    if spec in ("", "s", "v"):
        return message
    if spec == "q":
        return quote(message)
    return format(message, spec)


def verbose(err: BaseException) -> str:
    """
    Verbose rendering of any error.

    Errors that understand the "+v" spec render themselves. Anything else
    renders as its message followed by the frames of its traceback, if it
    was ever raised.
    """
    try:
        return format(err, VERBOSE)
    except (TypeError, ValueError):
        return str(err) + stack_from_traceback(err.__traceback__).format()
