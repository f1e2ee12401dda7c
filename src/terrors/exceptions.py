"""
Typed error variants and their constructors.

Three independent variants share one capability set (classification,
message, rendering):

- FundamentalError: classification, message and captured stack, no cause
- StackWrapper: classification, cause and a freshly captured stack; its
  message is the cause's message
- MessageWrapper: classification, cause and an annotation message; renders
  as "message: cause" and captures no stack

All values are immutable after construction and survive pickle and copy.
Every wrapping function returns None when handed None, so a "no error"
value passes through unchanged.
"""

from collections.abc import Mapping

from terrors import render
from terrors.stack import StackTrace, capture_stack
from terrors.types import Type


def _interpolate(format: str, args: tuple) -> str:
    # Same argument handling as logging.LogRecord.getMessage
    if not args:
        return format
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        return format % args[0]
    return format % args


# =============================================================================
# Variants
# =============================================================================


class FundamentalError(Exception):
    """Error with a classification, a literal message and a stack trace."""

    def __init__(self, type: Type, message: str, stack: StackTrace):
        super().__init__(message)
        self._type = type
        self._message = message
        self._stack = stack

    @property
    def type(self) -> Type:
        return self._type

    @property
    def message(self) -> str:
        return self._message

    @property
    def stack_trace(self) -> StackTrace:
        return self._stack

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._type}, {self._message!r})"

    def __reduce__(self):
        return type(self), (self._type, self._message, self._stack)

    def __format__(self, spec: str) -> str:
        if spec == render.VERBOSE:
            return self._message + self._stack.format()
        return render.format_message(self._message, spec)


class StackWrapper(Exception):
    """Wraps an error with a new classification and the stack at the wrap site."""

    def __init__(self, type: Type, cause: BaseException, stack: StackTrace):
        super().__init__(str(cause))
        self._type = type
        self._cause = cause
        self._stack = stack
        self.__cause__ = cause
        self.__suppress_context__ = True

    @property
    def type(self) -> Type:
        return self._type

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def stack_trace(self) -> StackTrace:
        return self._stack

    def __str__(self) -> str:
        return str(self._cause)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._type}, {self._cause!r})"

    def __reduce__(self):
        return type(self), (self._type, self._cause, self._stack)

    def __format__(self, spec: str) -> str:
        if spec == render.VERBOSE:
            return render.verbose(self._cause) + self._stack.format()
        return render.format_message(str(self), spec)


class MessageWrapper(Exception):
    """Annotates an error with a message. Captures no stack."""

    def __init__(self, type: Type, cause: BaseException, message: str):
        super().__init__(f"{message}: {cause}")
        self._type = type
        self._cause = cause
        self._message = message
        self.__cause__ = cause
        self.__suppress_context__ = True

    @property
    def type(self) -> Type:
        return self._type

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def message(self) -> str:
        """The annotation alone, without the cause's message."""
        return self._message

    def __str__(self) -> str:
        return f"{self._message}: {self._cause}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._type}, {self._cause!r}, {self._message!r})"

    def __reduce__(self):
        return type(self), (self._type, self._cause, self._message)

    def __format__(self, spec: str) -> str:
        if spec == render.VERBOSE:
            return render.verbose(self._cause) + "\n" + self._message
        return render.format_message(str(self), spec)


# =============================================================================
# Constructors
# =============================================================================


def new(type: Type, message: str) -> FundamentalError:
    """
    Create an error with a classification and message.

    The stack trace starts at the caller of new().

    Example:
        raise terrors.new(Type.NOT_EXIST, "file missing")
    """
    return FundamentalError(type, message, capture_stack(skip=1))


def errorf(type: Type, format: str, *args) -> FundamentalError:
    """
    Create an error with a printf-style formatted message.

    Arguments are interpolated the way logging interpolates log records:
    no args leaves the format untouched, a single mapping feeds %(name)s.
    """
    return FundamentalError(type, _interpolate(format, args), capture_stack(skip=1))


def with_stack(type: Type, err: BaseException | None) -> StackWrapper | None:
    """
    Annotate err with the stack at this call site and a new classification.

    The message is unchanged. Returns None if err is None.
    """
    if err is None:
        return None
    return StackWrapper(type, err, capture_stack(skip=1))


def with_message(
    type: Type, err: BaseException | None, message: str
) -> MessageWrapper | None:
    """
    Annotate err with a message, rendered as "message: err".

    No stack is captured. Returns None if err is None.
    """
    if err is None:
        return None
    return MessageWrapper(type, err, message)


def wrap(type: Type, err: BaseException | None, message: str) -> StackWrapper | None:
    """
    Annotate err with a message and the stack at this call site.

    The result is a StackWrapper around a MessageWrapper around err, so
    str() gives "message: err" and err is two cause links away.
    Returns None if err is None.

    Example:
        try:
            data = path.read_text()
        except OSError as e:
            raise terrors.wrap(Type.INTERNAL, e, "load config")
    """
    if err is None:
        return None
    return StackWrapper(type, MessageWrapper(type, err, message), capture_stack(skip=1))


def wrapf(
    type: Type, err: BaseException | None, format: str, *args
) -> StackWrapper | None:
    """Like wrap(), with a printf-style formatted message."""
    if err is None:
        return None
    message = _interpolate(format, args)
    return StackWrapper(type, MessageWrapper(type, err, message), capture_stack(skip=1))
