"""
Inspection of errors through their capabilities.

Nothing here checks for concrete variant classes. An error takes part in a
causal chain by exposing a cause property and carries a classification by
exposing a type property, so exceptions from other code compose with the
variants in terrors.exceptions.
"""

from collections.abc import Iterator

from terrors.types import Causer, Type, Typed


def _next_link(err: BaseException) -> BaseException | None:
    if not isinstance(err, Causer):
        return None
    return err.cause


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """
    Yield every link of the causal chain, outermost first.

    The last error yielded is the root cause. A link whose cause is None
    ends the chain at that link.
    """
    while err is not None:
        yield err
        err = _next_link(err)


def cause(err: BaseException | None) -> BaseException | None:
    """
    Return the root cause of err.

    Follows cause links until reaching an error without one. An error with
    no cause is its own root. Returns None for None.
    """
    root = None
    for root in iter_chain(err):
        pass
    return root


def type_of(err: BaseException | None) -> Type:
    """
    Return the classification of err.

    Only the outermost error is consulted, so wrapping with a new
    classification recategorizes the error. Errors without a classification
    and None give Type.UNKNOWN.
    """
    if not isinstance(err, Typed):
        return Type.UNKNOWN

    t = err.type
    if not isinstance(t, Type):
        return Type.UNKNOWN
    return t
