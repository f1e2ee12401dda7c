"""
Typed errors with classification, cause chains and stack traces.

Provides:
- Type enum for classifying errors
- Constructors and wrappers producing immutable error values
- Chain inspection through capabilities (cause, type_of)
- Logging helpers and configuration for them
"""

from terrors.chain import cause, iter_chain, type_of
from terrors.config import TerrorsConfig, load_config
from terrors.exceptions import (
    # Variants
    FundamentalError,
    MessageWrapper,
    StackWrapper,
    # Constructors
    errorf,
    new,
    with_message,
    with_stack,
    wrap,
    wrapf,
)
from terrors.log import error_fields, log_error
from terrors.stack import (
    MAX_STACK_DEPTH,
    Frame,
    StackTrace,
    capture_stack,
    stack_from_traceback,
)
from terrors.types import Causer, StackTracer, Type, Typed

__all__ = [
    # Enums
    "Type",
    # Capabilities
    "Typed",
    "Causer",
    "StackTracer",
    # Stack capture
    "MAX_STACK_DEPTH",
    "Frame",
    "StackTrace",
    "capture_stack",
    "stack_from_traceback",
    # Variants
    "FundamentalError",
    "StackWrapper",
    "MessageWrapper",
    # Constructors
    "new",
    "errorf",
    "with_stack",
    "with_message",
    "wrap",
    "wrapf",
    # Inspection
    "cause",
    "type_of",
    "iter_chain",
    # Logging
    "error_fields",
    "log_error",
    # Configuration
    "TerrorsConfig",
    "load_config",
]
