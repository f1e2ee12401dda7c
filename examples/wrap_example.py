#!/usr/bin/env python3
"""
Example demonstrating typed error wrapping and inspection.

Loads a config file that does not exist, wraps the failure on the way up
and shows what consumers see at each rendering level.

Usage:
    python examples/wrap_example.py
"""

import logging
import tempfile
from pathlib import Path

import terrors
from terrors import Type


def read_settings(path: Path) -> str:
    if not path.exists():
        raise terrors.errorf(Type.NOT_EXIST, "file missing: %s", path.name)
    return path.read_text()


def load_config(path: Path) -> str:
    try:
        return read_settings(path)
    except terrors.FundamentalError as e:
        raise terrors.wrap(Type.INTERNAL, e, "load config")


def main():
    """Demonstrate wrapping, inspection and rendering."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    logger = logging.getLogger("wrap_example")

    with tempfile.TemporaryDirectory() as temp_dir:
        try:
            load_config(Path(temp_dir) / "settings.yaml")
        except Exception as e:
            print("=" * 70)
            print(f"str:     {e}")
            print(f"quoted:  {e:q}")
            print(f"type_of: {terrors.type_of(e).value}")
            print(f"root:    {terrors.cause(e)!r}")
            print(f"root type_of: {terrors.type_of(terrors.cause(e)).value}")
            print("=" * 70)
            print(f"{e:+v}")
            print("=" * 70)

            terrors.log_error(logger, e, "Startup failed", level=logging.WARNING)


if __name__ == "__main__":
    main()
