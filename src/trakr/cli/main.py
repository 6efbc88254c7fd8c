# src/trakr/cli/main.py

"""
CLI entrypoint.

Initializes logging, validates the command, then runs it inside a store
session (load -> command -> flush). Every TrakrError ends up here and becomes
a message on stderr plus exit code 1.
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..errors import TrakrError, UsageError
from ..logging_setup import setup_logging
from .bootstrap import store_session
from .commands import registry

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))

    try:
        # Reject bad commands before touching the store file.
        registry.resolve(argv)

        with store_session(settings=settings) as store:
            output = registry.handle(store, argv)
    except UsageError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(registry.build_help(), file=sys.stderr)
        return e.exit_code
    except TrakrError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return e.exit_code

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
