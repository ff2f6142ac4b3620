#!/usr/bin/env python3
import argparse
import asyncio
import os

from . import __version__, config
from .errors import ViewsError
from .pipeline import run_pipeline


# -----------------------------------------------------------------------------
# CLI entrypoint
# -----------------------------------------------------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        prog=config.TOOL_NAME,
        description="Turn a create-react-app or create-react-native-app project into a Views project",
    )
    parser.add_argument(
        "directory",
        nargs='?',
        default=os.getcwd(),
        help="The project directory (defaults to the current directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    try:
        asyncio.run(run_pipeline(os.path.abspath(args.directory)))
    except ViewsError as e:
        print(f"\n{config.TOOL_NAME} failed: {e}")
        if e.__cause__ is not None:
            print(f"Caused by: {e.__cause__!r}")
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
