import os
import sys
import logging

from . import (
    cmds,
    const,
    vt100,
)
from .parser import Option, Result, parse, trace  # noqa: F401
from .tokens import OptionKind  # noqa: F401


class logger:
    @staticmethod
    def isVerbose() -> bool:
        return os.environ.get(const.VERBOSE_ENV, "").lower() in ("1", "true", "y", "yes")

    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            os.makedirs(os.path.dirname(const.GLOBAL_LOG_FILE), exist_ok=True)

            logging.basicConfig(
                level=logging.INFO,
                filename=const.GLOBAL_LOG_FILE,
                filemode="w",
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


def argv() -> list[str]:
    """The command line without the program name, with any extra tokens from the environment up front."""
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    args = sys.argv[1:]
    if len(args) == 0:
        return []
    # extra tokens follow the command name
    return args[:1] + (extra.split(" ") if extra else []) + args[1:]


def main() -> int:
    try:
        logger.setup(logger.isVerbose())
        cmds.exec(argv())
        return 0

    except RuntimeError as e:
        logging.exception(e)
        vt100.error(str(e))
        cmds.usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
