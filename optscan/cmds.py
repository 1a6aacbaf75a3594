import json
import logging

from dataclasses import dataclass
from typing import Callable

from . import const, graph, parser, vt100

Callback = Callable[[list[str]], None]

_logger = logging.getLogger(__name__)


@dataclass
class Cmd:
    shortName: str
    longName: str
    helpText: str
    callback: Callback


cmds: list[Cmd] = []


def cmd(shortName: str, longName: str, helpText: str):
    def wrap(fn: Callback):
        cmds.append(Cmd(shortName, longName, helpText, fn))
        return fn

    return wrap


def _quote(s: str) -> str:
    return json.dumps(s)


@cmd("d", "dump", "Show how the tokens are split")
def dumpCmd(args: list[str]):
    res = parser.parse(args)

    vt100.title("Arguments")
    if len(res.args) == 0:
        print(vt100.indent("(No arguments)"))
    for i, arg in enumerate(res.args):
        print(vt100.indent(f"{vt100.BRIGHT_BLACK}{i}{vt100.RESET} {_quote(arg)}"))
    print()

    vt100.title("Options")
    if len(res.opts) == 0:
        print(vt100.indent("(No options)"))
    for key, opt in res.opts.items():
        values = ", ".join(map(_quote, opt.values))
        print(
            vt100.indent(
                f"{vt100.GREEN}{opt.kind.dashes()}{key}{vt100.RESET} [{values}]"
            )
        )
    print()


@cmd("j", "json", "Print the split tokens as JSON")
def jsonCmd(args: list[str]):
    print(json.dumps(parser.parse(args).asJson(), indent=2))


@cmd("t", "trace", "Show every step of the scan")
def traceCmd(args: list[str]):
    _, steps = parser.trace(args)
    for i, step in enumerate(steps):
        color = vt100.BRIGHT_BLACK if step.action in ("skip", "drop") else vt100.CYAN
        print(
            f"{i:>3} {_quote(step.raw):<24} {color}{step.action:<6}{vt100.RESET} {step.before} -> {step.after}"
        )


@cmd("g", "graph", "Render the scan as a state diagram")
def graphCmd(args: list[str]):
    _, steps = parser.trace(args)
    graph.view(steps, title=" ".join(args))


@cmd("h", "help", "Show this help message")
def helpCmd(args: list[str]):
    usage()

    print()

    vt100.title("Description")
    print(f"    {const.DESCRIPTION}")

    print()
    vt100.title("Commands")
    for c in cmds:
        print(f" {vt100.GREEN}{c.shortName or ' '}{vt100.RESET}  {c.longName} - {c.helpText}")

    print()
    vt100.title("Environment")
    print(f"    {const.EXTRA_ARGS_ENV} - tokens prepended to the command line")
    print(f"    {const.VERBOSE_ENV} - log to stderr instead of {const.GLOBAL_LOG_FILE}")


@cmd("v", "version", "Show current version")
def versionCmd(args: list[str]):
    print(f"optscan v{const.VERSION_STR}")


def usage():
    print(f"Usage: {const.ARGV0} <command> [tokens...]")


def exec(args: list[str]):
    """Runs the command named by the first token on the remaining tokens."""
    if len(args) == 0:
        raise RuntimeError("No command specified")

    name, rest = args[0], args[1:]

    for c in cmds:
        if c.shortName == name or c.longName == name:
            _logger.info(f"Running command '{c.longName}' with {len(rest)} tokens")
            c.callback(rest)
            return

    raise RuntimeError(f"Unknown command {name}")
