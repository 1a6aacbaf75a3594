import logging
import dataclasses as dt

from typing import Any, Optional, Sequence

from .tokens import BareToken, MalformedToken, OptionKind, OptionToken, Token, classify

_logger = logging.getLogger(__name__)

# --- State ------------------------------------------------------------------ #


@dt.dataclass(frozen=True)
class ParsingArgs:
    """Still collecting positional arguments."""

    def __str__(self) -> str:
        return "args"


@dt.dataclass(frozen=True)
class ParsingOptions:
    """
    Collecting option values.

    Attributes:
        key: The option that receives the next bare token.
    """

    key: str

    def __str__(self) -> str:
        return f"opts({self.key})"


ScanState = ParsingArgs | ParsingOptions

# --- Result ----------------------------------------------------------------- #


@dt.dataclass(frozen=True)
class Option:
    """An option's kind and values. `kind` cannot be reassigned; `values` is a plain list."""

    kind: OptionKind
    values: list[str] = dt.field(default_factory=list)

    def asJson(self) -> dict[str, Any]:
        return {"kind": self.kind.name.lower(), "values": list(self.values)}


@dt.dataclass(frozen=True)
class Result:
    """
    Positional arguments and options gathered from a token sequence.

    Only the attributes are frozen: `args`, `opts` and each `Option.values`
    are plain containers owned by the caller, and results are not hashable.
    Every call to `parse` builds fresh containers, so editing one result
    never affects another.

    Attributes:
        args: Positional arguments, in the order they were given.
        opts: Options by key.
    """

    args: list[str] = dt.field(default_factory=list)
    opts: dict[str, Option] = dt.field(default_factory=dict)

    def has(self, key: str) -> bool:
        return key in self.opts

    def kind(self, key: str) -> Optional[OptionKind]:
        if key in self.opts:
            return self.opts[key].kind
        return None

    def values(self, key: str) -> list[str]:
        """Returns a copy of the values of `key`, or an empty list if it is absent."""
        if key in self.opts:
            return list(self.opts[key].values)
        return []

    def first(self, key: str, default: Optional[str] = None) -> Optional[str]:
        values = self.values(key)
        if len(values) == 0:
            return default
        return values[0]

    def flag(self, key: str) -> bool:
        """True if `key` was given, with or without values."""
        return self.has(key)

    def arg(self, index: int, default: Optional[str] = None) -> Optional[str]:
        if 0 <= index < len(self.args):
            return self.args[index]
        return default

    def asJson(self) -> dict[str, Any]:
        return {
            "args": list(self.args),
            "opts": {key: opt.asJson() for key, opt in self.opts.items()},
        }


# --- Scanner ---------------------------------------------------------------- #


@dt.dataclass(frozen=True)
class Step:
    """
    One raw string as seen by the scanner.

    Attributes:
        raw: The raw string.
        token: Its classification, None if it was skipped or could not be classified.
        before: The scan state before the string.
        after: The scan state after the string.
        action: One of "arg", "insert", "merge", "value", "drop", "skip".
    """

    raw: str
    token: Optional[Token]
    before: ScanState
    after: ScanState
    action: str


class Scanner:
    """
    Folds classified tokens into a `Result`, one raw string at a time.
    """

    _state: ScanState
    _args: list[str]
    _opts: dict[str, Option]

    def __init__(self):
        self._state = ParsingArgs()
        self._args = []
        self._opts = {}

    @property
    def state(self) -> ScanState:
        return self._state

    def _upsert(self, tok: OptionToken) -> bool:
        """Inserts the option or appends its value to an existing entry. Returns True on merge."""
        opt = self._opts.get(tok.key)
        if opt is None:
            self._opts[tok.key] = Option(tok.kind, [tok.value] if tok.value else [])
            return False

        if tok.value:
            opt.values.append(tok.value)
        return True

    def feed(self, raw: str) -> Step:
        before = self._state

        if raw == "":
            return Step(raw, None, before, before, "skip")

        try:
            tok = classify(raw)
        except MalformedToken as e:
            _logger.debug(f"Dropping token: {e}")
            return Step(raw, None, before, before, "drop")

        match (self._state, tok):
            case (ParsingArgs(), OptionToken()):
                self._opts[tok.key] = Option(tok.kind, [tok.value] if tok.value else [])
                self._state = ParsingOptions(tok.key)
                action = "insert"

            case (ParsingArgs(), BareToken()):
                self._args.append(tok.text)
                action = "arg"

            case (ParsingOptions(), OptionToken()):
                action = "merge" if self._upsert(tok) else "insert"
                self._state = ParsingOptions(tok.key)

            case (ParsingOptions(key=last), BareToken()):
                if last in self._opts:
                    self._opts[last].values.append(tok.text)
                    action = "value"
                else:
                    _logger.debug(f"No option '{last}' for value '{tok.text}'")
                    action = "drop"

            case _:
                _logger.debug(f"Dropping unexpected token: {tok}")
                action = "drop"

        return Step(raw, tok, before, self._state, action)

    def result(self) -> Result:
        return Result(
            list(self._args),
            {key: Option(opt.kind, list(opt.values)) for key, opt in self._opts.items()},
        )


def parse(args: Sequence[str]) -> Result:
    """
    Splits command-line tokens into positional arguments and options.

    Positional arguments must come first: once an option has been seen, every
    bare token becomes a value of the most recent option. The caller is
    expected to strip the program name from `sys.argv` beforehand.
    """
    scanner = Scanner()
    for raw in args:
        scanner.feed(raw)
    return scanner.result()


def trace(args: Sequence[str]) -> tuple[Result, list[Step]]:
    """Same as `parse`, also returning every step the scanner took."""
    scanner = Scanner()
    steps = [scanner.feed(raw) for raw in args]
    _logger.info(f"Scanned {len(steps)} tokens")
    return scanner.result(), steps
