import dataclasses as dt

from enum import Enum

from .scan import Scan


class OptionKind(Enum):
    """
    How an option was spelled on the command line.
    """

    SHORT = 0
    LONG = 1

    def dashes(self) -> str:
        return "-" if self == OptionKind.SHORT else "--"


@dt.dataclass(frozen=True)
class Token:
    """
    Base class for classified command-line tokens.
    """

    pass


@dt.dataclass(frozen=True)
class BareToken(Token):
    """
    A token that does not start with a dash.

    Attributes:
        text: The token, verbatim.
    """

    text: str


@dt.dataclass(frozen=True)
class OptionToken(Token):
    """
    A token starting with one or two dashes.

    Attributes:
        kind: SHORT for "-key", LONG for "--key".
        key: Everything after the dashes up to the first "=" (may be empty).
        value: Everything after the first "=", or "" if there is none.
    """

    kind: OptionKind
    key: str
    value: str


class MalformedToken(Exception):
    """
    Raised when a token cannot be classified. The scanner drops such tokens.
    """

    def __init__(self, arg: str, reason: str):
        super().__init__(f"Malformed token '{arg}': {reason}")
        self.arg = arg
        self.reason = reason


def classify(arg: str) -> Token:
    """Classifies a single non-empty command-line string."""
    if len(arg) == 0:
        raise MalformedToken(arg, "empty token")

    s = Scan(arg)
    if not s.skipStr("-"):
        return BareToken(arg)

    kind = OptionKind.LONG if s.skipStr("-") else OptionKind.SHORT
    key = s.until("=")
    value = s.rest() if s.skipStr("=") else ""
    return OptionToken(kind, key, value)
