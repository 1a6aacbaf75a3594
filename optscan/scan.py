class Scan:
    """
    A character cursor over a single command-line token.
    """

    _src: str
    _off: int

    def __init__(self, src: str, off: int = 0):
        """
        Initializes a new `Scan` object.

        Args:
            src: The token to scan.
            off: The starting offset within the token.
        """
        self._src = src
        self._off = off

    def curr(self) -> str:
        """
        Returns the character under the cursor, or '\0' at the end of the token.
        """
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        """
        Advances the cursor by one character and returns the new current one.
        """
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def skipStr(self, s: str) -> bool:
        """
        Attempts to skip over the given string.

        Returns:
            True if the string was skipped, False otherwise.
        """
        if self._src[self._off :].startswith(s):
            self._off += len(s)
            return True

        return False

    def until(self, c: str) -> str:
        """
        Consumes characters up to, but not including, `c` or the end of the token.

        Returns:
            The consumed span.
        """
        start = self._off
        while not self.eof() and self.curr() != c:
            self.next()
        return self._src[start : self._off]

    def rest(self) -> str:
        """Consumes and returns everything left in the token."""
        res = self._src[self._off :]
        self._off = len(self._src)
        return res
