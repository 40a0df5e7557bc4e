import io

# Returned by peek() and read() once the source is exhausted.
EOF = ""


class SourceError(Exception):
    """The underlying stream failed to produce a character."""


class RuneScanner:
    """
    Character source with one character of lookahead.

    Wraps a string or a text stream and reads it one character at a time,
    so nothing beyond the peeked character is ever pulled from the stream.
    Read failures of the stream are raised as SourceError carrying the
    original message. The stream is borrowed and never closed here.
    """

    def __init__(self, source):
        if isinstance(source, str):
            source = io.StringIO(source)
        if not callable(getattr(source, "read", None)):
            raise TypeError(f"Source must be a string or a text stream, got {type(source).__name__}.")
        self.stream = source
        self._pending = None

    def peek(self):
        """Return the next character without consuming it."""
        if self._pending is None:
            try:
                ch = self.stream.read(1)
            except (OSError, ValueError) as e:
                raise SourceError(str(e)) from e
            if not isinstance(ch, str):
                raise SourceError(f"expected a text stream, got {type(ch).__name__} data")
            self._pending = ch
        return self._pending

    def read(self):
        """Consume and return the next character."""
        ch = self.peek()
        self._pending = None
        return ch
