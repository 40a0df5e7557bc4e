import logging

from .scanner import EOF, RuneScanner, SourceError
from .tables import KEYWORDS, OPERATORS, PUNCTUATION
from .tokens import EOF_LEXEME, Kind, Token

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r")
QUOTES = frozenset("'\"")


class ScanError(Exception):
    """Malformed input inside a single token; folded into an ERROR token."""


# --- Character classes ---
def is_eof(ch):
    return ch == EOF


def is_whitespace(ch):
    return ch in WHITESPACE


def not_whitespace(ch):
    return not is_whitespace(ch)


def is_digit(ch):
    return len(ch) == 1 and "0" <= ch <= "9"


def is_ident_start(ch):
    return ch == "_" or (len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z"))


def is_ident(ch):
    return is_ident_start(ch) or is_digit(ch)


def is_quote(ch):
    return ch in QUOTES


def is_punctuation(ch):
    return ch in PUNCTUATION


def describe(ch):
    return EOF_LEXEME if is_eof(ch) else repr(ch)


class FilterTokenizer:
    """
    Pull-based lexer for filter expressions.

    Each call to ``consume`` skips whitespace and returns exactly one token.
    Problems with the input or the source come back as ERROR tokens, so a
    caller only ever reads from one stream of tokens. Once the input is
    exhausted every further call returns the EOF token.

    :param source: optional string, text stream or RuneScanner to load
    :param debug: log every emitted token at DEBUG level
    :param strict_strings: report a string without a closing quote as an
        ERROR token instead of a STRING token holding the partial body
    """

    def __init__(self, source=None, *, debug=False, strict_strings=True):
        self.DEBUG = debug
        self.strict_strings = strict_strings
        self.scanner = None
        # Evaluated in order; the first matching predicate owns the token.
        self.dispatch = [
            (is_eof, self.scan_eof),
            (is_digit, self.scan_number),
            (is_ident_start, self.scan_ident),
            (is_quote, self.scan_string),
            (is_punctuation, self.scan_punctuation),
        ]
        if source is not None:
            self.load(source)

    def debug(self, msg):
        if self.DEBUG:
            logger.debug(msg)

    def load(self, source):
        """Bind a new source, discarding the previous one."""
        if source is None:
            raise ValueError("Source cannot be None.")
        if not isinstance(source, RuneScanner):
            source = RuneScanner(source)
        self.scanner = source

    def consume(self):
        """Return the next token from the loaded source."""
        if self.scanner is None:
            return self.error("no source loaded")
        try:
            token = self.scan()
        except (ScanError, SourceError) as e:
            return self.error(str(e))
        self.debug(f"Token: {token}")
        return token

    def tokenize(self, source):
        """Yield tokens one by one, up to and including EOF or the first ERROR."""
        self.load(source)
        yield from self

    def __iter__(self):
        while True:
            token = self.consume()
            yield token
            if token.kind in (Kind.EOF, Kind.ERROR):
                return

    # --- Scanning ---
    def scan(self):
        self.read_while(is_whitespace)
        ch = self.scanner.peek()
        for predicate, scan_token in self.dispatch:
            if predicate(ch):
                return scan_token(ch)
        return Token(Kind.UNKNOWN, self.read_while(not_whitespace))

    def scan_eof(self, ch):
        return Token(Kind.EOF, EOF_LEXEME)

    def scan_number(self, ch):
        lexeme = self.read_while(is_digit)
        if self.scanner.peek() != ".":
            return Token(Kind.INT, lexeme)

        self.scanner.read()
        following = self.scanner.peek()
        if not is_digit(following):
            raise ScanError(f"expected digit, found {describe(following)}")
        fraction = self.read_while(is_digit)
        return Token(Kind.FLOAT, f"{lexeme}.{fraction}")

    def scan_ident(self, ch):
        lexeme = self.read_while(is_ident)
        return Token(KEYWORDS.get(lexeme, Kind.IDENT), lexeme)

    def scan_string(self, quote):
        self.scanner.read()
        body = self.read_while(lambda c: c != quote)
        if is_eof(self.scanner.peek()):
            if self.strict_strings:
                raise ScanError("unterminated string literal")
            return Token(Kind.STRING, body)
        self.scanner.read()
        return Token(Kind.STRING, body)

    def scan_punctuation(self, ch):
        self.scanner.read()
        pair = ch + self.scanner.peek()
        if len(pair) == 2 and pair in OPERATORS:
            self.scanner.read()
            return Token(OPERATORS[pair], pair)
        if ch in OPERATORS:
            return Token(OPERATORS[ch], ch)
        raise ScanError(f"unexpected punctuation: {ch!r}")

    def read_while(self, predicate):
        chars = []
        while True:
            ch = self.scanner.peek()
            if is_eof(ch) or not predicate(ch):
                return "".join(chars)
            chars.append(self.scanner.read())

    def error(self, message):
        logger.debug("Error token: %s", message)
        return Token(Kind.ERROR, message)


def tokenize(source, **options):
    """Tokenize ``source`` into a list ending with EOF or the first ERROR."""
    return list(FilterTokenizer(**options).tokenize(source))
