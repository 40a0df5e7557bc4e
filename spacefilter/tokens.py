import enum
from collections import namedtuple

EOF_LEXEME = "<EOF>"


class Kind(enum.Enum):
    # Control
    UNKNOWN = enum.auto()
    ERROR = enum.auto()
    EOF = enum.auto()

    # Literals
    BOOL = enum.auto()
    INT = enum.auto()
    FLOAT = enum.auto()
    STRING = enum.auto()
    IDENT = enum.auto()

    # Operators
    OR = enum.auto()
    AND = enum.auto()
    GREATER = enum.auto()
    LESS = enum.auto()
    EQUAL = enum.auto()
    GREATER_EQUAL = enum.auto()
    LESS_EQUAL = enum.auto()
    BANG_EQUAL = enum.auto()
    COMMA = enum.auto()
    QUESTION = enum.auto()
    DOT = enum.auto()
    MINUS = enum.auto()
    PARENTHESIS_LEFT = enum.auto()
    PARENTHESIS_RIGHT = enum.auto()
    BRACKET_LEFT = enum.auto()
    BRACKET_RIGHT = enum.auto()

    # Keywords
    WHERE = enum.auto()
    IN = enum.auto()
    LIKE = enum.auto()
    NOT = enum.auto()
    NIL = enum.auto()

    def __str__(self):
        """Display name, e.g. ``greaterequal`` for GREATER_EQUAL."""
        return self.name.replace("_", "").lower()

    @property
    def is_literal(self):
        return self in _LITERALS

    @property
    def is_operator(self):
        return self in _OPERATORS

    @property
    def is_keyword(self):
        return self in _KEYWORDS


_LITERALS = frozenset({Kind.BOOL, Kind.INT, Kind.FLOAT, Kind.STRING, Kind.IDENT})

_OPERATORS = frozenset({
    Kind.OR, Kind.AND, Kind.GREATER, Kind.LESS, Kind.EQUAL,
    Kind.GREATER_EQUAL, Kind.LESS_EQUAL, Kind.BANG_EQUAL, Kind.COMMA,
    Kind.QUESTION, Kind.DOT, Kind.MINUS,
    Kind.PARENTHESIS_LEFT, Kind.PARENTHESIS_RIGHT,
    Kind.BRACKET_LEFT, Kind.BRACKET_RIGHT,
})

_KEYWORDS = frozenset({Kind.WHERE, Kind.IN, Kind.LIKE, Kind.NOT, Kind.NIL})


class Token(namedtuple("Token", ["kind", "lexeme"])):
    """One classified unit of a filter expression.

    ``lexeme`` is the source text for identifiers, numbers, keywords and
    operators, the body without quotes for strings, and the message for
    ERROR tokens.
    """

    __slots__ = ()

    def __str__(self):
        return f"{self.kind}({self.lexeme!r})"
