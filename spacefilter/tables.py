from types import MappingProxyType

from .tokens import Kind

# Reserved words; matched only against a complete identifier run.
KEYWORDS = MappingProxyType({
    "where": Kind.WHERE,
    "nil": Kind.NIL,
    "in": Kind.IN,
    "like": Kind.LIKE,
    "not": Kind.NOT,
    "true": Kind.BOOL,
    "false": Kind.BOOL,
})

# Two-character lexemes are tried before their one-character prefixes.
OPERATORS = MappingProxyType({
    "||": Kind.OR,
    "&&": Kind.AND,
    ">": Kind.GREATER,
    "<": Kind.LESS,
    "=": Kind.EQUAL,
    ",": Kind.COMMA,
    "?": Kind.QUESTION,
    "!=": Kind.BANG_EQUAL,
    ">=": Kind.GREATER_EQUAL,
    "<=": Kind.LESS_EQUAL,
    "(": Kind.PARENTHESIS_LEFT,
    ")": Kind.PARENTHESIS_RIGHT,
    "[": Kind.BRACKET_LEFT,
    "]": Kind.BRACKET_RIGHT,
    ".": Kind.DOT,
    "-": Kind.MINUS,
})

PUNCTUATION = frozenset("|><=,&!?.-()[]")
