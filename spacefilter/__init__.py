from .tokens import Kind, Token
from .tables import KEYWORDS, OPERATORS
from .scanner import RuneScanner
from .tokenizer import FilterTokenizer, tokenize

__all__ = ["Kind", "Token", "KEYWORDS", "OPERATORS", "RuneScanner", "FilterTokenizer", "tokenize"]
