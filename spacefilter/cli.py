import argparse
import logging
import sys

from .tokenizer import FilterTokenizer
from .tokens import Kind


def main(argv=None):
    ap = argparse.ArgumentParser(prog="spacefilter", description="Print the tokens of a filter expression.")
    ap.add_argument("expr", nargs="?", help="expression to tokenize (default: read stdin)")
    ap.add_argument("--file", help="read the expression from a file")
    ap.add_argument("--verbose", action="store_true", help="log every token")
    ap.add_argument("--lenient-strings", action="store_true",
                    help="accept a string literal without a closing quote")
    args = ap.parse_args(argv)

    if args.expr is not None and args.file:
        ap.error("give either an expression or --file, not both")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    tokenizer = FilterTokenizer(debug=args.verbose, strict_strings=not args.lenient_strings)

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            tokens = list(tokenizer.tokenize(f))
    elif args.expr is not None:
        tokens = list(tokenizer.tokenize(args.expr))
    else:
        tokens = list(tokenizer.tokenize(sys.stdin))

    for token in tokens:
        print(f"{token.kind}\t{token.lexeme!r}")

    last = tokens[-1]
    if last.kind is Kind.ERROR:
        print(f"[error] {last.lexeme}", file=sys.stderr)
        return 1
    return 0
