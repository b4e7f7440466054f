# src/compat_support/demo.py
import argparse
import json
import logging
import sys


def main(argv=None):
    """CLI demo: tokenize text with the legacy tokenizer and print the tokens as JSON."""
    from .errors import CompatSupportError
    from .tokenizer import DEFAULT_DELIMITERS, Tokenizer

    parser = argparse.ArgumentParser(
        prog="compat-tokenize",
        description="Split text with the legacy tokenizer and print the tokens.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to tokenize (e.g. a,b,,c)",
    )
    parser.add_argument(
        "--delimiters",
        "-d",
        default=DEFAULT_DELIMITERS,
        help="Delimiter characters (default: space, tab, newline, carriage-return)",
    )
    parser.add_argument(
        "--retain",
        action="store_true",
        help="Emit each delimiter character as its own token",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    text = " ".join(args.text) or "a b  c"

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        tokenizer = Tokenizer(text, args.delimiters, retain_delimiters=args.retain)
        tokens = list(tokenizer)
        print(json.dumps({"tokens": tokens, "count": len(tokens)}, ensure_ascii=False))
    except CompatSupportError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
