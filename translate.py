import argparse
import sys
from typing import List, Optional

import config
from morse_codec import MORSE_DICT, UnsupportedCharacter, decode, encode, encoded_length


def run_self_check(text: str = config.SELF_CHECK_TEXT, debug: bool = False) -> bool:
    """Encode then decode `text` and report whether it came back unchanged."""
    encoded = encode(text)
    decoded = decode(encoded)
    if debug:
        print(f"Encoded: {encoded}")
        print(f"Length: {len(encoded)} (expected {encoded_length(text)})")
    print(decoded)
    if decoded != text:
        print(f"Error: self check failed, expected {text!r} but got {decoded!r}", file=sys.stderr)
        return False
    return True


def print_table():
    for char, code in MORSE_DICT.items():
        print(f"{char}\t{code}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Translate text to and from Morse code")
    parser.add_argument("--encode", type=str, help="Text to encode")
    parser.add_argument("--decode", type=str, help="Morse code to decode (groups separated by spaces)")
    parser.add_argument("--table", action="store_true", help="Print the Morse code table")
    parser.add_argument("--self-check", action="store_true", help="Round-trip the built-in test sentence")
    parser.add_argument("--debug", action="store_true", help="Show debug info")

    args = parser.parse_args(argv)

    if args.table:
        print_table()
        return 0

    if args.self_check:
        return 0 if run_self_check(debug=args.debug) else 1

    if args.encode is not None:
        try:
            encoded = encode(args.encode)
        except UnsupportedCharacter as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(encoded)
        if args.debug:
            print(f"Length: {len(encoded)}, Groups: {len(args.encode)}")
        return 0

    if args.decode is not None:
        decoded = decode(args.decode)
        print(decoded)
        if args.debug:
            print(f"Groups: {len(args.decode.split())}")
        return 0

    # No action given: behave like --self-check
    return 0 if run_self_check(debug=args.debug) else 1


if __name__ == "__main__":
    sys.exit(main())
