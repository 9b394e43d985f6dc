"""Interactive console that transliterates each entered line."""

from __future__ import annotations

import argparse
import sys

from obadh.processor import Processor

_TITLE = "Obadh Bengali Input Method - Test Console"
_HINT = "Type English characters for Bengali output (press Ctrl+C to exit)"


def main(argv: list[str] | None = None) -> int:
    """Run the console until end of input or interrupt."""
    parser = argparse.ArgumentParser(prog="obadh", description=_TITLE)
    parser.parse_args(argv)

    print(_TITLE)
    print(_HINT)

    processor = Processor()
    try:
        while True:
            print("> ", end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                print()
                return 0
            text = line.strip()
            if not text:
                continue
            print(processor.process_input(text))
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    raise SystemExit(main())