"""
t9line.cli
==========
Command-line entry point.
Registered as the ``t9line`` console script in pyproject.toml.

Usage:
    t9line                        # use config.json in cwd or package default
    t9line --config /my/path.json # explicit config file
    t9line --corpus words.tsv     # override the corpus on the fly
    t9line --lookup 46            # print ranked candidates and exit
    t9line --encode hello         # print the digit sequence and exit
"""

from __future__ import annotations

import argparse
import sys

from .keypad import LAYOUTS, ConfigurationError, Keypad


def _banner(keypad: Keypad, config: dict) -> str:
    """Keypad picture in the on-screen order (top row first)."""
    rows = ("789", "456", "123") if config["layout"] == "numpad" else ("123", "456", "789")
    lines = ["T9 line editor", ""]
    for row in rows:
        lines.append("".join(f"{d:^6}" for d in row).rstrip())
        lines.append("".join(f"{keypad.digit_letters[d]:^6}" for d in row).rstrip())
        lines.append("")

    aliases = config["digit_keys"]
    fallback = [
        f"  '{''.join(a for d in row for a in aliases.get(d, []) if a not in row)}' for {row}"
        for row in rows
        if any(a not in row for d in row for a in aliases.get(d, []))
    ]
    if fallback:
        lines.append("If you have no number pad, you can use")
        lines.extend(fallback)
        lines.append("")

    lines.append(
        f"  next: {' '.join(config['next_keys'])}   prev: {' '.join(config['prev_keys'])}"
        f"   erase: {' '.join(config['backspace_keys'])}   quit: {' '.join(config['exit_keys'])}"
    )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="t9line",
        description="Type words with digit keys and pick from ranked T9 candidates.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a custom config.json (overrides default resolution order).",
    )
    parser.add_argument(
        "--corpus",
        metavar="PATH",
        help="word<TAB>frequency file to index (overrides config).",
    )
    parser.add_argument(
        "--layout",
        choices=sorted(LAYOUTS),
        help="Keypad layout (overrides config).",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--lookup",
        metavar="DIGITS",
        help="Print the ranked candidates for a digit sequence and exit.",
    )
    mode.add_argument(
        "--encode",
        metavar="WORD",
        help="Print the digit sequence for a word and exit.",
    )
    args = parser.parse_args(argv)

    from .config import load_config
    from .dictionary import DictionaryIndex
    from .selector import rank

    config = load_config(args.config)
    if args.corpus:
        config["corpus"] = args.corpus
    if args.layout:
        config["layout"] = args.layout

    try:
        keypad = Keypad.for_layout(config["layout"])
        if args.encode is not None:
            print(keypad.encode(args.encode))
            return
        index = DictionaryIndex.from_file(config["corpus"], keypad)
    except (ConfigurationError, OSError) as e:
        print(f"[T9] Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.lookup is not None:
        ranking = rank(index, args.lookup)
        for i, candidate in enumerate(ranking.candidates):
            marker = "▶" if i == ranking.selected else " "
            print(f"{marker} {candidate.word:<20} {candidate.frequency:g}")
        return

    print(_banner(keypad, config))
    print()

    # Import here so --lookup/--encode work without pynput installed.
    from .app import T9LineApp
    try:
        app = T9LineApp(config, index)
    except ConfigurationError as e:
        print(f"[T9] Error: {e}", file=sys.stderr)
        sys.exit(1)
    app.run()


if __name__ == "__main__":
    main()
