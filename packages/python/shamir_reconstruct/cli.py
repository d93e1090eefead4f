"""
Shamir Reconstruction CLI
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .errors import ReconstructionError
from .reconstruct import analyze_input, decode_shares, reconstruct_input
from .share_input import STDIN_PATH, InputError, load_input, split_input


def cmd_solve(args) -> int:
    try:
        document = load_input(args.input)
        result = reconstruct_input(document)
    except (InputError, ReconstructionError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    text = json.dumps(result.to_dict(), indent=args.indent)
    if args.out:
        out_path = Path(args.out)
        out_path.write_text(text + "\n", encoding="utf-8")
        print(f"✅ Secret written to {out_path} ({len(result.wrong_shares)} wrong share(s))")
    else:
        print(text)
    return 0


def cmd_verify(args) -> int:
    try:
        document = load_input(args.input)
        n, k, raw_shares = split_input(document)
        shares = decode_shares(raw_shares)
        print(f"✅ Input verified ({len(shares)} share(s), n={n}, k={k})")
        return 0
    except (InputError, ReconstructionError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


def cmd_analyze(args) -> int:
    try:
        document = load_input(args.input)
        analysis = analyze_input(document)
    except InputError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    print(json.dumps(analysis, indent=2))
    return 0


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Shamir Reconstruction Kit CLI")
    parser.add_argument("--version", action="version", version=f"shamir-reconstruct {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command")

    solve_p = sub.add_parser("solve", help="Reconstruct the secret and report wrong shares")
    solve_p.add_argument("input", nargs="?", default=STDIN_PATH, help="Path to input JSON (default: stdin)")
    solve_p.add_argument("--indent", type=int, default=2, help="JSON indentation of the result")
    solve_p.add_argument("--out", help="Write the result JSON to this file instead of stdout")
    solve_p.set_defaults(func=cmd_solve)

    verify_p = sub.add_parser("verify", help="Check input structure and decode every share")
    verify_p.add_argument("input", nargs="?", default=STDIN_PATH, help="Path to input JSON (default: stdin)")
    verify_p.set_defaults(func=cmd_verify)

    analyze_p = sub.add_parser("analyze", help="Report feasibility without searching")
    analyze_p.add_argument("input", nargs="?", default=STDIN_PATH, help="Path to input JSON (default: stdin)")
    analyze_p.set_defaults(func=cmd_analyze)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if not args.command:
        parser.print_help()
        return 0
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
