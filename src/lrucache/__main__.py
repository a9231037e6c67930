#!/usr/bin/env python3
"""lrucache main entry point

Usage:
    python -m lrucache demo --capacity 5
    python -m lrucache replay ops.txt --verbose
"""

from __future__ import annotations

import sys

from lrucache.cli import cmd_demo, cmd_replay, create_parser


def main() -> int:
    """Main entry point"""
    parser = create_parser()
    args = parser.parse_args()

    if args.command == "demo":
        return cmd_demo(args)
    elif args.command == "replay":
        return cmd_replay(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
