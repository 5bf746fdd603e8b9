#!/usr/bin/env python3
"""
Render emoji sounds to WAV files.

Usage:
    python tools/render.py <subcommand> [options]

Subcommands:
    one <emoji>       Render a single emoji (unmapped emoji use the generic sound)
    popular           Render the popular emoji grid
    all               Render every mapped emoji

Options:
    --seed <int>          Seed for noise-based sounds (default: random)
    --sample-rate <int>   Sample rate (default: 44100)
    --debug               Save a JSON fingerprint next to each WAV
    --output-dir <path>   Output directory (default: unique timestamped dir)
"""
import sys
import os
import argparse
import logging
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tools.render_core import render_emoji, make_mapper, get_unique_output_dir
from sfx_engine.mapper.validation import is_valid_emoji


def _render_batch(args, emojis, base_name: str) -> int:
    output_dir = Path(args.output_dir) if args.output_dir else get_unique_output_dir(base_name)
    mapper = make_mapper(args.sample_rate, args.seed)

    failures = []
    for emoji in emojis:
        audio, info = render_emoji(mapper, emoji, output_dir, debug=args.debug)
        if audio is None:
            failures.append(emoji)
            print(f"  {emoji}  FAIL: no sound")
            continue
        fp = info["fingerprint"]
        print(f"  {emoji}  {info['duration_s']:.2f}s  peak={fp['peak']:.3f} rms={fp['rms']:.3f}  {info['sound_type']}")

    print(f"\n=== Render Complete ===")
    print(f"Output: {output_dir}")
    print(f"Rendered: {len(emojis) - len(failures)}/{len(emojis)}")
    if failures:
        print(f"No sound: {' '.join(failures)}")
        return 1
    return 0


def cmd_one(args) -> int:
    if not is_valid_emoji(args.emoji) and args.emoji not in make_mapper().emoji_mappings:
        print(f"Not a valid emoji: {args.emoji!r}")
        return 2
    return _render_batch(args, [args.emoji], "one")


def cmd_popular(args) -> int:
    return _render_batch(args, make_mapper().get_popular_emojis(), "popular")


def cmd_all(args) -> int:
    return _render_batch(args, make_mapper().mapped_emojis(), "all")


def main():
    parser = argparse.ArgumentParser(description="Render emoji sounds to WAV files")
    subparsers = parser.add_subparsers(dest="command", help="Subcommand")

    def add_common_args(p):
        p.add_argument("--seed", type=int, default=None, help="Noise seed (default: random)")
        p.add_argument("--sample-rate", type=int, default=44100, help="Sample rate (default: 44100)")
        p.add_argument("--debug", action="store_true", help="Save JSON fingerprint next to each WAV")
        p.add_argument("--output-dir", type=str, help="Output directory (default: unique timestamped)")
        p.add_argument("--verbose", action="store_true", help="Debug logging")

    p_one = subparsers.add_parser("one", help="Render a single emoji")
    p_one.add_argument("emoji")
    add_common_args(p_one)

    p_popular = subparsers.add_parser("popular", help="Render the popular emoji grid")
    add_common_args(p_popular)

    p_all = subparsers.add_parser("all", help="Render every mapped emoji")
    add_common_args(p_all)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "one":
        return cmd_one(args)
    elif args.command == "popular":
        return cmd_popular(args)
    elif args.command == "all":
        return cmd_all(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
