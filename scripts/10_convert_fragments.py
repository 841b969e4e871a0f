#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
10_convert_fragments.py
- Run every Markdown fragment under --src through: protect '@' -> parser -> restore
- One protector per fragment; output mirrors the source tree under --out
- --resume skips fragments already recorded in the checkpoint (.jsonl)
"""
import argparse, logging, os, sys

from mdrepair.settings import load_settings, build_config, resolve_log_level
from mdrepair.pipeline import convert_tree, resolve_parser

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--src", required=True)
    ap.add_argument("--out", required=True)
    ap.add_argument("--pattern", default=None)
    ap.add_argument("--parser", default=None, help="module:callable (str -> str); default from settings")
    ap.add_argument("--settings", default="config/settings.yaml")
    ap.add_argument("--resume", action="store_true")
    ap.add_argument("--quiet", action="store_true")
    args = ap.parse_args()

    try:
        cfg = build_config(load_settings(args.settings))
    except (OSError, ValueError) as e:
        print(f"[ERR ] settings: {e}", file=sys.stderr)
        return 2
    if args.pattern:
        cfg.pattern = args.pattern
    logging.basicConfig(level=resolve_log_level(cfg.log_level),
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    try:
        parse = resolve_parser(cfg, args.parser)
    except (ImportError, AttributeError, ValueError, TypeError) as e:
        print(f"[ERR ] parser: {e}", file=sys.stderr)
        return 2

    stats = convert_tree(args.src, args.out, cfg, parse, resume=args.resume, quiet=args.quiet)
    print(f"[OK] converted={stats['converted']} skipped={stats['skipped']} -> {os.path.abspath(args.out)}")
    if stats["underruns"] or stats["stale"]:
        print(f"[warn] marker mismatches: underruns={stats['underruns']} stale={stats['stale']} (run 25_qa_check.py)")
    return 0
if __name__ == "__main__":
    raise SystemExit(main())
