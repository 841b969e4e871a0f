import argparse, logging, os, sys

from mdrepair.settings import load_settings, build_config, resolve_log_level
from mdrepair.pipeline import trace_tree, resolve_parser
from mdrepair.qa import run_qa

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--src", required=True)
    ap.add_argument("--pattern", default=None)
    ap.add_argument("--parser", default=None)
    ap.add_argument("--settings", default="config/settings.yaml")
    ap.add_argument("--out", default=None)
    args = ap.parse_args()
    try:
        cfg = build_config(load_settings(args.settings))
        parse = resolve_parser(cfg, args.parser)
    except (OSError, ImportError, AttributeError, ValueError, TypeError) as e:
        print(f"[ERR ] {e}", file=sys.stderr)
        return 2
    if args.pattern:
        cfg.pattern = args.pattern
    logging.basicConfig(level=resolve_log_level(cfg.log_level))
    out = args.out or cfg.qa_report_path
    df = run_qa(trace_tree(args.src, cfg, parse))
    os.makedirs(os.path.dirname(out) or ".", exist_ok=True)
    df.to_csv(out, index=False, encoding="utf-8-sig")
    problems = int(df["has_issue"].sum()) if len(df) else 0
    print(f"[OK] QA report -> {os.path.abspath(out)}  (documents: {len(df)}, problems: {problems})")
    return 1 if problems else 0
if __name__ == "__main__":
    raise SystemExit(main())
