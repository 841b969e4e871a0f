
import pandas as pd
from typing import Callable, Dict, List
from .protect import MARKER, PlaceholderProtector

def check_marker_parity(protected, parsed):
    a = (protected or "").count(MARKER)
    b = (parsed or "").count(MARKER)
    if a == b:
        return True, f"markers {a}"
    kind = "dropped" if b < a else "duplicated"
    return False, f"parser {kind} markers {a} -> {b}"

def check_no_raw_at(parsed):
    # protect() leaves no @, so any here came from the parser
    n = (parsed or "").count("@")
    return (n == 0), f"parser emitted raw @: {n}"

def check_no_leftover_markers(source, restored):
    # only markers the author wrote may survive restore
    want = (source or "").count(MARKER)
    got = (restored or "").count(MARKER)
    return (got == want), f"leftover markers {want} -> {got}"

def trace_conversion(doc: str, source: str, parse: Callable[[str], str]) -> Dict:
    p = PlaceholderProtector(warn_on_underrun=False)
    protected = p.protect(source)
    queued = p.pending
    parsed = parse(protected)
    restored = p.restore(parsed)
    return {
        "doc": doc, "source": source, "protected": protected, "parsed": parsed,
        "restored": restored, "queued": queued, "stale": p.pending, "underruns": p.underruns,
    }

def run_qa(records: List[Dict]) -> pd.DataFrame:
    rows = []
    for rec in records:
        issues = []
        for ok, msg in (
            check_no_raw_at(rec.get("parsed")),
            check_marker_parity(rec.get("protected"), rec.get("parsed")),
            check_no_leftover_markers(rec.get("source"), rec.get("restored")),
        ):
            if not ok: issues.append(msg)
        rows.append({
            "doc": rec.get("doc"),
            "queued": rec.get("queued", 0),
            "stale": rec.get("stale", 0),
            "underruns": rec.get("underruns", 0),
            "issues": " | ".join(issues),
            "has_issue": bool(issues),
        })
    return pd.DataFrame(rows, columns=["doc", "queued", "stale", "underruns", "issues", "has_issue"])
