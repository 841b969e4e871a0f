
import os, json, time
from typing import Set, Optional

class Checkpointer:
    """
    JSONL-based simple checkpointer for per-document progress.
    Each line: {"doc": str, "ts": float, "info": {...}}
    """
    def __init__(self, path: str):
        self.path = path
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        self._done: Set[str] = set()
        if os.path.exists(self.path):
            with open(self.path, "r", encoding="utf-8") as f:
                for ln in f:
                    ln = ln.strip()
                    if not ln: continue
                    try:
                        obj = json.loads(ln)
                    except ValueError:
                        continue
                    doc = obj.get("doc") if isinstance(obj, dict) else None
                    if isinstance(doc, str):
                        self._done.add(doc)

    @property
    def done(self) -> Set[str]:
        return self._done

    def __contains__(self, doc: str) -> bool:
        return doc in self._done

    def mark(self, doc: str, info: Optional[dict]=None):
        self._done.add(doc)
        payload = {"doc": doc, "ts": time.time()}
        if info: payload["info"] = info
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(json.dumps(payload, ensure_ascii=False) + "\n")
