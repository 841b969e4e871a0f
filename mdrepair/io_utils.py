
import os
from pathlib import Path
from typing import Iterator

def load_fragment(path: str, encoding: str = "utf-8") -> str:
    # newline="" keeps CRLF intact so the output differs only where we touched it
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()

def save_fragment(text: str, path: str, encoding: str = "utf-8"):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)

def iter_fragments(root: str, pattern: str = "**/*.md") -> Iterator[Path]:
    """Files under root matching pattern, sorted so reruns see the same order."""
    base = Path(root)
    yield from sorted(p for p in base.glob(pattern) if p.is_file())

def output_path_for(src: Path, src_root: str, out_root: str, suffix: str) -> str:
    rel = Path(src).relative_to(src_root)
    return str(Path(out_root) / rel.with_suffix(suffix))
