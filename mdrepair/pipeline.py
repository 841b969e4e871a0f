
import logging
from typing import Callable, Dict, List, Optional
from tqdm import tqdm
from .checkpoint import Checkpointer
from .config import RepairConfig
from .io_utils import iter_fragments, load_fragment, save_fragment, output_path_for
from .protect import PlaceholderProtector
from .qa import trace_conversion
from .repair import Parser, convert, identity_parser, load_parser

logger = logging.getLogger(__name__)

def resolve_parser(cfg: RepairConfig, override: Optional[str] = None) -> Parser:
    path = override if override is not None else cfg.parser
    return load_parser(path) if path else identity_parser

def convert_tree(src: str, out: str, cfg: RepairConfig, parse: Parser, *,
                 resume: bool = False, quiet: bool = False,
                 on_done: Optional[Callable[[str, Dict], None]] = None) -> Dict[str, int]:
    """
    Run every fragment under src through protect -> parse -> restore, writing to out.
    Each fragment gets its own protector so no restoration value crosses documents.
    Returns totals: converted, skipped, underruns, stale.
    """
    ckpt = Checkpointer(cfg.checkpoint_path)
    files = list(iter_fragments(src, cfg.pattern))
    stats = {"converted": 0, "skipped": 0, "underruns": 0, "stale": 0}
    bar = tqdm(total=len(files), desc="Converting fragments", disable=quiet)
    try:
        for path in files:
            doc = path.relative_to(src).as_posix()
            # always recorded; only skipped when resuming
            if resume and doc in ckpt:
                stats["skipped"] += 1
                bar.update(1)
                continue
            protector = PlaceholderProtector(warn_on_underrun=cfg.warn_on_underrun)
            text = load_fragment(str(path), cfg.encoding)
            html = convert(text, parse, [protector])
            save_fragment(html, output_path_for(path, src, out, cfg.output_suffix), cfg.encoding)
            info = {"underruns": protector.underruns, "stale": protector.reset()}
            if info["underruns"] or info["stale"]:
                logger.info("%s: underruns=%d stale=%d", doc, info["underruns"], info["stale"])
            stats["converted"] += 1
            stats["underruns"] += info["underruns"]
            stats["stale"] += info["stale"]
            ckpt.mark(doc, info)
            if on_done:
                on_done(doc, info)
            bar.update(1)
            bar.set_postfix_str(f"underruns={stats['underruns']} stale={stats['stale']}")
    finally:
        bar.close()
    return stats

def trace_tree(src: str, cfg: RepairConfig, parse: Parser) -> List[Dict]:
    return [
        trace_conversion(p.relative_to(src).as_posix(), load_fragment(str(p), cfg.encoding), parse)
        for p in iter_fragments(src, cfg.pattern)
    ]
