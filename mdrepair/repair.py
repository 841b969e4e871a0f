
import importlib
import logging
from typing import Callable, Sequence

logger = logging.getLogger(__name__)

Parser = Callable[[str], str]


class MarkdownRepair:
    """
    Hook pair run around the Markdown parser.
    - protect(): before parsing, hide what the parser must not see.
    - restore(): after parsing, put back what was hidden.
    Default is a no-op in both directions.
    """
    def protect(self, text: str) -> str:
        return text

    def restore(self, text: str) -> str:
        return text

    def before_markdown_parser(self, markdown: str) -> str:
        return self.protect(markdown)

    def after_markdown_parser(self, markup: str) -> str:
        return self.restore(markup)


def identity_parser(text: str) -> str:
    return text


def load_parser(path: str) -> Parser:
    """Resolve 'package.module:attr' into a str -> str callable."""
    mod_name, sep, attr = (path or "").partition(":")
    if not sep or not mod_name.strip() or not attr.strip():
        raise ValueError(f"Bad parser path {path!r}; expected 'module:callable'.")
    mod = importlib.import_module(mod_name.strip())
    fn = mod
    for part in attr.strip().split("."):
        fn = getattr(fn, part)
    if not callable(fn):
        raise TypeError(f"Parser {path!r} is not callable.")
    return fn


def convert(text: str, parse: Parser, repairs: Sequence[MarkdownRepair]) -> str:
    # onion order: the first repair to protect is the last to restore
    out = text
    for r in repairs:
        out = r.before_markdown_parser(out)
    out = parse(out)
    for r in reversed(repairs):
        out = r.after_markdown_parser(out)
    for r in repairs:
        left = len(r) if hasattr(r, "__len__") else 0
        if left:
            logger.debug("%s kept %d unconsumed value(s); parser dropped markers", type(r).__name__, left)
    return out
