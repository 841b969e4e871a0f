
import logging
import re
from typing import List, Optional

from .repair import MarkdownRepair

logger = logging.getLogger(__name__)

MARKER = "{-at-}"
AT_HTML_ENTITY = "&#64;"

SUBST_RE = re.compile("@|" + re.escape(MARKER))
RESTORE_RE = re.compile(re.escape(MARKER))


class PlaceholderProtector(MarkdownRepair):
    """
    Shields '@' from a Markdown parser that treats it as a tag trigger.

    protect() swaps every '@' (and every marker already in the text) for MARKER
    and queues what each one should become; restore() replays the queue onto the
    markers found in the parser output, left to right.

    One instance per document. Markers the parser dropped leave stale entries
    behind; call reset() or discard the instance before reusing it.
    """
    def __init__(self, storage: Optional[List[str]] = None, warn_on_underrun: bool = True):
        self.storage: List[str] = storage if storage is not None else []
        self.warn_on_underrun = warn_on_underrun
        self.underruns = 0

    @property
    def pending(self) -> int:
        return len(self.storage)

    def __len__(self):
        return len(self.storage)

    def protect(self, text: str) -> str:
        def sub(m):
            # a marker written by the author must come back as itself
            self.storage.append(MARKER if m.group(0) == MARKER else AT_HTML_ENTITY)
            return MARKER
        return SUBST_RE.sub(sub, text)

    def restore(self, text: str) -> str:
        used = 0
        def sub(m):
            nonlocal used
            if used < len(self.storage):
                used += 1
                return self.storage[used - 1]
            self.underruns += 1
            if self.warn_on_underrun:
                logger.warning("restore: no pending value for marker at offset %d, keeping %s", m.start(), MARKER)
            return MARKER
        out = RESTORE_RE.sub(sub, text)
        # consumed values leave the queue in one slice, not one pop per marker
        del self.storage[:used]
        return out

    def reset(self) -> int:
        dropped = len(self.storage)
        if dropped:
            logger.debug("reset: discarding %d stale restoration value(s)", dropped)
        del self.storage[:]
        return dropped
