"""Document assembler — renders fetched files into a single XML document.

Layout::

    <documents>
    <document index="1">
    <source>src/main.py</source>
    <document_content>...</document_content>
    </document>
    </documents>

Indices count appended entries only, so files skipped upstream leave no gaps.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from xml.sax.saxutils import escape

from repo_aggregator.domain.entities import DocumentEntry

logger = logging.getLogger(__name__)

ROOT_TAG = "documents"

# Quotes are not reserved in element text but are escaped so the same helper
# is safe for attribute values.  A literal CR would be normalised to LF by
# any XML parser.
_EXTRA_ENTITIES = {'"': "&quot;", "'": "&apos;", "\r": "&#13;"}

# Code points XML 1.0 cannot carry, not even as character references.
_XML_INVALID_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def count_unrepresentable(text: str) -> int:
    """Number of characters :func:`escape_xml` will replace with U+FFFD."""
    return len(_XML_INVALID_RE.findall(text))


def escape_xml(text: str) -> str:
    """Escape *text* for use as XML character data."""
    text = _XML_INVALID_RE.sub("\ufffd", text)
    return escape(text, _EXTRA_ENTITIES)


class DocumentAssembler:
    """Buffers entries for one invocation and renders them on :meth:`finalize`."""

    def __init__(self) -> None:
        self._entries: list[DocumentEntry] = []

    @property
    def entries(self) -> list[DocumentEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, source_path: str, content: str) -> DocumentEntry:
        entry = DocumentEntry(
            index=len(self._entries) + 1,
            source_path=source_path,
            content=content,
        )
        self._entries.append(entry)
        return entry

    def render(self) -> str:
        lines = [f"<{ROOT_TAG}>"]
        for entry in self._entries:
            lines.append(f'<document index="{entry.index}">')
            lines.append(f"<source>{escape_xml(entry.source_path)}</source>")
            lines.append(
                f"<document_content>{escape_xml(entry.content)}</document_content>"
            )
            lines.append("</document>")
        lines.append(f"</{ROOT_TAG}>")
        return "\n".join(lines)

    def finalize(self, destination: str | os.PathLike[str] | None = None) -> str:
        """Render the document.

        Without a *destination* the document text is returned.  With one, the
        text is written there as UTF-8 and the destination path is returned.
        """
        text = self.render()
        if destination is None:
            return text

        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="")
        logger.info("Wrote %d document(s) to %s", len(self._entries), path)
        return str(path)
