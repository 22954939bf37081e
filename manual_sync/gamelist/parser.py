"""
Gamelist XML loading and saving.

Reads ES-DE gamelist.xml files into lxml trees and writes them back without
re-indenting, so everything the tool does not touch survives a rewrite.
"""

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from lxml import etree

logger = logging.getLogger(__name__)

GAMELIST_ROOT_TAG = "gameList"

# Optional BOM, leading whitespace and the <?xml ...?> declaration
_HEADER_RE = re.compile(rb'^(?:\xef\xbb\xbf)?\s*<\?xml[^>]*\?>')


class GamelistError(Exception):
    """Gamelist loading or saving errors."""
    pass


@dataclass
class GamelistDocument:
    """
    A parsed gamelist.xml.

    `header` holds the original bytes up to the end of the XML declaration
    (empty when the file had none) and is written back unchanged.
    """
    tree: etree._ElementTree
    header: bytes = b""

    def getroot(self) -> etree._Element:
        return self.tree.getroot()

    @property
    def encoding(self) -> str:
        return self.tree.docinfo.encoding or 'UTF-8'


def load_gamelist(gamelist_path: Path) -> GamelistDocument:
    """
    Parse a gamelist.xml file.

    Args:
        gamelist_path: Path to gamelist.xml file

    Returns:
        Parsed document whose root is <gameList>

    Raises:
        GamelistError: If the file can't be read, is malformed, or has
            a different root element
    """
    # Keep whitespace and comments so an unchanged region is written back as-is
    parser = etree.XMLParser(remove_blank_text=False, remove_comments=False)

    try:
        data = gamelist_path.read_bytes()
        tree = etree.parse(io.BytesIO(data), parser)
    except etree.XMLSyntaxError as e:
        raise GamelistError(f"Malformed XML in {gamelist_path}: {e}") from e
    except (OSError, etree.LxmlError) as e:
        raise GamelistError(f"Failed to read {gamelist_path}: {e}") from e

    root = tree.getroot()
    if root is None or root.tag != GAMELIST_ROOT_TAG:
        tag = root.tag if root is not None else None
        raise GamelistError(
            f"Expected <{GAMELIST_ROOT_TAG}> root element in {gamelist_path}, found <{tag}>"
        )

    match = _HEADER_RE.match(data)
    return GamelistDocument(tree=tree, header=match.group(0) if match else b"")


def save_gamelist(document: GamelistDocument, gamelist_path: Path) -> None:
    """
    Write a gamelist back to disk, overwriting the file.

    The original XML declaration is kept as written and the body is encoded
    with the document's declared encoding.

    Args:
        document: Document returned by load_gamelist
        gamelist_path: Destination path

    Raises:
        GamelistError: If the file can't be serialized or written
    """
    try:
        body = etree.tostring(
            document.tree,
            encoding=document.encoding,
            xml_declaration=False,
            pretty_print=False
        )
        content = document.header + b"\n" + body if document.header else body
        gamelist_path.write_bytes(content)
    except (OSError, LookupError, etree.LxmlError) as e:
        raise GamelistError(f"Failed to write {gamelist_path}: {e}") from e

    logger.debug(f"Wrote {gamelist_path}")
