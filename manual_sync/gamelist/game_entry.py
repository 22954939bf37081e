"""
Game entry view and element edits.

A GameEntry reads the fields manual-sync cares about from a <game> element;
the helpers below add or drop child elements while keeping the whitespace
layout of the surrounding siblings.
"""

from dataclasses import dataclass
from typing import Iterator, Optional
from lxml import etree


@dataclass
class GameEntry:
    """
    A <game> element of gamelist.xml.

    Only `path` and `manual` are read; every other child stays untouched in
    `element`.
    """
    element: etree._Element
    path: Optional[str] = None  # Relative path to ROM (e.g., "./Game.zip")
    manual: Optional[str] = None  # Relative path to manual, if present

    @classmethod
    def from_element(cls, game_elem: etree._Element) -> "GameEntry":
        """Build an entry from a <game> element."""
        return cls(
            element=game_elem,
            path=get_text(game_elem, "path"),
            manual=get_text(game_elem, "manual"),
        )

    def add_manual(self, manual_path: str) -> None:
        """
        Set the manual of an entry that has none.

        A blank <manual/> left by a scraper is filled in place; otherwise a
        new <manual> element is appended as the last child.
        """
        if self.manual:
            raise ValueError(f"Game {self.path} already has a manual: {self.manual}")

        manual_elem = self.element.find("manual")
        if manual_elem is not None:
            manual_elem.text = manual_path
        else:
            append_text_element(self.element, "manual", manual_path)
        self.manual = manual_path

    def remove_manual(self) -> bool:
        """
        Remove the first <manual> element.

        Returns:
            True if an element was removed
        """
        removed = remove_child(self.element, "manual")
        if removed:
            self.manual = get_text(self.element, "manual")
        return removed


def iter_game_entries(root: etree._Element) -> Iterator[GameEntry]:
    """Yield a GameEntry for each <game> child of <gameList>, in document order."""
    for game_elem in root.iterchildren("game"):
        yield GameEntry.from_element(game_elem)


def get_text(element: etree._Element, tag: str) -> Optional[str]:
    """Get text content of the first child with `tag`, None if empty."""
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    # Whitespace-only text counts as empty
    return child.text if child.text.strip() else None


def append_text_element(parent: etree._Element, tag: str, text: str) -> etree._Element:
    """
    Append a child element with text content.

    When the parent is indented, the new element takes the indentation of
    the existing children so the file keeps its layout.

    Args:
        parent: Parent element
        tag: Element tag name
        text: Text content (will be XML-escaped by lxml)

    Returns:
        The new element
    """
    last_child = parent[-1] if len(parent) else None

    elem = etree.SubElement(parent, tag)
    elem.text = text

    if last_child is not None:
        # New element closes the parent, previous last child now leads into it
        elem.tail = last_child.tail
        last_child.tail = parent.text
    return elem


def remove_child(parent: etree._Element, tag: str) -> bool:
    """
    Remove the first child with `tag`.

    lxml drops an element's tail along with it, so the tail is handed to the
    previous sibling to keep the closing indentation.

    Returns:
        True if a child was removed
    """
    child = parent.find(tag)
    if child is None:
        return False

    previous = child.getprevious()
    if previous is not None:
        previous.tail = child.tail
    elif len(parent) == 1:
        # Only child: let the parent close on the removed element's tail
        parent.text = child.tail

    parent.remove(child)
    return True
