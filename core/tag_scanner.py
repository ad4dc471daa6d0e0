"""
Quote-aware scanner that finds binding-carrying elements in template source.

This is not an HTML parser. It walks the text once, character by character,
with a four-state machine:

- OUTSIDE_TAG: plain template text. A "<" immediately followed by an ASCII
  letter opens a tag; anything else is ignored, including quotes.
- IN_TAG: inside an opening tag. A quote enters the matching quoted state and
  an unquoted ">" closes the tag.
- IN_SINGLE_QUOTE / IN_DOUBLE_QUOTE: inside an attribute value. Only the same
  quote character leaves the state, so ">" and the other quote type are inert.

Every closed tag whose text contains the binding marker is emitted as an
`ElementSpan`. A tag left open at end of input is dropped. A raw "<" inside an
open tag does not restart tag capture, and tag-like text inside comments or
scripts is scanned like any other text.
"""

from enum import Enum, auto
from typing import Final, Generator

from constants import BINDING_MARKER
from core.models import ElementSpan


class ScanState(Enum):
    OUTSIDE_TAG = auto()
    IN_TAG = auto()
    IN_SINGLE_QUOTE = auto()
    IN_DOUBLE_QUOTE = auto()


class Symbol(Enum):
    """Character classes the state machine reacts to."""

    TAG_OPEN = auto()
    TAG_CLOSE = auto()
    SINGLE_QUOTE = auto()
    DOUBLE_QUOTE = auto()
    OTHER = auto()


# (state, symbol) -> next state. Pairs not listed leave the state unchanged.
TRANSITIONS: Final[dict[tuple[ScanState, Symbol], ScanState]] = {
    (ScanState.OUTSIDE_TAG, Symbol.TAG_OPEN): ScanState.IN_TAG,
    (ScanState.IN_TAG, Symbol.SINGLE_QUOTE): ScanState.IN_SINGLE_QUOTE,
    (ScanState.IN_TAG, Symbol.DOUBLE_QUOTE): ScanState.IN_DOUBLE_QUOTE,
    (ScanState.IN_TAG, Symbol.TAG_CLOSE): ScanState.OUTSIDE_TAG,
    (ScanState.IN_SINGLE_QUOTE, Symbol.SINGLE_QUOTE): ScanState.IN_TAG,
    (ScanState.IN_DOUBLE_QUOTE, Symbol.DOUBLE_QUOTE): ScanState.IN_TAG,
}


def next_state(state: ScanState, symbol: Symbol) -> ScanState:
    return TRANSITIONS.get((state, symbol), state)


def classify(text: str, index: int) -> Symbol:
    """
    Classify the character at `index`.

    "<" only counts as TAG_OPEN when the next character is an ASCII letter, so
    "a < b", "<%= ... %>", "<!-- -->" and "</div>" never open a tag.
    """
    char = text[index]
    if char == "<":
        following = text[index + 1 : index + 2]
        if following.isascii() and following.isalpha():
            return Symbol.TAG_OPEN
        return Symbol.OTHER
    if char == ">":
        return Symbol.TAG_CLOSE
    if char == "'":
        return Symbol.SINGLE_QUOTE
    if char == '"':
        return Symbol.DOUBLE_QUOTE
    return Symbol.OTHER


def scan_tags(
    text: str, marker: str = BINDING_MARKER
) -> Generator[ElementSpan, None, None]:
    """
    Lazily yield the opening tags in `text` that contain `marker`.

    Args:
        text: Full source of one template file.
        marker: Substring a tag must contain to be emitted. Defaults to the
            shared "data-" prefix of all binding attributes.

    Yields:
        ElementSpan: Raw tag text ("<" through ">") and the offset of its "<",
            in document order.
    """
    state = ScanState.OUTSIDE_TAG
    tag_start = 0

    for index in range(len(text)):
        symbol = classify(text, index)
        new_state = next_state(state, symbol)

        if state is ScanState.OUTSIDE_TAG and new_state is ScanState.IN_TAG:
            tag_start = index
        elif state is ScanState.IN_TAG and new_state is ScanState.OUTSIDE_TAG:
            tag_text = text[tag_start : index + 1]
            if marker in tag_text:
                yield ElementSpan(tag_text, tag_start)

        state = new_state


def line_number_at(text: str, offset: int) -> int:
    """Return the 1-based line number of `offset` within `text`."""
    return text.count("\n", 0, offset) + 1
