"""Document transform — structured blocks to scaffolded code.

Headings become a banner comment and a class skeleton, paragraphs a
commented constant with a print call, lists an array literal and links a
``link`` constant.
"""

from __future__ import annotations

import logging
import random
import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .draw import Draw, line_seed
from .languages import BaseLanguage, resolve_language
from .naming import make_identifier, subject_words, to_pascal_case

logger = logging.getLogger(__name__)

BANNER_WIDTH = 40
COMMENT_PREVIEW_LENGTH = 60
LIST_VARIABLE = "items"
LINK_VARIABLE = "link"

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")
_LIST_ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+(.*)$")
_LINK_RE = re.compile(r"^\[([^\]]*)\]\(([^)\s]+)\)$")


class BlockKind(str, Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST = "list"
    LINK = "link"


class Block(BaseModel):
    kind: BlockKind
    text: str = ""
    items: list[str] = []
    url: str = ""


def parse_blocks(text: str) -> list[Block]:
    """Split markdown-ish *text* into blocks.

    ``#`` lines are headings, consecutive ``-``/``*``/``1.`` lines form one
    list, a line that is exactly ``[label](url)`` is a link, and every other
    non-blank line is a paragraph.
    """
    blocks: list[Block] = []
    pending_items: list[str] = []

    def _flush_list() -> None:
        if pending_items:
            blocks.append(Block(kind=BlockKind.LIST, items=list(pending_items)))
            pending_items.clear()

    for raw in text.replace("\r\n", "\n").split("\n"):
        line = raw.strip()
        item = _LIST_ITEM_RE.match(raw)
        if item and item.group(1).strip():
            pending_items.append(item.group(1).strip())
            continue
        _flush_list()
        if not line:
            continue
        heading = _HEADING_RE.match(line)
        link = _LINK_RE.match(line)
        if heading:
            blocks.append(Block(kind=BlockKind.HEADING, text=heading.group(2).strip()))
        elif link:
            blocks.append(Block(kind=BlockKind.LINK, text=link.group(1), url=link.group(2)))
        else:
            blocks.append(Block(kind=BlockKind.PARAGRAPH, text=line))
    _flush_list()
    return blocks


def _heading(block: Block, language: BaseLanguage) -> list[str]:
    banner = language.comment("=" * BANNER_WIDTH)
    class_name = to_pascal_case(make_identifier(block.text))
    return [
        "",
        banner,
        language.comment(block.text),
        banner,
        "",
        *language.class_skeleton(class_name),
    ]


def _paragraph(block: Block, language: BaseLanguage, draw: Draw) -> list[str]:
    preview = block.text[:COMMENT_PREVIEW_LENGTH]
    if len(block.text) > COMMENT_PREVIEW_LENGTH:
        preview += "..."
    name = make_identifier(subject_words(block.text))
    unit = language.INDENT_UNIT
    return [
        f"{unit}{language.comment(preview)}",
        f"{unit}{language.declaration(name, draw.hex_literal())}",
        f"{unit}{language.print_call(name)}",
    ]


def _list(block: Block, language: BaseLanguage) -> list[str]:
    items = [language.quote(item) for item in block.items]
    return [f"{language.INDENT_UNIT}{language.declaration(LIST_VARIABLE, language.collection(items))}"]


def _link(block: Block, language: BaseLanguage) -> list[str]:
    statement = language.declaration(LINK_VARIABLE, language.quote(block.url))
    return [f"{language.INDENT_UNIT}{statement} {language.comment(block.text)}"]


def transform_document(
    blocks: list[Block], language_id: str, rng: Optional[random.Random] = None
) -> str:
    """Render *blocks* as code in *language_id*.

    Hex literals come from *rng* when given, otherwise from a seed derived
    from each block, so the default output is reproducible.
    """
    language = resolve_language(language_id)
    logger.debug("Transforming %d blocks (%s)", len(blocks), language.LANGUAGE_ID)
    lines: list[str] = []
    for index, block in enumerate(blocks):
        if block.kind == BlockKind.HEADING:
            lines.extend(_heading(block, language))
        elif block.kind == BlockKind.PARAGRAPH:
            draw = Draw(rng) if rng is not None else Draw.seeded(line_seed(block.text, index))
            lines.extend(_paragraph(block, language, draw))
        elif block.kind == BlockKind.LIST and block.items:
            lines.extend(_list(block, language))
        elif block.kind == BlockKind.LINK:
            lines.extend(_link(block, language))
    if not lines:
        return language.empty_placeholder()
    return "\n".join(lines)
