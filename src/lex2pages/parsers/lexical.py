#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/lex2pages/parsers/lexical.py
"""Serialized Lexical editor state to AST converter.

This module loads the JSON a headless CMS stores for a Lexical rich-text
field (``{"root": {"children": [...]}}``) into the typed lex2pages AST.

Conversion is tolerant: content from a third-party authoring system can
change shape at any time, so malformed nodes degrade to safe defaults
instead of raising. Only input that cannot be deserialized at all (bad
JSON, unreadable file) raises ``ParsingError``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from lex2pages.ast import (
    Block,
    Document,
    Heading,
    HorizontalRule,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Text,
    UnknownNode,
)
from lex2pages.constants import (
    DEFAULT_BLOCK_TYPE,
    DEFAULT_HEADING_LEVEL,
    DEFAULT_LINK_HREF,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    NODE_TYPE_BLOCK,
    NODE_TYPE_HEADING,
    NODE_TYPE_HORIZONTAL_RULE,
    NODE_TYPE_LINK,
    NODE_TYPE_LIST,
    NODE_TYPE_LIST_ITEM,
    NODE_TYPE_PARAGRAPH,
    NODE_TYPE_TEXT,
)
from lex2pages.options.lexical import LexicalParserOptions
from lex2pages.parsers.base import BaseParser
from lex2pages.utils.decorators import debug_timer
from lex2pages.utils.media import coerce_media_reference

logger = logging.getLogger(__name__)


def _coerce_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return str(value)
        except ValueError:
            # int longer than sys.get_int_max_str_digits()
            logger.debug("Discarding numeric text payload too long to convert")
            return ""
    if value is not None:
        logger.debug("Discarding non-string text payload of type %s", type(value).__name__)
    return ""


def _coerce_format(value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return 0


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def _coerce_heading_level(tag: Any) -> int:
    """Map ``"h1"``..``"h6"`` (or a bare int) to a heading level."""
    level: Optional[int] = None
    if isinstance(tag, str):
        stripped = tag.strip().lower()
        if len(stripped) == 2 and stripped[0] == "h" and stripped[1].isdecimal():
            level = int(stripped[1])
    elif isinstance(tag, int) and not isinstance(tag, bool):
        level = tag

    if level is None:
        logger.debug("Heading tag %r not recognized, using h%d", tag, DEFAULT_HEADING_LEVEL)
        return DEFAULT_HEADING_LEVEL
    return min(MAX_HEADING_LEVEL, max(MIN_HEADING_LEVEL, level))


def _fields_of(raw: Mapping) -> Mapping:
    fields = raw.get("fields")
    return fields if isinstance(fields, Mapping) else {}


class LexicalParser(BaseParser):
    """Convert serialized Lexical editor state to a Document.

    Parameters
    ----------
    options : LexicalParserOptions or None
        Parser options

    Examples
    --------
    From an already-decoded API response:

        >>> parser = LexicalParser()
        >>> doc = parser.convert(article["content"])

    From a JSON file:

        >>> doc = LexicalParser().parse("article.json")

    """

    def __init__(self, options: LexicalParserOptions | None = None):
        """Initialize the Lexical parser."""
        BaseParser._validate_options_type(options, LexicalParserOptions, "lexical")
        options = options or LexicalParserOptions()
        super().__init__(options)
        self.options: LexicalParserOptions = options
        self._dropped_by_depth = 0
        self._converters: dict[str, Callable[[Mapping, int], Node]] = {
            NODE_TYPE_TEXT: self._convert_text,
            NODE_TYPE_PARAGRAPH: self._convert_paragraph,
            NODE_TYPE_HEADING: self._convert_heading,
            NODE_TYPE_LIST: self._convert_list,
            NODE_TYPE_LIST_ITEM: self._convert_list_item,
            NODE_TYPE_LINK: self._convert_link,
            NODE_TYPE_HORIZONTAL_RULE: self._convert_horizontal_rule,
            NODE_TYPE_BLOCK: self._convert_block,
        }

    def parse(self, input_data: Any) -> Document:
        """Parse Lexical JSON input into a Document.

        Parameters
        ----------
        input_data : Mapping, str, Path, IO, or bytes
            Decoded editor state, or a source of JSON text

        Returns
        -------
        Document
            AST Document node

        Raises
        ------
        ParsingError
            If the input cannot be read or is not valid JSON

        """
        data = input_data if isinstance(input_data, Mapping) else self._read_json(input_data)
        return self.convert(data)

    def convert(self, data: Any) -> Document:
        """Convert decoded editor state into a Document. Never raises.

        Parameters
        ----------
        data : Any
            Normally ``{"root": {"children": [...]}}``; anything else
            yields an empty Document

        Returns
        -------
        Document
            AST Document node

        """
        self._dropped_by_depth = 0

        root = data.get("root") if isinstance(data, Mapping) else None
        if not isinstance(root, Mapping):
            logger.debug("Input has no root mapping; returning empty document")
            return Document()

        with debug_timer(logger, "Converting Lexical tree"):
            children = self._convert_children(root.get("children"), depth=1)

        if self._dropped_by_depth:
            logger.warning(
                "Dropped %d node(s) nested deeper than max_depth=%d",
                self._dropped_by_depth,
                self.options.max_depth,
            )
        return Document(children=children)

    def convert_node(self, raw: Any, depth: int = 1) -> Optional[Node]:
        """Convert one raw node mapping. Returns None for non-mapping input.

        Parameters
        ----------
        raw : Any
            Raw node, usually a mapping with a ``type`` key
        depth : int, default 1
            Nesting depth of this node below the root

        Returns
        -------
        Node or None
            The typed node; ``UnknownNode`` for unrecognized types

        """
        if not isinstance(raw, Mapping):
            if raw is not None:
                logger.debug("Skipping non-mapping node of type %s", type(raw).__name__)
            return None

        if depth > self.options.max_depth:
            self._dropped_by_depth += 1
            return None

        node_type = raw.get("type")
        converter = self._converters.get(node_type) if isinstance(node_type, str) else None
        if converter is None:
            logger.debug("Unknown node type %r rendered as empty", node_type)
            return UnknownNode(node_type=node_type if isinstance(node_type, str) else "")
        return converter(raw, depth)

    def _convert_children(self, raw_children: Any, depth: int) -> list[Node]:
        if not isinstance(raw_children, (list, tuple)):
            return []
        children = []
        for raw in raw_children:
            node = self.convert_node(raw, depth)
            if node is not None:
                children.append(node)
        return children

    def _convert_text(self, raw: Mapping, depth: int) -> Text:
        return Text(content=_coerce_text(raw.get("text")), format=_coerce_format(raw.get("format")))

    def _convert_paragraph(self, raw: Mapping, depth: int) -> Paragraph:
        return Paragraph(children=self._convert_children(raw.get("children"), depth + 1))

    def _convert_heading(self, raw: Mapping, depth: int) -> Heading:
        return Heading(
            level=_coerce_heading_level(raw.get("tag")),
            children=self._convert_children(raw.get("children"), depth + 1),
        )

    def _convert_list(self, raw: Mapping, depth: int) -> List:
        tag = raw.get("tag")
        if tag in ("ol", "ul"):
            ordered = tag == "ol"
        else:
            ordered = raw.get("listType") == "number"
        return List(ordered=ordered, children=self._convert_children(raw.get("children"), depth + 1))

    def _convert_list_item(self, raw: Mapping, depth: int) -> ListItem:
        return ListItem(children=self._convert_children(raw.get("children"), depth + 1))

    def _convert_link(self, raw: Mapping, depth: int) -> Link:
        fields = _fields_of(raw)
        url = fields.get("url", raw.get("url"))
        if not isinstance(url, str) or not url.strip():
            url = DEFAULT_LINK_HREF
        return Link(
            url=url,
            new_tab=_coerce_bool(fields.get("newTab", raw.get("newTab"))),
            children=self._convert_children(raw.get("children"), depth + 1),
        )

    def _convert_horizontal_rule(self, raw: Mapping, depth: int) -> HorizontalRule:
        return HorizontalRule()

    def _convert_block(self, raw: Mapping, depth: int) -> Block:
        fields = _fields_of(raw)

        block_type = fields.get("blockType")
        if not isinstance(block_type, str) or not block_type:
            block_type = DEFAULT_BLOCK_TYPE

        block_id = fields.get("id")
        if isinstance(block_id, bool) or not isinstance(block_id, (str, int)):
            block_id = ""

        return Block(
            block_type=block_type,
            block_id=_coerce_text(block_id),
            media=coerce_media_reference(fields.get("media")),
            fields=dict(fields),
        )


__all__ = ["LexicalParser"]
