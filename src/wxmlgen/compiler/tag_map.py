"""HTML tag names mapped to their mini-program counterparts."""

from typing import Dict, Mapping, Optional

BLOCK_TAGS = {
    "address",
    "article",
    "aside",
    "blockquote",
    "dd",
    "div",
    "dl",
    "dt",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "header",
    "hr",
    "li",
    "main",
    "nav",
    "ol",
    "p",
    "pre",
    "section",
    "table",
    "tbody",
    "td",
    "tfoot",
    "th",
    "thead",
    "tr",
    "ul",
}

INLINE_TAGS = {
    "abbr",
    "b",
    "br",
    "cite",
    "code",
    "em",
    "i",
    "label",
    "mark",
    "q",
    "s",
    "small",
    "span",
    "strong",
    "sub",
    "sup",
    "time",
    "u",
}

TAG_MAP: Dict[str, str] = {
    **{tag: "view" for tag in BLOCK_TAGS},
    **{tag: "label" for tag in INLINE_TAGS},
    "a": "navigator",
    "img": "image",
    "select": "picker",
    "template": "block",
}


def resolve_tag(tag: str, tag_map: Optional[Mapping[str, str]] = None) -> str:
    """Return the target tag for `tag`; unmapped tags pass through."""
    mapping = TAG_MAP if tag_map is None else tag_map
    return mapping.get(tag, tag)
