"""AST node definitions consumed by the template generator."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Dict, List, Optional


class NodeType(IntEnum):
    ELEMENT = 1
    TEXT = 3


class GuardKind(str, Enum):
    IF = "if"
    ELSEIF = "elseif"
    ELSE = "else"


@dataclass
class Attribute:
    name: str
    value: str = ""


@dataclass
class EventModifiers:
    stop: bool = False
    capture: bool = False
    prevent: bool = False
    self_only: bool = False
    once: bool = False
    passive: bool = False


@dataclass
class EventBinding:
    """A `v-on` / `@` listener; the handler expression stays upstream."""

    modifiers: EventModifiers = field(default_factory=EventModifiers)
    value: str = ""


@dataclass
class ForSource:
    """Iteration data for a `v-for` node.

    `iterator1` is the index alias, `key` the raw `:key` expression
    (e.g. ``item.id``).
    """

    exp: str = ""
    alias: str = ""
    iterator1: Optional[str] = None
    key: Optional[str] = None


@dataclass(eq=False)
class IfCondition:
    guard: GuardKind
    block: "TemplateNode"
    exp: Optional[str] = None


@dataclass(eq=False)
class TemplateNode:
    """Annotated template node.

    `hid` is the binding handle id resolved at runtime through ``_h[ hid ]``
    and `cid` the component reference index. Chains are attached to their
    lead node only; the lead node is usually ``if_conditions[0].block``.
    """

    type: NodeType = NodeType.ELEMENT
    tag: Optional[str] = None
    attrs_list: List[Attribute] = field(default_factory=list)
    events: Optional[Dict[str, EventBinding]] = None
    class_binding: bool = False
    style_binding: bool = False
    static_class: str = ""
    static_style: str = ""
    if_conditions: Optional[List[IfCondition]] = None
    if_conditions_generated: bool = False
    for_source: Optional[ForSource] = None
    children: List["TemplateNode"] = field(default_factory=list)
    text: str = ""
    static: bool = False
    hid: Optional[int] = None
    cid: Optional[int] = None

    @property
    def is_element(self) -> bool:
        return self.type == NodeType.ELEMENT


def element(tag: str, *children: TemplateNode, **kwargs) -> TemplateNode:
    """Shorthand for building element nodes by hand."""
    return TemplateNode(
        type=NodeType.ELEMENT, tag=tag, children=list(children), **kwargs
    )


def text(value: str = "", hid: Optional[int] = None) -> TemplateNode:
    """Static text when `hid` is None, otherwise a dynamic text node."""
    return TemplateNode(type=NodeType.TEXT, text=value, static=hid is None, hid=hid)
