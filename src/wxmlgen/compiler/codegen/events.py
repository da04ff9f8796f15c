"""Event listener to bind-attribute mapping."""

from typing import List

from wxmlgen.compiler.ast_nodes import EventBinding, TemplateNode
from wxmlgen.compiler.codegen.attributes import handle_id

BIND = "bind"
CATCH_BIND = "catchbind"
CAPTURE_BIND = "capturebind"

# Every listener is dispatched through the runtime proxy
EVENT_HANDLER = "proxyEvent"

BLUR_ON_CHANGE_TAGS = {"input", "textarea"}


def binder_for(event: EventBinding) -> str:
    modifiers = event.modifiers
    if modifiers.stop:
        return CATCH_BIND
    if modifiers.capture:
        return CAPTURE_BIND
    return BIND


def map_event_type(event_type: str, tag: str) -> str:
    """Translate a DOM event name to the platform event name."""
    if event_type == "change" and tag in BLUR_ON_CHANGE_TAGS:
        return "blur"
    if event_type == "click":
        return "tap"
    return event_type


def gen_events(node: TemplateNode) -> str:
    if not node.events:
        return ""

    event_attrs: List[str] = []
    for event_type, event in node.events.items():
        mp_type = map_event_type(event_type, node.tag or "")
        event_attrs.append(f'{binder_for(event)}{mp_type}="{EVENT_HANDLER}"')

    return (
        f' data-cid="{{{{ cid }}}}" data-hid="{{{{ {handle_id(node)} }}}}" '
        + " ".join(event_attrs)
    )
