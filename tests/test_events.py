import pytest

from wxmlgen.compiler.ast_nodes import EventBinding, EventModifiers, element
from wxmlgen.compiler.codegen.events import binder_for, gen_events, map_event_type
from wxmlgen.compiler.exceptions import TemplateGenerationError


def test_no_events() -> None:
    assert gen_events(element("button", hid=1)) == ""
    assert gen_events(element("button", hid=1, events={})) == ""


def test_click_on_button() -> None:
    node = element("button", hid=3, events={"click": EventBinding()})
    assert (
        gen_events(node)
        == ' data-cid="{{ cid }}" data-hid="{{ 3 }}" bindtap="proxyEvent"'
    )


def test_multiple_events_keep_order() -> None:
    node = element(
        "view",
        hid=3,
        events={
            "click": EventBinding(),
            "touchstart": EventBinding(modifiers=EventModifiers(stop=True)),
        },
    )
    assert gen_events(node).endswith(
        'bindtap="proxyEvent" catchbindtouchstart="proxyEvent"'
    )


@pytest.mark.parametrize(
    "modifiers, binder",
    [
        (EventModifiers(), "bind"),
        (EventModifiers(stop=True), "catchbind"),
        (EventModifiers(capture=True), "capturebind"),
        (EventModifiers(stop=True, capture=True), "catchbind"),
        (EventModifiers(prevent=True, once=True), "bind"),
    ],
)
def test_binder_prefix(modifiers: EventModifiers, binder: str) -> None:
    assert binder_for(EventBinding(modifiers=modifiers)) == binder


@pytest.mark.parametrize(
    "event_type, tag, expected",
    [
        ("click", "button", "tap"),
        ("click", "input", "tap"),
        ("change", "input", "blur"),
        ("change", "textarea", "blur"),
        ("change", "select", "change"),
        ("input", "input", "input"),
        ("touchmove", "div", "touchmove"),
    ],
)
def test_event_type_mapping(event_type: str, tag: str, expected: str) -> None:
    assert map_event_type(event_type, tag) == expected


def test_stop_click_attribute_name() -> None:
    node = element(
        "div", hid=0, events={"click": EventBinding(modifiers=EventModifiers(stop=True))}
    )
    assert 'catchbindtap="proxyEvent"' in gen_events(node)


def test_events_require_handle() -> None:
    with pytest.raises(TemplateGenerationError, match="no handle id"):
        gen_events(element("button", events={"click": EventBinding()}))
