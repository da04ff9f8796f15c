"""Class, style and plain attribute emission."""

import re
from typing import List

from wxmlgen.compiler.ast_nodes import TemplateNode
from wxmlgen.compiler.exceptions import TemplateGenerationError

# Listeners are rendered by the event binder, never as plain attributes
VON_RE = re.compile(r"^v-on:|^@")
VBIND_RE = re.compile(r"^(v-bind)?:")

_STYLE_STRIP_RE = re.compile(r'["{}]')


def handle_id(node: TemplateNode) -> int:
    """Binding handle of `node`; dynamic output cannot be rendered without one."""
    if node.hid is None:
        what = f"<{node.tag}>" if node.tag else "text node"
        raise TemplateGenerationError(f"{what} has dynamic bindings but no handle id")
    return node.hid


def lookup(hid: int, field: str) -> str:
    """Interpolation reading `field` from handle `hid`."""
    return f"{{{{ _h[ {hid} ].{field} }}}}"


def gen_class(node: TemplateNode) -> str:
    """Render the ``class`` attribute.

    The ``_<tag>`` token always comes first so that platform stylesheets can
    target the original HTML tag after remapping.
    """
    klass: List[str] = [f"_{node.tag}"]
    static_class = (node.static_class or "").replace('"', "")
    if static_class:
        klass.append(static_class)
    if node.class_binding:
        klass.append(lookup(handle_id(node), "cl"))
    return f' class="{" ".join(klass)}"'


def gen_style(node: TemplateNode) -> str:
    style: List[str] = []
    static_style = _STYLE_STRIP_RE.sub("", node.static_style or "")
    static_style = "; ".join(static_style.split(","))
    if static_style:
        style.append(static_style)
    if node.style_binding:
        style.append(lookup(handle_id(node), "st"))
    joined = " ".join(s for s in style if s)
    return f' style="{joined}"' if joined else ""


def gen_attrs(node: TemplateNode) -> str:
    attrs: List[str] = []
    for attr in node.attrs_list:
        name = attr.name
        if VON_RE.match(name):
            continue
        if VBIND_RE.match(name):
            real_name = VBIND_RE.sub("", name)
            value = f"{{{{ _h[ {handle_id(node)} ][ '{real_name}' ] }}}}"
            attrs.append(f'{real_name}="{value}"')
        else:
            attrs.append(f'{name}="{attr.value}"')
    return f" {' '.join(attrs)}" if attrs else ""
