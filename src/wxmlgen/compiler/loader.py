"""Load serialized template ASTs produced by the upstream compiler."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from wxmlgen.compiler.ast_nodes import (
    Attribute,
    EventBinding,
    EventModifiers,
    ForSource,
    GuardKind,
    IfCondition,
    NodeType,
    TemplateNode,
)
from wxmlgen.compiler.exceptions import AstLoadError
from wxmlgen.compiler.options import GeneratorOptions, ImportEntry

logger = logging.getLogger(__name__)

# Upstream node types: 1 element, 2 expression text, 3 plain text
EXPRESSION_TYPE = 2


class AstLoader:
    """Maps the JSON form of an upstream AST onto `TemplateNode` objects.

    The JSON shape is the one emitted by the Vue template compiler after the
    mini-program transform (``attrsList``, ``ifConditions``, ``_hid``...).
    An ``ifConditions`` entry without a ``block`` refers to the node that owns
    the chain, since JSON cannot express the self reference.
    """

    def __init__(self, file_path: str = "") -> None:
        self.file_path = file_path

    def load(self, data: Any) -> TemplateNode:
        return self._map_node(data, "ast")

    def _error(self, message: str, path: str) -> AstLoadError:
        return AstLoadError(message, file_path=self.file_path, path=path)

    def _map_node(self, data: Any, path: str) -> TemplateNode:
        if not isinstance(data, dict):
            raise self._error("node must be an object", path)

        raw_type = data.get("type", NodeType.ELEMENT)
        if raw_type not in (1, 2, 3):
            raise self._error(f"unknown node type {raw_type!r}", path)

        if raw_type == NodeType.ELEMENT:
            node = TemplateNode(
                type=NodeType.ELEMENT,
                tag=self._expect(data, "tag", str, path),
                attrs_list=self._map_attrs(data.get("attrsList") or [], path),
                events=self._map_events(data.get("events"), path),
                class_binding=bool(data.get("classBinding")),
                style_binding=bool(data.get("styleBinding")),
                static_class=data.get("staticClass") or "",
                static_style=data.get("staticStyle") or "",
                for_source=self._map_for(data),
                static=bool(data.get("static", False)),
                hid=data.get("_hid"),
                cid=data.get("_cid"),
            )
        else:
            node = TemplateNode(
                type=NodeType.TEXT,
                text=data.get("text") or "",
                static=raw_type != EXPRESSION_TYPE and bool(data.get("static", True)),
                hid=data.get("_hid"),
            )

        node.children = self._map_children(data.get("children") or [], path)

        if data.get("ifConditions"):
            node.if_conditions = self._map_if_conditions(
                node, data["ifConditions"], path
            )
            node.if_conditions_generated = bool(data.get("ifConditionsGenerated"))

        return node

    def _expect(self, data: Dict[str, Any], key: str, kind: type, path: str) -> Any:
        value = data.get(key)
        if not isinstance(value, kind):
            raise self._error(f"'{key}' must be a {kind.__name__}", path)
        return value

    def _map_children(self, children: Any, path: str) -> List[TemplateNode]:
        if not isinstance(children, list):
            raise self._error("'children' must be a list", path)

        nodes = []
        for index, child in enumerate(children):
            child_path = f"{path}.children[{index}]"
            # Else/elseif branches are owned by the chain of their lead sibling
            is_branch = isinstance(child, dict) and (
                child.get("else") or child.get("elseif")
            )
            if is_branch:
                logger.debug("Skipping chain branch at %s", child_path)
                continue
            nodes.append(self._map_node(child, child_path))
        return nodes

    def _map_attrs(self, attrs: Any, path: str) -> List[Attribute]:
        if not isinstance(attrs, list):
            raise self._error("'attrsList' must be a list", path)

        result = []
        for index, attr in enumerate(attrs):
            if not isinstance(attr, dict) or "name" not in attr:
                raise self._error(
                    "attribute must be an object with a name",
                    f"{path}.attrsList[{index}]",
                )
            value = attr.get("value")
            result.append(
                Attribute(str(attr["name"]), "" if value is None else str(value))
            )
        return result

    def _map_events(
        self, events: Any, path: str
    ) -> Optional[Dict[str, EventBinding]]:
        if events is None:
            return None
        if not isinstance(events, dict):
            raise self._error("'events' must be an object", path)

        result = {}
        for event_type, handler in events.items():
            # Several listeners for one type share the first one's modifiers
            if isinstance(handler, list):
                handler = handler[0] if handler else {}
            if not isinstance(handler, dict):
                raise self._error(
                    f"listener for '{event_type}' must be an object", f"{path}.events"
                )
            modifiers = handler.get("modifiers") or {}
            if not isinstance(modifiers, dict):
                raise self._error(
                    f"modifiers for '{event_type}' must be an object",
                    f"{path}.events",
                )
            result[event_type] = EventBinding(
                modifiers=EventModifiers(
                    stop=bool(modifiers.get("stop")),
                    capture=bool(modifiers.get("capture")),
                    prevent=bool(modifiers.get("prevent")),
                    self_only=bool(modifiers.get("self")),
                    once=bool(modifiers.get("once")),
                    passive=bool(modifiers.get("passive")),
                ),
                value=handler.get("value") or "",
            )
        return result

    def _map_for(self, data: Dict[str, Any]) -> Optional[ForSource]:
        if not data.get("for"):
            return None
        return ForSource(
            exp=data["for"],
            alias=data.get("alias") or "",
            iterator1=data.get("iterator1"),
            key=data.get("key"),
        )

    def _map_if_conditions(
        self, owner: TemplateNode, conditions: Any, path: str
    ) -> List[IfCondition]:
        if not isinstance(conditions, list):
            raise self._error("'ifConditions' must be a list", path)

        result = []
        for index, condition in enumerate(conditions):
            cond_path = f"{path}.ifConditions[{index}]"
            if not isinstance(condition, dict):
                raise self._error("condition must be an object", cond_path)

            exp = condition.get("exp")
            if index == 0:
                guard = GuardKind.IF
            elif exp:
                guard = GuardKind.ELSEIF
            else:
                guard = GuardKind.ELSE

            raw_block = condition.get("block")
            block = (
                owner
                if raw_block is None
                else self._map_node(raw_block, f"{cond_path}.block")
            )
            result.append(IfCondition(guard=guard, block=block, exp=exp))
        return result


def load_ast(data: Any, file_path: str = "") -> TemplateNode:
    return AstLoader(file_path).load(data)


def load_options(data: Any, file_path: str = "") -> GeneratorOptions:
    """Build `GeneratorOptions` from ``{name, imports, slots}``."""
    if not isinstance(data, dict):
        raise AstLoadError("options must be an object", file_path=file_path)

    raw_imports = data.get("imports") or {}
    if not isinstance(raw_imports, dict):
        raise AstLoadError("'imports' must be an object", file_path=file_path)

    imports = {}
    for tag, entry in raw_imports.items():
        if not isinstance(entry, dict) or "src" not in entry:
            raise AstLoadError(
                f"import '{tag}' must be an object with a src",
                file_path=file_path,
                path=f"imports.{tag}",
            )
        imports[tag] = ImportEntry(src=entry["src"], hash=str(entry.get("hash", "")))

    name = data.get("name") or "defaultName"
    if not isinstance(name, str):
        raise AstLoadError("'name' must be a string", file_path=file_path)

    slots = data.get("slots") or []
    if not isinstance(slots, list) or not all(isinstance(s, str) for s in slots):
        raise AstLoadError(
            "'slots' must be a list of strings", file_path=file_path
        )

    return GeneratorOptions(name=name, imports=imports, slots=list(slots))


def load_document(file_path: Path) -> Tuple[TemplateNode, GeneratorOptions]:
    """Read a template document: options at the top level, AST under ``ast``."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise AstLoadError(f"invalid JSON: {e}", file_path=str(file_path))
    except UnicodeDecodeError as e:
        raise AstLoadError(f"not valid UTF-8: {e}", file_path=str(file_path))

    if not isinstance(data, dict) or "ast" not in data:
        raise AstLoadError(
            "document must be an object with an 'ast' key", file_path=str(file_path)
        )

    options = load_options(data, str(file_path))
    if "name" not in data:
        options.name = file_path.stem
    return load_ast(data["ast"], str(file_path)), options
