"""Template markup code generation."""

import logging
import re
from typing import List, Optional, Set

from markupsafe import escape

from wxmlgen.compiler.ast_nodes import GuardKind, TemplateNode
from wxmlgen.compiler.codegen.attributes import (
    gen_attrs,
    gen_class,
    gen_style,
    handle_id,
    lookup,
)
from wxmlgen.compiler.codegen.events import gen_events
from wxmlgen.compiler.exceptions import TemplateGenerationError
from wxmlgen.compiler.options import GeneratorOptions
from wxmlgen.compiler.tag_map import resolve_tag
from wxmlgen.runtime.error_renderer import render_error_document

logger = logging.getLogger(__name__)

# Leading scope segment of a key path: "item.id" -> "id"
KEY_SCOPE_RE = re.compile(r"^\w*\.")

DEFAULT_SLOT = "$defaultSlot: 'defaultSlot'"


def generate_template(
    ast: TemplateNode, options: Optional[GeneratorOptions] = None
) -> str:
    """Generate the template document for `ast`. Never raises."""
    return TemplateGenerator(ast, options).generate()


class TemplateGenerator:
    """Renders an annotated template AST into target-dialect markup.

    Each call to :meth:`generate` is one pass. Chains already emitted during
    the pass are tracked on the generator, so the input AST is left untouched
    and can be generated again (or shared between generators).
    """

    def __init__(
        self, ast: TemplateNode, options: Optional[GeneratorOptions] = None
    ) -> None:
        if options is None:
            options = GeneratorOptions()
        self.ast = ast
        self.options = options
        self.name = options.name
        self.imports = options.imports
        self.slots = options.slots
        self._emitted_chains: Set[int] = set()
        self.failed = False

    def generate(self) -> str:
        self._reset_state()
        logger.debug("Generating template %s", self.name)
        try:
            imports_code = self.gen_imports()
            code = self.generate_node(self.ast)
            name = escape(self.name)
            return f'{imports_code}<template name="{name}">{code}</template>'
        except Exception as e:
            self.failed = True
            logger.error("Failed to generate template %s: %s", self.name, e)
            logger.debug("Generation traceback", exc_info=True)
            return self.gen_error(e)

    def _reset_state(self) -> None:
        self._emitted_chains = set()
        self.failed = False

    def gen_imports(self) -> str:
        return "".join(
            f'<import src="{entry.src}"/>' for entry in self.imports.values()
        )

    def gen_error(self, error: BaseException) -> str:
        return render_error_document(self.name, error)

    def generate_node(
        self, node: TemplateNode, guard: Optional[GuardKind] = None
    ) -> str:
        """Dispatch `node` to the matching emitter.

        `guard` is the chain position of `node` when it is rendered as a
        branch of a conditional chain.
        """
        if node.if_conditions:
            if not self._chain_emitted(node):
                return self.gen_if_conditions(node)
            if guard is None:
                # Lead node reached again outside of its chain
                return ""

        if self.is_component(node):
            return self.gen_component(node)
        elif node.is_element:
            return self.gen_tag(node, guard)
        else:
            return self.gen_text(node)

    def _chain_emitted(self, node: TemplateNode) -> bool:
        return node.if_conditions_generated or id(node) in self._emitted_chains

    def is_component(self, node: TemplateNode) -> bool:
        if node.cid is None:
            return False
        if node.tag in self.imports:
            return True
        logger.debug(
            "Component <%s> (cid=%s) is not imported; rendering as element",
            node.tag,
            node.cid,
        )
        return False

    def gen_if_conditions(self, node: TemplateNode) -> str:
        self._emitted_chains.add(id(node))
        branches = (
            self.generate_node(condition.block, condition.guard)
            for condition in node.if_conditions or []
        )
        return "".join(b for b in branches if b)

    def gen_component(self, node: TemplateNode) -> str:
        entry = self.imports[node.tag]
        comp_name = f"{node.tag}{entry.hash}"
        data = ", ".join(
            [
                f"...$root[ $kk + {node.cid} ]",
                "$root",
                DEFAULT_SLOT,
            ]
        )
        return f'<template is="{comp_name}" data="{{{{{data}}}}}"/>'

    def gen_tag(self, node: TemplateNode, guard: Optional[GuardKind] = None) -> str:
        if not node.tag:
            raise TemplateGenerationError(
                "element node has no tag", template_name=self.name
            )
        mp_tag = resolve_tag(node.tag, self.options.tag_map)
        start_tag = "".join(
            [
                "<",
                mp_tag,
                self.gen_for(node),
                self.gen_if(node, guard),
                gen_class(node),
                gen_style(node),
                gen_attrs(node),
                gen_events(node),
                ">",
            ]
        )
        return f"{start_tag}{self.gen_children(node)}</{mp_tag}>"

    def gen_if(self, node: TemplateNode, guard: Optional[GuardKind]) -> str:
        if guard == GuardKind.IF:
            return f' wx:if="{lookup(handle_id(node), "_if")}"'
        elif guard == GuardKind.ELSEIF:
            return f' wx:elif="{lookup(handle_id(node), "_if")}"'
        elif guard == GuardKind.ELSE:
            return " wx:else"
        return ""

    def gen_for(self, node: TemplateNode) -> str:
        source = node.for_source
        if source is None:
            return ""
        parts: List[str] = [f' wx:for="{lookup(handle_id(node), "li")}"']
        if source.iterator1:
            parts.append(f' wx:for-index="{source.iterator1}"')
        key_name = KEY_SCOPE_RE.sub("", source.key or "")
        if key_name:
            parts.append(f' wx:key="{key_name}"')
        return "".join(parts)

    def gen_text(self, node: TemplateNode) -> str:
        if node.static:
            return node.text or ""
        return lookup(handle_id(node), "t")

    def gen_children(self, node: TemplateNode) -> str:
        if not node.children:
            return ""
        return "".join(self.generate_node(child) for child in node.children)
