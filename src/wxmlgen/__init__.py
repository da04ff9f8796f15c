from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("wxmlgen")
except PackageNotFoundError:
    __version__ = "unknown"

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
from wxmlgen.compiler.codegen.template import TemplateGenerator, generate_template
from wxmlgen.compiler.exceptions import (
    AstLoadError,
    TemplateGenerationError,
    WxmlgenError,
)
from wxmlgen.compiler.options import GeneratorOptions, ImportEntry

__all__ = [
    "Attribute",
    "EventBinding",
    "EventModifiers",
    "ForSource",
    "GuardKind",
    "IfCondition",
    "NodeType",
    "TemplateNode",
    "TemplateGenerator",
    "generate_template",
    "GeneratorOptions",
    "ImportEntry",
    "WxmlgenError",
    "TemplateGenerationError",
    "AstLoadError",
]
