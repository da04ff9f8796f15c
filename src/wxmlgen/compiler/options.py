"""Generator configuration."""

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional


@dataclass(frozen=True)
class ImportEntry:
    """A compiled sub-component available to the template.

    `src` is the path emitted into ``<import src="..."/>`` and `hash` the
    content hash appended to the instance name.
    """

    src: str
    hash: str = ""


@dataclass
class GeneratorOptions:
    name: str = "defaultName"
    imports: Dict[str, ImportEntry] = field(default_factory=dict)
    # Accepted for compatibility with upstream; component instances only wire
    # the default slot.
    slots: List[str] = field(default_factory=list)
    tag_map: Optional[Mapping[str, str]] = None
