"""Batch compilation of serialized template ASTs."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from wxmlgen.compiler.codegen.template import TemplateGenerator
from wxmlgen.compiler.exceptions import AstLoadError
from wxmlgen.compiler.loader import load_document

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".wxml"


@dataclass
class BuildSummary:
    templates: int
    failures: int
    out_dir: Path
    failed: List[Path] = field(default_factory=list)


class ArtifactBuilder:
    def __init__(self, src_dir: Path, out_dir: Path) -> None:
        self.src_dir = src_dir.resolve()
        self.out_dir = out_dir.resolve()
        self._template_count = 0
        self._failed: List[Path] = []

    def build(self, clean: bool = True) -> BuildSummary:
        # Cleaning the output must never reach the sources
        if self.out_dir == self.src_dir or self.out_dir in self.src_dir.parents:
            raise ValueError(
                "Output directory must not be the source directory or contain it"
            )

        if clean and self.out_dir.exists():
            shutil.rmtree(self.out_dir)
        self.out_dir.mkdir(parents=True, exist_ok=True)

        for source in sorted(self.src_dir.rglob("*.json")):
            parts = source.relative_to(self.src_dir).parts
            if any(part.startswith((".", "_")) for part in parts):
                continue
            self._compile_file(source)

        return BuildSummary(
            templates=self._template_count,
            failures=len(self._failed),
            out_dir=self.out_dir,
            failed=list(self._failed),
        )

    def _compile_file(self, source: Path) -> None:
        relative = source.relative_to(self.src_dir)
        self._template_count += 1

        try:
            ast, options = load_document(source)
        except (AstLoadError, OSError) as e:
            logger.error("Skipping %s: %s", relative, e)
            self._failed.append(relative)
            return

        generator = TemplateGenerator(ast, options)
        code = generator.generate()
        if generator.failed:
            self._failed.append(relative)

        target = self.out_dir / relative.with_suffix(OUTPUT_SUFFIX)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(code, encoding="utf-8")
        logger.debug("Wrote %s", target)


def build_artifacts(src_dir: Path, out_dir: Path, clean: bool = True) -> BuildSummary:
    """Compile every template document under `src_dir` into `out_dir`."""
    return ArtifactBuilder(src_dir=src_dir, out_dir=out_dir).build(clean=clean)
