"""Documentation run for one content-type family.

Scans every source root of the family in order, merges the declarations of
family members into one model per key, then writes one ``<Key>.md`` page per
key. A page that cannot be written does not stop the others; the failures
are reported together at the end.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path

from content_autodoc.declarations.models import DeclarationSource, RawDeclaration
from content_autodoc.exceptions import OutputWriteError, RunFailedError
from content_autodoc.families import ContentFamily
from content_autodoc.logging import get_autodoc_logger
from content_autodoc.model.type_model import ParsingOptions, TypeModelRegistry
from content_autodoc.page.assembler import DocumentAssembler

logger = get_autodoc_logger(__name__)


@dataclass
class RunReport:
    """Outcome of a run: pages written and pages that failed."""

    written: list[Path] = field(default_factory=list)
    failed: list[OutputWriteError] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def raise_for_failures(self) -> None:
        if self.failed:
            raise RunFailedError([error.key for error in self.failed])


def collect_declarations(family: ContentFamily, repo_path: Path, source: DeclarationSource) -> list[RawDeclaration]:
    """Scan the family's source roots in variant order."""
    declarations: list[RawDeclaration] = []
    for root in family.source_roots(repo_path):
        if not root.exists():
            logger.warning("Source root %s does not exist, skipping", root)
            continue
        found = source.scan(root)
        logger.info("Scanned %s: %d declarations", root, len(found))
        declarations.extend(found)
    return declarations


def build_models(family: ContentFamily, declarations: list[RawDeclaration]) -> TypeModelRegistry:
    """Merge each family member's declarations into one model per key, in scan order."""
    bases_by_name: dict[str, set[str]] = defaultdict(set)
    for declaration in declarations:
        bases_by_name[declaration.name].update(declaration.base_classes)

    registry = TypeModelRegistry(ParsingOptions(initializer_method_names=family.initializer_method_names))
    for declaration in declarations:
        if family.is_member(declaration.name, bases_by_name):
            registry.add(declaration)
    logger.info("Built %d %s models", len(registry), family.name)
    return registry


def render_family(registry: TypeModelRegistry, output_dir: Path, assembler: DocumentAssembler | None = None) -> RunReport:
    """Write one page per root key into ``output_dir``."""
    assembler = assembler or DocumentAssembler()
    report = RunReport()
    known_keys = registry.keys()

    for key, model in registry.items():
        page = assembler.assemble(key, model, known_keys)
        report.diagnostics.extend(assembler.diagnostics)
        path = output_dir / f"{key}.md"
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(page.to_markdown(), encoding="utf-8")
        except OSError as e:
            error = OutputWriteError(key, str(path), str(e))
            logger.error("%s", error)
            report.failed.append(error)
            continue
        logger.info("Wrote %s", path)
        report.written.append(path)
    return report


def run_family(family: ContentFamily, repo_path: Path, output_dir: Path, source: DeclarationSource) -> RunReport:
    declarations = collect_declarations(family, repo_path, source)
    registry = build_models(family, declarations)
    return render_family(registry, output_dir)
