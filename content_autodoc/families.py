"""Content-type families: which sources to scan and which classes belong."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from content_autodoc.exceptions import UnknownFamilyError


@dataclass(frozen=True)
class ContentFamily:
    """A documented family of content types sharing a root type.

    Attributes:
        name: Family name used on the command line.
        root_type: Type every member derives from (and is itself a member).
        source_path_template: Source root relative to the repository, with
            ``{0}`` replaced by each variant.
        variants: Source variants in scan order; later variants merge into
            declarations from earlier ones.
        initializer_method_names: Methods whose XML field assignments are documented.
    """

    name: str
    root_type: str
    source_path_template: str
    variants: tuple[str, ...] = ("Shared", "Client")
    initializer_method_names: frozenset[str] = frozenset()

    def source_roots(self, repo_path: Path) -> list[Path]:
        return [repo_path / self.source_path_template.format(variant) for variant in self.variants]

    def is_member(self, name: str, bases_by_name: Mapping[str, set[str]]) -> bool:
        """True when ``name`` is the root type or one of its bases chains up to it."""
        pending = [name]
        seen: set[str] = set()
        while pending:
            current = pending.pop()
            if current == self.root_type:
                return True
            if current in seen:
                continue
            seen.add(current)
            pending.extend(bases_by_name.get(current, ()))
        return False


AFFLICTIONS = ContentFamily(
    name="afflictions",
    root_type="Affliction",
    source_path_template="Barotrauma/Barotrauma{0}/{0}Source/Characters/Health/Afflictions/",
    variants=("Shared", "Client"),
    initializer_method_names=frozenset({"LoadEffects", "load_effects"}),
)

FAMILIES: dict[str, ContentFamily] = {AFFLICTIONS.name: AFFLICTIONS}


def get_family(name: str) -> ContentFamily:
    try:
        return FAMILIES[name.lower()]
    except KeyError:
        raise UnknownFamilyError(f"Unknown content family '{name}'. Known: {', '.join(sorted(FAMILIES))}") from None
