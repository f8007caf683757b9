"""Declaration manifests: YAML or JSON files listing raw declarations.

Used when the declarations were extracted by external tooling, for example
from a codebase that is not written in Python. A manifest holds either a
list of declarations or a mapping with a ``declarations`` list:

    declarations:
      - name: Bleeding
        base_classes: [Affliction]
        members:
          - {name: Strength, type_name: float, default_value: "0", description: desc}
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from content_autodoc.declarations.models import RawDeclaration
from content_autodoc.exceptions import DeclarationLoadError
from content_autodoc.logging import get_autodoc_logger

logger = get_autodoc_logger(__name__)

MANIFEST_SUFFIXES: frozenset[str] = frozenset({".yml", ".yaml", ".json"})


class ManifestLoader:
    """Reads every manifest under a source root, in sorted path order."""

    def scan(self, root: Path) -> list[RawDeclaration]:
        if root.is_file():
            files = [root]
        else:
            files = sorted(p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in MANIFEST_SUFFIXES)

        declarations: list[RawDeclaration] = []
        for path in files:
            declarations.extend(load_manifest(path))
        logger.debug("Loaded %d declarations from %d manifest(s) under %s", len(declarations), len(files), root)
        return declarations


def load_manifest(path: Path) -> list[RawDeclaration]:
    """Load and validate one manifest file.

    Raises:
        DeclarationLoadError: The file is unreadable, is not YAML/JSON, or
            does not describe a list of declarations.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        raise DeclarationLoadError(f"Cannot read manifest {path}: {e}") from e

    entries = _declaration_entries(data, path)
    try:
        return [RawDeclaration.model_validate({"source": str(path), **entry}) for entry in entries]
    except ValidationError as e:
        raise DeclarationLoadError(f"Invalid declaration in {path}: {e}") from e


def _declaration_entries(data: Any, path: Path) -> list[dict[str, Any]]:
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("declarations", [])
    if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
        raise DeclarationLoadError(f"Manifest {path} must contain a list of declaration mappings")
    return data
