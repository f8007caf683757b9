"""Vulture whitelist — methods called by frameworks, not direct code."""

# Pydantic validators — called by Pydantic, not our code
from content_autodoc.declarations.models import RawMember

RawMember.stringify_default

# Add more as vulture reports false positives
