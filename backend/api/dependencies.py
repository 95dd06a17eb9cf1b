"""Shared dependencies for API routes."""

import logging

from fastapi import Request

from config import settings
from services.app_state import AppState
from services.skill_taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy, load_taxonomy

logger = logging.getLogger(__name__)

_taxonomy: SkillTaxonomy | None = None


def get_taxonomy() -> SkillTaxonomy:
    """Taxonomy in effect: the configured JSON resource, else the built-in one."""
    global _taxonomy
    if _taxonomy is None:
        if settings.taxonomy_path:
            _taxonomy = load_taxonomy(settings.taxonomy_path)
        else:
            _taxonomy = DEFAULT_TAXONOMY
    return _taxonomy


def get_app_state(request: Request) -> AppState:
    return request.app.state.career


def reset() -> None:
    """Drop the cached taxonomy. Useful for testing."""
    global _taxonomy
    _taxonomy = None
