"""Career category → weighted skill taxonomy.

Weights are ordinal importance ranks, not probabilities:
    3 = critical, 2 = important, 1 = bonus

The built-in taxonomy is compiled in. A deployment may point
``settings.taxonomy_path`` at a JSON file with the same shape:

    {"frontend": [["React", 3], ["HTML", 2], ...], ...}
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

VALID_WEIGHTS = frozenset({1, 2, 3})

WeightedSkills = tuple[tuple[str, int], ...]


class TaxonomyError(ValueError):
    """Raised when an external taxonomy resource is malformed."""


# ---------------------------------------------------------------------------
# Built-in taxonomy, one entry per career interest offered at onboarding
# ---------------------------------------------------------------------------
_BUILTIN: dict[str, list[tuple[str, int]]] = {
    "frontend": [
        ("React", 3), ("TypeScript", 3), ("JavaScript", 3),
        ("HTML", 2), ("CSS", 2), ("Tailwind CSS", 2), ("Next.js", 2),
        ("Redux", 1), ("GraphQL", 1), ("Figma", 1),
    ],
    "backend": [
        ("Node.js", 3), ("Python", 3), ("SQL", 3), ("REST APIs", 3),
        ("PostgreSQL", 2), ("MongoDB", 2), ("Docker", 2), ("Express", 2),
        ("Redis", 1), ("GraphQL", 1), ("AWS", 1), ("Microservices", 1),
    ],
    "fullstack": [
        ("JavaScript", 3), ("TypeScript", 3), ("React", 3), ("Node.js", 3),
        ("SQL", 2), ("REST APIs", 2), ("HTML", 2), ("CSS", 2), ("Git", 2),
        ("Docker", 1), ("AWS", 1), ("Next.js", 1), ("MongoDB", 1),
    ],
    "mobile": [
        ("React Native", 3), ("Swift", 3), ("Kotlin", 3), ("Flutter", 2),
        ("iOS", 2), ("Android", 2), ("Dart", 1), ("Firebase", 1),
        ("REST APIs", 1),
    ],
    "data": [
        ("Python", 3), ("SQL", 3), ("Machine Learning", 3), ("Pandas", 2),
        ("Statistics", 2), ("NumPy", 2), ("TensorFlow", 1), ("PyTorch", 1),
        ("Tableau", 1), ("Power BI", 1), ("Spark", 1),
    ],
    "marketing": [
        ("SEO", 3), ("Content Marketing", 3), ("Google Analytics", 3),
        ("Social Media", 2), ("Email Marketing", 2), ("Copywriting", 2),
        ("Google Ads", 1), ("HubSpot", 1), ("Canva", 1),
    ],
    "design": [
        ("Figma", 3), ("UI/UX", 3), ("Prototyping", 3), ("Wireframing", 2),
        ("User Research", 2), ("Adobe XD", 2), ("Design Systems", 1),
        ("Sketch", 1), ("Illustrator", 1),
    ],
}


class SkillTaxonomy:
    """Read-only mapping from category identifier to weighted skills."""

    def __init__(self, data: Mapping[str, list[tuple[str, int]]]) -> None:
        frozen = {
            category: tuple((str(name), int(weight)) for name, weight in skills)
            for category, skills in data.items()
        }
        self._data: Mapping[str, WeightedSkills] = MappingProxyType(frozen)

    def resolve(self, category_id: str) -> WeightedSkills:
        """Weighted skills for a category, or an empty tuple if unknown."""
        return self._data.get(category_id, ())

    def categories(self) -> list[str]:
        return list(self._data)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._data

    def as_dict(self) -> dict[str, list[tuple[str, int]]]:
        return {category: list(skills) for category, skills in self._data.items()}


def _validate(raw: object) -> dict[str, list[tuple[str, int]]]:
    if not isinstance(raw, dict):
        raise TaxonomyError("Taxonomy must be a JSON object keyed by category")

    data: dict[str, list[tuple[str, int]]] = {}
    for category, entries in raw.items():
        if not isinstance(entries, list):
            raise TaxonomyError(f"Category {category!r} must map to a list of [skill, weight] pairs")
        skills: list[tuple[str, int]] = []
        for entry in entries:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise TaxonomyError(f"Bad entry in {category!r}: {entry!r}")
            name, weight = entry
            if not isinstance(name, str) or not name.strip():
                raise TaxonomyError(f"Skill name in {category!r} must be a non-empty string")
            if isinstance(weight, bool) or weight not in VALID_WEIGHTS:
                raise TaxonomyError(f"Weight for {name!r} in {category!r} must be 1, 2 or 3, got {weight!r}")
            skills.append((name.strip(), weight))
        data[category] = skills
    return data


def load_taxonomy(path: str | Path) -> SkillTaxonomy:
    """Load and validate a taxonomy JSON resource."""
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise TaxonomyError(f"Taxonomy file {path} is not valid JSON: {e}") from e
    except OSError as e:
        raise TaxonomyError(f"Cannot read taxonomy file {path}: {e}") from e

    taxonomy = SkillTaxonomy(_validate(raw))
    logger.info("Loaded skill taxonomy from %s (%d categories)", path, len(taxonomy.categories()))
    return taxonomy


DEFAULT_TAXONOMY = SkillTaxonomy(_BUILTIN)
