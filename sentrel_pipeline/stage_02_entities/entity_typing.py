"""
Entity types for sentence-level co-occurrence.

The tagger vocabulary is closed to seven types:
- LOCATION, ORGANIZATION, DATE, MONEY, PERSON, PERCENT, TIME

Labels from other taggers (e.g. spaCy's OntoNotes scheme) are mapped onto
this set; anything without a counterpart is dropped.
"""

from enum import Enum
from typing import Optional


class EntityType(str, Enum):
    LOCATION = "LOCATION"
    ORGANIZATION = "ORGANIZATION"
    DATE = "DATE"
    MONEY = "MONEY"
    PERSON = "PERSON"
    PERCENT = "PERCENT"
    TIME = "TIME"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: "EntityType | str | None") -> Optional["EntityType"]:
        """Return the matching member, or None if value is not one of the seven types.

        Matching is exact: "person" or " PERSON" are not valid type names.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


# All entity types
ONTOLOGY_TYPES = tuple(EntityType)

# spaCy (OntoNotes) labels that have a counterpart in the closed set
NER_LABEL_MAP = {
    "PERSON": EntityType.PERSON,
    "ORG": EntityType.ORGANIZATION,
    "ORGANIZATION": EntityType.ORGANIZATION,
    "GPE": EntityType.LOCATION,
    "LOC": EntityType.LOCATION,
    "FAC": EntityType.LOCATION,
    "LOCATION": EntityType.LOCATION,
    "DATE": EntityType.DATE,
    "MONEY": EntityType.MONEY,
    "PERCENT": EntityType.PERCENT,
    "TIME": EntityType.TIME,
}


def map_ner_label_to_type(ner_label: Optional[str]) -> Optional[EntityType]:
    """
    Map an upstream NER label to an entity type.

    Args:
        ner_label: Tagger label, e.g. "ORG", "GPE" (spaCy) or "ORGANIZATION" (Stanford)

    Returns:
        EntityType, or None for labels outside the closed set (NORP, PRODUCT, ...)
    """
    if not ner_label:
        return None
    return NER_LABEL_MAP.get(ner_label.strip().upper())
