"""Co-occurring entities of one sentence and the triples they imply."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from sentrel_core.config import settings
from sentrel_core.schemas import Triple
from sentrel_pipeline.stage_02_entities.entity_typing import EntityType
from sentrel_pipeline.stage_04_relations.relation_rules import (
    ONTOLOGY_CLASSES,
    PREDICATES,
    SUBJECT_TYPES,
)

logger = logging.getLogger(__name__)


def get_ontology_class(entity_type: EntityType) -> Optional[str]:
    return ONTOLOGY_CLASSES.get(entity_type)


def get_predicate(entity_type: EntityType) -> Optional[str]:
    return PREDICATES.get(entity_type)


class RelationsInSentence:
    """
    Entities recognized in a single sentence, grouped by type.

    One instance per sentence: entities are added as the tagger finds them,
    then the instance is asked whether the sentence is worth relation
    extraction (``is_empty``) and for its triples (``get_all_triples``).
    """

    def __init__(
        self,
        sentence: str,
        *,
        symmetric_dedup: Optional[bool] = None,
        emit_unmapped: Optional[bool] = None,
    ):
        self._sentence = sentence
        self._entities: dict[EntityType, list[str]] = {}
        self._entity_count = 0
        self.symmetric_dedup = (
            settings.SYMMETRIC_ENTITY_DEDUP if symmetric_dedup is None else symmetric_dedup
        )
        self.emit_unmapped = (
            settings.EMIT_UNMAPPED_TRIPLES if emit_unmapped is None else emit_unmapped
        )

    @property
    def sentence(self) -> str:
        return self._sentence

    @property
    def entity_count(self) -> int:
        return self._entity_count

    @property
    def entities_by_type(self) -> Mapping[EntityType, tuple[str, ...]]:
        """Read-only snapshot of the entities recorded so far, in insertion order."""
        return MappingProxyType(
            {entity_type: tuple(names) for entity_type, names in self._entities.items()}
        )

    def entities(self, entity_type: EntityType | str) -> tuple[str, ...]:
        parsed = EntityType.parse(entity_type)
        if parsed is None:
            return ()
        return tuple(self._entities.get(parsed, ()))

    def __len__(self) -> int:
        return self._entity_count

    def add_entity(self, entity_name: str, entity_type: EntityType | str) -> bool:
        """
        Record an entity for this sentence.

        Args:
            entity_name: Surface text, e.g. "Bill Gates", "Microsoft"
            entity_type: One of the seven entity types (member or its name)

        Returns:
            True if the entity was inserted, False if the type is not recognized
            or a similar entity of the same type is already recorded
        """
        parsed = EntityType.parse(entity_type)
        if parsed is None:
            logger.debug("Rejected %r: unknown entity type %r", entity_name, entity_type)
            return False

        names = self._entities.get(parsed)
        if names is None:
            self._entities[parsed] = [entity_name]
            self._entity_count += 1
            return True

        if self._contains_similar_entity(names, entity_name):
            logger.debug("Rejected %r: similar %s already recorded", entity_name, parsed)
            return False

        names.append(entity_name)
        self._entity_count += 1
        return True

    def _contains_similar_entity(self, names: list[str], entity_name: str) -> bool:
        # "Gates" after "Bill Gates" is a repeat mention, not a new entity.
        # The reverse order only counts as similar with symmetric dedup.
        candidate = entity_name.lower()
        for name in names:
            existing = name.lower()
            if candidate in existing:
                return True
            if self.symmetric_dedup and existing in candidate:
                return True
        return False

    def is_empty(self) -> bool:
        """
        True if the co-occurrences in this sentence are trivial: there is no
        PERSON or ORGANIZATION entity, or fewer than two entities overall.
        """
        if EntityType.PERSON not in self._entities and EntityType.ORGANIZATION not in self._entities:
            return True
        return self._entity_count <= 1

    def get_all_triples(self, source_url: str) -> list[Triple]:
        triples: list[Triple] = []
        for subject_type in SUBJECT_TYPES:
            if subject_type in self._entities:
                triples.extend(self._get_triples_for_type(subject_type, source_url))
        return triples

    def _get_triples_for_type(self, subject_type: EntityType, source_url: str) -> list[Triple]:
        triples = []
        subject_class = get_ontology_class(subject_type)
        for i, subject in enumerate(self._entities[subject_type]):
            for object_type, objects in self._entities.items():
                predicate = get_predicate(object_type)
                object_class = get_ontology_class(object_type)
                if not self.emit_unmapped and (predicate is None or object_class is None):
                    logger.debug("Suppressing %s objects for %r: no ontology mapping", object_type, subject)
                    continue
                for j, obj in enumerate(objects):
                    if object_type == subject_type and i == j:
                        continue
                    triples.append(
                        Triple(
                            subject=subject,
                            subject_class=subject_class,
                            predicate=predicate,
                            object=obj,
                            object_class=object_class,
                            sentence=self._sentence,
                            source_url=source_url,
                        )
                    )
        return triples

    def render_summary(self) -> str:
        lines = [f'Sentence: "{self._sentence}"']
        for entity_type, names in self._entities.items():
            lines.append(f"    {entity_type}(S): {', '.join(names)}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render_summary()

    def __repr__(self) -> str:
        return f"RelationsInSentence(sentence={self._sentence!r}, entity_count={self._entity_count})"
