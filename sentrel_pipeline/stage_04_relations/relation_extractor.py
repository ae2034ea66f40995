"""Relation extraction for Stage 4."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from sentrel_core.schemas import Triple
from sentrel_pipeline.stage_02_entities.entity_typing import EntityType
from sentrel_pipeline.stage_04_relations.relations_in_sentence import RelationsInSentence

logger = logging.getLogger(__name__)

TaggedEntity = tuple[str, "EntityType | str", str, Optional[str]]


def extract_triples_for_sentences(
    tagged_entities: Iterable[TaggedEntity],
    source_url: Optional[str] = None,
    *,
    symmetric_dedup: Optional[bool] = None,
    emit_unmapped: Optional[bool] = None,
) -> dict:
    """
    Group tagged entities by sentence and collect the triples of every
    non-trivial sentence.

    Consecutive tuples with the same sentence text and source URL belong to the
    same sentence; the tagger is expected to emit one sentence at a time.

    Args:
        tagged_entities: (entity_name, entity_type, sentence_text, source_url) tuples
        source_url: Used for tuples whose own source_url is None
        symmetric_dedup: Override for settings.SYMMETRIC_ENTITY_DEDUP
        emit_unmapped: Override for settings.EMIT_UNMAPPED_TRIPLES

    Returns:
        Dictionary with statistics and results:
        - sentences_processed: Number of sentences seen
        - sentences_with_relations: Number of non-trivial sentences
        - entities_added: Entities accepted by an aggregator
        - entities_rejected: Entities with an unknown type or a similar duplicate
        - triples: List of Triple, in sentence order
    """
    triples: list[Triple] = []
    sentences_processed = 0
    sentences_with_relations = 0
    entities_added = 0
    entities_rejected = 0

    current: Optional[RelationsInSentence] = None
    current_key: Optional[tuple[str, Optional[str]]] = None

    def flush() -> None:
        nonlocal sentences_with_relations
        if current is None or current.is_empty():
            return
        sentences_with_relations += 1
        triples.extend(current.get_all_triples(current_key[1] or ""))

    for entity_name, entity_type, sentence_text, entity_source in tagged_entities:
        key = (sentence_text, entity_source if entity_source is not None else source_url)
        if key != current_key:
            flush()
            current = RelationsInSentence(
                sentence_text,
                symmetric_dedup=symmetric_dedup,
                emit_unmapped=emit_unmapped,
            )
            current_key = key
            sentences_processed += 1

        if current.add_entity(entity_name, entity_type):
            entities_added += 1
        else:
            entities_rejected += 1

    flush()

    logger.info(
        "Processed %d sentences: %d with relations, %d triples (%d entities added, %d rejected)",
        sentences_processed,
        sentences_with_relations,
        len(triples),
        entities_added,
        entities_rejected,
    )

    return {
        "sentences_processed": sentences_processed,
        "sentences_with_relations": sentences_with_relations,
        "entities_added": entities_added,
        "entities_rejected": entities_rejected,
        "triples": triples,
    }
