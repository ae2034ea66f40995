"""
Collect entities that an upstream tagger attached to a spaCy Doc or Span.

No model is run here: the caller has already produced ``doc.ents``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from sentrel_pipeline.stage_02_entities.entity_typing import map_ner_label_to_type
from sentrel_pipeline.stage_04_relations.relations_in_sentence import RelationsInSentence

if TYPE_CHECKING:
    from spacy.tokens import Doc, Span

logger = logging.getLogger(__name__)


def collect_sentence_entities(
    sentence: Doc | Span,
    *,
    symmetric_dedup: Optional[bool] = None,
    emit_unmapped: Optional[bool] = None,
) -> RelationsInSentence:
    """
    Build a RelationsInSentence from the tagged entities of one sentence.

    Args:
        sentence: spaCy Doc or Span (e.g. an item of ``doc.sents``) with entities set
        symmetric_dedup: Override for settings.SYMMETRIC_ENTITY_DEDUP
        emit_unmapped: Override for settings.EMIT_UNMAPPED_TRIPLES

    Returns:
        Aggregator holding every entity whose label maps to an entity type
    """
    relations = RelationsInSentence(
        sentence.text,
        symmetric_dedup=symmetric_dedup,
        emit_unmapped=emit_unmapped,
    )

    for ent in sentence.ents:
        if not ent.text or not ent.text.strip():
            continue

        entity_type = map_ner_label_to_type(ent.label_)
        if entity_type is None:
            logger.debug("Skipping %r: label %s has no entity type", ent.text, ent.label_)
            continue

        relations.add_entity(ent.text, entity_type)

    return relations
