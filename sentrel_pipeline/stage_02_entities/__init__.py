"""
Stage 2: Entity typing

Maps upstream NER labels onto the closed entity type set and gathers the
tagged entities of a sentence.
"""

from sentrel_pipeline.stage_02_entities.entity_typing import (
    EntityType,
    ONTOLOGY_TYPES,
    map_ner_label_to_type,
)

__all__ = ["EntityType", "ONTOLOGY_TYPES", "map_ner_label_to_type"]
