"""
Sentrel Pipeline - Stage 2 & Stage 4 only.

This package contains:
- stage_02_entities: Entity types and collection of tagged entities (Stage 2)
- stage_04_relations: Sentence co-occurrence aggregation and triple generation (Stage 4)
"""
