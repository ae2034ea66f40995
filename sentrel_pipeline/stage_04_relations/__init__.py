"""
Stage 4: Relations

Aggregates the co-occurring entities of each sentence and derives
subject-predicate-object triples for people and organizations.
"""

from sentrel_pipeline.stage_04_relations.relation_extractor import extract_triples_for_sentences
from sentrel_pipeline.stage_04_relations.relations_in_sentence import RelationsInSentence

__all__ = ["RelationsInSentence", "extract_triples_for_sentences"]
