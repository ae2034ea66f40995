"""Shared fixtures for sentrel tests."""

import pytest
import spacy
from spacy.tokens import Doc

from sentrel_pipeline.stage_04_relations.relations_in_sentence import RelationsInSentence
from tests.fixtures.test_sentences import TEST_SENTENCES


def build_relations(sentence_key: str, **kwargs) -> RelationsInSentence:
    """Helper to load one fixture sentence into a fresh aggregator."""
    data = TEST_SENTENCES[sentence_key]
    relations = RelationsInSentence(data["text"], **kwargs)
    for name, entity_type in data["entities"]:
        relations.add_entity(name, entity_type)
    return relations


def triple_keys(triples) -> set[tuple]:
    """Reduce triples to (subject, subject_class, predicate, object, object_class)."""
    return {
        (t.subject, t.subject_class, t.predicate, t.object, t.object_class)
        for t in triples
    }


@pytest.fixture
def relations():
    """Aggregator with default (asymmetric, emit-unmapped) behavior."""
    return RelationsInSentence(
        "Bill Gates met Satya Nadella in Redmond.",
        symmetric_dedup=False,
        emit_unmapped=True,
    )


@pytest.fixture(scope="session")
def vocab():
    return spacy.blank("en").vocab


@pytest.fixture
def make_tagged_doc(vocab):
    """Build a spaCy Doc with entities preset, as an upstream tagger would leave it."""
    def _make(words: list[str], ents: list[str], spaces: list[bool] | None = None) -> Doc:
        if spaces is None:
            spaces = [True] * (len(words) - 1) + [False]
        return Doc(vocab, words=words, spaces=spaces, ents=ents)
    return _make
