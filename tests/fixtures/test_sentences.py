"""Tagged sentence fixtures with known expected outputs."""

from typing import Dict, Any

SOURCE_URL = "https://example.com/news/1"

# Each sentence lists (entity_name, entity_type) in the order the tagger found them
TEST_SENTENCES: Dict[str, Dict[str, Any]] = {
    "person_and_org": {
        "text": "Alice joined Acme.",
        "entities": [("Alice", "PERSON"), ("Acme", "ORGANIZATION")],
    },

    "single_person": {
        "text": "Alice smiled.",
        "entities": [("Alice", "PERSON")],
    },

    "locations_only": {
        "text": "The train from Paris reached Berlin.",
        "entities": [("Paris", "LOCATION"), ("Berlin", "LOCATION")],
    },

    "repeated_mention": {
        "text": "Bill Gates founded Microsoft, and Gates later left Microsoft Corp.",
        "entities": [
            ("Bill Gates", "PERSON"),
            ("Microsoft", "ORGANIZATION"),
            ("Gates", "PERSON"),
            ("Microsoft Corp", "ORGANIZATION"),
        ],
    },

    "two_people_and_place": {
        "text": "Ada Lovelace wrote to Charles Babbage from London in 1843.",
        "entities": [
            ("Ada Lovelace", "PERSON"),
            ("Charles Babbage", "PERSON"),
            ("London", "LOCATION"),
            ("1843", "DATE"),
        ],
    },

    "unmapped_types": {
        "text": "Acme shares rose 5% at noon.",
        "entities": [("Acme", "ORGANIZATION"), ("5%", "PERCENT"), ("noon", "TIME")],
    },

    "invalid_type": {
        "text": "Alice visited the Louvre with Bob.",
        "entities": [("Alice", "PERSON"), ("the Louvre", "FACILITY"), ("Bob", "PERSON")],
    },
}
