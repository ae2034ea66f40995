from sentrel_pipeline.stage_02_entities.entity_typing import EntityType

# Only relations involving people or organizations are of interest
SUBJECT_TYPES = (EntityType.PERSON, EntityType.ORGANIZATION)

# PERCENT and TIME have no ontology class
ONTOLOGY_CLASSES = {
    EntityType.PERSON: "Person",
    EntityType.ORGANIZATION: "Organization",
    EntityType.LOCATION: "Location",
    EntityType.DATE: "Date",
    EntityType.MONEY: "Money",
}

# Keyed by the object's type
PREDICATES = {
    EntityType.PERSON: "hasPerson",
    EntityType.ORGANIZATION: "hasOrganization",
    EntityType.LOCATION: "hasLocation",
    EntityType.DATE: "hasDate",
    EntityType.MONEY: "hasMoney",
}
