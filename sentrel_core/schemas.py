from pydantic import BaseModel, ConfigDict, Field

class Triple(BaseModel):
    """Subject-predicate-object statement plus the sentence and source it came from.

    ``None`` in a class or predicate field means the entity type has no ontology mapping.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subject: str
    subject_class: str | None = Field(default=None, alias="subjectClass")
    predicate: str | None = None
    object: str
    object_class: str | None = Field(default=None, alias="objectClass")
    sentence: str
    source_url: str = Field(alias="sourceUrl")

    @property
    def is_mapped(self) -> bool:
        return None not in (self.subject_class, self.predicate, self.object_class)
