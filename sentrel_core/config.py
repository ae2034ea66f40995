from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Also reject a longer name that contains an already recorded one
    SYMMETRIC_ENTITY_DEDUP: bool = False
    # Keep triples whose object type has no ontology class / predicate (PERCENT, TIME)
    EMIT_UNMAPPED_TRIPLES: bool = True
    LOG_LEVEL: str = "INFO"

settings = Settings()
