from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# Raw species data as returned by PokeAPI (Internal Contract)
class Language(BaseModel):
    name: str

class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: Language

class Habitat(BaseModel):
    name: str

class SpeciesRecord(BaseModel):
    name: str
    habitat: Habitat
    is_legendary: bool
    flavor_text_entries: list[FlavorTextEntry]


# Raw response from the fun translations API (Internal Contract)
class TranslatedContents(BaseModel):
    translated: str

class TranslationResponse(BaseModel):
    contents: TranslatedContents


class TranslationStyle(str, Enum):
    FORMAL = "shakespeare"
    MYSTIC = "yoda"

    @property
    def endpoint(self) -> str:
        return f"{self.value}.json"


# Model for the public API response (both endpoints)
# Keys are serialized in camelCase, e.g. "isLegendary"
class PokemonInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: str
    habitat: str
    is_legendary: bool
