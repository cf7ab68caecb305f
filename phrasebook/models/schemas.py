from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class EntryCreate(BaseModel):
    """Write payload for one entry.

    Accepts the canonical field names and the legacy ones
    (`pronounciation`, `mandarin`, `audioURL`).
    """
    model_config = ConfigDict(populate_by_name=True)

    phrase: str
    pronunciation: str | None = Field(default=None, validation_alias=AliasChoices("pronunciation", "pronounciation"))
    translation: str | None = Field(default=None, validation_alias=AliasChoices("translation", "mandarin"))
    definition: str | None = None
    usage: str | None = None
    tags: list[str] = Field(default_factory=list)
    audio_reference: str | None = Field(
        default=None,
        validation_alias=AliasChoices("audioReference", "audioURL", "audio_reference"),
    )

    @field_validator("phrase")
    @classmethod
    def _phrase_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("phrase cannot be empty")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_as_set(cls, v):
        if v is None:
            return []
        if isinstance(v, list) and all(isinstance(t, str) for t in v):
            # membership is what matters; drop repeats, keep first position
            return list(dict.fromkeys(v))
        return v
