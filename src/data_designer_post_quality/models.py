from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class GenerationSettings(BaseModel):
    """Settings a user picks in the post wizard before generating a draft.

    Accepts both the Python field names and the camelCase names used by the
    web client (``emojiUsage``, ``includeCTA``, ``customInstructions``).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    tone: str
    style: str
    length: str
    language: str
    purpose: str
    audience: str
    emoji_usage: str = Field(alias="emojiUsage")
    include_cta: bool = Field(alias="includeCTA")
    custom_instructions: str | None = Field(default=None, alias="customInstructions")


class ReferenceContent(BaseModel):
    """A fetched reference URL attached to a generation request."""

    model_config = ConfigDict(frozen=True)

    url: str
    content: str | None = None
    error: str | None = None


class HashableContent(BaseModel):
    """Everything that determines the output of one generation request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    input: str
    settings: GenerationSettings
    reference_content: list[ReferenceContent] = Field(default_factory=list, alias="referenceContent")


class InputAnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    feedback: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    recommended_settings: dict[str, str] | None = Field(default=None, alias="recommendedSettings")
    detected_intent: str = Field(default="unknown", alias="detectedIntent")
    word_count: int = Field(default=0, alias="wordCount")
    is_specific: bool = Field(default=False, alias="isSpecific")
    has_numbers: bool = Field(default=False, alias="hasNumbers")
    has_call_to_action: bool = Field(default=False, alias="hasCallToAction")
    has_unique_details: bool = Field(default=False, alias="hasUniqueDetails")

    def to_payload(self) -> dict[str, object]:
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass(frozen=True)
class QualityLabel:
    label: str
    color: str
    emoji: str


@dataclass(frozen=True)
class InputExample:
    """A weak input next to a stronger rewrite of it."""

    bad: str
    good: str
    explanation: str
