"""Typed model of the language service registry.

The registry document has the following shape::

        global:
            tts_port: 6000
        grammar:
            sme:
                name: North Sámi
                port: 5001
        speller:
            sme:
                name: North Sámi
                port: 5101
        hyphenation:
            sme:
                name: North Sámi
                port: 5201
        tts:
            sme:
                name: North Sámi
                voices:
                    biret:
                        name: Biret
                        gender: female
                        model: sme-multi
                        speaker: 0
                        language: 1

Grammar, speller and hyphenation entries each run on their own backend
port. Every TTS voice is served by one shared backend (``global.tts_port``)
and selected through its ``model`` sub-path plus optional ``speaker`` and
``language`` query parameters.

Mappings keep document order; callers that need a stable order go through
:meth:`Registry.sorted_tags` and :meth:`TtsEntry.sorted_voices`.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, field_serializer, field_validator

__all__ = [
    "ServiceCategory",
    "Gender",
    "LanguageEntry",
    "VoiceEntry",
    "TtsEntry",
    "GlobalConfig",
    "Registry",
]


class ServiceCategory(str, Enum):
    """Kind of backend; the value doubles as the public path prefix."""

    GRAMMAR = "grammar"
    SPELLER = "speller"
    HYPHENATION = "hyphenation"
    TTS = "tts"

    @classmethod
    def ordered(cls) -> tuple[ServiceCategory, ...]:
        """Return categories in output order (grammar, speller, hyphenation, tts)."""
        return (cls.GRAMMAR, cls.SPELLER, cls.HYPHENATION, cls.TTS)


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"
    OTHER = "other"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def _readonly(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _empty() -> Mapping[str, Any]:
    return MappingProxyType({})


class LanguageEntry(_Frozen):
    """A grammar checker, speller or hyphenator for one language."""

    name: str
    port: int = Field(ge=0, le=65535)


class VoiceEntry(_Frozen):
    """One TTS voice.

    Attributes:
        name: Display name of the voice.
        gender: Voice gender; ``None`` when the document leaves it out.
        model: Backend model identifier, used as the proxied sub-path.
        speaker: Optional speaker id for multi-speaker models.
        language: Optional language id for multilingual models.
    """

    name: str
    gender: Gender | None = None
    model: str = Field(min_length=1)
    speaker: int | None = None
    language: int | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def _coerce_gender(cls, value: Any) -> Any:
        if value is None or isinstance(value, Gender):
            return value
        try:
            return Gender(str(value).strip().lower())
        except ValueError:
            return Gender.OTHER

    @property
    def is_female(self) -> bool:
        return self.gender is Gender.FEMALE


class TtsEntry(_Frozen):
    """A TTS language and the voices available for it."""

    name: str
    voices: Mapping[str, VoiceEntry] = Field(default_factory=_empty)

    @field_validator("voices")
    @classmethod
    def _freeze_voices(cls, value: Mapping[str, VoiceEntry]) -> Mapping[str, VoiceEntry]:
        return _readonly(value)

    @field_serializer("voices", mode="wrap")
    def _dump_voices(self, value: Mapping[str, VoiceEntry], handler: SerializerFunctionWrapHandler) -> Any:
        return handler(dict(value))

    def sorted_voices(self) -> list[tuple[str, VoiceEntry]]:
        """Return ``(voice_id, voice)`` pairs in ascending voice id order."""
        return sorted(self.voices.items(), key=lambda item: item[0])


class GlobalConfig(_Frozen):
    tts_port: int = Field(ge=0, le=65535)


class Registry(_Frozen):
    """Root aggregate of the registry document.

    Instances are immutable down to the category and voice mappings, which
    are read-only views; reloading the document yields a new value.
    """

    global_config: GlobalConfig = Field(alias="global")
    grammar: Mapping[str, LanguageEntry] = Field(default_factory=_empty)
    speller: Mapping[str, LanguageEntry] = Field(default_factory=_empty)
    hyphenation: Mapping[str, LanguageEntry] = Field(default_factory=_empty)
    tts: Mapping[str, TtsEntry] = Field(default_factory=_empty)

    @field_validator("grammar", "speller", "hyphenation", "tts")
    @classmethod
    def _freeze_mappings(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _readonly(value)

    @field_serializer("grammar", "speller", "hyphenation", "tts", mode="wrap")
    def _dump_mappings(self, value: Mapping[str, Any], handler: SerializerFunctionWrapHandler) -> Any:
        return handler(dict(value))

    @property
    def tts_port(self) -> int:
        return self.global_config.tts_port

    def languages(self, category: ServiceCategory) -> Mapping[str, LanguageEntry]:
        """Return the per-language mapping of a non-TTS category.

        Raises:
            ValueError: If ``category`` is :attr:`ServiceCategory.TTS`.
        """
        if category is ServiceCategory.TTS:
            raise ValueError("tts entries are not per-port languages; use Registry.tts")
        return getattr(self, category.value)

    def entries(self, category: ServiceCategory) -> Mapping[str, LanguageEntry] | Mapping[str, TtsEntry]:
        if category is ServiceCategory.TTS:
            return self.tts
        return self.languages(category)

    def sorted_tags(self, category: ServiceCategory) -> list[str]:
        """Return the tags of ``category`` in ascending lexicographic order."""
        return sorted(self.entries(category))

    def counts(self) -> dict[str, int]:
        """Return the number of routes each category compiles to."""
        counts = {c.value: len(self.entries(c)) for c in ServiceCategory.ordered()}
        counts[ServiceCategory.TTS.value] = sum(len(t.voices) for t in self.tts.values())
        return counts

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready dump using the document's field names."""
        return self.model_dump(mode="json", by_alias=True)
