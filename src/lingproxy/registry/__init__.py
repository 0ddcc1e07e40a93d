"""Registry data model and YAML ingestion."""

from .loader import load_registry, parse_registry
from .models import (
    Gender,
    GlobalConfig,
    LanguageEntry,
    Registry,
    ServiceCategory,
    TtsEntry,
    VoiceEntry,
)

__all__ = [
    "Gender",
    "GlobalConfig",
    "LanguageEntry",
    "Registry",
    "ServiceCategory",
    "TtsEntry",
    "VoiceEntry",
    "load_registry",
    "parse_registry",
]
