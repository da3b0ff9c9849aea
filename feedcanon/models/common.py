from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ParseMode(str, Enum):
    STRICT = "strict"
    COERCE = "coerce"


@dataclass(frozen=True)
class ParseOptions:
    """
    Request-scoped configuration threaded through every extractor.

    `mode` controls primitive coercion; `as_namespace` is the tag prefix used
    when a host extractor is reused for a namespace-embedded element (for
    example "atom:" inside RSS, or "itunes:" for an owner). Setting a prefix
    puts the call in namespace mode: any single field is enough to emit the
    entity and namespace payloads are never attached.
    """

    mode: ParseMode = ParseMode.COERCE
    as_namespace: Optional[str] = None

    @property
    def prefix(self) -> str:
        return self.as_namespace or ""

    @property
    def in_namespace(self) -> bool:
        return bool(self.as_namespace)

    def with_namespace(self, prefix: str) -> "ParseOptions":
        return replace(self, as_namespace=prefix)


class CanonicalModel(BaseModel):
    """Base for canonical entities: immutable, empty sequences stored as absent."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_sequences(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned: Dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, (list, tuple)) and not value:
                continue
            cleaned[key] = value
        return cleaned
