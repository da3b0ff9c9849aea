"""
Element accessors and primitive coercion.

Everything here is feed-agnostic: it only knows the generic node shape
(mappings keyed by tag name, "@"-prefixed attributes, text under "#text")
and the two strictness modes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, TypeVar, Union

from feedcanon.models.common import ParseMode, ParseOptions

T = TypeVar("T")

TEXT_KEY = "#text"
ATTRIBUTE_PREFIX = "@"

_TRUE_STRINGS = {"true", "yes", "1"}
_FALSE_STRINGS = {"false", "no", "0"}


def is_node(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_present(value: Any) -> bool:
    """None and empty sequences count as absent; empty strings do not."""
    if value is None:
        return False
    if isinstance(value, (list, tuple)) and not value:
        return False
    return True


def as_string(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[str]:
    if isinstance(value, str):
        return value
    if mode != ParseMode.COERCE:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    return None


def as_number(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[Union[int, float]]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else None
    if mode != ParseMode.COERCE or not isinstance(value, str):
        return None
    candidate = value.strip()
    # int() and float() accept "1_000"; feed text never means that.
    if not candidate or "_" in candidate:
        return None
    try:
        return int(candidate)
    except ValueError:
        pass
    try:
        parsed = float(candidate)
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def as_boolean(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if mode != ParseMode.COERCE or not isinstance(value, str):
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    return None


def as_date(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[str]:
    # Date text is kept verbatim; numbers or booleans are never dates.
    return value if isinstance(value, str) else None


def as_sequence_of(value: Any, extractor: Callable[[Any], Optional[T]]) -> List[T]:
    """
    Map `extractor` over a repeatable tag.

    A single occurrence is treated as a one-element sequence and members the
    extractor rejects are dropped without affecting their siblings.
    """
    if value is None:
        return []
    items: Iterable[Any] = value if isinstance(value, (list, tuple)) else (value,)
    result: List[T] = []
    for item in items:
        parsed = extractor(item)
        if parsed is not None:
            result.append(parsed)
    return result


def require_all(candidate: Mapping[str, Any], names: Sequence[str]) -> bool:
    return all(is_present(candidate.get(name)) for name in names)


def require_any(candidate: Mapping[str, Any], names: Sequence[str]) -> bool:
    return any(is_present(candidate.get(name)) for name in names)


def omit_absent(obj: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in obj.items() if value is not None}


# -------- Tag lookups --------------------------------------------------------

def child(node: Any, tag: str, options: ParseOptions) -> Any:
    """Value of a (prefixed) child tag, or None."""
    if not is_node(node):
        return None
    return node.get(f"{options.prefix}{tag}")


def text_value(value: Any) -> Any:
    """Text content of an element node; bare scalars are their own text."""
    if is_node(value):
        return value.get(TEXT_KEY)
    if isinstance(value, (list, tuple)):
        return text_value(value[0]) if value else None
    return value


def attribute(node: Any, name: str, mode: ParseMode) -> Optional[str]:
    if not is_node(node):
        return None
    return as_string(node.get(f"{ATTRIBUTE_PREFIX}{name}"), mode)


def text_of(node: Any, tag: str, options: ParseOptions) -> Optional[str]:
    return as_string(text_value(child(node, tag, options)), options.mode)


def number_of(node: Any, tag: str, options: ParseOptions) -> Optional[Union[int, float]]:
    return as_number(text_value(child(node, tag, options)), options.mode)


def boolean_of(node: Any, tag: str, options: ParseOptions) -> Optional[bool]:
    return as_boolean(text_value(child(node, tag, options)), options.mode)


def date_of(node: Any, tag: str, options: ParseOptions) -> Optional[str]:
    return as_date(text_value(child(node, tag, options)), options.mode)


def first_text(
    node: Any,
    tags: Sequence[str],
    options: ParseOptions,
    reader: Callable[[Any, str, ParseOptions], Optional[T]] = text_of,
) -> Optional[T]:
    """First tag of a fallback chain that yields a value wins."""
    for tag in tags:
        value = reader(node, tag, options)
        if value is not None:
            return value
    return None


def first_attribute(node: Any, names: Sequence[str], mode: ParseMode) -> Optional[str]:
    for name in names:
        value = attribute(node, name, mode)
        if value is not None:
            return value
    return None


# -------- Presence gates -----------------------------------------------------

@dataclass(frozen=True)
class EntityGate:
    """
    Declarative presence rule for one entity type.

    `required` must all be present; when empty, any single field suffices.
    Namespace-mode extraction always falls back to any-field.
    """

    required: Sequence[str] = ()
    any_of: Sequence[str] = ()


def passes_gate(candidate: Mapping[str, Any], gate: EntityGate, options: ParseOptions) -> bool:
    if options.in_namespace:
        return require_any(candidate, list(candidate.keys()))
    if gate.required:
        return require_all(candidate, gate.required)
    return require_any(candidate, gate.any_of or list(candidate.keys()))
