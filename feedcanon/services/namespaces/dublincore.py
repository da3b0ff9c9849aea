from __future__ import annotations

from typing import Any, Optional

from feedcanon.models.common import ParseMode
from feedcanon.models.namespaces import DublinCore
from feedcanon.services.accessors import as_date, as_string, is_node, require_any, text_value

# Dublin Core Metadata Element Set 1.1, in element-set order.
DC_ELEMENTS = (
    "title",
    "creator",
    "subject",
    "description",
    "publisher",
    "contributor",
    "date",
    "type",
    "format",
    "identifier",
    "source",
    "language",
    "relation",
    "coverage",
    "rights",
)


def retrieve_dublincore(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[DublinCore]:
    if not is_node(value):
        return None

    dublincore = {}
    for element in DC_ELEMENTS:
        raw = text_value(value.get(f"dc:{element}"))
        reader = as_date if element == "date" else as_string
        dublincore[element] = reader(raw, mode)

    if require_any(dublincore, DC_ELEMENTS):
        return DublinCore(**dublincore)
    return None
