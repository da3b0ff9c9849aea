from __future__ import annotations

from typing import Any, Optional

from feedcanon.models.common import ParseMode
from feedcanon.models.namespaces import Content
from feedcanon.services.accessors import as_string, is_node, text_value


def retrieve_content(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[Content]:
    if not is_node(value):
        return None

    encoded = as_string(text_value(value.get("content:encoded")), mode)
    if encoded is None:
        return None
    return Content(encoded=encoded)
