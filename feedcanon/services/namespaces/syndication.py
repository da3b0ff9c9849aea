from __future__ import annotations

from typing import Any, Optional

from feedcanon.models.common import ParseMode
from feedcanon.models.namespaces import Syndication
from feedcanon.services.accessors import as_date, as_number, as_string, is_node, require_any, text_value


def retrieve_syndication(value: Any, mode: ParseMode = ParseMode.COERCE) -> Optional[Syndication]:
    if not is_node(value):
        return None

    syndication = {
        "update_period": as_string(text_value(value.get("sy:updateperiod")), mode),
        "update_frequency": as_number(text_value(value.get("sy:updatefrequency")), mode),
        "update_base": as_date(text_value(value.get("sy:updatebase")), mode),
    }

    if require_any(syndication, list(syndication.keys())):
        return Syndication(**syndication)
    return None
