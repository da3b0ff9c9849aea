from feedcanon.models.common import CanonicalModel, ParseMode, ParseOptions

__all__ = ["CanonicalModel", "ParseMode", "ParseOptions"]
