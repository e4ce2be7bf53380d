"""Static catalogs shipped with adaptive."""

from adaptive.core.data.tools import TOOL_CATALOG

__all__ = ["TOOL_CATALOG"]
