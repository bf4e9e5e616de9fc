"""Static datasets indexed at startup."""

from .app_sections import APP_SECTIONS
from .cpg_v2_4 import CPG_SECTIONS, CPG_SOURCE_URL
from .documents import DOCUMENTS

__all__ = ["APP_SECTIONS", "CPG_SECTIONS", "CPG_SOURCE_URL", "DOCUMENTS"]
