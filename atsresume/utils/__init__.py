"""
Shared utilities for atsresume.

Common functionality used across contexts:
- Configuration tables (YAML via OmegaConf)
- Logging setup (loguru)
- Text helpers and report formatting
- Document decoding, persistence and the AI suggestion stub
"""

from atsresume.utils.config_registry import ConfigRegistry, load_config
from atsresume.utils.text_processing import split_resume_lines, truncate_display

__all__ = ["ConfigRegistry", "load_config", "split_resume_lines", "truncate_display"]
