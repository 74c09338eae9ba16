"""pywgcheck: a validator for WireGuard tunnel configurations.

This package checks `[Interface]`/`[Peer]` configuration text, or the
equivalent flat form record, and reports every problem it finds as a
human-readable error. Configuration content is never stored or logged.
"""

from .core.base_validator import ValidationResult
from .core.parser import ConfigSections, parse_config_sections
from .core.validator import validate_config, validate_form
from .utils.config_text import build_config_text

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__license__",
    "ValidationResult",
    "ConfigSections",
    "parse_config_sections",
    "validate_config",
    "validate_form",
    "build_config_text",
]
