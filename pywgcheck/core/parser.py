"""Splits raw tunnel configuration text into its `[Interface]` and `[Peer]` sections.

The parser is deliberately lossy: lines outside a recognized section and lines
without an `=` are dropped without complaint. It performs no normalization
beyond stripping whitespace around lines, keys and values.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional

SECTION_NAMES = ("Interface", "Peer")

_HEADERS = {f"[{name}]": name for name in SECTION_NAMES}


@dataclass
class ConfigSections:
    """The key/value pairs found under each recognized section header.

    Attributes:
        interface (Dict[str, str]): Fields of the `[Interface]` section.
        peer (Dict[str, str]): Fields of the `[Peer]` section.
    """

    interface: Dict[str, str] = field(default_factory=dict)
    peer: Dict[str, str] = field(default_factory=dict)

    def section(self, name: str) -> Dict[str, str]:
        """Returns the mapping for a section by its header name.

        Args:
            name (str): Either "Interface" or "Peer".

        Raises:
            KeyError: If the name is not a known section.
        """
        if name not in SECTION_NAMES:
            raise KeyError(name)
        return getattr(self, name.lower())


def parse_config_sections(text: str) -> ConfigSections:
    """Parses configuration text into a `ConfigSections` record.

    Args:
        text (str): The raw, possibly multi-line, configuration.

    Returns:
        ConfigSections: The parsed sections. Both may be empty.
    """
    sections = ConfigSections()
    current: Optional[Dict[str, str]] = None

    for line in text.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        if stripped in _HEADERS:
            current = sections.section(_HEADERS[stripped])
            continue

        # Unknown headers do not switch sections; they are read like any other line.
        if current is not None and "=" in stripped:
            key, _, value = stripped.partition("=")
            current[key.strip()] = value.strip()

    return sections
