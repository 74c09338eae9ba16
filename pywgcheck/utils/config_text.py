"""Renders a form record into `[Interface]`/`[Peer]` configuration text.

The result is built in memory and handed back to the caller; it is never
written anywhere by this module. The record should have passed
`validate_form` first, as no checks are made here.
"""
from typing import Any, List, Mapping

INTERFACE_FIELDS = ("PrivateKey", "Address", "DNS")
PEER_FIELDS = ("PublicKey", "PreSharedKey", "AllowedIPs", "PersistentKeepAlive", "Endpoint")


def _section_lines(header: str, names, fields: Mapping[str, Any]) -> List[str]:
    lines = [f"[{header}]"]
    for name in names:
        value = fields.get(name)
        if value or value == 0:
            lines.append(f"{name} = {value}")
    return lines


def build_config_text(fields: Mapping[str, Any]) -> str:
    """Builds configuration text from a flat field record.

    Fields that are absent or empty are left out rather than written with an
    empty value.

    Args:
        fields (Mapping[str, Any]): The form record.

    Returns:
        str: The configuration text, ending without a trailing newline.
    """
    lines = _section_lines("Interface", INTERFACE_FIELDS, fields)
    lines.append("")
    lines.extend(_section_lines("Peer", PEER_FIELDS, fields))
    return "\n".join(lines)
