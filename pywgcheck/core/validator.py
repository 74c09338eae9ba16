"""Entry points for validating a tunnel configuration.

Two call shapes share the same rule sets:

1.  `validate_config` takes raw configuration text, splits it into its
    `[Interface]` and `[Peer]` sections and runs each section's rules.
2.  `validate_form` takes a flat field record, as submitted by a form, and
    runs the same rules without section grouping.

Both are synchronous and pure. The configuration content is held only for the
duration of the call; the returned `ValidationResult` carries error strings
and nothing else. Log records carry error counts only.
"""

import logging
from collections.abc import Mapping
from typing import Any, List, Tuple, Type

from .base_validator import BaseValidator, ValidationResult
from .parser import parse_config_sections
from ..validators.interface_validator import InterfaceValidator
from ..validators.peer_validator import PeerValidator

logger = logging.getLogger(__name__)

# Section rule sets in reporting order.
SECTION_VALIDATORS: Tuple[Type[BaseValidator], ...] = (InterfaceValidator, PeerValidator)


def _finish(errors: List[str], source: str) -> ValidationResult:
    if errors:
        logger.info(f"{source} validation failed: {len(errors)} errors")
    else:
        logger.debug(f"{source} validation passed")
    return ValidationResult(errors)


def validate_config(text: Any) -> ValidationResult:
    """Validates raw `[Interface]`/`[Peer]` configuration text.

    A missing or empty section yields exactly one error for that section and
    its field rules are skipped. Otherwise every field rule runs, and all
    violations are reported, Interface first.

    Args:
        text (Any): The configuration text. Anything other than a non-empty
            string is rejected with a single error.

    Returns:
        ValidationResult: The verdict and ordered error list.
    """
    if not text or not isinstance(text, str):
        return _finish(["Config is empty or invalid"], "Config")

    sections = parse_config_sections(text)
    errors: List[str] = []

    for validator_cls in SECTION_VALIDATORS:
        fields = sections.section(validator_cls.section)
        if not fields:
            errors.append(f"Missing [{validator_cls.section}] section")
            continue
        errors.extend(validator_cls(fields).validate())

    return _finish(errors, "Config")


def validate_form(fields: Any) -> ValidationResult:
    """Validates a flat record of configuration fields.

    The record may hold `PrivateKey`, `Address`, `DNS`, `PublicKey`,
    `PreSharedKey`, `AllowedIPs`, `PersistentKeepAlive` and `Endpoint`.
    `Address` is a single CIDR block here, unlike the text path.

    Args:
        fields (Any): The record. Anything other than a mapping is rejected
            with a single error.

    Returns:
        ValidationResult: The verdict and ordered error list.
    """
    if not isinstance(fields, Mapping):
        return _finish(["Form data is empty or invalid"], "Form")

    errors: List[str] = []
    for validator_cls in SECTION_VALIDATORS:
        errors.extend(validator_cls(fields, scoped=False).validate())

    return _finish(errors, "Form")
