"""
Base class for the section rule sets and the result type they produce.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..validators.fields import in_range, is_valid_cidr, is_valid_ipv4, is_valid_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """The verdict of a single validation call.

    Only error descriptions are carried; none of the validated content is.

    Attributes:
        errors (List[str]): Ordered, human-readable error descriptions.
    """

    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True iff no errors were recorded."""
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {"valid": self.valid, "errors": list(self.errors)}


class BaseValidator(ABC):
    """Abstract base class for the `[Interface]` and `[Peer]` rule sets.

    A validator collects error strings for one group of fields. The same rule
    set serves two call paths: the text path, where the fields come from a
    parsed section and messages name that section, and the form path, where
    the fields come from a flat record and messages use shorter wording.
    Subclasses implement `_validate` and record findings with `add_error`.

    Attributes:
        name (str): The display name of the validator.
        section (str): The configuration section the rule set covers.
        description (str): A brief explanation of what the validator checks.
    """

    name: str = "UnnamedValidator"
    section: str = ""
    description: str = "No description provided"

    def __init__(self, fields: Mapping[str, Any], scoped: bool = True) -> None:
        """Initializes the validator with the fields to check.

        Args:
            fields (Mapping[str, Any]): Field name to value.
            scoped (bool): True when the fields come from a parsed section
                of configuration text, False for a flat form record.
        """
        self.fields = fields
        self.scoped = scoped
        self.errors: List[str] = []

    def validate(self) -> List[str]:
        """Runs the rule set and returns the collected errors.

        An unexpected failure inside the rule set becomes a single error entry
        instead of propagating. Only the exception type is logged, since its
        message could echo the input.

        Returns:
            List[str]: The errors found, in rule order.
        """
        logger.debug(f"Running {self.name} validator: {self.description}")
        try:
            self._validate()
        except Exception as e:
            logger.error("Validator %s failed with %s", self.name, type(e).__name__)
            self.add_error(f"Validator {self.name} failed unexpectedly")
        return list(self.errors)

    @abstractmethod
    def _validate(self) -> None:
        """Checks the fields, recording problems with `add_error`."""
        raise NotImplementedError("Subclasses must implement _validate()")

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def get_field(self, name: str) -> Optional[Any]:
        """Returns a field's value, or None when it is absent or empty."""
        value = self.fields.get(name)
        return value if value else None

    def describe(self, scoped: str, flat: str) -> str:
        """Picks the message wording for the current call path."""
        return scoped if self.scoped else flat

    def require(self, name: str) -> Optional[Any]:
        """Returns a required field, recording an error when it is missing."""
        value = self.get_field(name)
        if value is None:
            self.add_error(self.describe(
                f"{name} is required in [{self.section}]",
                f"{name} is required",
            ))
        return value

    def check_key(self, name: str, required: bool) -> None:
        """Checks a field holding a base64 key."""
        value = self.require(name) if required else self.get_field(name)
        if value is not None and not is_valid_key(value):
            self.add_error(self.describe(
                f"Invalid {name} format (must be 44-character base64 string)",
                f"Invalid {name} format",
            ))

    def check_range(self, name: str, low: int, high: int, flat_message: Optional[str] = None) -> None:
        """Checks an optional integer field against an inclusive range."""
        value = self.get_field(name)
        if value is not None and not in_range(value, low, high):
            scoped = f"Invalid {name} value (must be between {low} and {high})"
            self.add_error(self.describe(scoped, flat_message or scoped))

    @staticmethod
    def split_list(value: Any) -> List[str]:
        """Splits a comma-separated field into stripped entries."""
        if not isinstance(value, str):
            return [str(value)]
        return [entry.strip() for entry in value.split(",")]

    @staticmethod
    def invalid_entries(entries: Iterable[str], predicate) -> List[str]:
        return [entry for entry in entries if not predicate(entry)]

    def check_cidr_list(self, name: str, scoped_message: str, flat_message: str) -> None:
        """Checks a required comma-separated list of CIDR blocks.

        One aggregated error lists every invalid entry.
        """
        value = self.require(name)
        if value is None:
            return
        invalid = self.invalid_entries(self.split_list(value), is_valid_cidr)
        if invalid:
            message = self.describe(scoped_message, flat_message)
            self.add_error(f"{message}: {', '.join(invalid)}")

    def check_ipv4_list(self, name: str, message: str) -> None:
        """Checks an optional comma-separated list of IPv4 addresses."""
        value = self.get_field(name)
        if value is None:
            return
        invalid = self.invalid_entries(self.split_list(value), is_valid_ipv4)
        if invalid:
            self.add_error(f"{message}: {', '.join(invalid)}")
