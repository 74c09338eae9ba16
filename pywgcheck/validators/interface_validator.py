"""Rules for the `[Interface]` fields: the local end of the tunnel.

The interface carries the private key, the tunnel addresses, and optionally
the DNS servers and MTU to use while the tunnel is up.
"""
from ..core.base_validator import BaseValidator
from .fields import MTU_RANGE, is_valid_cidr

ADDRESS_HINT = "use CIDR notation, e.g., 10.0.0.2/24"


class InterfaceValidator(BaseValidator):
    """Checks PrivateKey, Address, DNS and MTU.

    On the text path `Address` may list several blocks separated by commas.
    A form record supplies exactly one interface address per submission, so on
    the form path the whole value must be a single CIDR block.
    """

    name = "Interface"
    section = "Interface"
    description = "Checks the local key, tunnel addresses, DNS servers and MTU."

    def _validate(self) -> None:
        self.check_key("PrivateKey", required=True)

        if self.scoped:
            message = f"Invalid Address format ({ADDRESS_HINT})"
            self.check_cidr_list("Address", message, message)
        else:
            self._check_single_address()

        self.check_ipv4_list("DNS", "Invalid DNS server format")

        # MTU is not part of the form record.
        if self.scoped:
            self.check_range("MTU", *MTU_RANGE)

    def _check_single_address(self) -> None:
        address = self.require("Address")
        if address is not None and not is_valid_cidr(address):
            self.add_error(f"Invalid Address format ({ADDRESS_HINT})")
