"""Rules for the `[Peer]` fields: the remote end of the tunnel."""
from ..core.base_validator import BaseValidator
from .fields import KEEPALIVE_RANGE, is_valid_endpoint


class PeerValidator(BaseValidator):
    """Checks PublicKey, Endpoint, AllowedIPs, PreSharedKey and PersistentKeepAlive."""

    name = "Peer"
    section = "Peer"
    description = "Checks the remote key, endpoint, routed blocks and keepalive."

    def _validate(self) -> None:
        self.check_key("PublicKey", required=True)
        self._check_endpoint()
        self.check_cidr_list(
            "AllowedIPs",
            "Invalid AllowedIPs format (use CIDR notation)",
            "Invalid AllowedIPs format",
        )
        self.check_key("PreSharedKey", required=False)
        self.check_range(
            "PersistentKeepAlive",
            *KEEPALIVE_RANGE,
            flat_message="Invalid PersistentKeepAlive value (must be 0-65535)",
        )

    def _check_endpoint(self) -> None:
        endpoint = self.require("Endpoint")
        if endpoint is not None and not is_valid_endpoint(endpoint):
            self.add_error(self.describe(
                "Invalid Endpoint format (use hostname:port or ip:port, e.g., vpn.example.com:51820)",
                "Invalid Endpoint format (use hostname:port or ip:port)",
            ))
