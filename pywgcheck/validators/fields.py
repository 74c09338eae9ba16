"""Predicates for the primitive value types of a tunnel configuration.

Every function here is pure: it takes a single value and answers whether it
has the expected surface shape. Non-string, empty, or missing input is simply
invalid and never raises. Only the shape of keys is checked; whether a key
decodes to a usable curve point is outside the scope of this module.
"""
import re
from typing import Any, Optional

# Compiled once and never mutated. Patterns are matched against the whole
# string and use ASCII classes so that `\d` only means 0-9.
PATTERNS = {
    "key": re.compile(r"[A-Za-z0-9+/]{42}[A-Za-z0-9+/=]{2}", re.ASCII),
    "ipv4": re.compile(r"(?:\d{1,3}\.){3}\d{1,3}", re.ASCII),
    # Exactly eight groups; `::` shorthand is not expanded.
    "ipv6": re.compile(r"(?:[0-9a-fA-F]{0,4}:){7}[0-9a-fA-F]{0,4}", re.ASCII),
    "cidr_v4": re.compile(r"(?:\d{1,3}\.){3}\d{1,3}/\d{1,2}", re.ASCII),
    "cidr_v6": re.compile(r"(?:[0-9a-fA-F]{0,4}:){2,7}[0-9a-fA-F]{0,4}/\d{1,3}", re.ASCII),
    "endpoint": re.compile(r"[a-zA-Z0-9.-]+:\d{1,5}", re.ASCII),
    "domain": re.compile(
        r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
        r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*",
        re.ASCII,
    ),
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)

MTU_RANGE = (576, 65535)
KEEPALIVE_RANGE = (0, 65535)
PORT_RANGE = (1, 65535)


def _matches(pattern: str, value: Any) -> bool:
    if not value or not isinstance(value, str):
        return False
    return PATTERNS[pattern].fullmatch(value) is not None


def parse_int(value: Any) -> Optional[int]:
    """Parses the leading base-10 integer of a value.

    Mirrors the lenient parsing the configuration format has always used:
    surrounding whitespace and trailing garbage are tolerated (`"25s"` is 25),
    but a value without leading digits does not parse.

    Args:
        value (Any): A string or an integer.

    Returns:
        Optional[int]: The parsed integer, or None if nothing parses.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # More digits than int() will convert; far outside any field range.
        return None


def in_range(value: Any, low: int, high: int) -> bool:
    """Checks that a value parses as an integer within `[low, high]`."""
    number = parse_int(value)
    return number is not None and low <= number <= high


def is_valid_key(key: Any) -> bool:
    """Checks the 44-character base64 surface format of a key."""
    if not key or not isinstance(key, str):
        return False
    return PATTERNS["key"].fullmatch(key.strip()) is not None


def is_valid_ipv4(ip: Any) -> bool:
    """Checks a dotted-quad IPv4 address with every octet in 0-255."""
    if not _matches("ipv4", ip):
        return False
    return all(0 <= int(octet) <= 255 for octet in ip.split("."))


def is_valid_ipv6(ip: Any) -> bool:
    """Checks a fully written IPv6 address of eight hex groups."""
    return _matches("ipv6", ip)


def is_valid_cidr(cidr: Any) -> bool:
    """Checks an IPv4 or IPv6 block in `address/prefix` notation.

    For IPv6 only the coarse group shape and the prefix length are checked;
    the address part is not run through `is_valid_ipv6`.
    """
    if _matches("cidr_v4", cidr):
        ip, prefix = cidr.split("/")
        return is_valid_ipv4(ip) and 0 <= int(prefix) <= 32

    if _matches("cidr_v6", cidr):
        prefix = cidr.split("/")[1]
        return 0 <= int(prefix) <= 128

    return False


def is_valid_domain(host: Any) -> bool:
    """Checks a host name made of 1-63 character alphanumeric labels."""
    return _matches("domain", host)


def is_valid_port(port: Any) -> bool:
    return in_range(port, *PORT_RANGE)


def is_valid_endpoint(endpoint: Any) -> bool:
    """Checks a `host:port` pair where host is an IPv4 address or a domain."""
    if not _matches("endpoint", endpoint):
        return False

    host, _, port = endpoint.partition(":")
    if not is_valid_port(port):
        return False

    return is_valid_ipv4(host) or is_valid_domain(host)
