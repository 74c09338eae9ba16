"""Rule sets and field predicates for tunnel configurations.

`fields` holds the pure predicates for each primitive value type. The
`interface_validator` and `peer_validator` modules hold the section rule sets,
each a subclass of `pywgcheck.core.base_validator.BaseValidator`, shared by
the text and form validation paths.
"""
