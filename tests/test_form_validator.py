import unittest

from pywgcheck import validate_form
from tests.helpers import VALID_FORM


class TestValidateForm(unittest.TestCase):

    def form(self, **overrides):
        fields = dict(VALID_FORM)
        for key, value in overrides.items():
            if value is None:
                fields.pop(key, None)
            else:
                fields[key] = value
        return fields

    def test_valid_record(self):
        result = validate_form(VALID_FORM)
        self.assertTrue(result.valid)
        self.assertEqual(result.errors, [])

    def test_optional_fields_may_be_absent_or_empty(self):
        fields = self.form(DNS=None, PreSharedKey="", PersistentKeepAlive=None)
        self.assertTrue(validate_form(fields).valid)

    def test_address_list_is_rejected(self):
        result = validate_form(self.form(Address="10.0.0.0/24,10.0.1.0/24"))
        self.assertFalse(result.valid)
        self.assertEqual(result.errors, ["Invalid Address format (use CIDR notation, e.g., 10.0.0.2/24)"])

    def test_empty_record(self):
        self.assertEqual(validate_form({}).errors, [
            "PrivateKey is required",
            "Address is required",
            "PublicKey is required",
            "Endpoint is required",
            "AllowedIPs is required",
        ])

    def test_short_messages_in_order(self):
        fields = self.form(
            PrivateKey="short",
            Address="10.0.0.2/33",
            DNS="1.1.1.1,dns.example.com",
            PublicKey="bad",
            Endpoint="vpn.example.com",
            AllowedIPs="0.0.0.0/0, 10.0.0.0/40",
            PreSharedKey="bad",
            PersistentKeepAlive="70000",
        )
        self.assertEqual(validate_form(fields).errors, [
            "Invalid PrivateKey format",
            "Invalid Address format (use CIDR notation, e.g., 10.0.0.2/24)",
            "Invalid DNS server format: dns.example.com",
            "Invalid PublicKey format",
            "Invalid Endpoint format (use hostname:port or ip:port)",
            "Invalid AllowedIPs format: 10.0.0.0/40",
            "Invalid PreSharedKey format",
            "Invalid PersistentKeepAlive value (must be 0-65535)",
        ])

    def test_integer_keepalive(self):
        self.assertTrue(validate_form(self.form(PersistentKeepAlive=25)).valid)
        self.assertEqual(
            validate_form(self.form(PersistentKeepAlive=70000)).errors,
            ["Invalid PersistentKeepAlive value (must be 0-65535)"],
        )

    def test_oversized_keepalive(self):
        result = validate_form(self.form(PersistentKeepAlive="9" * 5000))
        self.assertEqual(result.errors, ["Invalid PersistentKeepAlive value (must be 0-65535)"])

    def test_mtu_is_not_a_form_field(self):
        self.assertTrue(validate_form(self.form(MTU="1")).valid)

    def test_non_string_values_are_invalid(self):
        fields = self.form(DNS=123, AllowedIPs=["0.0.0.0/0"], PublicKey=1)
        self.assertEqual(validate_form(fields).errors, [
            "Invalid DNS server format: 123",
            "Invalid PublicKey format",
            "Invalid AllowedIPs format: ['0.0.0.0/0']",
        ])

    def test_non_mapping_input(self):
        for value in (None, "PrivateKey=x", [("PrivateKey", "x")]):
            self.assertEqual(validate_form(value).errors, ["Form data is empty or invalid"], repr(value))

    def test_text_and_form_paths_agree_on_a_valid_record(self):
        from pywgcheck import build_config_text, validate_config

        self.assertTrue(validate_config(build_config_text(VALID_FORM)).valid)


if __name__ == '__main__':
    unittest.main()
