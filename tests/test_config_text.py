import unittest

from pywgcheck import build_config_text, parse_config_sections, validate_config
from tests.helpers import PRESHARED_KEY, PRIVATE_KEY, PUBLIC_KEY, VALID_FORM


class TestBuildConfigText(unittest.TestCase):

    def test_full_record(self):
        expected = (
            "[Interface]\n"
            f"PrivateKey = {PRIVATE_KEY}\n"
            "Address = 10.0.0.2/24\n"
            "DNS = 1.1.1.1, 8.8.8.8\n"
            "\n"
            "[Peer]\n"
            f"PublicKey = {PUBLIC_KEY}\n"
            f"PreSharedKey = {PRESHARED_KEY}\n"
            "AllowedIPs = 0.0.0.0/0, ::/0\n"
            "PersistentKeepAlive = 25\n"
            "Endpoint = vpn.example.com:51820"
        )
        self.assertEqual(build_config_text(VALID_FORM), expected)

    def test_absent_fields_are_omitted(self):
        fields = {key: value for key, value in VALID_FORM.items() if key not in ("DNS", "PreSharedKey")}
        fields["PersistentKeepAlive"] = ""
        text = build_config_text(fields)
        self.assertNotIn("DNS", text)
        self.assertNotIn("PreSharedKey", text)
        self.assertNotIn("PersistentKeepAlive", text)

    def test_zero_keepalive_is_written(self):
        fields = dict(VALID_FORM, PersistentKeepAlive=0)
        self.assertIn("PersistentKeepAlive = 0", build_config_text(fields))

    def test_output_parses_back_to_the_record(self):
        sections = parse_config_sections(build_config_text(VALID_FORM))
        merged = {**sections.interface, **sections.peer}
        self.assertEqual(merged, VALID_FORM)
        self.assertTrue(validate_config(build_config_text(VALID_FORM)).valid)


if __name__ == '__main__':
    unittest.main()
