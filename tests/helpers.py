"""Sample keys and configurations shared by the test modules."""

PRIVATE_KEY = "yAnz5TF+lXXJte14tji3zlMNq+hd2rYUIgJBgB3fBmk="
PUBLIC_KEY = "xTIBA5rboUvnH4htodjb6e697QjLERt1NAB4mZqp8Dg="
PRESHARED_KEY = "HIgo9xNzJMWLKASShiTqIybxZ0U3wGLiUeJ1PKf8ykw="

VALID_CONFIG = f"""[Interface]
PrivateKey = {PRIVATE_KEY}
Address = 10.0.0.2/24

[Peer]
PublicKey = {PUBLIC_KEY}
Endpoint = vpn.example.com:51820
AllowedIPs = 0.0.0.0/0
"""

VALID_FORM = {
    "PrivateKey": PRIVATE_KEY,
    "Address": "10.0.0.2/24",
    "DNS": "1.1.1.1, 8.8.8.8",
    "PublicKey": PUBLIC_KEY,
    "PreSharedKey": PRESHARED_KEY,
    "AllowedIPs": "0.0.0.0/0, ::/0",
    "PersistentKeepAlive": "25",
    "Endpoint": "vpn.example.com:51820",
}
