"""WiFi QR code payload building and SVG rendering."""

import io
import qrcode
import qrcode.image.svg
from qrcode.constants import ERROR_CORRECT_M
from shared.domain.consts import WifiSecurity

# Characters that carry meaning inside a WIFI: payload field
_SPECIAL_CHARS = ("\\", ";", ",", ":", '"')


def escape_wifi_field(value: str) -> str:
    """Backslash-escape the characters that delimit WIFI: payload fields."""
    if value is None:
        return ""
    escaped = value
    for char in _SPECIAL_CHARS:
        escaped = escaped.replace(char, "\\" + char)
    return escaped


def build_wifi_payload(
    network_name: str,
    password: str,
    security: str = WifiSecurity.WPA,
    hidden: bool = False,
) -> str:
    """
    Build the string phones decode to join a network.

    Format: WIFI:T:<security>;S:<network>;P:<password>;H:<hidden>;;

    Raises:
        ValueError: If security is not WPA, WEP or nopass.
    """
    try:
        security_value = WifiSecurity(security).value
    except ValueError:
        raise ValueError(f"Unknown WiFi security type: {security}")

    return (
        f"WIFI:T:{security_value};"
        f"S:{escape_wifi_field(network_name)};"
        f"P:{escape_wifi_field(password)};"
        f"H:{'true' if hidden else 'false'};;"
    )


def render_qr_svg(payload: str, border: int = 4) -> bytes:
    """Render payload as a standalone SVG document."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_M,
        box_size=10,
        border=border,
        image_factory=qrcode.image.svg.SvgImage,
    )
    qr.add_data(payload)
    qr.make(fit=True)

    buffer = io.BytesIO()
    qr.make_image().save(buffer)
    return buffer.getvalue()
