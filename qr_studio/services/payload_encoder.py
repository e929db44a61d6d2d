"""Encode structured template fields into standard QR payload strings.

Every encoder is a pure function ``fields -> str``. A missing required
field yields an empty string; optional fields that are empty are left out
of the payload entirely rather than emitted as empty key/value pairs.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from qr_studio.services.template_catalog import get_template
from qr_studio.utils.format_utils import (
    escape_text_value,
    escape_wifi_value,
    percent_encode,
    to_calendar_datetime,
)

logger = logging.getLogger(__name__)

Fields = Mapping[str, Any]

WIFI_ENCRYPTIONS = {
    "WPA": "WPA",
    "WPA2": "WPA",
    "WPA3": "WPA",
    "WEP": "WEP",
    "NOPASS": "nopass",
    "NONE": "nopass",
    "OPEN": "nopass",
}
DEFAULT_WIFI_ENCRYPTION = "WPA"

TRUTHY_VALUES = {"true", "1", "yes", "on"}


def _raw(fields: Fields, key: str) -> str:
    value = fields.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _value(fields: Fields, key: str) -> str:
    return _raw(fields, key).strip()


def _missing(template_id: str, key: str) -> str:
    logger.debug(f"Cannot encode {template_id} payload: missing required field '{key}'")
    return ""


def _compact_number(value: str) -> str:
    # tel:/sms: URIs allow visual separators like '-' but not whitespace
    return "".join(value.split())


def encode_url(fields: Fields) -> str:
    """Return the URL unchanged."""
    url = _raw(fields, "url")
    if not url.strip():
        return _missing("url", "url")
    return url


def encode_text(fields: Fields) -> str:
    """Return the text unchanged."""
    text = _raw(fields, "text")
    if not text.strip():
        return _missing("text", "text")
    return text


def encode_wifi(fields: Fields) -> str:
    """Encode network credentials as ``WIFI:T:<enc>;S:<ssid>;P:<password>;;``.

    The SSID and password are used verbatim (no trimming) and have
    ``\\ ; , :`` backslash-escaped. The encryption type defaults to WPA.
    The ``P:`` segment is omitted for open networks and empty passwords,
    and ``H:true`` is added for hidden networks.

    Example:
        encode_wifi({"ssid": "Home", "password": "p;w"})
        # Returns: "WIFI:T:WPA;S:Home;P:p\\;w;;"
    """
    ssid = _raw(fields, "ssid")
    if not ssid.strip():
        return _missing("wifi", "ssid")

    password = _raw(fields, "password")
    encryption = WIFI_ENCRYPTIONS.get(
        _value(fields, "encryption").upper(), DEFAULT_WIFI_ENCRYPTION
    )

    parts = [f"T:{encryption}", f"S:{escape_wifi_value(ssid)}"]
    if password and encryption != "nopass":
        parts.append(f"P:{escape_wifi_value(password)}")
    if _value(fields, "hidden").lower() in TRUTHY_VALUES:
        parts.append("H:true")
    return "WIFI:" + ";".join(parts) + ";;"


def encode_contact(fields: Fields) -> str:
    """Encode a contact as a vCard 3.0 block."""
    name = _value(fields, "name")
    if not name:
        return _missing("contact", "name")

    lines = ["BEGIN:VCARD", "VERSION:3.0", f"FN:{escape_text_value(name)}"]
    phone = _value(fields, "phone")
    if phone:
        lines.append(f"TEL:{phone}")
    email = _value(fields, "email")
    if email:
        lines.append(f"EMAIL:{email}")
    organization = _value(fields, "organization")
    if organization:
        lines.append(f"ORG:{escape_text_value(organization)}")
    title = _value(fields, "title")
    if title:
        lines.append(f"TITLE:{escape_text_value(title)}")
    url = _value(fields, "url")
    if url:
        lines.append(f"URL:{url}")
    lines.append("END:VCARD")
    return "\n".join(lines)


def encode_email(fields: Fields) -> str:
    """Encode a ``mailto:`` URI with optional subject and body."""
    address = _value(fields, "email")
    if not address:
        return _missing("email", "email")

    params = []
    subject = _raw(fields, "subject")
    if subject.strip():
        params.append(f"subject={percent_encode(subject)}")
    body = _raw(fields, "body")
    if body.strip():
        params.append(f"body={percent_encode(body)}")

    uri = f"mailto:{address}"
    if params:
        uri += "?" + "&".join(params)
    return uri


def encode_sms(fields: Fields) -> str:
    """Encode an ``sms:`` URI with an optional message body."""
    phone = _compact_number(_value(fields, "phone"))
    if not phone:
        return _missing("sms", "phone")
    message = _raw(fields, "message")
    if message.strip():
        return f"sms:{phone}?body={percent_encode(message)}"
    return f"sms:{phone}"


def encode_phone(fields: Fields) -> str:
    """Encode a ``tel:`` URI."""
    phone = _compact_number(_value(fields, "phone"))
    if not phone:
        return _missing("phone", "phone")
    return f"tel:{phone}"


def _coordinate(value: str, limit: float) -> bool:
    try:
        number = float(value)
    except ValueError:
        return False
    return -limit <= number <= limit


def encode_location(fields: Fields) -> str:
    """Encode a ``geo:<lat>,<lon>`` URI with an optional labelled query.

    Coordinates must be numbers within [-90, 90] and [-180, 180].
    """
    latitude = _value(fields, "latitude")
    if not latitude:
        return _missing("location", "latitude")
    longitude = _value(fields, "longitude")
    if not longitude:
        return _missing("location", "longitude")
    if not (_coordinate(latitude, 90.0) and _coordinate(longitude, 180.0)):
        logger.debug(f"Cannot encode location payload: invalid coordinates {latitude},{longitude}")
        return ""

    uri = f"geo:{latitude},{longitude}"
    label = _value(fields, "label")
    if label:
        uri += f"?q={latitude},{longitude}({percent_encode(label)})"
    return uri


def encode_event(fields: Fields) -> str:
    """Encode a calendar event as a vEvent block.

    Start and end accept datetimes or ISO 8601 strings and are written in
    the compact ``YYYYMMDDTHHMMSS`` form. An end value that cannot be
    parsed is left out.
    """
    title = _value(fields, "title")
    if not title:
        return _missing("event", "title")
    start = to_calendar_datetime(fields.get("start"))
    if not start:
        return _missing("event", "start")

    lines = ["BEGIN:VEVENT", f"SUMMARY:{escape_text_value(title)}"]
    location = _value(fields, "location")
    if location:
        lines.append(f"LOCATION:{escape_text_value(location)}")
    lines.append(f"DTSTART:{start}")
    end = to_calendar_datetime(fields.get("end"))
    if end:
        lines.append(f"DTEND:{end}")
    description = _value(fields, "description")
    if description:
        lines.append(f"DESCRIPTION:{escape_text_value(description)}")
    lines.append("END:VEVENT")
    return "\n".join(lines)


ENCODERS: dict[str, Callable[[Fields], str]] = {
    "url": encode_url,
    "text": encode_text,
    "wifi": encode_wifi,
    "contact": encode_contact,
    "email": encode_email,
    "sms": encode_sms,
    "phone": encode_phone,
    "location": encode_location,
    "event": encode_event,
}


def encode_payload(template_id: str, fields: Fields) -> str:
    """Encode fields with the encoder of the given template.

    Args:
        template_id: One of the catalogue template ids
        fields: Field values keyed by template field key

    Returns:
        The payload string, or "" if a required field is missing

    Raises:
        TemplateNotFoundError: If the template id is unknown
    """
    template = get_template(template_id)
    return ENCODERS[template.id](fields)
