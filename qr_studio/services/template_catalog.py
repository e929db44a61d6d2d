"""Catalogue of structured payload templates."""

from qr_studio.exceptions import TemplateNotFoundError
from qr_studio.models import Template, TemplateField

TEMPLATES: tuple[Template, ...] = (
    Template(
        id="url",
        name="URL / Website",
        icon="globe-outline",
        fields=(TemplateField("url", "URL", "https://example.com", required=True),),
    ),
    Template(
        id="text",
        name="Plain Text",
        icon="document-text-outline",
        fields=(
            TemplateField("text", "Text", "Enter any text", multiline=True, required=True),
        ),
    ),
    Template(
        id="wifi",
        name="WiFi Network",
        icon="wifi-outline",
        fields=(
            TemplateField("ssid", "Network Name (SSID)", "MyNetwork", required=True),
            TemplateField("password", "Password", "Network password", secure=True),
            TemplateField("encryption", "Encryption", "WPA, WEP or nopass"),
            TemplateField("hidden", "Hidden Network", "true or false"),
        ),
    ),
    Template(
        id="contact",
        name="Contact Card",
        icon="person-outline",
        fields=(
            TemplateField("name", "Full Name", "Jane Doe", required=True),
            TemplateField("phone", "Phone", "+1 415 555 1212"),
            TemplateField("email", "Email", "jane@example.com"),
            TemplateField("organization", "Organization", "Example Inc."),
            TemplateField("title", "Job Title", "Engineer"),
            TemplateField("url", "Website", "https://example.com"),
        ),
    ),
    Template(
        id="email",
        name="Email",
        icon="mail-outline",
        fields=(
            TemplateField("email", "Email Address", "someone@example.com", required=True),
            TemplateField("subject", "Subject", "Hello"),
            TemplateField("body", "Message", "Write your message", multiline=True),
        ),
    ),
    Template(
        id="sms",
        name="SMS Message",
        icon="chatbubble-outline",
        fields=(
            TemplateField("phone", "Phone Number", "+1 415 555 1212", required=True),
            TemplateField("message", "Message", "Write your message", multiline=True),
        ),
    ),
    Template(
        id="phone",
        name="Phone Number",
        icon="call-outline",
        fields=(TemplateField("phone", "Phone Number", "+1 415 555 1212", required=True),),
    ),
    Template(
        id="location",
        name="Location",
        icon="location-outline",
        fields=(
            TemplateField("latitude", "Latitude", "37.7749", required=True),
            TemplateField("longitude", "Longitude", "-122.4194", required=True),
            TemplateField("label", "Label", "San Francisco"),
        ),
    ),
    Template(
        id="event",
        name="Calendar Event",
        icon="calendar-outline",
        fields=(
            TemplateField("title", "Event Title", "Team meeting", required=True),
            TemplateField("location", "Location", "Conference room"),
            TemplateField("start", "Start", "2024-05-01T10:00", required=True),
            TemplateField("end", "End", "2024-05-01T11:00"),
            TemplateField("description", "Description", "Agenda", multiline=True),
        ),
    ),
)

_TEMPLATES_BY_ID = {template.id: template for template in TEMPLATES}


def get_templates() -> list[Template]:
    """Return every template in display order."""
    return list(TEMPLATES)


def get_template(template_id: str) -> Template:
    """Look up a template by id.

    Raises:
        TemplateNotFoundError: If no template has this id
    """
    try:
        return _TEMPLATES_BY_ID[template_id]
    except KeyError:
        raise TemplateNotFoundError(template_id) from None
