"""Business logic services for QR Studio."""

from .action_invoker import ActionInvoker
from .action_resolver import build_open_target, geo_to_maps_link, resolve
from .content_classifier import classify
from .history_store import HistoryStore
from .payload_encoder import (
    encode_contact,
    encode_email,
    encode_event,
    encode_location,
    encode_payload,
    encode_phone,
    encode_sms,
    encode_text,
    encode_url,
    encode_wifi,
)
from .template_catalog import get_template, get_templates

__all__ = [
    "classify",
    "resolve",
    "build_open_target",
    "geo_to_maps_link",
    "encode_payload",
    "encode_url",
    "encode_text",
    "encode_wifi",
    "encode_contact",
    "encode_email",
    "encode_sms",
    "encode_phone",
    "encode_location",
    "encode_event",
    "get_templates",
    "get_template",
    "HistoryStore",
    "ActionInvoker",
]
