"""
QR Studio - QR payload encoding, classification and history

Encodes structured input (WiFi credentials, contacts, events, ...) into
standard QR payload strings, classifies arbitrary payloads back into
content types, and keeps a bounded, searchable history of them.
"""

__version__ = "1.0.0"
__author__ = "QR Studio Contributors"
