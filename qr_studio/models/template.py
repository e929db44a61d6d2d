"""Data models for structured payload templates."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TemplateField:
    """A single input field of a template."""

    key: str
    label: str
    placeholder: str = ""
    multiline: bool = False
    secure: bool = False
    required: bool = False


@dataclass(frozen=True)
class Template:
    """A named input schema that a payload encoder turns into a payload."""

    id: str
    name: str
    icon: str
    fields: tuple[TemplateField, ...] = field(default_factory=tuple)

    @property
    def required_keys(self) -> list[str]:
        """Keys of the fields that must be non-empty to encode."""
        return [f.key for f in self.fields if f.required]

    @property
    def field_keys(self) -> list[str]:
        """All field keys in display order."""
        return [f.key for f in self.fields]
