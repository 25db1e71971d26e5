"""
Form builder contract and registry.

Every claim type is one FormBuilder subclass registered under its
formType; the assembler only ever asks the registry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

from core.errors import UnsupportedFormTypeError
from core.layout import LayoutCursor

FormValues = Dict[str, Any]

AFFIRMATIVE = ("ja", "yes", "true", "on", "1")


@dataclass
class RenderContext:
    """Per-document values a builder needs besides the form values"""
    today: date = field(default_factory=date.today)
    footer_tag: str = ""
    wrap_chars: int = 90


def field_text(values: FormValues, key: str) -> str:
    """Field value as text; absent or None becomes ""."""
    value = values.get(key)
    if value is None:
        return ""
    return str(value)


def is_affirmative(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() in AFFIRMATIVE


class FormBuilder(ABC):
    """Draws one claim type's fields onto the cursor, top to bottom."""

    form_type: str = ""
    # Prefix for generated file names
    document_name: str = ""

    @abstractmethod
    def render(self, cursor: LayoutCursor, values: FormValues, context: RenderContext) -> None:
        """Draw the form and leave the cursor below the last line drawn."""
        ...


_REGISTRY: Dict[str, FormBuilder] = {}


def register_builder(builder: FormBuilder) -> FormBuilder:
    _REGISTRY[builder.form_type] = builder
    return builder


def get_builder(form_type: str) -> FormBuilder:
    try:
        return _REGISTRY[form_type]
    except KeyError:
        raise UnsupportedFormTypeError(f"Unsupported form type: {form_type!r}") from None


def registered_form_types() -> List[str]:
    return list(_REGISTRY)
