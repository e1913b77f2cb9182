"""Host-side form and event stand-ins for the submit pipeline."""

from dataclasses import dataclass, field
from typing import Dict

from ..models.form_payload import MissingFieldError, normalize_field_id


@dataclass
class Form:
    """A form's identity and its current field values."""

    form_id: str
    values: Dict[str, str] = field(default_factory=dict)

    def value(self, field_id: str) -> str:
        name = normalize_field_id(field_id)
        if name not in self.values:
            raise MissingFieldError(name)
        return self.values[name]


@dataclass
class FormEvent:
    """A submit or click event raised on ``form``."""

    form: Form
    type: str = "submit"
    default_prevented: bool = False

    def prevent_default(self):
        self.default_prevented = True
