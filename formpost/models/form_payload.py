"""Form payload model."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping


class MissingFieldError(LookupError):
    """Raised when a form has no field with the requested identifier."""

    def __init__(self, field_id: str):
        super().__init__(f"Form has no field '{field_id}'")
        self.field_id = field_id


def normalize_field_id(field_id: str) -> str:
    """Strip a leading ``#`` so ``#username`` and ``username`` match."""
    return field_id[1:] if field_id.startswith("#") else field_id


@dataclass
class FormPayload:
    """Field values read from a form at submit time."""

    fields: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_form(
        cls, values: Mapping[str, str], field_ids: Iterable[str]
    ) -> "FormPayload":
        """Read each of ``field_ids`` from ``values``."""
        fields = {}
        for field_id in field_ids:
            name = normalize_field_id(field_id)
            if name not in values:
                raise MissingFieldError(name)
            fields[name] = values[name]
        return cls(fields=fields)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.fields)
