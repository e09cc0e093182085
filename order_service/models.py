"""
Order entity and its JSON mapping
"""
from dataclasses import dataclass, fields
from typing import Any, Dict


class OrderDecodeError(ValueError):
    """Raised when a request body cannot be decoded into an Order"""


@dataclass
class Order:
    id: str = ''
    name: str = ''
    order_items: str = ''
    total_items: str = ''
    payment: str = ''
    table_number: str = ''

    @classmethod
    def from_json(cls, data: Any) -> 'Order':
        """
        Build an Order from decoded JSON.

        Missing and null fields become empty strings, unknown keys are
        ignored. Anything that is not an object, or a field holding a
        non-string value, raises OrderDecodeError.
        """
        if not isinstance(data, dict):
            raise OrderDecodeError(f"expected a JSON object, got {type(data).__name__}")

        values = {}
        for field in fields(cls):
            value = data.get(field.name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise OrderDecodeError(
                    f"field '{field.name}' must be a string, got {type(value).__name__}"
                )
            values[field.name] = value
        return cls(**values)

    def to_json(self) -> Dict[str, str]:
        """Encode as a dict, leaving out empty fields"""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}
