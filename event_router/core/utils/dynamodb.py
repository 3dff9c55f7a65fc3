from base64 import b64decode
from binascii import Error as Base64Error
from typing import Any, Callable

from boto3.dynamodb.types import TypeDeserializer


class AttributeDeserializer(TypeDeserializer):
    """TypeDeserializer that yields plain Python values and never raises on bad input.

    Numbers become ``int`` or ``float`` instead of ``Decimal``, binary values become
    ``bytes`` (stream records carry them base64 encoded) and unknown type tags
    become ``None``.
    """

    def deserialize(self, value: Any) -> Any:
        if not isinstance(value, dict) or len(value) != 1:
            return None

        (dynamodb_type,) = value
        if not hasattr(self, f"_deserialize_{dynamodb_type}".lower()):
            return None

        return super().deserialize(value)

    def _deserialize_n(self, value: str) -> int | float | None:
        try:
            if "." in value or "e" in value.lower():
                return float(value)
            return int(value)
        except (AttributeError, TypeError, ValueError):
            return None

    def _deserialize_b(self, value: str | bytes) -> bytes | None:
        try:
            if isinstance(value, str):
                return b64decode(value, validate=True)
            return bytes(value)
        except (Base64Error, TypeError, ValueError):
            return None

    def _deserialize_l(self, value: list) -> list | None:
        if not isinstance(value, list):
            return None
        return [self.deserialize(v) for v in value]

    def _deserialize_m(self, value: dict) -> dict[str, Any] | None:
        if not isinstance(value, dict):
            return None
        return {k: self.deserialize(v) for k, v in value.items()}

    def _deserialize_ss(self, value: list) -> set | None:
        return self._as_set(value, lambda v: v)

    def _deserialize_ns(self, value: list) -> set | None:
        return self._as_set(value, self._deserialize_n)

    def _deserialize_bs(self, value: list) -> set | None:
        return self._as_set(value, self._deserialize_b)

    def _as_set(
        self, value: list, deserialize: Callable[[Any], Any]
    ) -> set | None:
        if not isinstance(value, list):
            return None
        try:
            return set(map(deserialize, value))
        except TypeError:
            # Unhashable members
            return None


_deserializer = AttributeDeserializer()


def unmarshall(item: dict[str, Any]) -> dict[str, Any]:
    """Convert a DynamoDB attribute value map into plain Python values."""
    return {key: _deserializer.deserialize(value) for key, value in item.items()}
