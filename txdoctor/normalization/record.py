"""Coerces arbitrary request bodies into TransactionFailureRecord."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TransactionFailureRecord:
    """A partially populated description of a failed transaction.

    Every field is optional. Values are either a string or None, except
    additional_context which is a dict or None.
    """

    hash: str | None = None
    status: str | None = None
    gas_used: str | None = None
    gas_limit: str | None = None
    gas_price: str | None = None
    from_address: str | None = None
    to_address: str | None = None
    value: str | None = None
    nonce: str | None = None
    error: str | None = None
    revert_reason: str | None = None
    error_message: str | None = None
    contract_address: str | None = None
    contract_name: str | None = None
    function_name: str | None = None
    input_data: str | None = None
    network: str | None = None
    timestamp: str | None = None
    additional_context: dict[str, Any] | None = None


# Wire keys are camelCase; snake_case aliases are accepted as well.
_DISPLAY_FIELDS: dict[str, tuple[str, ...]] = {
    "hash": ("hash",),
    "status": ("status",),
    "gas_used": ("gasUsed", "gas_used"),
    "gas_limit": ("gasLimit", "gas_limit"),
    "gas_price": ("gasPrice", "gas_price"),
    "from_address": ("from", "from_address", "fromAddress"),
    "to_address": ("to", "to_address", "toAddress"),
    "value": ("value",),
    "nonce": ("nonce",),
    "contract_address": ("contractAddress", "contract_address"),
    "contract_name": ("contractName", "contract_name"),
    "function_name": ("functionName", "function_name"),
    "input_data": ("inputData", "input_data"),
    "network": ("network",),
    "timestamp": ("timestamp",),
}

_ERROR_TEXT_FIELDS: dict[str, tuple[str, ...]] = {
    "error": ("error",),
    "revert_reason": ("revertReason", "revert_reason"),
    "error_message": ("errorMessage", "error_message"),
}

_ADDITIONAL_CONTEXT_KEYS = ("additionalContext", "additional_context")


def build_record(data: object) -> TransactionFailureRecord:
    """Build a TransactionFailureRecord from any object.

    Never raises. Non-mapping input yields an empty record; values of an
    unexpected shape are dropped instead of rejected.
    """
    if isinstance(data, TransactionFailureRecord):
        return data
    if not isinstance(data, Mapping):
        return TransactionFailureRecord()

    fields: dict[str, Any] = {}
    for name, keys in _DISPLAY_FIELDS.items():
        fields[name] = _first(data, keys, _as_display_text)
    for name, keys in _ERROR_TEXT_FIELDS.items():
        fields[name] = _first(data, keys, _as_error_text)
    fields["additional_context"] = _first(data, _ADDITIONAL_CONTEXT_KEYS, _as_context)
    return TransactionFailureRecord(**fields)


def _first(data: Mapping[Any, Any], keys: tuple[str, ...], coerce: Any) -> Any:
    for key in keys:
        if key not in data:
            continue
        value = coerce(data[key])
        if value is not None:
            return value
    return None


def _as_error_text(raw: Any) -> str | None:
    return raw if isinstance(raw, str) else None


def _as_display_text(raw: Any) -> str | None:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        # Zero is falsy and falls back to the field default.
        return str(raw) if raw else None
    return None


def _as_context(raw: Any) -> dict[str, Any] | None:
    if not isinstance(raw, Mapping):
        return None
    return {str(key): value for key, value in raw.items()}
