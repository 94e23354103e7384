from dataclasses import dataclass, field
from typing import Any

from txdoctor.classification.models import UNKNOWN_RESULT, ClassificationResult


@dataclass(frozen=True)
class NormalizedContext:
    """Display-ready transaction failure context with every field resolved."""

    hash: str
    status: str
    gas_used: str
    gas_limit: str
    gas_price: str
    from_address: str
    to_address: str
    value: str
    nonce: str
    error: str
    revert_reason: str
    contract_address: str
    contract_name: str
    function_name: str
    input_data: str
    network: str
    timestamp: str
    error_category: ClassificationResult = UNKNOWN_RESULT
    additional_context: dict[str, Any] = field(default_factory=dict)

    def as_payload(self) -> dict[str, object]:
        """Return the camelCase JSON shape used on the wire."""
        return {
            "hash": self.hash,
            "status": self.status,
            "errorCategory": self.error_category.as_payload(),
            "gasUsed": self.gas_used,
            "gasLimit": self.gas_limit,
            "gasPrice": self.gas_price,
            "from": self.from_address,
            "to": self.to_address,
            "value": self.value,
            "nonce": self.nonce,
            "error": self.error,
            "revertReason": self.revert_reason,
            "contractAddress": self.contract_address,
            "contractName": self.contract_name,
            "functionName": self.function_name,
            "inputData": self.input_data,
            "network": self.network,
            "timestamp": self.timestamp,
            "additionalContext": dict(self.additional_context),
        }
