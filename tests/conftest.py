from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture()
def allowance_record() -> dict[str, object]:
    """A fully populated allowance failure in wire (camelCase) format."""
    return {
        "hash": "0xabc",
        "network": "Polygon",
        "from": "0xUser",
        "to": "0xAaveV3Pool",
        "contractName": "Aave V3 Lending Pool",
        "functionName": "supply",
        "gasUsed": "45231",
        "gasLimit": "300000",
        "gasPrice": "100 Gwei",
        "value": "0",
        "nonce": "156",
        "error": "execution reverted",
        "revertReason": "ERC20: transfer amount exceeds allowance",
        "inputData": "0x617ba037",
        "timestamp": "2024-01-15T14:20:30Z",
        "additionalContext": {"token": "USDT", "currentAllowance": "0 USDT"},
    }
