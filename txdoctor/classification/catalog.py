"""Ordered, immutable catalog of known transaction failure patterns."""

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from txdoctor.classification.models import ErrorPattern


class PatternCatalog:
    """Read-only sequence of error patterns in match priority order.

    The first entry whose substrings occur in a search text wins, so the
    order entries are given in is the order they are tried in.
    """

    def __init__(self, entries: Iterable[ErrorPattern]) -> None:
        normalized: list[ErrorPattern] = []
        by_key: dict[str, ErrorPattern] = {}
        for entry in entries:
            if not entry.patterns:
                raise ValueError(f"Error pattern '{entry.key}' has no substrings")
            if entry.key in by_key:
                raise ValueError(f"Duplicate error pattern key: {entry.key}")
            lowered = ErrorPattern(
                key=entry.key,
                category=entry.category,
                patterns=tuple(p.lower() for p in entry.patterns),
            )
            by_key[entry.key] = lowered
            normalized.append(lowered)
        self._entries = tuple(normalized)
        self._by_key = MappingProxyType(by_key)

    def __iter__(self) -> Iterator[ErrorPattern]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def keys(self) -> tuple[str, ...]:
        return tuple(entry.key for entry in self._entries)

    def get(self, key: str) -> ErrorPattern | None:
        return self._by_key.get(key)


DEFAULT_CATALOG = PatternCatalog(
    [
        ErrorPattern(
            key="OUT_OF_GAS",
            category="Gas Error",
            patterns=("out of gas", "gas required exceeds allowance", "intrinsic gas too low"),
        ),
        ErrorPattern(
            key="REVERT_NO_REASON",
            category="Execution Revert",
            patterns=("execution reverted", "transaction reverted"),
        ),
        ErrorPattern(
            key="SLIPPAGE",
            category="Slippage Error",
            patterns=(
                "insufficient output amount",
                "excessive input amount",
                "uniswapv2: k",
                "slippage",
            ),
        ),
        ErrorPattern(
            key="ALLOWANCE",
            category="Allowance Error",
            patterns=(
                "allowance",
                "transfer amount exceeds allowance",
                "erc20: insufficient allowance",
            ),
        ),
        ErrorPattern(
            key="BALANCE",
            category="Balance Error",
            patterns=(
                "insufficient balance",
                "transfer amount exceeds balance",
                "erc20: transfer amount exceeds balance",
            ),
        ),
        ErrorPattern(
            key="DEADLINE",
            category="Deadline Error",
            patterns=("transaction too old", "expired", "deadline"),
        ),
        ErrorPattern(
            key="REENTRANCY",
            category="Reentrancy Guard",
            patterns=("reentrant call", "reentrancy guard"),
        ),
        ErrorPattern(
            key="OWNERSHIP",
            category="Access Control Error",
            patterns=(
                "ownable: caller is not the owner",
                "not authorized",
                "access denied",
                "onlyowner",
            ),
        ),
        ErrorPattern(
            key="PAUSED",
            category="Contract Paused",
            patterns=("paused", "contract is paused", "pausable: paused"),
        ),
        ErrorPattern(
            key="NONCE",
            category="Nonce Error",
            patterns=("nonce too low", "nonce too high", "replacement transaction underpriced"),
        ),
    ]
)
