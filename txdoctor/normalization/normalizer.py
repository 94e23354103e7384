"""Builds the canonical, fully defaulted context for a failed transaction."""

from collections.abc import Callable
from datetime import datetime, timezone

from txdoctor.classification.classifier import Classifier
from txdoctor.normalization.models import NormalizedContext
from txdoctor.normalization.record import build_record

Clock = Callable[[], datetime]

NOT_AVAILABLE = "N/A"
DEFAULT_STATUS = "failed"
DEFAULT_VALUE = "0"
DEFAULT_ERROR = "No error message"
DEFAULT_REVERT_REASON = "No revert reason"
DEFAULT_CONTRACT_NAME = "Unknown Contract"
DEFAULT_FUNCTION_NAME = "Unknown Function"
DEFAULT_NETWORK = "Ethereum Mainnet"


def system_clock() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render a datetime as ISO-8601 UTC with millisecond precision and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Normalizer:
    """Resolves every canonical field of a failure record to a concrete value."""

    def __init__(
        self,
        classifier: Classifier | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._classifier = classifier or Classifier()
        self._clock = clock or system_clock

    def normalize(self, record: object) -> NormalizedContext:
        """Normalize any object-shaped input. Never raises and never mutates it.

        The clock is read only when the input carries no timestamp.
        """
        rec = build_record(record)
        return NormalizedContext(
            hash=rec.hash or NOT_AVAILABLE,
            status=rec.status or DEFAULT_STATUS,
            error_category=self._classifier.classify(rec),
            gas_used=rec.gas_used or NOT_AVAILABLE,
            gas_limit=rec.gas_limit or NOT_AVAILABLE,
            gas_price=rec.gas_price or NOT_AVAILABLE,
            from_address=rec.from_address or NOT_AVAILABLE,
            to_address=rec.to_address or NOT_AVAILABLE,
            value=rec.value or DEFAULT_VALUE,
            nonce=rec.nonce or NOT_AVAILABLE,
            error=rec.error or DEFAULT_ERROR,
            revert_reason=rec.revert_reason or DEFAULT_REVERT_REASON,
            # A missing contract address falls back to the recipient address.
            contract_address=rec.contract_address or rec.to_address or NOT_AVAILABLE,
            contract_name=rec.contract_name or DEFAULT_CONTRACT_NAME,
            function_name=rec.function_name or DEFAULT_FUNCTION_NAME,
            input_data=rec.input_data or NOT_AVAILABLE,
            network=rec.network or DEFAULT_NETWORK,
            timestamp=rec.timestamp or format_timestamp(self._clock()),
            additional_context=dict(rec.additional_context or {}),
        )


def normalize(record: object, clock: Clock | None = None) -> NormalizedContext:
    """Normalize with the default classifier and the given (or system) clock."""
    return Normalizer(clock=clock).normalize(record)
