"""Offline diagnosis client.

Returns canned markdown for each conversation turn. Useful for local
development, demos without an API key, and tests.
"""

from typing import ClassVar

from txdoctor.diagnosis.client_base import BaseDiagnosisClient


class ExampleClientAdapter(BaseDiagnosisClient):
    """Replies by turn number; ignores model settings and prompt contents."""

    TURN_REPLIES: ClassVar[tuple[str, ...]] = (
        "- **Root Cause**: The transaction reverted during execution.\n"
        "- **Severity**: Medium",
        "```text\nReview the failing parameter, then retry.\n```\n"
        "1. Re-check parameters\n2. Re-estimate gas\n3. Retry",
        "1. Only the gas fee was spent.\n"
        "2. No security concerns detected.\n"
        "3. Confidence: Low (offline example reply).",
    )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        messages: list[dict[str, str]],
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt
        user_turns = sum(1 for message in messages if message.get("role") == "user")
        index = min(max(user_turns, 1), len(self.TURN_REPLIES)) - 1
        return self.TURN_REPLIES[index]
