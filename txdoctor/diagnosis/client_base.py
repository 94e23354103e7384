from abc import ABC, abstractmethod


class BaseDiagnosisClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        messages: list[dict[str, str]],
    ) -> str:
        """Return the assistant reply for the conversation as plain text.

        Args:
            messages: Conversation so far as role/content dicts, alternating
                user and assistant and ending with a user turn.
        """
