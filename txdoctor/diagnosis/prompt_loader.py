from pathlib import Path

from txdoctor.diagnosis.exceptions import DiagnosisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_PROMPT = "system_prompt.txt"
DIAGNOSIS_PROMPT = "diagnosis_prompt.txt"
CODE_FIX_PROMPT = "code_fix_prompt.txt"
RISK_ASSESSMENT_PROMPT = "risk_assessment_prompt.txt"


def load_prompt(name: str, path: Path | None = None) -> str:
    """Load a prompt text file.

    Args:
        name: File name of a bundled prompt under diagnosis/prompts.
        path: Explicit path that overrides the bundled file.

    Returns:
        The raw prompt text, placeholders included.

    Raises:
        DiagnosisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DiagnosisError(f"Failed to load prompt '{name}': {exc}") from exc
