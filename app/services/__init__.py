from app.services.completion import CompletionProvider, CompletionResult, get_completion_provider
from app.services.ledger import compute_level

__all__ = ["CompletionProvider", "CompletionResult", "compute_level", "get_completion_provider"]
