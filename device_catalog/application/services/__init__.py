from .key_guard import ensure_key_available
from .reference_checker import ReferenceChecker

__all__ = ["ReferenceChecker", "ensure_key_available"]
