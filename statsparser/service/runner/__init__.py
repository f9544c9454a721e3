from .captured_runner import CapturedRunner
from .runner import ExecutionService

__all__ = ["CapturedRunner", "ExecutionService"]
