from .ab_test_executor import ABTestExecutor

__all__ = ["ABTestExecutor"]
