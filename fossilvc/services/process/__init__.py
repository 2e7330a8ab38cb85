"""
Process services for fossilvc.

Services:
- ProcessInvoker: Run the fossil executable and normalize its result
"""

from .invoker import DEFAULT_EXECUTABLE, DEFAULT_TIMEOUT, ProcessInvoker

__all__ = [
    "DEFAULT_EXECUTABLE",
    "DEFAULT_TIMEOUT",
    "ProcessInvoker",
]
