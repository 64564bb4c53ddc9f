from .retry_utils import call_with_retry

__all__ = ["call_with_retry"]
