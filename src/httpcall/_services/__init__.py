from .api_call_service import ApiCallService

__all__ = ["ApiCallService"]
