from .transcribe import router as transcribe_router

__all__ = ["transcribe_router"]
