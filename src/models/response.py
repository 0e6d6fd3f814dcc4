"""
Error payload built by handle_error and returned by the web error handlers
"""

from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response model"""
    message: str
    error_code: Optional[str] = None
    details: Optional[dict] = None
