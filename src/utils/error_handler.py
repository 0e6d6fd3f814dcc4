"""
Error handling utilities
"""

from typing import Optional
from src.models.response import ErrorResponse
from src.utils.logger import logger


class DashboardError(Exception):
    """Base exception for dashboard errors"""
    pass


class APIError(DashboardError):
    """Backend API error exception"""
    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(DashboardError):
    """Validation error exception"""
    pass


def handle_error(error: Exception) -> ErrorResponse:
    """
    Handle error and return user-friendly message
    
    Args:
        error: Exception to handle
        
    Returns:
        ErrorResponse with user-friendly message
    """
    logger.error(f"Error occurred: {error}", exc_info=True)
    
    if isinstance(error, APIError):
        return ErrorResponse(
            message=f"Erro na API: {error.message}",
            error_code=error.error_code,
        )
    
    if isinstance(error, ValidationError):
        return ErrorResponse(
            message=f"Erro de validação: {str(error)}",
        )
    
    # Generic error message
    return ErrorResponse(
        message="Ocorreu um erro. Tente novamente mais tarde ou contate o administrador.",
    )
