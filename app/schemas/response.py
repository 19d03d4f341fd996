from pydantic import BaseModel
from typing import Optional, Any

class ErrorResponse(BaseModel):
    """
    Standard error response structure.
    `success` is always False so the dashboard can branch on one field.
    """
    success: bool = False
    error: str
    code: str
    details: Optional[Any] = None
