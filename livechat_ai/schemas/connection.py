from pydantic import BaseModel
from typing import Optional


class ConnectionTestRequest(BaseModel):
    # the dashboard also posts test_message; unknown fields are ignored
    provider: Optional[str] = None
    api_key: Optional[str] = None
    model: Optional[str] = None


class ConnectionTestResponse(BaseModel):
    success: bool
    response: Optional[str] = None
    provider: Optional[str] = None
    model: Optional[str] = None
    error: Optional[str] = None
    status_code: Optional[int] = None
