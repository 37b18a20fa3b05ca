"""
Modelos Pydantic de la API REST (respuestas que no son entidades de dominio)
"""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response del health check"""
    status: str = Field(..., description="'ok' o 'degraded'")
    version: str
    api_key_configured: bool


class ErrorResponse(BaseModel):
    """Response de error"""
    error: str = Field(..., description="Tipo de error (transport, decoding)")
    detail: str
    field: Optional[str] = Field(None, description="Campo inválido (solo errores de decodificación)")

    class Config:
        json_schema_extra = {
            "example": {
                "error": "decoding",
                "detail": "Decoding error in field 'event_key': missing",
                "field": "event_key"
            }
        }
