"""
Excepciones del sistema
=======================

Jerarquía:
- TennisDataError
    - TransportError: fallo del transporte (URL, HTTP, red)
    - DecodingError: un campo obligatorio no coincide con ninguna
      representación aceptada

Un "sin datos" de la API (error == "1") NO es una excepción: el
repositorio devuelve una colección vacía.
"""

from typing import Optional


class TennisDataError(Exception):
    """Error base de tennis_tracker"""


class TransportError(TennisDataError):
    """Fallo reportado por el transporte; el llamador decide si reintenta"""


class InvalidURLError(TransportError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url}")


class InvalidResponseError(TransportError):
    def __init__(self, message: str = "Invalid response"):
        super().__init__(message)


class HTTPStatusError(TransportError):
    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error with status code: {status_code}")


class NetworkError(TransportError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class DecodingError(TennisDataError):
    """
    Un campo obligatorio falta o no tiene una representación válida

    Attributes:
        field: Nombre del campo en el payload (ej: "event_key")
        reason: Descripción corta del problema
    """

    def __init__(self, field: str, reason: Optional[str] = None):
        self.field = field
        self.reason = reason or "missing or invalid value"
        super().__init__(f"Decoding error in field '{field}': {self.reason}")
