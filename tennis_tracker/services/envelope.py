"""
Envelope de respuestas
======================

Toda respuesta de la API tiene la forma:
    {"success": 1, "error": "0", "result": [...]}

La API indica "no hay datos para estos filtros" con error == "1" (o
success != 1), no con un error HTTP. Eso se traduce en una lista vacía,
no en una excepción.
"""

import logging
from typing import Any, List

from ..exceptions import DecodingError
from ..utils.decoding import decode_flexible

logger = logging.getLogger(__name__)


def _error_messages(result: Any) -> str:
    if not isinstance(result, list):
        return ""
    messages = [str(item.get("msg")) for item in result if isinstance(item, dict) and item.get("msg")]
    return ", ".join(messages)


def unwrap_envelope(payload: Any, method: str = "", result_required: bool = False) -> List[Any]:
    """
    Extrae la lista "result" de una respuesta

    Args:
        payload: JSON de la respuesta ya decodificado
        method: Método de la API (solo para logs)
        result_required: Si True, un "result" ausente o null es un DecodingError
            (get_events); si False, se devuelve lista vacía

    Returns:
        Lista de registros crudos (vacía si la API no tiene datos)

    Raises:
        DecodingError: Si la respuesta no es un objeto o "result" no es una lista
    """
    if not isinstance(payload, dict):
        raise DecodingError("envelope", "response is not a JSON object")

    if decode_flexible(payload.get("error")) == "1":
        messages = _error_messages(payload.get("result"))
        logger.warning(f"⚠️  API sin datos para {method or 'petición'}: {messages or 'error=1'}")
        return []

    success = payload.get("success")
    if success is not None and decode_flexible(success) != "1":
        logger.warning(f"⚠️  API devolvió success={success!r} para {method or 'petición'}")
        return []

    result = payload.get("result")
    if result is None:
        if result_required:
            raise DecodingError("result", "missing")
        return []

    if not isinstance(result, list):
        raise DecodingError("result", f"expected a list, got {type(result).__name__}")

    return result
