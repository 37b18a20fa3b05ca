"""
API-Tennis Client
=================

Transporte HTTP para api-tennis.com: dado un método de la API y sus
parámetros devuelve los bytes crudos de la respuesta o lanza un
TransportError. No interpreta el contenido; eso es trabajo de
TennisRepository.

Documentación: https://api-tennis.com/documentation
"""

import logging
import time
from typing import Dict, Optional

import requests

from ..config import Config
from ..exceptions import (
    HTTPStatusError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
)
from .api_constants import Methods, Parameters

logger = logging.getLogger(__name__)


class APITennisClient:
    """
    Cliente para API-Tennis (api-tennis.com)

    Reintenta solo los timeouts, con backoff exponencial (1s, 2s, 4s...).
    Cualquier otro fallo se lanza al primer intento.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        connect_timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
    ):
        """
        Args:
            api_key: API key (por defecto Config.API_TENNIS_API_KEY)
            base_url: URL base (por defecto Config.API_TENNIS_BASE_URL)
            timeout: Timeout de lectura en segundos
            connect_timeout: Timeout de conexión en segundos
            max_retries: Intentos máximos ante timeout
        """
        self.api_key = api_key if api_key is not None else Config.API_TENNIS_API_KEY
        if not self.api_key:
            logger.warning("⚠️  API_TENNIS_API_KEY no configurada")

        self.base_url = base_url or Config.API_TENNIS_BASE_URL
        self.timeout = (
            connect_timeout or Config.API_TENNIS_CONNECT_TIMEOUT,
            timeout or Config.API_TENNIS_TIMEOUT,
        )
        self.max_retries = max(1, max_retries or Config.API_TENNIS_MAX_RETRIES)

        # Rate limit tracking
        self.requests_made = 0

        logger.info("✅ APITennisClient inicializado")

    def request(self, method: str, params: Optional[Dict[str, str]] = None) -> bytes:
        """
        Hace una petición GET a la API

        Args:
            method: Método de la API (get_fixtures, get_livescore, etc.)
            params: Parámetros adicionales (filtros)

        Returns:
            Cuerpo de la respuesta en bytes

        Raises:
            InvalidURLError: Si la URL base no es válida
            HTTPStatusError: Si la respuesta no es 2xx
            InvalidResponseError: Si no hay cuerpo que devolver
            NetworkError: Fallo de red o timeout tras agotar reintentos
        """
        request_params = {Parameters.METHOD: method, Parameters.API_KEY: self.api_key}
        if params:
            request_params.update(params)

        for attempt in range(self.max_retries):
            try:
                response = requests.get(self.base_url, params=request_params, timeout=self.timeout)
            except requests.exceptions.Timeout as e:
                if attempt < self.max_retries - 1:
                    wait_time = 2 ** attempt  # Backoff: 1s, 2s, 4s
                    logger.warning(
                        f"⚠️  Timeout en intento {attempt + 1}/{self.max_retries}, reintentando en {wait_time}s..."
                    )
                    time.sleep(wait_time)
                    continue
                logger.error(f"❌ Timeout después de {self.max_retries} intentos")
                raise NetworkError(e) from e
            except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema,
                    requests.exceptions.InvalidSchema) as e:
                logger.error(f"❌ URL inválida: {self.base_url}")
                raise InvalidURLError(self.base_url) from e
            except requests.exceptions.RequestException as e:
                logger.error(f"❌ Error en petición a API-Tennis: {e}")
                raise NetworkError(e) from e

            # Actualizar contador de requests
            self.requests_made += 1
            logger.debug(f"📊 Requests hechos: {self.requests_made}")

            if not 200 <= response.status_code < 300:
                logger.error(f"❌ API-Tennis devolvió HTTP {response.status_code} para {method}")
                raise HTTPStatusError(response.status_code)

            if not response.content:
                raise InvalidResponseError(f"Respuesta sin cuerpo para {method}")

            return response.content

        # max_retries >= 1 garantiza que el bucle devuelve o lanza
        raise InvalidResponseError(f"Sin respuesta para {method}")

    def get_rate_limit_status(self) -> Dict:
        """
        Obtiene el estado actual del rate limit

        Returns:
            Dict con información del rate limit
        """
        return {"requests_made": self.requests_made}


# ============================================================
# EJEMPLO DE USO
# ============================================================

if __name__ == "__main__":
    Config.configure_logging()

    client = APITennisClient()

    body = client.request(Methods.GET_EVENTS)
    print(f"\n🎾 get_events: {len(body)} bytes\n")

    rate_limit = client.get_rate_limit_status()
    print(f"📊 Rate Limit Status:")
    print(f"   Requests hechos: {rate_limit['requests_made']}")
