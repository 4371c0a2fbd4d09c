# apps/adapters/profanity/purgomalum.py
"""
PurgoMalum Profanity Checker Adapter

Implements IProfanityChecker using the PurgoMalum web service.
"""
import logging

import requests

from apps.core.exceptions import PurgomalumError

logger = logging.getLogger(__name__)


class PurgomalumClient:
    """
    PurgoMalum API adapter

    The containsprofanity endpoint answers with a plain-text
    "true" or "false".
    """

    def __init__(
        self,
        base_url: str = "https://www.purgomalum.com",
        timeout: float = 5.0,
        session: requests.Session = None,
    ):
        """
        Initialize PurgoMalum client

        Args:
            base_url: Service base URL
            timeout: Request timeout in seconds
            session: Optional requests session (shared connection pool)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def contains_profanity(self, text: str) -> bool:
        """
        Ask PurgoMalum whether text contains profanity

        Args:
            text: Text to screen

        Returns:
            True if the service flags the text

        Raises:
            PurgomalumError: If the request fails or the answer is not a boolean
        """
        url = f"{self.base_url}/service/containsprofanity"

        try:
            r = self.session.get(url, params={"text": text}, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"PurgoMalum request failed: {e}")
            raise PurgomalumError(f"Profanity check failed: {e}") from e

        if r.status_code != 200:
            logger.error(f"PurgoMalum API error: {r.status_code} - {r.text[:200]}")
            raise PurgomalumError(f"Profanity check returned status {r.status_code}")

        answer = r.text.strip().lower()
        if answer not in ("true", "false"):
            logger.error(f"PurgoMalum returned unexpected body: {r.text[:200]}")
            raise PurgomalumError("Profanity check returned an unexpected answer")

        logger.debug(f"PurgoMalum answered {answer} for {text!r}")
        return answer == "true"
