"""PurgoMalum-backed implementation of ProfanityChecker.

PurgoMalum answers ``GET /service/containsprofanity?text=...`` with a
plain-text ``true`` or ``false`` body.
"""

from __future__ import annotations

import logging

import httpx

from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.purgomalum.com"


class PurgomalumClient(ProfanityChecker):

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 5.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def contains_profanity(self, text: str) -> bool:
        """Ask PurgoMalum whether *text* contains profanity.

        Transport failures and non-2xx responses raise ``httpx.HTTPError``;
        retrying is left to the caller.
        """
        response = self._client.get(
            "/service/containsprofanity", params={"text": text}
        )
        response.raise_for_status()

        body = response.text.strip().lower()
        logger.debug("PurgoMalum answered %r for %r", body, text)
        if body not in ("true", "false"):
            raise httpx.DecodingError(f"Unexpected PurgoMalum response: {body!r}")
        return body == "true"

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> PurgomalumClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
