"""Domain service: Name Validation.

Every product and menu name passes through here before it becomes a
``Name``. The profanity check itself is delegated to whatever
``ProfanityChecker`` is injected (an HTTP client in production, a fake
in tests).
"""

from __future__ import annotations

import logging

from kitchenpos.domain.exceptions import InvalidNameError
from kitchenpos.domain.model.value_objects import Name
from kitchenpos.domain.service.profanity_checker import ProfanityChecker

logger = logging.getLogger(__name__)


class NameValidator:

    def __init__(self, profanity_checker: ProfanityChecker) -> None:
        self._profanity_checker = profanity_checker

    def validate(self, raw_name: str | None) -> Name:
        """Turn user input into a ``Name``.

        Raises InvalidNameError for a missing or blank name, or one the
        profanity checker rejects. Blank names never reach the checker.
        """
        if not isinstance(raw_name, str) or not raw_name.strip():
            raise InvalidNameError("Name is required")

        if self._profanity_checker.contains_profanity(raw_name):
            logger.info("Rejected name containing profanity: %r", raw_name)
            raise InvalidNameError(f"Name '{raw_name}' contains profanity")

        return Name(raw_name)
