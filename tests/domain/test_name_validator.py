"""Unit tests for the NameValidator domain service."""

import pytest

from kitchenpos.domain.exceptions import InvalidNameError
from kitchenpos.domain.model.value_objects import Name
from kitchenpos.domain.service.name_validator import NameValidator
from tests.fakes import FakeProfanityChecker


class TestNameValidator:

    def test_clean_name_accepted(self):
        validator = NameValidator(FakeProfanityChecker())
        assert validator.validate("fried chicken") == Name("fried chicken")

    @pytest.mark.parametrize("raw", ["damn chicken", "Crap wings"])
    def test_profane_name_rejected(self, raw):
        validator = NameValidator(FakeProfanityChecker())
        with pytest.raises(InvalidNameError, match="profanity"):
            validator.validate(raw)

    @pytest.mark.parametrize("raw", [None, "", "  "])
    def test_missing_name_rejected_without_calling_checker(self, raw):
        checker = FakeProfanityChecker()
        validator = NameValidator(checker)
        with pytest.raises(InvalidNameError, match="required"):
            validator.validate(raw)
        assert checker.checked == []

    @pytest.mark.parametrize("raw", [16000, b"fried chicken", ["fried chicken"]])
    def test_non_string_name_rejected(self, raw):
        checker = FakeProfanityChecker()
        with pytest.raises(InvalidNameError, match="required"):
            NameValidator(checker).validate(raw)
        assert checker.checked == []
