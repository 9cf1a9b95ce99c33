"""
Unit tests for engine error types.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from shared.errors import (
    InvalidStepError, ResultFactoryError, RulesetException, ValidationError
)


class TestErrors:
    """Test cases for error types."""

    def test_error_codes(self):
        """Test the code carried by each error type."""
        assert InvalidStepError().code == "INVALID_STEP"
        assert ResultFactoryError().code == "RESULT_FACTORY_ERROR"
        assert ValidationError().code == "VALIDATION_ERROR"

    def test_errors_share_base(self):
        """Test that all errors derive from RulesetException."""
        for error in (InvalidStepError(), ResultFactoryError(), ValidationError()):
            assert isinstance(error, RulesetException)

    def test_message_and_details(self):
        """Test message and details carried by an error."""
        error = InvalidStepError("Step 2 is not a step", details={"index": 2})

        assert error.message == "Step 2 is not a step"
        assert error.details == {"index": 2}
        assert str(error) == "Step 2 is not a step"

    def test_default_details(self):
        """Test that details default to an empty dict."""
        assert ValidationError("bad weapon").details == {}
