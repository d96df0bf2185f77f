"""
Tests for log masking and settings validation.
"""
import logging

import pytest

from claimgenie.core.config import Settings
from claimgenie.core.logging import MaskingFormatter


def format_message(message: str) -> str:
    record = logging.LogRecord("claimgenie", logging.INFO, __file__, 1, message, None, None)
    return MaskingFormatter("%(message)s").format(record)


class TestMaskingFormatter:
    def test_masks_json_style_fields(self):
        out = format_message('payload {"policy_number": "POL2", "claimant_name": "Maria Lopez"}')
        assert "POL2" not in out
        assert "Maria Lopez" not in out
        assert '"policy_number": "***"' in out

    def test_masks_dict_repr_fields(self):
        out = format_message(str({"claimant_name": "Maria Lopez", "claim_type": "Fire"}))
        assert "Maria Lopez" not in out
        assert "'claim_type': 'Fire'" in out

    def test_leaves_plain_messages_alone(self):
        assert format_message("Claim CLM-1000 stored") == "Claim CLM-1000 stored"


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.CLAIMS_FILE.endswith("claims.json")
        assert settings.STRICT_DATE_MODE is False

    def test_openai_requires_key(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, LLM_PROVIDER="openai", OPENAI_API_KEY="")

    def test_bedrock_requires_credentials(self):
        with pytest.raises(ValueError):
            Settings(
                _env_file=None,
                LLM_PROVIDER="bedrock",
                AWS_ACCESS_KEY_ID="",
                AWS_SECRET_ACCESS_KEY="",
            )

    def test_openai_with_key(self):
        settings = Settings(_env_file=None, LLM_PROVIDER="openai", OPENAI_API_KEY="sk-test")
        assert settings.OPENAI_MODEL == "gpt-4.1-mini"
