"""
Tests for LLM provider selection and the policy seed script.
"""
import json
from datetime import date

from langchain_community.chat_models import ChatOllama
from langchain_openai import ChatOpenAI

from claimgenie.core.config import Settings
from claimgenie.orchestration.routing import get_llm
from claimgenie.services.policy_directory import PolicyDirectory, is_policy_expired

from data.seed_policies import build_sample_policies, seed_policies


class TestProviderSelection:
    def test_ollama_is_default(self):
        config = Settings(_env_file=None, LLM_PROVIDER="ollama", LLM_TEMPERATURE=0.0)
        llm = get_llm(config)
        assert isinstance(llm, ChatOllama)
        assert llm.temperature == 0.0

    def test_openai(self):
        config = Settings(_env_file=None, LLM_PROVIDER="openai", OPENAI_API_KEY="sk-test")
        llm = get_llm(config)
        assert isinstance(llm, ChatOpenAI)
        assert llm.model_name == "gpt-4.1-mini"


class TestSeedPolicies:
    def test_sample_policies_include_an_expired_one(self):
        today = date(2025, 6, 15)
        policies = build_sample_policies(today)
        expired = [n for n, p in policies.items() if is_policy_expired(p["validTill"], today)]
        assert expired == ["POL0999"]

    def test_seed_keeps_existing_policies(self, tmp_path):
        path = tmp_path / "policies.json"
        path.write_text(json.dumps({"POL1001": {"name": "Kept"}}), encoding="utf-8")

        seed_policies(path)

        directory = PolicyDirectory(str(path))
        assert directory.get("POL1001") == {"name": "Kept"}
        assert directory.get("POL1002")["name"] == "Maria Lopez"
