"""
LLM Provider Routing - environment-configured provider selection
"""
from typing import Optional
from enum import Enum

import boto3
from botocore.config import Config as BotoConfig
from langchain_aws import ChatBedrock
from langchain_community.chat_models import ChatOllama
from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI

from claimgenie.core.config import Settings, settings as default_settings
from claimgenie.core.logging import logger


class LLMProvider(str, Enum):
    BEDROCK = "bedrock"
    OLLAMA = "ollama"
    OPENAI = "openai"


def get_llm(config: Optional[Settings] = None) -> BaseChatModel:
    """
    Get the configured LLM instance.

    Every provider gets the configured temperature and request timeout.
    """
    config = config or default_settings
    provider = config.LLM_PROVIDER

    logger.info(f"Using LLM provider: {provider}")

    if provider == LLMProvider.BEDROCK.value:
        return _get_bedrock_llm(config)
    if provider == LLMProvider.OPENAI.value:
        return _get_openai_llm(config)
    return _get_ollama_llm(config)


def _get_ollama_llm(config: Settings) -> BaseChatModel:
    """Get Ollama LLM instance."""
    return ChatOllama(
        model=config.OLLAMA_MODEL,
        base_url=config.OLLAMA_BASE_URL,
        temperature=config.LLM_TEMPERATURE,
        timeout=config.LLM_TIMEOUT_SECONDS,
    )


def _get_openai_llm(config: Settings) -> BaseChatModel:
    """Get OpenAI LLM instance."""
    return ChatOpenAI(
        model=config.OPENAI_MODEL,
        api_key=config.OPENAI_API_KEY,
        temperature=config.LLM_TEMPERATURE,
        timeout=config.LLM_TIMEOUT_SECONDS,
        max_retries=1,
    )


def _get_bedrock_llm(config: Settings) -> BaseChatModel:
    """Get AWS Bedrock LLM instance."""
    bedrock_runtime = boto3.client(
        "bedrock-runtime",
        region_name=config.AWS_REGION,
        aws_access_key_id=config.AWS_ACCESS_KEY_ID,
        aws_secret_access_key=config.AWS_SECRET_ACCESS_KEY,
        config=BotoConfig(
            read_timeout=config.LLM_TIMEOUT_SECONDS,
            connect_timeout=config.LLM_TIMEOUT_SECONDS,
            retries={"max_attempts": 1},
        ),
    )

    return ChatBedrock(
        client=bedrock_runtime,
        model_id=config.BEDROCK_MODEL_ID,
        model_kwargs={"temperature": config.LLM_TEMPERATURE, "max_tokens": 1024},
    )
