# jdfilter/config.py
"""Extractor configuration that reads JDFILTER_* environment variables.

List values must be provided as JSON arrays, for example:
JDFILTER_CORS_ORIGINS=["http://localhost:5173"]
"""

from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractorSettings(BaseSettings):
    # Lexicon persistence
    lexicon_backend: str = Field(default="file", description="Lexicon store backend: file or supabase")
    lexicon_path: str = Field(default="data/tech_stacks.json")
    lexicon_table: str = Field(default="tech_lexicon")
    lexicon_key: str = Field(default="default")

    # Page fetching
    fetch_mode: str = Field(default="http", description="Page fetcher: http or browser")
    request_timeout: float = Field(default=30.0)
    user_agent: str = Field(default="JD-Filter/1.0 Mozilla/5.0")

    # HTTP service
    cors_origins: List[str] = Field(default=["*"])
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=4000)

    # Supabase (only read when lexicon_backend == "supabase")
    supabase_url: str = Field(default="", alias="SUPABASE_URL")
    supabase_key: str = Field(default="", alias="SUPABASE_KEY")

    model_config = SettingsConfigDict(env_prefix="JDFILTER_", extra="ignore")


load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent / ".env", override=False)
settings = ExtractorSettings()
