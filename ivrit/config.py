"""Configuration loader for the Ivrit Reader pipeline."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Ivrit Reader"
    version: str = "1.0.0"
    language: str = "he"


class LexiconConfig(BaseModel):
    """Root dictionary location.

    ``path`` of None selects the lexicon bundled with the package.
    """

    path: str | None = None


class CliticScoringConfig(BaseModel):
    """Weights and thresholds of the clitic-split scorer."""

    article_weight: int = 3
    infinitive_weight: int = 2
    pronoun_weight: int = 3
    verb_affix_weight: int = 2
    plural_penalty: int = 1
    short_base_min_score: int = 3
    split_threshold: int = 2
    min_split_length: int = 3
    respect_lexicon: bool = False


class SegmentationConfig(BaseModel):
    """Sentence and phrase segmentation options."""

    split_phrases: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    lexicon: LexiconConfig = Field(default_factory=LexiconConfig)
    clitics: CliticScoringConfig = Field(default_factory=CliticScoringConfig)
    segmentation: SegmentationConfig = Field(default_factory=SegmentationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Environment overrides
    log_level = os.getenv("IVRIT_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()
    lexicon_path = os.getenv("IVRIT_LEXICON_PATH")
    if lexicon_path:
        config.lexicon.path = lexicon_path

    return config
