# src/paintwindow/config.py
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from paintwindow.models.rules import RulesConfig

# .env 파일에서 환경 변수 로드
load_dotenv()

DEFAULT_RULES_PATH = Path(__file__).with_name("rules.config.json")
RULES_PATH = Path(os.getenv("PAINTWINDOW_RULES_PATH", str(DEFAULT_RULES_PATH)))

# Nominatim usage policy requires an identifying User-Agent
NOMINATIM_USER_AGENT = os.getenv(
    "NOMINATIM_USER_AGENT",
    "paint-stain-forecast/1.0 (+https://github.com/paintwindow/paintwindow)",
)

SCHEMA_VERSION = "1.0"

DISCLAIMER = (
    "Guidance only. Surface temperature, sun or shade, substrate moisture, "
    "and product-specific label requirements can override forecast-based rules."
)


def load_rules(path: Path | str) -> RulesConfig:
    """
    Read and validate a rules document.
    Missing or non-numeric fields raise pydantic.ValidationError; there are no defaults
    for threshold values.
    """
    with open(path, "r", encoding="utf-8") as f:
        return RulesConfig.model_validate_json(f.read())


@lru_cache(maxsize=1)
def get_rules() -> RulesConfig:
    return load_rules(RULES_PATH)
