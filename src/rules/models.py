from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class OpenGraphRules(BaseModel):
    # og:type reproduces historical output for the single-image fallback
    image_fallback_property: Literal["og:type", "og:image"] = "og:type"
    collect_warnings: bool = True

    model_config = ConfigDict(extra="forbid")

class ObservabilityRules(BaseModel):
    log_level: LogLevel = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = ConfigDict(extra="forbid")

class Rules(BaseModel):
    opengraph: OpenGraphRules = Field(default_factory=OpenGraphRules)
    observability: ObservabilityRules = Field(default_factory=ObservabilityRules)

    model_config = ConfigDict(extra="forbid")
