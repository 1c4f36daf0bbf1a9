# multibasekit/conf/models.py

from pydantic import BaseModel, ConfigDict, Field


class MultibaseConfig(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)

    UNARY_WARN_THRESHOLD: int = Field(default=1 << 16, ge=0)
    TRACING_ENABLED: bool = True
