from dataclasses import dataclass
from typing import Optional, Literal

ModelFamily = Literal["chat_completion"]

@dataclass(frozen=True)
class ModelSpec:
    id: str                     # e.g. "gpt-4o"
    platform_id: str            # e.g. "openai"
    family: ModelFamily         # how it is invoked
    quality_tier: Literal["low", "medium", "high"]

    # Operational characteristics
    typical_latency_ms: Optional[int] = None
    rpm_limit: Optional[int] = None
    notes: Optional[str] = None
