from pydantic import BaseModel, Field, field_validator


class RedirectRules(BaseModel):
    # Empty list disables the scheme check
    allowed_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])

    @field_validator("allowed_schemes")
    @classmethod
    def lowercase_schemes(cls, value: list[str]) -> list[str]:
        return [scheme.lower() for scheme in value]


class RandomDelayRules(BaseModel):
    enabled: bool = True
    unit_ms: float = Field(default=1.0, ge=0)


class StatusRules(BaseModel):
    random_delay: RandomDelayRules = Field(default_factory=RandomDelayRules)


class Rules(BaseModel):
    redirects: RedirectRules = Field(default_factory=RedirectRules)
    status: StatusRules = Field(default_factory=StatusRules)
