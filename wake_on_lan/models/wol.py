from pydantic import BaseModel, ConfigDict, Field

class WolModel(BaseModel):
    port: int = Field(default=7, ge=0, le=65535)
    reply_timeout: float = Field(default=0, ge=0)

    model_config = ConfigDict(extra='forbid')
