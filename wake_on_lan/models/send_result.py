from pydantic import BaseModel, ConfigDict, model_validator

class SendResult(BaseModel):
    host: str
    port: int
    success: bool
    bytes_sent: int = 0
    error: str | None = None
    reply: bytes | None = None

    model_config = ConfigDict(extra='forbid', frozen=True)
    
    @model_validator(mode='after')
    def validate_after(self):
        # a failed attempt carries its transport error and nothing sent
        if not self.success and not self.error:
            raise ValueError("A failed send must carry an error")
        
        if not self.success and self.bytes_sent:
            raise ValueError("A failed send cannot report sent bytes")

        return self
