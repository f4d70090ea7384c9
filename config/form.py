import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class FormConfig(BaseModel):
    submit_delay: float = Field(default=2.0, ge=0, description="Simulated backend latency, seconds")
    reset_delay: float = Field(default=1.0, ge=0, description="Time the success state stays visible, seconds")
    submit_timeout: Optional[float] = Field(default=None, gt=0, description="Upper bound on one submit call")
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FormConfig":
        timeout = os.getenv("FORM_SUBMIT_TIMEOUT")
        return cls(
            submit_delay=float(os.getenv("FORM_SUBMIT_DELAY", "2.0")),
            reset_delay=float(os.getenv("FORM_RESET_DELAY", "1.0")),
            submit_timeout=float(timeout) if timeout else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
