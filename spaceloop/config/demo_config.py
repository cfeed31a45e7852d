#!filepath: spaceloop/config/demo_config.py
from pydantic import BaseModel, Field, model_validator


class DemoConfig(BaseModel):
    fib_range_low: int = 1
    fib_range_high: int = Field(default=100, ge=1)
    delay_seconds: float = Field(default=0.5, ge=0)

    @model_validator(mode="after")
    def check_range(self) -> "DemoConfig":
        if self.fib_range_low > self.fib_range_high:
            raise ValueError(
                f"fib_range_low={self.fib_range_low} > fib_range_high={self.fib_range_high}"
            )
        return self

    @property
    def fib_range(self) -> tuple[int, int]:
        return self.fib_range_low, self.fib_range_high
