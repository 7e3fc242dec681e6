"""Customizer configuration."""

from pydantic import BaseModel, ConfigDict


class CustomizerConfig(BaseModel):
    """Which customization steps to run. Both are enabled by default."""

    model_config = ConfigDict(frozen=True)

    with_security_schemes: bool = True
    with_standard_headers: bool = True
