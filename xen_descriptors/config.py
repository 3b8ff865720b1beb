"""
Configuration for XenAPI descriptors.

Reads from environment variables with sensible defaults.
"""

import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings loaded from environment."""

    # Reserved VBD other_config key carrying the template-device flag
    template_device_key: str = os.getenv("XEN_DESCRIPTORS_TEMPLATE_DEVICE_KEY", "template_device")

    # Logging
    log_level: str = os.getenv("XEN_DESCRIPTORS_LOG_LEVEL", "INFO")
    log_sm_config: bool = os.getenv("XEN_DESCRIPTORS_LOG_SM_CONFIG", "true").lower() == "true"

    class Config:
        env_prefix = "XEN_DESCRIPTORS_"


settings = Settings()
