"""Configuration loader from .env file."""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv

DEFAULT_HOST = "https://imsp.emome.net:4443/imsp/sms/servlet"

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Client configuration."""
    
    # Emome IMSP account
    account: str
    password: str
    
    # Gateway
    host: str
    from_addr: str
    
    # Timeouts, seconds
    timeout: float
    connect_timeout: float
    
    # Select message encoding by msg_type (Big5 for 0/1)
    legacy_encoding: bool


def load_config(env_path: str | Path | None = None) -> Config:
    """Load configuration from .env file."""
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()
    
    return Config(
        account=os.getenv("EMOME_ACCOUNT", ""),
        password=os.getenv("EMOME_PASSWORD", ""),
        
        host=os.getenv("EMOME_HOST", DEFAULT_HOST),
        from_addr=os.getenv("EMOME_FROM_ADDR", ""),
        
        timeout=float(os.getenv("EMOME_TIMEOUT", "30")),
        connect_timeout=float(os.getenv("EMOME_CONNECT_TIMEOUT", "30")),
        
        legacy_encoding=os.getenv("EMOME_LEGACY_ENCODING", "").strip().lower() in TRUE_VALUES,
    )
