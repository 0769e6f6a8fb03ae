from .config import Config, validate_config, load_config

__all__ = ["Config", "validate_config", "load_config"]
