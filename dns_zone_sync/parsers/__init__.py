from .zone_config import ConfigError, ZoneConfig, ZoneConfigParser

__all__ = ["ConfigError", "ZoneConfig", "ZoneConfigParser"]
