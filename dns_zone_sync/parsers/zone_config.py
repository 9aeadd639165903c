import logging
from dataclasses import dataclass, field
from typing import Dict, List

import yaml

from ..core.records import DeclaredRecord, is_supported_type
from ..utils.validators import (
    validate_content,
    validate_record_name,
    validate_record_type,
    validate_zone_name,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "type", "content")


class ConfigError(ValueError):
    """Raised when the zone configuration cannot be loaded."""


@dataclass
class ZoneConfig:
    domain: str
    records: List[DeclaredRecord] = field(default_factory=list)
    logging: Dict = field(default_factory=dict)


class ZoneConfigParser:
    def __init__(self, config_path: str):
        self.config_path = config_path

    def parse(self) -> ZoneConfig:
        """Parse the zone configuration file and validate records."""
        logger.info(f"Read file: {self.config_path}")
        try:
            with open(self.config_path, "r") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {self.config_path}: {e}")
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing config file {self.config_path}: {e}")

        logger.info(f"Parse yaml: {self.config_path}")
        return self.load(data)

    def load(self, data) -> ZoneConfig:
        """Build a zone configuration from already decoded YAML data."""
        if not isinstance(data, dict):
            raise ConfigError("Config must be a mapping with 'domain' and 'records'")

        domain = data.get("domain")
        if not domain or not isinstance(domain, str):
            raise ConfigError("Config must define a non-empty 'domain'")
        if not validate_zone_name(domain):
            logger.warning(f"Domain '{domain}' does not look like a valid zone name")

        raw_records = data.get("records") or []
        if not isinstance(raw_records, list):
            raise ConfigError("'records' must be a list")

        records = [
            self._parse_record(entry, index)
            for index, entry in enumerate(raw_records, start=1)
        ]

        logging_config = data.get("logging") or {}
        if not isinstance(logging_config, dict):
            raise ConfigError("'logging' must be a mapping")

        logger.info(f"Successfully parsed {len(records)} records for {domain}")
        return ZoneConfig(domain=domain, records=records, logging=logging_config)

    def _parse_record(self, entry, index: int) -> DeclaredRecord:
        if not isinstance(entry, dict):
            raise ConfigError(f"Record #{index} must be a mapping")

        missing = [key for key in REQUIRED_FIELDS if entry.get(key) in (None, "")]
        if missing:
            raise ConfigError(f"Record #{index} is missing {', '.join(missing)}")

        name = str(entry["name"])
        record_type = str(entry["type"])
        content = str(entry["content"])

        # An empty "proxy:" key reads as null
        proxied = entry.get("proxy")
        if proxied is None:
            proxied = False
        if not isinstance(proxied, bool):
            raise ConfigError(f"Record #{index} ({name}): 'proxy' must be true or false")

        if not validate_record_type(record_type):
            raise ConfigError(f"Record #{index} ({name}): unknown type '{record_type}'")

        if not is_supported_type(record_type):
            logger.warning(
                f"Record #{index} ({name}) has type {record_type}, only A and CNAME are managed"
            )
        elif not validate_content(record_type, content):
            logger.warning(f"Record #{index} ({name}): suspicious content '{content}'")

        if not validate_record_name(name):
            logger.warning(f"Record #{index}: suspicious name '{name}'")

        return DeclaredRecord(
            name=name, type=record_type, content=content, proxied=proxied
        )
