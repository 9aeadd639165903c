"""
Validators - Input validation for declared DNS records

This module provides validation functions for record names, record types
and record content. Validators log what they reject and return a bool so
callers decide whether a failure is fatal.
"""

import ipaddress
import logging

import dns.exception
import dns.name
import dns.rdatatype

from ..core.records import APEX

logger = logging.getLogger(__name__)


def validate_record_type(record_type: str) -> bool:
    """
    Validate that a record type is a DNS type known to dnspython.

    Args:
        record_type: The record type mnemonic, e.g. "A" or "CNAME"

    Returns:
        True if valid, False otherwise
    """
    if not record_type or not isinstance(record_type, str):
        return False

    try:
        rdtype = dns.rdatatype.from_text(record_type)
    except (dns.rdatatype.UnknownRdatatype, ValueError):
        logger.warning(f"Unknown record type: {record_type}")
        return False

    # from_text also accepts the generic TYPE<n> syntax
    if dns.rdatatype.to_text(rdtype) != record_type:
        logger.warning(f"Record type must be an upper-case mnemonic: {record_type}")
        return False

    return True


def validate_record_name(name: str) -> bool:
    """
    Validate a short record name relative to the zone.

    Args:
        name: "@" for the apex, otherwise one or more labels without the zone

    Returns:
        True if valid, False otherwise
    """
    if not name or not isinstance(name, str):
        return False

    if name == APEX:
        return True

    if name.endswith("."):
        logger.warning(f"Record name must be relative to the zone: {name}")
        return False

    try:
        dns.name.from_text(name, origin=None)
    except dns.exception.DNSException as e:
        logger.warning(f"Invalid record name '{name}': {e}")
        return False

    return True


def validate_hostname(hostname: str) -> bool:
    """
    Validate a host name used as a CNAME target.

    Args:
        hostname: The target host name

    Returns:
        True if valid, False otherwise
    """
    if not hostname or not isinstance(hostname, str):
        return False

    try:
        name = dns.name.from_text(hostname)
    except dns.exception.DNSException as e:
        logger.warning(f"Invalid host name '{hostname}': {e}")
        return False

    # Root plus at least one label
    if len(name.labels) < 2:
        logger.warning(f"Host name has no labels: {hostname}")
        return False

    return True


def validate_ipv4(ipv4: str) -> bool:
    """
    Validate IPv4 address.

    Args:
        ipv4: The IPv4 address to validate

    Returns:
        True if valid, False otherwise
    """
    if not ipv4 or not isinstance(ipv4, str):
        return False

    try:
        ipaddress.IPv4Address(ipv4.strip())
        return True
    except ipaddress.AddressValueError:
        logger.warning(f"Invalid IPv4 address: {ipv4}")
        return False


def validate_content(record_type: str, content: str) -> bool:
    """Validate record content for the managed record types."""
    if record_type == "A":
        return validate_ipv4(content)
    if record_type == "CNAME":
        return validate_hostname(content)
    return True


def validate_zone_name(zone: str) -> bool:
    """
    Validate DNS zone name.

    Args:
        zone: The zone name to validate

    Returns:
        True if valid, False otherwise
    """
    if not zone or not isinstance(zone, str):
        return False

    if not validate_hostname(zone):
        return False

    # Zone names typically don't have IP addresses
    try:
        ipaddress.IPv4Address(zone)
    except ipaddress.AddressValueError:
        return True

    logger.warning(f"Zone name looks like an IP address: {zone}")
    return False
