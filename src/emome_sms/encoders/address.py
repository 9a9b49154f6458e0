"""Recipient address normalization."""

import re
from typing import Iterable, Pattern

# Separator between recipients: comma plus optional whitespace
ADDR_SEPARATOR: Pattern[str] = re.compile(r',\s*')


def split_addresses(to_addr: str | Iterable[str] | None) -> list[str]:
    """
    Split recipients into a deduplicated list.
    
    Order of first occurrence is kept. A string without separators
    gives a single-element list, an empty string gives [""].
    """
    if to_addr is None:
        to_addr = ""
    
    if isinstance(to_addr, str):
        items = ADDR_SEPARATOR.split(to_addr)
    else:
        items = [str(addr) for addr in to_addr]
    
    # dict keeps insertion order
    return list(dict.fromkeys(items))


def convert_to_addr(to_addr: str | Iterable[str] | None) -> str:
    """
    Return one or more phone numbers joined with a comma.
    
    Args:
        to_addr: List of numbers or a string like "0912345678, 0987654321"
        
    Returns:
        Comma-joined string without duplicates, e.g. "0912345678,0987654321"
    """
    return ",".join(split_addresses(to_addr))
