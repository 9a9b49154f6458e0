"""Parser for the plaintext SubmitSM response."""

import logging
import re
from typing import Pattern

from bs4 import BeautifulSoup

from .models import SubmissionResult

logger = logging.getLogger(__name__)

# Line-break marker separating recipient records
LINE_BREAK: Pattern[str] = re.compile(r'<br\s*/?>', re.IGNORECASE)
TRAILING_LINE_BREAK: Pattern[str] = re.compile(r'<br\s*/?>$', re.IGNORECASE)
FIELD_SEPARATOR = "|"

EMPTY_RESPONSE = "empty response"


def strip_markup(record: str) -> str:
    """
    Remove HTML markup the gateway wrapped around a record.
    
    Every record goes through the same extraction, so entities such as
    &amp; are decoded whether or not the line carries tags.
    """
    soup = BeautifulSoup(record, "html.parser")
    return soup.get_text()


def parse_response(response: str | None) -> SubmissionResult:
    """
    Parse response from CHT Emome IMSP SubmitSM API.
    
    The body is a list of records separated by <br>, each record
    a pipe-delimited line starting with the recipient address:
    
        0912345678|0|MSGID1|Success<br>0987654321|0|MSGID2|Success<br>
    
    Args:
        response: Raw response body
        
    Returns:
        SubmissionResult keyed by recipient, in response order
    """
    result = SubmissionResult()
    
    body = re.sub(r'[\r\n]', '', response or "")
    body = TRAILING_LINE_BREAK.sub('', body, count=1)
    
    if not body.strip():
        result.warnings.append(EMPTY_RESPONSE)
        return result
    
    for index, raw_record in enumerate(LINE_BREAK.split(body)):
        if not raw_record.strip():
            result.warnings.append(f"empty record at position {index}")
            continue
        
        record = strip_markup(raw_record)
        if not record.strip():
            # Wrapper markup only, e.g. a closing </body>
            logger.debug(f"Skipping markup-only record: {raw_record!r}")
            continue
        
        fields = record.split(FIELD_SEPARATOR)
        if not fields[0]:
            result.warnings.append(f"record without recipient at position {index}: {record!r}")
            continue
        
        result.records[fields[0]] = fields
    
    if not result.records and not result.warnings:
        result.warnings.append(EMPTY_RESPONSE)
    
    return result
