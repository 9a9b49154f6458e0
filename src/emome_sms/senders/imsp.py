"""SMS sender for Chunghwa Telecom Emome IMSP HTTP API."""

import logging
from types import MappingProxyType
from typing import Iterable, Mapping

from ..config import DEFAULT_HOST, Config
from ..encoders import UNICODE_DCS, encode_submission
from ..errors import InvalidParameterError, TransportError
from ..parsers import SubmissionResult, parse_response
from .transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

SUBMIT_SM_PATH = "SubmitSM"


class ImspClient:
    """
    Client for the IMSP SubmitSM servlet.
    
    Defaults are built once per client and never mutated; every call
    merges its own overrides over a copy.
    
    Args:
        account: IMSP account
        password: IMSP password
        transport: POST callable, HttpxTransport() when omitted
        host: Servlet base URL
        legacy_encoding: Pick message encoding by msg_type (Big5 for 0/1)
            and let callers set msg_dcs
    """
    
    def __init__(
        self,
        account: str,
        password: str,
        *,
        transport: Transport | None = None,
        host: str = DEFAULT_HOST,
        legacy_encoding: bool = False,
        from_addr: str | None = None,
    ):
        self.host = host.rstrip("/")
        self.legacy_encoding = legacy_encoding
        self.transport = transport or HttpxTransport()
        
        self._defaults = MappingProxyType({
            "account": account,
            "password": password,
            "from_addr_type": 0,
            "from_addr": from_addr,
            "to_addr_type": 0,
            "to_addr": None,
            "msg_expire_time": 0,
            "msg_type": 0,
            "msg_dcs": 0 if legacy_encoding else UNICODE_DCS,
            "msg_pclid": 0,
            "msg_udhi": 0,
            "msg": None,
            "dest_port": 0,
        })
    
    @classmethod
    def from_config(cls, config: Config, transport: Transport | None = None) -> "ImspClient":
        """Build a client from loaded configuration."""
        if transport is None:
            transport = HttpxTransport(
                timeout=config.timeout,
                connect_timeout=config.connect_timeout,
            )
        return cls(
            config.account,
            config.password,
            transport=transport,
            host=config.host,
            legacy_encoding=config.legacy_encoding,
            from_addr=config.from_addr or None,
        )
    
    @property
    def defaults(self) -> Mapping:
        return self._defaults
    
    @property
    def url(self) -> str:
        return f"{self.host}/{SUBMIT_SM_PATH}"
    
    def merge_parameters(self, params: Mapping | None = None) -> dict:
        """Overlay caller fields on the defaults, key for key."""
        params = dict(params or {})
        
        unknown = sorted(set(params) - set(self._defaults))
        if unknown:
            raise InvalidParameterError(f"Unknown SubmitSM parameters: {', '.join(unknown)}")
        
        if not self.legacy_encoding and "msg_dcs" in params:
            raise InvalidParameterError("msg_dcs is fixed to Unicode and cannot be overridden")
        
        merged = dict(self._defaults)
        merged.update(params)
        return merged
    
    def submit_sm(self, params: Mapping | None = None) -> SubmissionResult:
        """
        Submit the SM via custom parameters.
        
        Args:
            params: Overrides for any default SubmitSM field
            
        Returns:
            SubmissionResult mapping to_addr to [to_addr, code, message_id, description]
            
        Raises:
            InvalidParameterError: Unknown field or unusable value
            EncodingError: Legacy Big5 message with unrepresentable characters
            TransportError: Request failed
        """
        merged = self.merge_parameters(params)
        fields = encode_submission(merged, legacy=self.legacy_encoding)
        
        recipients = fields["to_addr"].split(",")
        logger.info(f"Отправляю SMS на {len(recipients)} номер(а) через {self.url}")
        
        try:
            response = self.transport(self.url, fields)
        except TransportError as e:
            logger.error(f"❌ SubmitSM не выполнен: {e}")
            raise
        
        result = parse_response(response)
        
        if result.malformed:
            logger.warning(f"Некорректный ответ шлюза: {'; '.join(result.warnings)}")
        
        for outcome in result.outcomes:
            logger.info(
                f"{outcome.to_addr}: code={outcome.code} "
                f"id={outcome.message_id} {outcome.description or ''}".rstrip()
            )
        
        return result
    
    def send_sm(self, message: str, to_addr: str | Iterable[str]) -> SubmissionResult:
        """Old API, delegate to submit_sm."""
        return self.submit_sm({
            "msg": message,
            "to_addr": to_addr,
        })
