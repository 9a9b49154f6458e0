"""Result types for parsed SubmitSM responses."""

from dataclasses import dataclass, field
from typing import Iterator

# Gateway status code for an accepted message
ACCEPTED_CODE = "0"


@dataclass(frozen=True)
class RecipientOutcome:
    """One response line: [to_addr, code, message_id, description, ...]."""
    fields: tuple[str, ...]
    
    def _field(self, index: int) -> str | None:
        return self.fields[index] if len(self.fields) > index else None
    
    @property
    def to_addr(self) -> str:
        return self.fields[0]
    
    @property
    def code(self) -> str | None:
        return self._field(1)
    
    @property
    def message_id(self) -> str | None:
        return self._field(2)
    
    @property
    def description(self) -> str | None:
        return self._field(3)
    
    @property
    def accepted(self) -> bool:
        return self.code == ACCEPTED_CODE


@dataclass
class SubmissionResult:
    """
    Parsed SubmitSM response.
    
    Maps recipient address to the ordered list of fields from its line.
    A repeated address keeps only the last line seen.
    
    warnings is non-empty when the body was empty or contained
    malformed records; check malformed before trusting an empty result.
    """
    records: dict[str, list[str]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)
    
    @property
    def malformed(self) -> bool:
        return bool(self.warnings)
    
    @property
    def recipients(self) -> list[str]:
        return list(self.records)
    
    @property
    def outcomes(self) -> list[RecipientOutcome]:
        return [RecipientOutcome(tuple(fields)) for fields in self.records.values()]
    
    def outcome(self, to_addr: str) -> RecipientOutcome | None:
        fields = self.records.get(to_addr)
        if fields is None:
            return None
        return RecipientOutcome(tuple(fields))
    
    def get(self, to_addr: str, default: list[str] | None = None) -> list[str] | None:
        return self.records.get(to_addr, default)
    
    def __getitem__(self, to_addr: str) -> list[str]:
        return self.records[to_addr]
    
    def __contains__(self, to_addr: object) -> bool:
        return to_addr in self.records
    
    def __iter__(self) -> Iterator[str]:
        return iter(self.records)
    
    def __len__(self) -> int:
        return len(self.records)
