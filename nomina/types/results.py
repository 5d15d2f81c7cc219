"""
Result types for full-name parsing.

`ParsedName` is the candidate a single pattern produces; `NameParseResult` is
what the parser hands back to callers after arbitration. Both are immutable.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class ParsedName:
    """Candidate produced by one pattern - absent fields stay None, never fabricated."""

    score: int
    title: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    nick_name: str | None = None
    suffix: str | None = None
    display_name: str | None = None


@dataclass(frozen=True)
class NameParseResult:
    """Structured name exposed to callers."""

    title: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    nick_name: str | None = None
    suffix: str | None = None
    display_name: str | None = None
    # Confidence of the winning candidate, None when nothing matched
    score: int | None = None

    @classmethod
    def unparsed(cls, display_name: str | None) -> NameParseResult:
        return cls(display_name=display_name)

    @classmethod
    def from_candidate(cls, candidate: ParsedName) -> NameParseResult:
        # display_name is copied as-is; the winning pattern owns it
        return cls(
            title=candidate.title,
            first_name=candidate.first_name,
            middle_name=candidate.middle_name,
            last_name=candidate.last_name,
            nick_name=candidate.nick_name,
            suffix=candidate.suffix,
            display_name=candidate.display_name,
            score=candidate.score,
        )

    @property
    def matched(self) -> bool:
        return self.score is not None

    def as_dict(self) -> dict[str, str | int | None]:
        return asdict(self)
