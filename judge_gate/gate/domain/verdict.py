"""Verdict parsing — turns the judge's free-text reply into a structured verdict."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

_PASS_PREFIX = "PASS:"
_FAIL_PREFIX = "FAIL:"
_MISSING_FAIL_REASON = "Judge rejected the output without a reason"


class UnparseablePolicy(StrEnum):
    """What to conclude when the judge's reply has no recognisable verdict line."""

    ACCEPT = "accept"
    REJECT = "reject"


_FALLBACK_REASONS: dict[UnparseablePolicy, str] = {
    UnparseablePolicy.ACCEPT: "Could not parse validation response, assuming pass",
    UnparseablePolicy.REJECT: "Could not parse validation response, assuming fail",
}


class ParsedVerdict(BaseModel):
    """Structured form of a judge reply.

    ``matched`` is False when the verdict came from the unparseable policy
    rather than from a ``PASS:``/``FAIL:`` line.
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    reason: str
    matched: bool = True


def parse_verdict(
    raw: str, policy: UnparseablePolicy = UnparseablePolicy.ACCEPT
) -> ParsedVerdict:
    """Extract the verdict from the first non-blank line of a judge reply.

    The prefixes are matched case-sensitively. Anything else, including an
    empty reply, resolves through ``policy``. A ``FAIL:`` line without a reason
    gets a default reason. Never raises.
    """
    line = _first_non_blank_line(raw)
    if line.startswith(_PASS_PREFIX):
        return ParsedVerdict(passed=True, reason=line[len(_PASS_PREFIX) :].strip())
    if line.startswith(_FAIL_PREFIX):
        reason = line[len(_FAIL_PREFIX) :].strip()
        return ParsedVerdict(passed=False, reason=reason or _MISSING_FAIL_REASON)
    return ParsedVerdict(
        passed=policy is UnparseablePolicy.ACCEPT,
        reason=_FALLBACK_REASONS[policy],
        matched=False,
    )


def _first_non_blank_line(raw: str) -> str:
    for line in raw.splitlines():
        stripped = line.strip()
        if stripped:
            return stripped
    return ""
