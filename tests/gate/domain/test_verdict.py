"""Tests for parse_verdict and the unparseable-reply policy."""

import pytest

from judge_gate.gate.domain.verdict import (
    ParsedVerdict,
    UnparseablePolicy,
    parse_verdict,
)

_ACCEPT_FALLBACK = "Could not parse validation response, assuming pass"
_REJECT_FALLBACK = "Could not parse validation response, assuming fail"


class TestPassPrefix:
    """Replies starting with PASS: are accepted with the trimmed reason."""

    def test_pass_line_is_accepted(self) -> None:
        verdict = parse_verdict("PASS: meets all requirements")

        assert verdict == ParsedVerdict(passed=True, reason="meets all requirements")

    def test_reason_is_trimmed(self) -> None:
        verdict = parse_verdict("PASS:    plenty of space   ")

        assert verdict.reason == "plenty of space"

    def test_pass_without_reason_yields_empty_reason(self) -> None:
        verdict = parse_verdict("PASS:")

        assert verdict.passed is True
        assert verdict.reason == ""
        assert verdict.matched is True

    def test_only_first_line_is_used(self) -> None:
        verdict = parse_verdict("PASS: first\nFAIL: second")

        assert verdict.passed is True
        assert verdict.reason == "first"


class TestFailPrefix:
    """Replies starting with FAIL: are rejected with the trimmed reason."""

    def test_fail_line_is_rejected(self) -> None:
        verdict = parse_verdict("FAIL: missing tests")

        assert verdict == ParsedVerdict(passed=False, reason="missing tests")

    def test_fail_without_reason_gets_default_reason(self) -> None:
        verdict = parse_verdict("FAIL:   ")

        assert verdict.passed is False
        assert verdict.reason == "Judge rejected the output without a reason"
        assert verdict.matched is True

    def test_leading_blank_lines_are_skipped(self) -> None:
        verdict = parse_verdict("\n   \n\tFAIL: wrong format\nextra commentary")

        assert verdict.passed is False
        assert verdict.reason == "wrong format"

    def test_windows_line_endings(self) -> None:
        verdict = parse_verdict("FAIL: no summary\r\nmore")

        assert verdict.reason == "no summary"


class TestFallback:
    """Anything without an exact prefix resolves through the policy."""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   \n\n ",
            "pass: ok",
            "Fail: nope",
            "PASS - looks fine",
            "The output is acceptable.",
            "Verdict: PASS: fine",
        ],
    )
    def test_default_policy_accepts(self, raw: str) -> None:
        verdict = parse_verdict(raw)

        assert verdict.passed is True
        assert verdict.reason == _ACCEPT_FALLBACK
        assert verdict.matched is False

    def test_reject_policy_rejects(self) -> None:
        verdict = parse_verdict("pass: ok", policy=UnparseablePolicy.REJECT)

        assert verdict.passed is False
        assert verdict.reason == _REJECT_FALLBACK
        assert verdict.matched is False

    def test_reject_policy_does_not_affect_parseable_replies(self) -> None:
        verdict = parse_verdict("PASS: fine", policy=UnparseablePolicy.REJECT)

        assert verdict.passed is True
        assert verdict.reason == "fine"
