import argparse
import json
import logging
import re
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from feedback import RECOMMENDATIONS, TIER_LABELS

# Handlers come from logger_config.setup_logger("scam_shield") in app.py
logger = logging.getLogger("scam_shield.scorer")


class EmptyMessageError(ValueError):
    """Raised when there is no text to analyze."""


@dataclass(frozen=True)
class Rule:
    name: str
    keywords: Tuple[str, ...]
    weight: int

    @property
    def title(self) -> str:
        return self.name[:1].upper() + self.name[1:]


# Evaluated in this order; flag order follows it
RULES = (
    Rule("urgency", ("urgent", "immediate", "expires today", "limited time", "act now", "hurry"), 15),
    Rule("money", ("free money", "cash prize", "lottery", "inheritance", "million dollars",
                   "wire transfer", "bitcoin", "cryptocurrency"), 25),
    Rule("personal", ("verify account", "confirm identity", "social security", "bank details",
                      "credit card", "password"), 30),
    Rule("threats", ("suspended", "blocked", "legal action", "arrest", "fine", "penalty"), 20),
    Rule("suspicious", ("click here", "download now", "call immediately", "reply with",
                        "send money", "western union"), 15),
)

# "...", "!!", SHOUTING (case-sensitive, run against the original text)
GRAMMAR_PATTERN = re.compile(r"[.]{3,}|[!]{2,}|[A-Z]{5,}")
GRAMMAR_WEIGHT = 15
GRAMMAR_MIN_MATCHES = 3

LINK_MARKERS = ("http", "www.")
LINK_WEIGHT = 10

SHORT_MESSAGE_LENGTH = 20
SHORT_MESSAGE_WEIGHT = 5

HIGH_THRESHOLD = 50
MEDIUM_THRESHOLD = 25


@dataclass(frozen=True)
class AnalysisResult:
    risk_score: int
    risk_tier: str
    flags: Tuple[str, ...] = field(default_factory=tuple)
    recommendation: str = ""

    @property
    def verdict(self) -> str:
        return TIER_LABELS[self.risk_tier]

    @property
    def display_score(self) -> int:
        """Score as shown on the meter, clamped to 0..100."""
        return max(0, min(self.risk_score, 100))

    def to_dict(self) -> Dict:
        return {
            "risk_score": self.risk_score,
            "risk_tier": self.risk_tier,
            "verdict": self.verdict,
            "flags": list(self.flags),
            "recommendation": self.recommendation,
        }


def classify(score: int) -> str:
    if score >= HIGH_THRESHOLD:
        return "HIGH"
    if score >= MEDIUM_THRESHOLD:
        return "MEDIUM"
    return "LOW"


def count_formatting_signals(text: str) -> int:
    return len(GRAMMAR_PATTERN.findall(text))


def analyze(message: str) -> AnalysisResult:
    """
    Score a message for scam likelihood.

    Every keyword found adds its category's full weight, so two urgency
    keywords count twice. Raises EmptyMessageError for blank input.
    """
    if not isinstance(message, str) or not message.strip():
        raise EmptyMessageError("Message is empty; nothing to analyze.")

    lower = message.lower()
    score = 0
    flags: List[str] = []

    for rule in RULES:
        for kw in rule.keywords:
            if kw in lower:
                score += rule.weight
                flags.append(f'{rule.title}: "{kw}"')

    if count_formatting_signals(message) >= GRAMMAR_MIN_MATCHES:
        score += GRAMMAR_WEIGHT
        flags.append("Suspicious formatting detected")

    if any(marker in lower for marker in LINK_MARKERS):
        score += LINK_WEIGHT
        flags.append("Contains external links")

    if len(message.strip()) < SHORT_MESSAGE_LENGTH:
        score += SHORT_MESSAGE_WEIGHT
        flags.append("Very short message")

    tier = classify(score)
    logger.debug(f"Analyzed message: score={score} tier={tier} flags={len(flags)}")

    return AnalysisResult(
        risk_score=score,
        risk_tier=tier,
        flags=tuple(flags),
        recommendation=RECOMMENDATIONS[tier],
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Score a message for scam likelihood.")
    parser.add_argument("message", nargs="?", help="message text (read from stdin if omitted)")
    parser.add_argument("--samples", action="store_true", help="score the bundled sample messages")
    args = parser.parse_args(argv)

    if args.samples:
        from samples import SAMPLE_MESSAGES
        out = [{"message": s, **analyze(s).to_dict()} for s in SAMPLE_MESSAGES]
        print(json.dumps(out, indent=2))
        return 0

    text = args.message if args.message is not None else sys.stdin.read()
    try:
        result = analyze(text)
    except EmptyMessageError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
