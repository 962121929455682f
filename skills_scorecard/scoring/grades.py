"""Score arithmetic and threshold labels."""

from skills_scorecard.models import Band, RiskLevel

QUALITY_WEIGHT = 6
SECURITY_WEIGHT = 4

BAND_THRESHOLDS = (
    (85, Band.EXCELLENT),
    (70, Band.GOOD),
    (50, Band.FAIR),
)

RISK_THRESHOLDS = (
    (85, RiskLevel.LOW),
    (65, RiskLevel.MEDIUM),
)


def clamp_score(score: int) -> int:
    return max(0, min(100, score))


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator/denominator to the nearest integer, halves upward.

    Works on non-negative integers only, so no float error creeps in.
    """
    if denominator <= 0:
        return 0
    return (2 * numerator + denominator) // (2 * denominator)


def overall_score(quality: int, security: int) -> int:
    """round(quality * 0.6 + security * 0.4)"""
    return round_half_up(QUALITY_WEIGHT * quality + SECURITY_WEIGHT * security, 10)


def mean_score(scores: list[int]) -> int:
    """Integer mean of scores, 0 for an empty list."""
    return round_half_up(sum(scores), len(scores))


def band_for_score(score: int) -> Band:
    for threshold, band in BAND_THRESHOLDS:
        if score >= threshold:
            return band
    return Band.NEEDS_WORK


def risk_for_score(score: int) -> RiskLevel:
    for threshold, risk in RISK_THRESHOLDS:
        if score >= threshold:
            return risk
    return RiskLevel.HIGH
