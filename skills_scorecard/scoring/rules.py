"""Declarative scoring rules applied to SKILL.md text.

Rules are evaluated independently and in list order; the order also fixes
the order of the notes they produce.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class ScoreRule:
    """A single heuristic check over markdown text.

    A rule matches when its pattern (if any) is found in the text and the
    text is longer than min_length (if set).

    Attributes:
        key: Stable identifier for the rule
        weight: Points awarded (quality) or deducted (security) on a match
        note: Strength or finding recorded when the rule matches
        gap: Note recorded when a quality rule does not match
        pattern: Compiled regular expression searched anywhere in the text
        min_length: Text length that must be exceeded
    """
    key: str
    weight: int
    note: str
    gap: str = ""
    pattern: re.Pattern | None = None
    min_length: int | None = None

    def matches(self, text: str) -> bool:
        if self.min_length is not None and len(text) <= self.min_length:
            return False
        if self.pattern is not None and not self.pattern.search(text):
            return False
        return True


QUALITY_RULES: list[ScoreRule] = [
    ScoreRule(
        key="title",
        weight=20,
        pattern=re.compile(r"^#[ \t]+\S", re.MULTILINE),
        note="Has a clear top-level title.",
        gap="Add a top-level '# Title' heading.",
    ),
    ScoreRule(
        key="usage",
        weight=20,
        pattern=re.compile(r"usage|example|how to|quick start", re.IGNORECASE),
        note="Documents usage with examples.",
        gap="Add usage instructions or examples.",
    ),
    ScoreRule(
        key="sections",
        weight=15,
        pattern=re.compile(r"^##[ \t]+\S", re.MULTILINE),
        note="Organized into structured sections.",
        gap="Split the document into '##' sections.",
    ),
    ScoreRule(
        key="constraints",
        weight=20,
        pattern=re.compile(r"constraint|do not|must|never|required", re.IGNORECASE),
        note="States constraints and requirements.",
        gap="Document constraints (what the skill must or must not do).",
    ),
    ScoreRule(
        key="commands",
        weight=15,
        pattern=re.compile(r"```"),
        note="Includes commands or code snippets.",
        gap="Include runnable commands or code snippets.",
    ),
    ScoreRule(
        key="depth",
        weight=10,
        min_length=400,
        note="Provides sufficient detail.",
        gap="Expand the documentation beyond a short stub.",
    ),
]


SECURITY_RULES: list[ScoreRule] = [
    ScoreRule(
        key="destructive-delete",
        weight=25,
        pattern=re.compile(
            r"\brm\s+-[a-z]*(?:rf|fr)[a-z]*\b|\bmkfs\b|\bdd\s+if=|\bdrop\s+(?:table|database)\b",
            re.IGNORECASE,
        ),
        note="Destructive delete command detected (e.g. rm -rf).",
    ),
    ScoreRule(
        key="remote-exec",
        weight=25,
        pattern=re.compile(
            r"\b(?:curl|wget)\b[^\n|]*\|\s*(?:sudo\s+)?(?:ba|z)?sh\b",
            re.IGNORECASE,
        ),
        note="Pipes remote content into a shell (curl | sh).",
    ),
    ScoreRule(
        key="privilege",
        weight=10,
        pattern=re.compile(
            r"\bsudo\b|\bsu\s+root\b|\bdoas\b|\brun\s+as\s+administrator\b",
            re.IGNORECASE,
        ),
        note="Requests elevated privileges (sudo).",
    ),
    ScoreRule(
        key="dynamic-exec",
        weight=8,
        pattern=re.compile(
            r"\beval\b|\bexec\b|\bchild_process\b|\bsubprocess\b|\bos\.system\b",
            re.IGNORECASE,
        ),
        note="Uses dynamic code execution (eval/exec).",
    ),
    ScoreRule(
        key="credentials",
        weight=6,
        pattern=re.compile(
            r"\bapi[_ -]?keys?\b|\bsecrets?\b|\bpasswords?\b|\btokens?\b|\bcredentials?\b|\bprivate[_ -]?keys?\b",
            re.IGNORECASE,
        ),
        note="References credentials or secrets.",
    ),
    ScoreRule(
        key="network",
        weight=6,
        pattern=re.compile(r"https?://|\bcurl\b|\bwget\b|\bwebhooks?\b", re.IGNORECASE),
        note="Uses external network resources.",
    ),
]


SAFETY_RULE = ScoreRule(
    key="safety-language",
    weight=8,
    pattern=re.compile(
        r"\bconfirm(?:ation|s|ed)?\b|\bread[- ]only\b|\bnon[- ]destructive\b"
        r"|\bdry[- ]run\b|\bask (?:the )?user\b|\bpermissions?\b|\bapprov(?:al|e)\b",
        re.IGNORECASE,
    ),
    note="Includes safety/permission language.",
    gap="No safety/permission language detected.",
)
