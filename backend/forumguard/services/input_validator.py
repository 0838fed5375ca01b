"""
ForumGuard Backend — Input Sanity Validator
=============================================

What:  Screens a single free-text field (username, password, post or reply
       body) for SQL-injection-shaped input and returns a verdict.
Why:   Early warning for the UI. The forum store uses parameterized queries,
       which are the actual injection defense; this validator only lets
       the client explain to the user why an input was refused before it
       is ever sent. A miss here is not a breach; a false positive blocks a
       legitimate user.
How:   An ordered tuple of independent rules. Each rule inspects the input
       and either matches or not. The first matching rule decides the
       verdict and its reason string, cheap checks first.

Rule order (first match wins):
    1. empty or None            → safe
    2. comment_syntax           → "SQL comment syntax detected"
    3. sql_keyword              → "SQL keyword detected"
    4. quote_logic              → "Suspicious quote pattern detected"
    5. statement_separator      → "Invalid character (;) detected"
    6. logic_pattern            → "Suspicious SQL logic pattern detected"

Known Tradeoff (logic_pattern):
    The last rule also rejects any text containing "OR " or "AND "
    (case-insensitive) anywhere, including inside words: "Tips for exams"
    is rejected because of "FOR ". This matches the forum's established
    behavior; loosening it changes which inputs the login and posting
    screens accept.

Thread Safety:
    Module-level compiled patterns are immutable; validate() has no state,
    no I/O and no logging. Safe to call from any thread or coroutine.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple


SQL_COMMENT_TOKENS: Tuple[str, ...] = ("--", "/*", "*/", "#")

SQL_KEYWORDS: Tuple[str, ...] = (
    "UNION", "SELECT", "INSERT", "UPDATE", "DELETE", "DROP",
    "CREATE", "ALTER", "EXEC", "EXECUTE", "SCRIPT", "DECLARE",
    "ORDER BY", "HAVING", "GROUP BY", "CASE", "WHEN",
)

# \b on both sides: "SELECTED" must not match "SELECT"
_KEYWORD_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(keyword) for keyword in SQL_KEYWORDS) + r")\b",
    re.IGNORECASE,
)

# ' OR '   " AND "   '  xor"   (either quote may open or close)
_QUOTE_LOGIC_PATTERN = re.compile(r"['\"]\s*(?:OR|AND|XOR)\s*['\"]", re.IGNORECASE)

# OR 1=1, AND 'a'='a', OR true, AND false
_LOGIC_COMPARISON_PATTERN = re.compile(
    r"(?:OR|AND)\s*(?:1\s*=\s*1|'.*'\s*=\s*'.*'|TRUE|FALSE)",
    re.IGNORECASE,
)
# OR x=y, AND id = 5
_LOGIC_CONDITION_PATTERN = re.compile(r"(?:OR|AND)\s+.*=", re.IGNORECASE)
_STANDALONE_LOGIC_TOKENS: Tuple[str, ...] = ("OR ", "AND ")


@dataclass(frozen=True)
class ValidationResult:
    """
    Verdict for one input.

    Use the constructors instead of building instances directly:
        ValidationResult.ok()
        ValidationResult.rejected("sql_keyword", "SQL keyword detected")
    """

    safe: bool
    reason: Optional[str] = None
    rule: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(safe=True)

    @classmethod
    def rejected(cls, rule: str, reason: str) -> "ValidationResult":
        return cls(safe=False, reason=reason, rule=rule)

    @property
    def message(self) -> str:
        """Display text for the UI label; empty string when the input is safe."""
        if self.safe:
            return ""
        return f"ERROR: {self.reason}. This input is not allowed."


@dataclass(frozen=True)
class ValidationRule:
    """One named check with the reason it reports when it matches."""

    name: str
    reason: str
    matches: Callable[[str], bool]

    def check(self, text: str) -> Optional[ValidationResult]:
        """Returns a rejection if this rule matches, else None."""
        if self.matches(text):
            return ValidationResult.rejected(self.name, self.reason)
        return None


def contains_comment_syntax(text: str) -> bool:
    """Case-sensitive scan for --, /*, */ and #."""
    return any(token in text for token in SQL_COMMENT_TOKENS)


def contains_sql_keyword(text: str) -> bool:
    """Whole-word, case-insensitive scan for statement keywords."""
    return _KEYWORD_PATTERN.search(text) is not None


def contains_quote_logic(text: str) -> bool:
    return _QUOTE_LOGIC_PATTERN.search(text) is not None


def contains_statement_separator(text: str) -> bool:
    return ";" in text


def contains_suspicious_logic(text: str) -> bool:
    """
    Any of three shapes, all case-insensitive:
        - OR/AND followed by 1=1, a quoted equality, true or false
        - OR/AND, whitespace, then anything containing "="
        - the bare substring "OR " or "AND " anywhere
    """
    if _LOGIC_COMPARISON_PATTERN.search(text):
        return True
    if _LOGIC_CONDITION_PATTERN.search(text):
        return True
    upper = text.upper()
    return any(token in upper for token in _STANDALONE_LOGIC_TOKENS)


RULES: Tuple[ValidationRule, ...] = (
    ValidationRule("comment_syntax", "SQL comment syntax detected", contains_comment_syntax),
    ValidationRule("sql_keyword", "SQL keyword detected", contains_sql_keyword),
    ValidationRule("quote_logic", "Suspicious quote pattern detected", contains_quote_logic),
    ValidationRule(
        "statement_separator", "Invalid character (;) detected", contains_statement_separator
    ),
    ValidationRule(
        "logic_pattern", "Suspicious SQL logic pattern detected", contains_suspicious_logic
    ),
)


def validate(text: Optional[str]) -> ValidationResult:
    """
    Classify `text` as safe or rejected.

    Args:
        text: The raw field value. None and "" are safe; required-field
              checks belong to the caller.

    Returns:
        ValidationResult.ok() or the rejection of the first matching rule.
    """
    if not text:
        return ValidationResult.ok()

    for rule in RULES:
        verdict = rule.check(text)
        if verdict is not None:
            return verdict
    return ValidationResult.ok()
