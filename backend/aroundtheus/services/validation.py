"""
Credential validation – pure, regex-only structural checks.

The grammars are module constants with a version suffix so a policy change
(e.g. a longer minimum password) ships as a new constant instead of an
edit to the old one. `EMAIL_PATTERN` / `PASSWORD_PATTERN` point at the
version currently in force.
"""
import re
import string
from typing import Any, Mapping

from ..models.validation import Credentials, InputError, Verdict

# ───────────────────────────── e-mail ─────────────────────────────────
# local@domain.tld – tld is letters only, domain labels may repeat
EMAIL_PATTERN_V1 = re.compile(
    r"[A-Za-z0-9._%+-]+@(?:[A-Za-z0-9-]+\.)+[A-Za-z]+"
)
EMAIL_PATTERN = EMAIL_PATTERN_V1

# ──────────────────────────── password ────────────────────────────────
PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = string.punctuation


def build_password_pattern(
    min_length: int = PASSWORD_MIN_LENGTH,
    symbols: str = PASSWORD_SYMBOLS,
) -> re.Pattern[str]:
    """
    Regex requiring one upper, one lower, one digit and one symbol from
    `symbols`, with at least `min_length` characters overall.
    """
    sym = re.escape(symbols)
    return re.compile(
        r"(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])"
        rf"(?=.*[{sym}])"
        rf".{{{min_length},}}",
        re.DOTALL,
    )


PASSWORD_PATTERN_V1 = build_password_pattern(8, string.punctuation)
PASSWORD_PATTERN = PASSWORD_PATTERN_V1


def is_valid_email(value: Any, pattern: re.Pattern[str] = EMAIL_PATTERN) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def is_valid_password(
    value: Any, pattern: re.Pattern[str] = PASSWORD_PATTERN
) -> bool:
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def validate_user_input(
    credentials: Credentials | Mapping[str, Any],
    *,
    password_pattern: re.Pattern[str] = PASSWORD_PATTERN,
) -> Verdict:
    """
    Classify an e-mail/password pair.

    Accepts the pydantic model or any mapping with `email` / `password`
    keys; a missing key counts as an empty string. Never raises.
    """
    if isinstance(credentials, Credentials):
        email, password = credentials.email, credentials.password
    else:
        email = credentials.get("email", "")
        password = credentials.get("password", "")

    email_ok = is_valid_email(email)
    password_ok = is_valid_password(password, password_pattern)

    if email_ok and password_ok:
        return Verdict.success()
    if password_ok:
        return Verdict.failure(InputError.WRONG_EMAIL)
    if email_ok:
        return Verdict.failure(InputError.WRONG_PASSWORD)
    return Verdict.failure(InputError.INCORRECT_DATA)
