from typing import Optional

from werkzeug.security import generate_password_hash

POLICY_HASH = "hash"
POLICY_PLAIN = "plain"
POLICIES = (POLICY_HASH, POLICY_PLAIN)


class PasswordPolicy:
    """How a submitted login password is written to the audit log."""

    def __init__(self, mode: str = POLICY_HASH):
        mode = (mode or POLICY_HASH).lower()
        if mode not in POLICIES:
            raise ValueError(f"PASSWORD_POLICY must be one of {POLICIES}, got {mode!r}")
        self.mode = mode

    def prepare(self, password: Optional[str]) -> Optional[str]:
        # Missing passwords are stored as NULL under either policy
        if password is None:
            return None
        if self.mode == POLICY_PLAIN:
            return password
        return generate_password_hash(str(password))

