import secrets

RESET_CODE_MIN = 10000
RESET_CODE_MAX = 99999


def generate_reset_code() -> str:
    """Uniform 5-digit code in [10000, 99999]."""
    return str(RESET_CODE_MIN + secrets.randbelow(RESET_CODE_MAX - RESET_CODE_MIN + 1))
