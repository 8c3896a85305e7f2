# app/utils/codes.py
import secrets

REDEMPTION_CODE_LENGTH = 8


def generate_redemption_code(length: int = REDEMPTION_CODE_LENGTH) -> str:
    """Случайный код из шестнадцатеричных символов в верхнем регистре, например '9F3A07C2'."""
    return secrets.token_hex((length + 1) // 2)[:length].upper()
