import hmac

from cryptography.fernet import Fernet, InvalidToken

from wisdom_lenses.config import get_settings


def get_fernet() -> Fernet:
    settings = get_settings()
    key = settings.MEMO_TOKEN_KEY
    return Fernet(key.encode() if isinstance(key, str) else key)


def encrypt_token(token: str) -> bytes:
    """Encrypt a memo edit token using Fernet symmetric encryption."""
    f = get_fernet()
    return f.encrypt(token.encode("utf-8"))


def decrypt_token(encrypted: bytes) -> str:
    """Decrypt a Fernet-encrypted memo edit token back to text."""
    f = get_fernet()
    return f.decrypt(encrypted).decode("utf-8")


def token_matches(encrypted: bytes, candidate: str) -> bool:
    """Constant-time comparison of a presented token with the stored one."""
    try:
        stored = decrypt_token(encrypted)
    except InvalidToken:
        return False
    return hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8"))
