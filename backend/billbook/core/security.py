import hashlib
import hmac
import secrets

PBKDF2_ITERATIONS = 100000


def hash_password(password: str) -> str:
    """Salted PBKDF2-SHA256 hash, stored as ``salt$hexdigest``."""
    salt = secrets.token_hex(16)
    hash_obj = hashlib.pbkdf2_hmac(
        'sha256',
        password.encode('utf-8'),
        salt.encode('utf-8'),
        PBKDF2_ITERATIONS
    )
    return f"{salt}${hash_obj.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        salt, stored_hash = password_hash.split('$')
    except ValueError:
        return False

    hash_obj = hashlib.pbkdf2_hmac(
        'sha256',
        password.encode('utf-8'),
        salt.encode('utf-8'),
        PBKDF2_ITERATIONS
    )
    return hmac.compare_digest(hash_obj.hex(), stored_hash)
