from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    if not isinstance(password, str):
        password = str(password)
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    if not isinstance(plain_password, str):
        plain_password = str(plain_password)
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # plain-text rows left by older deck files never verify
        return False
