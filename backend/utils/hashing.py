# utils/hashing.py
from passlib.context import CryptContext

# Password hashing context (bcrypt, salted per hash)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def dummy_verify() -> None:
    # Burns the same time as a real verification when no account matched
    pwd_context.dummy_verify()
