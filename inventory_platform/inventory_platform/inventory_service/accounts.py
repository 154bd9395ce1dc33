"""
Registration and login flows.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .auth import PasswordHasher, TokenService
from .errors import DuplicateUsername, InvalidCredentials, ValidationError
from .models import Account

logger = logging.getLogger(__name__)


class AccountService:
    def __init__(self, hasher: PasswordHasher, tokens: TokenService):
        self.hasher = hasher
        self.tokens = tokens

    def register(self, db: Session, username: str, password: str) -> Account:
        username = (username or "").strip()
        if not username or not password:
            raise ValidationError("Invalid registration data")

        try:
            digest = self.hasher.hash(password)
        except ValueError as exc:
            # passlib rejects oversized secrets
            raise ValidationError("Invalid registration data") from exc

        account = Account(username=username, password_hash=digest)
        db.add(account)
        try:
            db.commit()
        except IntegrityError as exc:
            # The unique constraint on username is the only arbiter of duplicates
            db.rollback()
            raise DuplicateUsername() from exc
        db.refresh(account)
        logger.info(f"Account created: account_id={account.id}, username={account.username}")
        return account

    def login(self, db: Session, username: str, password: str) -> str:
        # Same error for unknown user and wrong password
        account = self.find(db, (username or "").strip())
        if not account:
            self.hasher.dummy_verify()
            raise InvalidCredentials()
        if not self.hasher.verify(password, account.password_hash):
            raise InvalidCredentials()
        return self.tokens.issue(account.username)

    def find(self, db: Session, username: str):
        return db.query(Account).filter(Account.username == username).first()
