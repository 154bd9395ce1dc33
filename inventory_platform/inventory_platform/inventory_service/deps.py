from typing import Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from .accounts import AccountService
from .auth import TokenError, TokenService
from .errors import InvalidToken, MissingToken
from .inventory import InventoryService
from .models import Account
from .utils.event_logger import log_auth_event


class AuthGate:
    """
    Per-request authentication stage for protected routes.

    ``authenticate`` either returns the Account behind a bearer token or
    raises: ``MissingToken`` when no credentials were sent, ``InvalidToken``
    for everything else. Which token check failed is never exposed.
    """

    def __init__(self, tokens: TokenService, accounts: AccountService):
        self.tokens = tokens
        self.accounts = accounts

    @staticmethod
    def extract_token(authorization: Optional[str]) -> str:
        if not authorization or not authorization.strip():
            raise MissingToken()
        scheme, _, token = authorization.strip().partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise InvalidToken()
        return token.strip()

    def authenticate(self, db: Session, authorization: Optional[str], request: Optional[Request] = None) -> Account:
        token = self.extract_token(authorization)
        try:
            username = self.tokens.verify(token)
        except TokenError as exc:
            log_auth_event("token_rejected", None, request, reason=type(exc).__name__)
            raise InvalidToken() from exc

        account = self.accounts.find(db, username)
        if not account:
            log_auth_event("token_rejected", username, request, reason="UnknownAccount")
            raise InvalidToken()
        return account


def get_db(request: Request) -> Generator[Session, None, None]:
    yield from request.app.state.database.session()


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


def get_inventory_service(request: Request) -> InventoryService:
    return request.app.state.inventory_service


def get_auth_gate(request: Request) -> AuthGate:
    return request.app.state.auth_gate


def get_current_account(
    request: Request,
    db: Session = Depends(get_db),
    gate: AuthGate = Depends(get_auth_gate),
    authorization: Optional[str] = Header(default=None, alias="Authorization"),
) -> Account:
    return gate.authenticate(db, authorization, request)
