"""
Registration and login endpoints. Neither goes through the auth gate.
"""
import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from ..accounts import AccountService
from ..deps import get_account_service, get_db
from ..errors import DuplicateUsername, InvalidCredentials
from ..schemas import AccountCredentials, ErrorResponse, RegistrationResponse, Token
from ..utils.event_logger import log_auth_event

logger = logging.getLogger(__name__)

router = APIRouter(tags=["accounts"])


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Username taken or invalid input", "model": ErrorResponse}},
)
def register(
    credentials: AccountCredentials,
    request: Request,
    db: Session = Depends(get_db),
    accounts: AccountService = Depends(get_account_service),
):
    try:
        account = accounts.register(db, credentials.username, credentials.password)
    except DuplicateUsername:
        logger.warning(f"[Register] Username taken: username={credentials.username}")
        raise
    log_auth_event("register", account.username, request)
    return RegistrationResponse()


@router.post(
    "/login",
    response_model=Token,
    responses={401: {"description": "Bad credentials", "model": ErrorResponse}},
)
def login(
    credentials: AccountCredentials,
    request: Request,
    db: Session = Depends(get_db),
    accounts: AccountService = Depends(get_account_service),
):
    try:
        token = accounts.login(db, credentials.username, credentials.password)
    except InvalidCredentials:
        log_auth_event("login_failure", credentials.username, request)
        raise
    log_auth_event("login_success", credentials.username, request)
    return Token(access_token=token)
