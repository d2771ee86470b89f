"""/cashcards endpoints: HTTP Basic caller resolution and owner-scoped CRUD."""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from cashcard.core.config import Settings
from cashcard.domain.paging import InvalidSortError, page_request_from_query
from cashcard.schemas import CashCardRead, CashCardWrite
from cashcard.services.auth_service import AuthService, Caller, ForbiddenError, InvalidCredentialsError
from cashcard.services.cash_card_service import CashCardNotFoundError, CashCardService

router = APIRouter(prefix="/cashcards", tags=["cashcards"])
_basic = HTTPBasic(auto_error=False)

MAX_CARD_ID = 2**63 - 1


def _state(request: Request, name: str):
    value = getattr(getattr(request.app, "state", None), name, None)
    if value is None:
        raise RuntimeError(f"{name} is not configured")
    return value


def _get_cash_card_service(request: Request) -> CashCardService:
    return _state(request, "cash_card_service")


def _get_auth_service(request: Request) -> AuthService:
    return _state(request, "auth_service")


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Basic"},
    )


def current_card_owner(
    request: Request,
    credentials: Optional[HTTPBasicCredentials] = Depends(_basic),
) -> Caller:
    """Resolve the Basic credentials into a caller allowed to manage cash cards."""
    if credentials is None:
        raise _unauthorized()
    auth = _get_auth_service(request)
    try:
        caller = auth.authenticate(credentials.username, credentials.password)
    except InvalidCredentialsError:
        raise _unauthorized()
    try:
        return auth.require_card_owner(caller)
    except ForbiddenError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")


def _not_found() -> Response:
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/{card_id}", response_model=CashCardRead)
def get_cash_card(
    request: Request,
    card_id: int = Path(..., ge=-MAX_CARD_ID - 1, le=MAX_CARD_ID),
    caller: Caller = Depends(current_card_owner),
):
    svc = _get_cash_card_service(request)
    try:
        card = svc.get(card_id, caller.username)
    except CashCardNotFoundError:
        return _not_found()
    return CashCardRead.from_card(card)


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_cash_card(payload: CashCardWrite, request: Request, caller: Caller = Depends(current_card_owner)):
    svc = _get_cash_card_service(request)
    saved = svc.create(payload.amount, caller.username)
    location = str(request.url_for("get_cash_card", card_id=str(saved.id)))
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.get("", response_model=List[CashCardRead])
def list_cash_cards(
    request: Request,
    page: Optional[int] = Query(None, description="Zero-based page number"),
    size: Optional[int] = Query(None, description="Page size"),
    sort: Optional[List[str]] = Query(None, description="field[,asc|desc]; may be repeated"),
    caller: Caller = Depends(current_card_owner),
):
    settings: Settings = _state(request, "settings")
    try:
        page_request = page_request_from_query(
            page,
            size,
            sort,
            default_size=settings.default_page_size,
            max_size=settings.max_page_size,
        )
    except InvalidSortError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    svc = _get_cash_card_service(request)
    return [CashCardRead.from_card(card) for card in svc.list(caller.username, page_request)]


@router.put("/{card_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def put_cash_card(
    payload: CashCardWrite,
    request: Request,
    card_id: int = Path(..., ge=-MAX_CARD_ID - 1, le=MAX_CARD_ID),
    caller: Caller = Depends(current_card_owner),
):
    svc = _get_cash_card_service(request)
    try:
        svc.update(card_id, payload.amount, caller.username)
    except CashCardNotFoundError:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_cash_card(
    request: Request,
    card_id: int = Path(..., ge=-MAX_CARD_ID - 1, le=MAX_CARD_ID),
    caller: Caller = Depends(current_card_owner),
):
    svc = _get_cash_card_service(request)
    try:
        svc.delete(card_id, caller.username)
    except CashCardNotFoundError:
        return _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
