"""Dependency injection type aliases."""

from typing import Annotated

from fastapi import Depends, Request

from stellar_explain.services.account_service import AccountService
from stellar_explain.services.explain_service import ExplainService


def get_explain_service(request: Request) -> ExplainService:
    return request.app.state.explain_service


def get_account_service(request: Request) -> AccountService:
    return request.app.state.account_service


ExplainServiceDep = Annotated[ExplainService, Depends(get_explain_service)]
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]

__all__ = [
    "AccountServiceDep",
    "ExplainServiceDep",
    "get_account_service",
    "get_explain_service",
]
