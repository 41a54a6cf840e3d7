# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Ownership guard.

A caller may only touch rows that hang off a farm they own:

    Crop / Livestock / Employee  →  Farm  →  Account

Every protected handler goes through :func:`authorize` (existing resource)
or :func:`authorize_farm` (create / list under a farm).  Resource kinds only
differ in how they are looked up and how their owning farm id is read, which
is what :class:`OwnedKind` captures.

The read-then-decide sequence is not wrapped in a transaction; farms are
never transferred between accounts, so there is nothing to race against.
"""

from dataclasses import dataclass
from typing import Any, Callable

from sqlalchemy.orm import Session

from core.errors import AccessDenied, AccountNotFound, ResourceNotFound, Unauthenticated
from core.logger import logger
from core.security import TokenClaims
from repositories import stores
from repositories.base import RecordStore


@dataclass(frozen=True)
class OwnedKind:
    name: str
    store: RecordStore
    owning_farm_key: Callable[[Any], str]


FARM = OwnedKind("farm", stores.farms, lambda farm: farm.farm_id)
CROP = OwnedKind("crop", stores.crops, lambda crop: crop.farm_id)
LIVESTOCK = OwnedKind("livestock", stores.livestock, lambda herd: herd.farm_id)
EMPLOYEE = OwnedKind("employee", stores.employees, lambda employee: employee.farm_id)


def resolve_account(db: Session, claims: TokenClaims | None):
    """
    Map a validated claim set to the live account row.

    Raises ``Unauthenticated`` without claims and ``AccountNotFound`` when
    the token outlived its account (soft-deleted since issuance).  The row is
    found by primary key and must still carry the token's email: a later
    signup reusing a deactivated email is a different account.
    """
    if claims is None:
        raise Unauthenticated()
    account = stores.accounts.get_by_id(db, claims.user_id)
    if account is None or account.email != claims.email:
        logger.info("Token for account %s refers to no live account", claims.user_id)
        raise AccountNotFound()
    return account


def _check_owner(account, farm, kind: OwnedKind, key: str) -> None:
    if farm is None or farm.user_id != account.user_id:
        logger.warning(
            "Access denied: account=%s %s=%s farm=%s",
            account.user_id,
            kind.name,
            key,
            farm.farm_id if farm is not None else None,
        )
        raise AccessDenied()


def authorize(db: Session, claims: TokenClaims | None, kind: OwnedKind, key: str):
    """
    Resolve *key* of *kind* and return it if the caller owns its farm.

    Order: account, resource, farm, owner comparison.  A resource whose farm
    has been soft-deleted is treated as not owned (AccessDenied).
    """
    account = resolve_account(db, claims)

    resource = kind.store.get_by_key(db, key)
    if resource is None:
        logger.info("%s %s not found", kind.name, key)
        raise ResourceNotFound(f"{kind.name} not found")

    if kind is FARM:
        farm = resource
    else:
        farm = stores.farms.get_by_key(db, kind.owning_farm_key(resource))

    _check_owner(account, farm, kind, key)
    return resource


def authorize_farm(db: Session, claims: TokenClaims | None, farm_key: str):
    """
    Create/list variant: there is no child resource yet, so the farm named
    by the caller is checked directly.  Returns ``(account, farm)``.
    """
    account = resolve_account(db, claims)

    farm = stores.farms.get_by_key(db, farm_key)
    if farm is None:
        logger.info("farm %s not found", farm_key)
        raise ResourceNotFound("farm not found")

    _check_owner(account, farm, FARM, farm_key)
    return account, farm
