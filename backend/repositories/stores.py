# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Store singletons – one per entity.  Import from here, not from base."""

from typing import Optional

from sqlalchemy.orm import Session

from models.crop import Crop
from models.employee import Employee
from models.farm import Farm
from models.livestock import Livestock
from models.user import User
from repositories.base import RecordStore


class AccountStore(RecordStore[User]):
    """Credential store: adds identity and primary-key lookups."""

    def get_by_identity(self, db: Session, email: str) -> Optional[User]:
        return self._live(db).filter(User.email == email).first()

    def get_by_id(self, db: Session, pk: int) -> Optional[User]:
        return self._live(db).filter(User.id == pk).first()


accounts = AccountStore(User, "user_id")
farms = RecordStore(Farm, "farm_id", parent_attr="user_id")
crops = RecordStore(Crop, "crop_id", parent_attr="farm_id")
livestock = RecordStore(Livestock, "livestock_id", parent_attr="farm_id")
employees = RecordStore(Employee, "employee_id", parent_attr="farm_id")
