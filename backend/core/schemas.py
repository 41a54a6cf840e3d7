# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""Base model shared by every request/response schema: camelCase on the wire."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # Accept both ``farmType`` and ``farm_type`` on input; emit camelCase.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Envelope(CamelModel):
    success: bool = True
    message: str


class UpdateModel(CamelModel):
    """
    Partial-update body.  Only fields present in the request are applied.
    An explicit null clears a field listed in ``clearable`` (nullable
    columns) and is ignored for every other field.
    """

    clearable: ClassVar[frozenset] = frozenset()

    def apply_to(self, obj) -> None:
        for field, value in self.model_dump(exclude_unset=True).items():
            if value is None and field not in self.clearable:
                continue
            setattr(obj, field, value)
