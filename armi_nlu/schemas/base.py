"""
Shared base for contract models.

Attributes are snake_case in Python and camelCase on the wire, which is
the shape the LLM collaborator emits and downstream callers consume.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ContractModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Serialize with camelCase keys and ISO-8601 timestamps."""
        return self.model_dump(by_alias=True, mode="json")
