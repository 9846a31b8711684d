from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire.

    Inputs accept either spelling.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InputModel(CamelModel):
    """Action payload: optional fields may be omitted but never sent as null."""

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value):
        # Defaults are not validated, so this only sees values the client sent
        if value is None:
            raise ValueError("must not be null; omit the field instead")
        return value
