from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


# Unsigned 16-bit, like the column's original uint16
Age = Annotated[StrictInt, Field(ge=0, le=65535)]


class Student(BaseModel):
    """
    Wire shape of a student. Missing keys and JSON null decode to the zero
    value; values of the wrong JSON type are rejected.
    """
    nim: StrictStr = ""
    name: StrictStr = ""
    age: Age = 0
    address: StrictStr = ""

    model_config = ConfigDict(from_attributes=True)

    @field_validator("nim", "name", "age", "address", mode="before")
    @classmethod
    def null_as_zero_value(cls, v, info):
        if v is None:
            return cls.model_fields[info.field_name].default
        return v
