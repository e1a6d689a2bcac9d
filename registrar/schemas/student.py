from pydantic import BaseModel, ConfigDict


class StudentSchema(BaseModel):
    """Student as handed to and returned by the student store.

    ``id`` stays 0 until the row is inserted.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = 0
    full_name: str
    national_id: str
    email: str
    phone: str
    active: bool = True
