from pydantic import BaseModel

class UserBase(BaseModel):
    name: str
    surname: str
    email: str

class UserRead(UserBase):
    id: int
    role_id: int

    class Config:
        from_attributes = True
