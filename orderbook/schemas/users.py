# orderbook/schemas/users.py

from pydantic import BaseModel, EmailStr, constr

# helper types
Name = constr(strip_whitespace=True, min_length=1, max_length=100)
Username = constr(strip_whitespace=True, min_length=2, max_length=64)
Password = constr(min_length=6, max_length=128)


class UserCreate(BaseModel):
    first_name: Name
    last_name: Name
    user_name: Username
    email: EmailStr
    password: Password


# full replacement, like the create payload
class UserUpdate(UserCreate):
    pass


class UserOut(BaseModel):
    id: str
    first_name: str
    last_name: str
    user_name: str
    email: str
