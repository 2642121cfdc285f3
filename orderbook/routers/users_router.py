# orderbook/routers/users_router.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from orderbook.queries import UserQueries
from orderbook.routers.deps import get_user_queries
from orderbook.schemas.users import UserCreate, UserOut, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


def _found(u):
    if u is None:
        raise HTTPException(status_code=404, detail="User not found")
    return u


@router.post("/", response_model=UserOut, status_code=201)
def create_user(body: UserCreate, users: UserQueries = Depends(get_user_queries)):
    return users.create(body)


@router.get("/", response_model=List[UserOut])
def list_users(users: UserQueries = Depends(get_user_queries)):
    return users.show_all()


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, users: UserQueries = Depends(get_user_queries)):
    return _found(users.show(user_id))


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: str, body: UserUpdate, users: UserQueries = Depends(get_user_queries)):
    return _found(users.update(user_id, body))


@router.delete("/{user_id}", response_model=UserOut)
def delete_user(user_id: str, users: UserQueries = Depends(get_user_queries)):
    return _found(users.delete(user_id))
