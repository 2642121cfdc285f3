# orderbook/queries/user_queries.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from orderbook.database.session import unit_of_work
from orderbook.models.user_model import User
from orderbook.schemas.users import UserCreate, UserOut, UserUpdate


def _to_out(u: User) -> UserOut:
    return UserOut(
        id=u.id,
        first_name=u.first_name,
        last_name=u.last_name,
        user_name=u.user_name,
        email=u.email,
    )


class UserQueries:
    def __init__(self, session_factory: sessionmaker, default_timeout: Optional[float] = None):
        self._session_factory = session_factory
        self._default_timeout = default_timeout

    def _unit(self, timeout: Optional[float]):
        return unit_of_work(
            self._session_factory,
            timeout if timeout is not None else self._default_timeout,
        )

    def create(self, body: UserCreate, timeout: Optional[float] = None) -> UserOut:
        with self._unit(timeout) as db:
            u = User(
                first_name=body.first_name,
                last_name=body.last_name,
                user_name=body.user_name,
                email=str(body.email),
                password=body.password,
            )
            db.add(u)
            db.flush()
            return _to_out(u)

    def show(self, user_id: str, timeout: Optional[float] = None) -> Optional[UserOut]:
        with self._unit(timeout) as db:
            u = db.get(User, user_id)
            return _to_out(u) if u else None

    def show_all(self, timeout: Optional[float] = None) -> List[UserOut]:
        with self._unit(timeout) as db:
            users = db.execute(select(User).order_by(User.user_name)).scalars().all()
            return [_to_out(u) for u in users]

    def update(self, user_id: str, body: UserUpdate, timeout: Optional[float] = None) -> Optional[UserOut]:
        with self._unit(timeout) as db:
            u = db.get(User, user_id)
            if u is None:
                return None
            u.first_name = body.first_name
            u.last_name = body.last_name
            u.user_name = body.user_name
            u.email = str(body.email)
            u.password = body.password
            db.flush()
            return _to_out(u)

    def delete(self, user_id: str, timeout: Optional[float] = None) -> Optional[UserOut]:
        with self._unit(timeout) as db:
            u = db.get(User, user_id)
            if u is None:
                return None
            last_known = _to_out(u)
            db.delete(u)
            db.flush()
            return last_known
