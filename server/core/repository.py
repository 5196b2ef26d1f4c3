# server/core/repository.py

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from models.task import Task, TaskStatus
from models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def exists_by_username(self, username: str) -> bool:
        return self.db.query(User.id).filter(User.username == username).first() is not None

    def find_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username).first()

    def save(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user


class TaskRepository:
    """
    Task queries, always filtered by owner.
    Lookups by id take the user id too, so a task owned by someone else
    is never loaded at all.
    """

    def __init__(self, db: Session):
        self.db = db

    def find_all_by_user(self, user_id: str) -> list[Task]:
        return (
            self.db.query(Task)
            .filter(Task.user_id == user_id)
            .order_by(Task.created_at.desc())
            .all()
        )

    def find_by_id_and_user(self, task_id: str, user_id: str) -> Task | None:
        return self.db.query(Task).filter(Task.id == task_id, Task.user_id == user_id).first()

    def count_by_user_and_status(self, user_id: str, status: TaskStatus) -> int:
        return self.db.query(Task).filter(Task.user_id == user_id, Task.status == status).count()

    def count_by_user(self, user_id: str) -> int:
        return self.db.query(Task).filter(Task.user_id == user_id).count()

    def save(self, task: Task) -> Task:
        self.db.add(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def delete(self, task: Task):
        self.db.delete(task)
        self.db.commit()
