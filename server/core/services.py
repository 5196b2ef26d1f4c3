# server/core/services.py

import logging
from sqlalchemy.exc import IntegrityError
from core.errors import (
    InvalidCredentialsError,
    TaskNotFoundError,
    UserNotFoundError,
    UsernameAlreadyExistsError,
)
from core.repository import TaskRepository, UserRepository
from core.schemas import AuthResponse, TaskRequest, TaskStats
from core.security import PasswordHasher, TokenIssuer
from models.task import Task, TaskStatus
from models.user import User


logger = logging.getLogger(__name__)


# -------------------------------
# Users & Authentication
# -------------------------------

class UserService:
    def __init__(self, users: UserRepository, hasher: PasswordHasher):
        self.users = users
        self.hasher = hasher

    def create_user(self, username: str, password: str) -> User:
        if self.users.exists_by_username(username):
            raise UsernameAlreadyExistsError(username)

        user = User(username=username, hashed_password=self.hasher.hash(password))
        try:
            saved = self.users.save(user)
        except IntegrityError as e:
            # lost a race with a concurrent registration
            raise UsernameAlreadyExistsError(username) from e

        logger.info("User created: %s", username)
        return saved

    def find_by_username(self, username: str) -> User:
        user = self.users.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)
        return user

    def check_password(self, user: User, raw_password: str) -> bool:
        return self.hasher.verify(raw_password, user.hashed_password)


class AuthService:
    def __init__(self, user_service: UserService, token_issuer: TokenIssuer):
        self.user_service = user_service
        self.token_issuer = token_issuer

    def register(self, username: str, password: str) -> AuthResponse:
        user = self.user_service.create_user(username, password)
        token = self.token_issuer.issue(user.username, user.id)

        logger.info("User registered successfully: %s", user.username)
        return AuthResponse(token=token, username=user.username)

    def login(self, username: str, password: str) -> AuthResponse:
        user = self.user_service.find_by_username(username)

        if not self.user_service.check_password(user, password):
            logger.warning("Invalid login attempt for user: %s", username)
            raise InvalidCredentialsError()

        token = self.token_issuer.issue(user.username, user.id)

        logger.info("User logged in successfully: %s", user.username)
        return AuthResponse(token=token, username=user.username)


# -------------------------------
# Tasks
# -------------------------------

class TaskService:
    """
    Per-user task operations.
    Every lookup goes through TaskRepository.find_by_id_and_user, so a task
    belonging to another user is reported exactly like a missing one.
    """

    def __init__(self, tasks: TaskRepository):
        self.tasks = tasks

    def list_tasks(self, user_id: str) -> list[Task]:
        return self.tasks.find_all_by_user(user_id)

    def get_task(self, task_id: str, user_id: str) -> Task:
        return self._find_owned(task_id, user_id)

    def create_task(self, data: TaskRequest, user_id: str) -> Task:
        task = Task(
            title=data.title,
            description=data.description,
            status=data.status or TaskStatus.TODO,
            user_id=user_id,
        )
        saved = self.tasks.save(task)
        logger.info("Task created: %s for user: %s", saved.id, user_id)
        return saved

    def update_task(self, task_id: str, data: TaskRequest, user_id: str) -> Task:
        task = self._find_owned(task_id, user_id)

        # title and description are replaced as sent; status only when present
        task.title = data.title
        task.description = data.description
        if data.status is not None:
            task.status = data.status

        updated = self.tasks.save(task)
        logger.info("Task updated: %s for user: %s", task_id, user_id)
        return updated

    def update_status(self, task_id: str, status: TaskStatus, user_id: str) -> Task:
        task = self._find_owned(task_id, user_id)
        task.status = status

        updated = self.tasks.save(task)
        logger.info("Task status updated: %s to %s for user: %s", task_id, status.value, user_id)
        return updated

    def delete_task(self, task_id: str, user_id: str):
        task = self._find_owned(task_id, user_id)
        self.tasks.delete(task)
        logger.info("Task deleted: %s for user: %s", task_id, user_id)

    def get_stats(self, user_id: str) -> TaskStats:
        return TaskStats(
            todo=self.tasks.count_by_user_and_status(user_id, TaskStatus.TODO),
            in_progress=self.tasks.count_by_user_and_status(user_id, TaskStatus.IN_PROGRESS),
            completed=self.tasks.count_by_user_and_status(user_id, TaskStatus.COMPLETED),
            total=self.tasks.count_by_user(user_id),
        )

    def _find_owned(self, task_id: str, user_id: str) -> Task:
        task = self.tasks.find_by_id_and_user(task_id, user_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
