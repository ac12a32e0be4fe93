"""Loads the post, comment or user a report or action points at."""

from typing import TypeAlias
from uuid import UUID

from claycraft_api.database.models.base import Publishable
from claycraft_api.database.models.base import TargetRef
from claycraft_api.database.models.base import TargetType
from claycraft_api.database.models.comment import Comment
from claycraft_api.database.models.post import Post
from claycraft_api.database.models.user import User
from claycraft_api.database.repositories.comment import CommentRepository
from claycraft_api.database.repositories.post import PostRepository
from claycraft_api.database.repositories.user import UserRepository
from claycraft_api.services.errors import NotFoundError

ModerationTarget: TypeAlias = Post | Comment | User


class TargetService:
    """Resolves polymorphic targets and toggles publish flags."""

    def __init__(
        self,
        post_repo: PostRepository | None = None,
        comment_repo: CommentRepository | None = None,
        user_repo: UserRepository | None = None,
    ) -> None:
        self.post_repo = post_repo or PostRepository()
        self.comment_repo = comment_repo or CommentRepository()
        self.user_repo = user_repo or UserRepository()

    async def load(self, target: TargetRef) -> ModerationTarget:
        """Fetch the target entity or raise ``NotFoundError``."""
        entity: ModerationTarget | None
        if target.target_type == TargetType.POST:
            entity = await self.post_repo.get_by_pk(target.target_pk)
        elif target.target_type == TargetType.COMMENT:
            entity = await self.comment_repo.get_by_pk(target.target_pk)
        else:
            entity = await self.user_repo.get_by_pk(target.target_pk)

        if entity is None:
            raise NotFoundError(
                f"{target.target_type.value.capitalize()} {target.target_pk} not found"
            )
        return entity

    async def load_author(self, target: ModerationTarget) -> User:
        """Get the user responsible for a target; a user is their own author."""
        if isinstance(target, User):
            return target
        return await self.load_user(target.author_pk)

    async def load_user(self, user_pk: UUID) -> User:
        """Fetch a user or raise ``NotFoundError``."""
        user = await self.user_repo.get_by_pk(user_pk)
        if user is None:
            raise NotFoundError(f"User {user_pk} not found")
        return user

    async def set_published(self, content: Publishable, *, published: bool) -> None:
        """Toggle the publish flag on content that has one."""
        if isinstance(content, Post):
            await self.post_repo.set_published(content.pk, published=published)
