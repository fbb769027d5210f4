"""Domain layer DI providers."""

from dishka import Scope, provide

from humor.config import AuthSettings, ContentSettings, NotificationSettings
from humor.domain.repository import (
    NotificationRepository,
    PostRepository,
    UserRepository,
)
from humor.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    PostService,
    ReactionService,
    UserService,
)
from humor.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Services are REQUEST-scoped to share the request's repositories and,
    in production, its database transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, content_settings: ContentSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, content_settings=content_settings
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, content_settings: ContentSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, content_settings=content_settings
        )

    @provide
    def get_notification_service(
        self,
        notification_repository: NotificationRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
        notification_settings: NotificationSettings,
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            user_repository=user_repository,
            post_repository=post_repository,
            notification_settings=notification_settings,
        )

    @provide
    def get_reaction_service(
        self, post_service: PostService, notification_service: NotificationService
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            post_service=post_service, notification_service=notification_service
        )

    @provide
    def get_comment_service(
        self, post_service: PostService, notification_service: NotificationService
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            post_service=post_service, notification_service=notification_service
        )
