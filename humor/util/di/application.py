"""Application layer DI providers."""

from dishka import Scope, provide

from humor.application.usecase.auth import LoginUseCase, SignupUseCase
from humor.application.usecase.comment import (
    CreateCommentUseCase,
    ReactToCommentUseCase,
)
from humor.application.usecase.notification import (
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkReadUseCase,
    UnreadCountUseCase,
)
from humor.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ReactToPostUseCase,
    UpdatePostUseCase,
)
from humor.application.usecase.user import GetUserUseCase, ListUsersUseCase
from humor.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    PostService,
    ReactionService,
    UserService,
)
from humor.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_signup_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(user_service=user_service, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self, user_service: UserService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(user_service=user_service, jwt_service=jwt_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(post_service=post_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_react_to_post_use_case(
        self, reaction_service: ReactionService, user_service: UserService
    ) -> ReactToPostUseCase:
        """Provide react to post use case."""
        return ReactToPostUseCase(
            reaction_service=reaction_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_react_to_comment_use_case(
        self, reaction_service: ReactionService, user_service: UserService
    ) -> ReactToCommentUseCase:
        """Provide react to comment use case."""
        return ReactToCommentUseCase(
            reaction_service=reaction_service, user_service=user_service
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(
            notification_service=notification_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService, user_service: UserService
    ) -> MarkReadUseCase:
        """Provide mark notification read use case."""
        return MarkReadUseCase(
            notification_service=notification_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all notifications read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> UnreadCountUseCase:
        """Provide unread count use case."""
        return UnreadCountUseCase(notification_service=notification_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(self, user_service: UserService) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)
