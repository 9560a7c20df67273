"""List users use case."""

import logfire

from accounts.application.usecase.base import BaseUseCase
from accounts.application.usecase.user.response import UserPageResponse
from accounts.domain.repository import PageParameters, UserRepository


class FindUsersUseCase(BaseUseCase):
    """Use case for listing users one page at a time."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, parameters: PageParameters) -> UserPageResponse:
        with logfire.span(
            "find_users.execute",
            page=parameters.page,
            size=parameters.size,
            order_by=parameters.order_by,
            direction=parameters.direction.value,
        ):
            page = await self.user_repository.find_all(parameters)
            logfire.info(
                "Listed users", count=len(page.items), total=page.total_items
            )
            return UserPageResponse.from_page(page)
