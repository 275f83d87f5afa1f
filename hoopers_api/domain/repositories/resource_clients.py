from typing import Annotated

import httpx
from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway, HttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.environment_variables import EnvironmentVariables
from hoopers_api.domain.exceptions import InvalidArgumentError
from hoopers_api.domain.repositories.client_repository import ClientRepository
from hoopers_api.domain.repositories.game_repository import GameRepository
from hoopers_api.domain.repositories.joined_run_repository import (
    JoinedRunRepository,
)
from hoopers_api.domain.repositories.order_repository import OrderRepository
from hoopers_api.domain.repositories.private_run_invite_repository import (
    PrivateRunInviteRepository,
)
from hoopers_api.domain.repositories.profile_repository import ProfileRepository
from hoopers_api.domain.repositories.report_repository import ReportRepository
from hoopers_api.domain.repositories.resource_repositories import (
    CourtRepository,
    PostRepository,
    PrivateRunRepository,
    ProductRepository,
    RequestRepository,
    SubscriptionRepository,
    VideoRepository,
)
from hoopers_api.domain.repositories.run_repository import RunRepository
from hoopers_api.domain.repositories.user_repository import UserRepository
from hoopers_api.utils.model_utils import normalize_key


class ResourceClients:
    """
    One client per backend resource, all sharing a single HTTP gateway.

    Inside a FastAPI app this is resolved with `DResourceClients`; elsewhere use
    `ResourceClients.from_httpx_client` with your own `httpx.AsyncClient`.
    """

    def __init__(
        self,
        http: DHttpxGateway,
        environment_variables: DEnvironmentVariables,
    ):
        self.runs = RunRepository(http, environment_variables)
        self.games = GameRepository(http, environment_variables)
        self.users = UserRepository(http, environment_variables)
        self.profiles = ProfileRepository(http, environment_variables)
        self.products = ProductRepository(http, environment_variables)
        self.videos = VideoRepository(http, environment_variables)
        self.posts = PostRepository(http, environment_variables)
        self.requests = RequestRepository(http, environment_variables)
        self.subscriptions = SubscriptionRepository(http, environment_variables)
        self.private_runs = PrivateRunRepository(http, environment_variables)
        self.private_run_invites = PrivateRunInviteRepository(
            http, environment_variables
        )
        self.orders = OrderRepository(http, environment_variables)
        self.joined_runs = JoinedRunRepository(http, environment_variables)
        self.clients = ClientRepository(http, environment_variables)
        self.courts = CourtRepository(http, environment_variables)
        self.reports = ReportRepository(http)

    @classmethod
    def from_httpx_client(
        cls,
        client: httpx.AsyncClient,
        environment_variables: EnvironmentVariables | None = None,
    ) -> "ResourceClients":
        return cls(
            HttpxGateway(client),
            environment_variables or EnvironmentVariables.refresh(),
        )

    def all(self) -> list[RestResourceClient]:
        return [
            value
            for value in vars(self).values()
            if isinstance(value, RestResourceClient)
        ]

    def for_resource(self, name: str) -> RestResourceClient:
        wanted = normalize_key(name or "")
        for client in self.all():
            if normalize_key(client.name) == wanted:
                return client
        raise InvalidArgumentError(f"Unknown resource {name!r}")


DResourceClients = Annotated[ResourceClients, Depends(ResourceClients)]
