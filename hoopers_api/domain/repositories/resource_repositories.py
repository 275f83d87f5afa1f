"""Clients for resources that only need the shared CRUD and cursor operations."""

from typing import Annotated

from fastapi import Depends

from hoopers_api.adapters.http.adapter_httpx import DHttpxGateway
from hoopers_api.adapters.resource_api.adapter_rest import RestResourceClient
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import (
    COURT,
    POST,
    PRIVATE_RUN,
    PRODUCT,
    REQUEST,
    SUBSCRIPTION,
    VIDEO,
)
from hoopers_api.domain.entities.courts import CourtEntity
from hoopers_api.domain.entities.posts import PostEntity
from hoopers_api.domain.entities.private_runs import PrivateRunEntity
from hoopers_api.domain.entities.products import ProductEntity
from hoopers_api.domain.entities.requests import RequestDetailEntity, RequestEntity
from hoopers_api.domain.entities.subscriptions import SubscriptionEntity
from hoopers_api.domain.entities.videos import VideoEntity


class ProductRepository(RestResourceClient[ProductEntity, ProductEntity]):
    def __init__(
        self, http: DHttpxGateway, environment_variables: DEnvironmentVariables
    ):
        super().__init__(PRODUCT, http, environment_variables)


class VideoRepository(RestResourceClient[VideoEntity, VideoEntity]):
    def __init__(
        self, http: DHttpxGateway, environment_variables: DEnvironmentVariables
    ):
        super().__init__(VIDEO, http, environment_variables)


class PostRepository(RestResourceClient[PostEntity, PostEntity]):
    def __init__(
        self, http: DHttpxGateway, environment_variables: DEnvironmentVariables
    ):
        super().__init__(POST, http, environment_variables)


class RequestRepository(RestResourceClient[RequestEntity, RequestDetailEntity]):
    def __init__(
        self, http: DHttpxGateway, environment_variables: DEnvironmentVariables
    ):
        super().__init__(REQUEST, http, environment_variables)


class SubscriptionRepository(
    RestResourceClient[SubscriptionEntity, SubscriptionEntity]
):
    def __init__(
        self, http: DHttpxGateway, environment_variables: DEnvironmentVariables
    ):
        super().__init__(SUBSCRIPTION, http, environment_variables)


class PrivateRunRepository(RestResourceClient[PrivateRunEntity, PrivateRunEntity]):
    def __init__(
        self, http: DHttpxGateway, environment_variables: DEnvironmentVariables
    ):
        super().__init__(PRIVATE_RUN, http, environment_variables)


class CourtRepository(RestResourceClient[CourtEntity, CourtEntity]):
    def __init__(
        self, http: DHttpxGateway, environment_variables: DEnvironmentVariables
    ):
        super().__init__(COURT, http, environment_variables)


DProductRepository = Annotated[ProductRepository, Depends(ProductRepository)]
DVideoRepository = Annotated[VideoRepository, Depends(VideoRepository)]
DPostRepository = Annotated[PostRepository, Depends(PostRepository)]
DRequestRepository = Annotated[RequestRepository, Depends(RequestRepository)]
DSubscriptionRepository = Annotated[
    SubscriptionRepository, Depends(SubscriptionRepository)
]
DPrivateRunRepository = Annotated[PrivateRunRepository, Depends(PrivateRunRepository)]
DCourtRepository = Annotated[CourtRepository, Depends(CourtRepository)]
