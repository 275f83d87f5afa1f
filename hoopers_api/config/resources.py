"""
Resource definitions for every backend resource.

A definition carries everything the generic client and the reference backend
need to talk about a resource: its route name, its wire types, the attribute
holding its backend-assigned id and the fields a cursor listing may sort by.
"""

from dataclasses import dataclass

from hoopers_api.domain.entities.clients import ClientDetailEntity, ClientEntity
from hoopers_api.domain.entities.courts import CourtEntity
from hoopers_api.domain.entities.games import GameDetailEntity, GameEntity
from hoopers_api.domain.entities.joined_runs import (
    JoinedRunDetailEntity,
    JoinedRunEntity,
)
from hoopers_api.domain.entities.orders import OrderDetailEntity, OrderEntity
from hoopers_api.domain.entities.posts import PostEntity
from hoopers_api.domain.entities.private_run_invites import (
    PrivateRunInviteDetailEntity,
    PrivateRunInviteEntity,
)
from hoopers_api.domain.entities.private_runs import PrivateRunEntity
from hoopers_api.domain.entities.products import ProductEntity
from hoopers_api.domain.entities.profiles import ProfileEntity
from hoopers_api.domain.entities.requests import RequestDetailEntity, RequestEntity
from hoopers_api.domain.entities.runs import RunDetailEntity, RunEntity
from hoopers_api.domain.entities.subscriptions import SubscriptionEntity
from hoopers_api.domain.entities.users import UserDetailEntity, UserEntity
from hoopers_api.domain.entities.videos import VideoEntity
from hoopers_api.domain.exceptions import InvalidArgumentError
from hoopers_api.utils.model_utils import BaseModel, normalize_key


@dataclass(frozen=True)
class SortField:
    name: str  # Wire name sent as `sortBy`, e.g. "RunDate"
    attribute: str  # Entity attribute holding the value, e.g. "run_date"
    descending: bool = False


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    entity: type[BaseModel]
    detail: type[BaseModel]
    id_attribute: str
    sort_fields: tuple[SortField, ...]
    plural: str | None = None

    def __post_init__(self):
        if not self.sort_fields:
            raise ValueError(f"Resource {self.name} needs at least one sort field")

    @property
    def plural_name(self) -> str:
        return self.plural or f"{self.name}s"

    @property
    def default_sort(self) -> SortField:
        return self.sort_fields[0]

    @property
    def base_path(self) -> str:
        return f"/api/{self.name}"

    def route(self, action: str) -> str:
        return f"{self.base_path}/{action}"

    @property
    def list_all_path(self) -> str:
        return self.route(f"Get{self.plural_name}")

    @property
    def get_by_id_path(self) -> str:
        return self.route(f"Get{self.name}ById")

    @property
    def list_page_path(self) -> str:
        return self.route(f"Get{self.plural_name}WithCursor")

    @property
    def create_path(self) -> str:
        return self.route(f"Create{self.name}")

    @property
    def update_path(self) -> str:
        return self.route(f"Update{self.name}")

    @property
    def delete_path(self) -> str:
        return self.route(f"Delete{self.name}")

    def resolve_sort(self, sort_by: str | None) -> SortField:
        """
        Resolve a caller-supplied sort field, ignoring case.

        `None` or an empty string selects the default sort. Both the wire name
        (`RunDate`) and the attribute name (`run_date`) are accepted.

        Raises:
            InvalidArgumentError: If the field is not sortable for this resource
        """
        if sort_by is None or not str(sort_by).strip():
            return self.default_sort
        wanted = normalize_key(str(sort_by).strip())
        for field in self.sort_fields:
            if wanted in (normalize_key(field.name), normalize_key(field.attribute)):
                return field
        allowed = ", ".join(field.name for field in self.sort_fields)
        raise InvalidArgumentError(
            f"Unknown sortBy {sort_by!r} for {self.name}; expected one of: {allowed}"
        )

    def id_of(self, record: BaseModel) -> str | None:
        value = getattr(record, self.id_attribute, None)
        return None if value is None else str(value)


RUN = ResourceDefinition(
    name="Run",
    entity=RunEntity,
    detail=RunDetailEntity,
    id_attribute="run_id",
    sort_fields=(
        SortField("Points", "points", descending=True),
        SortField("RunDate", "run_date", descending=True),
        SortField("CreatedDate", "created_date", descending=True),
        SortField("Name", "name"),
        SortField("Cost", "cost"),
    ),
)

GAME = ResourceDefinition(
    name="Game",
    entity=GameEntity,
    detail=GameDetailEntity,
    id_attribute="game_id",
    sort_fields=(
        SortField("CreatedDate", "created_date", descending=True),
        SortField("GameNumber", "game_number"),
        SortField("Status", "status"),
    ),
)

USER = ResourceDefinition(
    name="User",
    entity=UserEntity,
    detail=UserDetailEntity,
    id_attribute="user_id",
    sort_fields=(
        SortField("CreatedDate", "created_date", descending=True),
        SortField("LastName", "last_name"),
        SortField("Email", "email"),
        SortField("Status", "status"),
    ),
)

PROFILE = ResourceDefinition(
    name="Profile",
    entity=ProfileEntity,
    detail=ProfileEntity,
    id_attribute="profile_id",
    sort_fields=(
        SortField("Points", "points", descending=True),
        SortField("UserName", "user_name"),
        SortField("CreatedDate", "created_date", descending=True),
    ),
)

PRODUCT = ResourceDefinition(
    name="Product",
    entity=ProductEntity,
    detail=ProductEntity,
    id_attribute="product_id",
    sort_fields=(
        SortField("Points", "points", descending=True),
        SortField("Price", "price"),
        SortField("Title", "title"),
    ),
)

VIDEO = ResourceDefinition(
    name="Video",
    entity=VideoEntity,
    detail=VideoEntity,
    id_attribute="video_id",
    sort_fields=(
        SortField("VideoDate", "video_date", descending=True),
        SortField("VideoName", "video_name"),
    ),
)

POST = ResourceDefinition(
    name="Post",
    entity=PostEntity,
    detail=PostEntity,
    id_attribute="post_id",
    sort_fields=(
        SortField("PostedDate", "posted_date", descending=True),
        SortField("Likes", "likes", descending=True),
        SortField("Views", "views", descending=True),
    ),
)

REQUEST = ResourceDefinition(
    name="Request",
    entity=RequestEntity,
    detail=RequestDetailEntity,
    id_attribute="request_id",
    sort_fields=(
        SortField("CreatedDate", "created_date", descending=True),
        SortField("Status", "status"),
    ),
)

SUBSCRIPTION = ResourceDefinition(
    name="Subscription",
    entity=SubscriptionEntity,
    detail=SubscriptionEntity,
    id_attribute="subscription_id",
    sort_fields=(
        SortField("CreatedDate", "created_date", descending=True),
        SortField("Status", "status"),
    ),
)

PRIVATE_RUN = ResourceDefinition(
    name="PrivateRun",
    entity=PrivateRunEntity,
    detail=PrivateRunEntity,
    id_attribute="private_run_id",
    sort_fields=(
        SortField("RunDate", "run_date", descending=True),
        SortField("Name", "name"),
    ),
)

PRIVATE_RUN_INVITE = ResourceDefinition(
    name="PrivateRunInvite",
    entity=PrivateRunInviteEntity,
    detail=PrivateRunInviteDetailEntity,
    id_attribute="private_run_invite_id",
    sort_fields=(
        SortField("InvitedDate", "invited_date", descending=True),
        SortField("AcceptedInvite", "accepted_invite"),
    ),
)

ORDER = ResourceDefinition(
    name="Order",
    entity=OrderEntity,
    detail=OrderDetailEntity,
    id_attribute="order_id",
    sort_fields=(
        SortField("OrderDate", "order_date", descending=True),
        SortField("OrderNumber", "order_number"),
        SortField("Status", "status"),
    ),
)

JOINED_RUN = ResourceDefinition(
    name="JoinedRun",
    entity=JoinedRunEntity,
    detail=JoinedRunDetailEntity,
    id_attribute="joined_run_id",
    sort_fields=(
        SortField("CreatedDate", "created_date", descending=True),
        SortField("Status", "status"),
    ),
)

CLIENT = ResourceDefinition(
    name="Client",
    entity=ClientEntity,
    detail=ClientDetailEntity,
    id_attribute="client_id",
    sort_fields=(
        SortField("Name", "name"),
        SortField("CreatedDate", "created_date", descending=True),
    ),
)

COURT = ResourceDefinition(
    name="Court",
    entity=CourtEntity,
    detail=CourtEntity,
    id_attribute="court_id",
    sort_fields=(
        SortField("Name", "name"),
        SortField("CreatedDate", "created_date", descending=True),
    ),
)

RESOURCES: dict[str, ResourceDefinition] = {
    definition.name: definition
    for definition in (
        RUN,
        GAME,
        USER,
        PROFILE,
        PRODUCT,
        VIDEO,
        POST,
        REQUEST,
        SUBSCRIPTION,
        PRIVATE_RUN,
        PRIVATE_RUN_INVITE,
        ORDER,
        JOINED_RUN,
        CLIENT,
        COURT,
    )
}


def get_resource(name: str) -> ResourceDefinition:
    wanted = normalize_key(name or "")
    for definition in RESOURCES.values():
        if normalize_key(definition.name) == wanted:
            return definition
    raise InvalidArgumentError(f"Unknown resource {name!r}")
