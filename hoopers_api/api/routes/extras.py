"""Routes beyond the shared CRUD set: joins, searches and per-owner listings."""

from typing import Annotated, Any
from uuid import uuid4

from fastapi import APIRouter, Body, Depends, Query

from hoopers_api.api.authentication import require_bearer_token
from hoopers_api.api.in_memory_store import DRecordStore
from hoopers_api.api.logged_api_route import LoggedAPIRoute
from hoopers_api.api.routes.paging import paginate_records, parse_body
from hoopers_api.config.dependencies import DEnvironmentVariables
from hoopers_api.config.resources import (
    CLIENT,
    COURT,
    GAME,
    JOINED_RUN,
    ORDER,
    PRIVATE_RUN,
    PRIVATE_RUN_INVITE,
    POST,
    PRODUCT,
    PROFILE,
    RUN,
    USER,
    VIDEO,
)
from hoopers_api.domain.entities.joined_runs import (
    JoinedRunDetailEntity,
    JoinedRunEntity,
)
from hoopers_api.domain.entities.profiles import ScoutingReportEntity
from hoopers_api.domain.entities.reports import ReportCounts
from hoopers_api.domain.exceptions import NotFoundError

AUTHENTICATED = [Depends(require_bearer_token)]

run_router = APIRouter(
    prefix=RUN.base_path,
    tags=["Run"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
game_router = APIRouter(
    prefix=GAME.base_path,
    tags=["Game"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
user_router = APIRouter(
    prefix=USER.base_path,
    tags=["User"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
client_router = APIRouter(
    prefix=CLIENT.base_path,
    tags=["Client"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
joined_run_router = APIRouter(
    prefix=JOINED_RUN.base_path,
    tags=["JoinedRun"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
profile_router = APIRouter(
    prefix=PROFILE.base_path,
    tags=["Profile"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
order_router = APIRouter(
    prefix=ORDER.base_path,
    tags=["Order"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
private_run_invite_router = APIRouter(
    prefix=PRIVATE_RUN_INVITE.base_path,
    tags=["PrivateRunInvite"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)
report_router = APIRouter(
    prefix="/api/Report",
    tags=["Report"],
    dependencies=AUTHENTICATED,
    route_class=LoggedAPIRoute,
)


@run_router.get("/GetJoinedRunProfilesByRunId", summary="List players joined to a run")
async def get_joined_run_profiles(
    store: DRecordStore,
    run_id: Annotated[str, Query(alias="runId")],
) -> list[dict[str, Any]]:
    store.get(RUN, run_id)
    profiles = []
    for joined in store.find(JOINED_RUN, run_id=run_id):
        profiles.extend(store.find(PROFILE, profile_id=joined.profile_id))
    return [profile.to_wire() for profile in profiles]


@game_router.get("/GetGamesByProfileId", summary="List a player's games")
async def get_games_by_profile(
    store: DRecordStore,
    profile_id: Annotated[str, Query(alias="profileId")],
) -> list[dict[str, Any]]:
    return [game.to_wire() for game in store.find(GAME, profile_id=profile_id)]


@game_router.get(
    "/GetGamesByProfileIdWithCursor",
    summary="List a player's games with cursor pagination",
)
async def get_games_page_by_profile(
    store: DRecordStore,
    environment_variables: DEnvironmentVariables,
    profile_id: Annotated[str, Query(alias="profileId")],
    cursor: Annotated[str | None, Query()] = None,
    limit: Annotated[int | None, Query()] = None,
    direction: Annotated[str, Query()] = "next",
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
) -> dict[str, Any]:
    return paginate_records(
        GAME,
        store.find(GAME, profile_id=profile_id),
        environment_variables,
        cursor,
        limit,
        direction,
        sort_by,
    )


@game_router.get(
    "/GetGamesByClientIdWithCursor",
    summary="List a client's games with cursor pagination",
)
async def get_games_page_by_client(
    store: DRecordStore,
    environment_variables: DEnvironmentVariables,
    client_id: Annotated[str, Query(alias="clientId")],
    cursor: Annotated[str | None, Query()] = None,
    limit: Annotated[int | None, Query()] = None,
    direction: Annotated[str, Query()] = "next",
    sort_by: Annotated[str | None, Query(alias="sortBy")] = None,
) -> dict[str, Any]:
    return paginate_records(
        GAME,
        store.find(GAME, client_id=client_id),
        environment_variables,
        cursor,
        limit,
        direction,
        sort_by,
    )


@user_router.get("/GetUsersSearch", summary="Search users by name or email")
async def search_users(
    store: DRecordStore,
    search_query: Annotated[str, Query(alias="searchQuery")],
) -> list[dict[str, Any]]:
    needle = search_query.strip().lower()
    matches = []
    for user in store.records(USER):
        haystack = " ".join(
            value
            for value in (user.first_name, user.last_name, user.email)
            if value
        ).lower()
        if needle in haystack:
            matches.append(user.to_wire())
    return matches


@client_router.get("/GetClientCourts", summary="List a client's courts")
async def get_client_courts(
    store: DRecordStore,
    client_id: Annotated[str, Query(alias="clientId")],
) -> list[dict[str, Any]]:
    return [court.to_wire() for court in store.find(COURT, client_id=client_id)]


@joined_run_router.get("/GetUserJoinedRuns", summary="List the runs a player joined")
async def get_user_joined_runs(
    store: DRecordStore,
    profile_id: Annotated[str, Query(alias="profileId")],
) -> list[dict[str, Any]]:
    details = []
    for joined in store.find(JOINED_RUN, profile_id=profile_id):
        detail = JoinedRunDetailEntity.model_validate(joined.model_dump())
        runs = store.find(RUN, run_id=joined.run_id)
        if runs:
            run = runs[0]
            detail.run_name = run.name
            detail.run_date = run.run_date
            detail.start_time = run.start_time
            detail.end_time = run.end_time
            detail.address = run.address
            detail.city = run.city
            courts = store.find(COURT, court_id=run.court_id) if run.court_id else []
            detail.court_name = courts[0].name if courts else None
        details.append(detail.to_wire())
    return details


@joined_run_router.post("/AddProfileToJoinedRun", summary="Add a player to a run")
async def add_profile_to_joined_run(
    store: DRecordStore,
    payload: Annotated[Any, Body()],
) -> dict[str, Any]:
    joined_run = parse_body(JoinedRunEntity, payload)
    store.get(RUN, joined_run.run_id or "")
    existing = store.find(
        JOINED_RUN, profile_id=joined_run.profile_id, run_id=joined_run.run_id
    )
    if existing:
        return existing[0].to_wire()
    return store.create(JOINED_RUN, joined_run).to_wire()


@joined_run_router.delete("/RemoveUserJoinRun", summary="Remove a player from a run")
async def remove_user_join_run(
    store: DRecordStore,
    profile_id: Annotated[str, Query(alias="profileId")],
    run_id: Annotated[str, Query(alias="runId")],
) -> dict[str, Any]:
    joined = store.find(JOINED_RUN, profile_id=profile_id, run_id=run_id)
    if not joined:
        raise NotFoundError(f"Profile {profile_id} has not joined run {run_id}")
    for record in joined:
        store.delete(JOINED_RUN, record.joined_run_id)
    return {"message": f"Profile {profile_id} removed from run {run_id}"}


@profile_router.post("/UpdateScoutingReport", summary="Replace a player's scouting report")
async def update_scouting_report(
    store: DRecordStore,
    payload: Annotated[Any, Body()],
) -> dict[str, Any]:
    report = parse_body(ScoutingReportEntity, payload)
    profile = store.get(PROFILE, report.profile_id or "")
    if report.scouting_report_id is None:
        report.scouting_report_id = uuid4().hex
    profile.scouting_report = report
    store.update(PROFILE, profile)
    return report.to_wire()


@order_router.get("/GetOrderByProfileId", summary="List a player's orders")
async def get_orders_by_profile(
    store: DRecordStore,
    profile_id: Annotated[str, Query(alias="profileId")],
) -> list[dict[str, Any]]:
    return [order.to_wire() for order in store.find(ORDER, profile_id=profile_id)]


@private_run_invite_router.get(
    "/GetPrivateRunInvitesByProfileId", summary="List a player's private run invites"
)
async def get_private_run_invites_by_profile(
    store: DRecordStore,
    profile_id: Annotated[str, Query(alias="profileId")],
) -> list[dict[str, Any]]:
    return [
        invite.to_wire()
        for invite in store.find(PRIVATE_RUN_INVITE, profile_id=profile_id)
    ]


@private_run_invite_router.delete(
    "/RemoveProfileFromPrivateRun", summary="Withdraw a player from a private run"
)
async def remove_profile_from_private_run(
    store: DRecordStore,
    profile_id: Annotated[str, Query(alias="profileId")],
    private_run_id: Annotated[str, Query(alias="privateRunId")],
) -> dict[str, Any]:
    invites = store.find(
        PRIVATE_RUN_INVITE, profile_id=profile_id, private_run_id=private_run_id
    )
    if not invites:
        raise NotFoundError(
            f"Profile {profile_id} has no invite to private run {private_run_id}"
        )
    for invite in invites:
        store.delete(PRIVATE_RUN_INVITE, invite.private_run_invite_id)
    return {
        "message": f"Profile {profile_id} removed from private run {private_run_id}"
    }


@report_router.get("", include_in_schema=False)
@report_router.get("/StreamAllCountsAsync", summary="Dashboard totals")
async def get_counts(store: DRecordStore) -> dict[str, Any]:
    counts = ReportCounts(
        total_users=store.count(USER),
        total_runs=store.count(RUN),
        total_games=store.count(GAME),
        total_products=store.count(PRODUCT),
        total_videos=store.count(VIDEO),
        total_posts=store.count(POST),
        total_clients=store.count(CLIENT),
        total_private_runs=store.count(PRIVATE_RUN),
    )
    return counts.to_wire()


routers = [
    run_router,
    game_router,
    user_router,
    client_router,
    joined_run_router,
    profile_router,
    order_router,
    private_run_invite_router,
    report_router,
]
