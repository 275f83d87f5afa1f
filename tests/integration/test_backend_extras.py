from datetime import datetime

import pytest

from hoopers_api.adapters.resource_api.port import DeleteResult
from hoopers_api.config.resources import COURT, GAME, JOINED_RUN, PROFILE, RUN, USER
from hoopers_api.domain.entities.courts import CourtEntity
from hoopers_api.domain.entities.games import GameEntity
from hoopers_api.domain.entities.joined_runs import JoinedRunEntity
from hoopers_api.domain.entities.orders import OrderEntity
from hoopers_api.domain.entities.private_run_invites import PrivateRunInviteEntity
from hoopers_api.domain.entities.profiles import ProfileEntity, ScoutingReportEntity
from hoopers_api.domain.entities.runs import RunEntity
from hoopers_api.domain.entities.users import UserEntity
from tests.fixtures.http import TEST_TOKEN


@pytest.fixture
def league(record_store):
    """Two players, one court owned by a client, and a run played there."""
    record_store.seed(
        PROFILE,
        [
            ProfileEntity(profile_id="p1", user_name="splash"),
            ProfileEntity(profile_id="p2", user_name="glass"),
        ],
    )
    record_store.seed(
        COURT, [CourtEntity(court_id="ct1", client_id="c1", name="Main Gym")]
    )
    record_store.seed(
        RUN,
        [
            RunEntity(
                run_id="r1",
                court_id="ct1",
                name="Friday Run",
                run_date=datetime(2024, 6, 7, 19, 0),
                start_time="19:00:00",
                city="Oakland",
            )
        ],
    )
    record_store.seed(
        USER,
        [
            UserEntity(user_id="u1", first_name="Jordan", last_name="Miles"),
            UserEntity(user_id="u2", first_name="Casey", email="casey@hoopers.test"),
        ],
    )
    record_store.seed(
        GAME,
        [
            GameEntity(game_id=f"g{index}", profile_id="p1", client_id="c1")
            for index in range(3)
        ],
    )
    return record_store


@pytest.mark.integration
class TestJoiningRuns:
    @pytest.mark.asyncio
    async def test_join_then_list_players(self, resource_clients, league):
        assert await resource_clients.joined_runs.add_profile(
            "p1", "r1", token=TEST_TOKEN
        )
        assert await resource_clients.runs.join_run(
            JoinedRunEntity(profile_id="p2", run_id="r1", status="Invited"),
            token=TEST_TOKEN,
        )

        profiles = await resource_clients.runs.list_joined_profiles(
            "r1", token=TEST_TOKEN
        )

        assert sorted(profile.user_name for profile in profiles) == ["glass", "splash"]

    @pytest.mark.asyncio
    async def test_joining_twice_keeps_one_record(self, resource_clients, league):
        for _ in range(2):
            await resource_clients.joined_runs.add_profile("p1", "r1", token=TEST_TOKEN)
        assert league.count(JOINED_RUN) == 1

    @pytest.mark.asyncio
    async def test_joining_an_unknown_run_is_refused(self, resource_clients, league):
        assert (
            await resource_clients.joined_runs.add_profile(
                "p1", "missing", token=TEST_TOKEN
            )
            is False
        )

    @pytest.mark.asyncio
    async def test_player_schedule(self, resource_clients, league):
        await resource_clients.joined_runs.add_profile("p1", "r1", token=TEST_TOKEN)

        joined = await resource_clients.joined_runs.list_for_profile(
            "p1", token=TEST_TOKEN
        )

        assert len(joined) == 1
        assert joined[0].run_name == "Friday Run"
        assert joined[0].court_name == "Main Gym"
        assert joined[0].status == "Accepted"

    @pytest.mark.asyncio
    async def test_leaving_twice_succeeds(self, resource_clients, league):
        await resource_clients.joined_runs.add_profile("p1", "r1", token=TEST_TOKEN)

        first = await resource_clients.joined_runs.remove_profile(
            "p1", "r1", token=TEST_TOKEN
        )
        second = await resource_clients.joined_runs.remove_profile(
            "p1", "r1", token=TEST_TOKEN
        )

        assert first == second == DeleteResult(True)
        assert (
            await resource_clients.runs.list_joined_profiles("r1", token=TEST_TOKEN)
            == []
        )


@pytest.mark.integration
class TestProfilesUsersAndClients:
    @pytest.mark.asyncio
    async def test_scouting_report_is_stored_on_the_profile(
        self, resource_clients, league
    ):
        report = ScoutingReportEntity(profile_id="p1", strengths="Catch and shoot")

        assert await resource_clients.profiles.update_scouting_report(
            report, token=TEST_TOKEN
        )

        profile = await resource_clients.profiles.get_by_id("p1", token=TEST_TOKEN)
        assert profile.scouting_report.strengths == "Catch and shoot"
        assert profile.scouting_report.scouting_report_id

    @pytest.mark.asyncio
    async def test_search_users(self, resource_clients, league):
        by_name = await resource_clients.users.search("jord", token=TEST_TOKEN)
        by_email = await resource_clients.users.search("CASEY@", token=TEST_TOKEN)

        assert [user.user_id for user in by_name] == ["u1"]
        assert [user.user_id for user in by_email] == ["u2"]

    @pytest.mark.asyncio
    async def test_client_courts(self, resource_clients, league):
        courts = await resource_clients.clients.list_courts("c1", token=TEST_TOKEN)
        assert [court.name for court in courts] == ["Main Gym"]

    @pytest.mark.asyncio
    async def test_games_by_profile(self, resource_clients, league):
        games = await resource_clients.games.list_by_profile("p1", token=TEST_TOKEN)
        page = await resource_clients.games.list_page_by_profile(
            "p1", limit=2, token=TEST_TOKEN
        )
        rest = await resource_clients.games.list_page_by_profile(
            "p1", page.next_cursor, 2, token=TEST_TOKEN
        )

        assert len(games) == 3
        assert page.count == 2
        assert rest.count == 1
        assert rest.has_more is False

    @pytest.mark.asyncio
    async def test_games_by_client(self, resource_clients, league):
        page = await resource_clients.games.list_page_by_client("c1", token=TEST_TOKEN)
        assert page.count == 3

    @pytest.mark.asyncio
    async def test_report_counts(self, resource_clients, league):
        counts = await resource_clients.reports.get_counts(token=TEST_TOKEN)

        assert counts.total_runs == 1
        assert counts.total_users == 2
        assert counts.total_games == 3
        assert counts.total_products == 0

    @pytest.mark.asyncio
    async def test_report_is_also_served_at_the_resource_root(
        self, backend_client, league
    ):
        response = await backend_client.get(
            "/api/Report", headers={"Authorization": f"Bearer {TEST_TOKEN}"}
        )
        assert response.status_code == 200
        assert response.json()["totalRuns"] == 1


@pytest.mark.integration
class TestOrdersAndInvitesByProfile:
    @pytest.mark.asyncio
    async def test_orders_by_profile(self, resource_clients, league):
        for number, profile_id in (("1001", "p1"), ("1002", "p2"), ("1003", "p1")):
            await resource_clients.orders.create(
                OrderEntity(order_number=number, profile_id=profile_id),
                token=TEST_TOKEN,
            )

        orders = await resource_clients.orders.list_by_profile("p1", token=TEST_TOKEN)

        assert sorted(order.order_number for order in orders) == ["1001", "1003"]

    @pytest.mark.asyncio
    async def test_invite_then_withdraw_twice(self, resource_clients, league):
        invites = resource_clients.private_run_invites
        await invites.create(
            PrivateRunInviteEntity(profile_id="p2", private_run_id="pr1"),
            token=TEST_TOKEN,
        )
        assert len(await invites.list_by_profile("p2", token=TEST_TOKEN)) == 1

        first = await invites.remove_profile("p2", "pr1", token=TEST_TOKEN)
        second = await invites.remove_profile("p2", "pr1", token=TEST_TOKEN)

        assert first == second == DeleteResult(True)
        assert await invites.list_by_profile("p2", token=TEST_TOKEN) == []
