# Import all fixtures
from tests.fixtures.backend import *  # noqa: F403
from tests.fixtures.environment import *  # noqa: F403
from tests.fixtures.http import *  # noqa: F403
from tests.fixtures.records import *  # noqa: F403
