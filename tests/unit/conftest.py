import pytest

from tests.utils.mock_uow import build_mock_uow


@pytest.fixture
def mock_uow():
    return build_mock_uow()
