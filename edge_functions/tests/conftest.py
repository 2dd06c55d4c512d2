import pytest

from edge_functions.models import Credentials
from edge_functions.tests.fakes import RecordingTransport

BASE_URL = "https://project.supabase.co"
API_KEY = "anon-key"


@pytest.fixture
def credentials():
    return Credentials(base_url=BASE_URL, api_key=API_KEY, access_token="user-token")


@pytest.fixture
def transport():
    return RecordingTransport()
