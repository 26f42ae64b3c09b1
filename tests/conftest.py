import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_chat_provider
from config import Settings
from main import get_application


class StubProvider:
    """Records submitted completions and replays fixed chunks."""

    def __init__(self, chunks=(), error=None, fail_after=None):
        self.chunks = list(chunks)
        self.error = error
        self.fail_after = fail_after
        self.calls = []

    async def stream_chat(self, messages, **options):
        self.calls.append({"messages": messages, "options": options})
        if self.error is not None:
            raise self.error
        return self._iterate()

    async def _iterate(self):
        for i, chunk in enumerate(self.chunks):
            if i == self.fail_after:
                raise ConnectionError("stream dropped")
            yield chunk


@pytest.fixture
def stub_provider():
    return StubProvider(chunks=["```sql\n", "CREATE POLICY ", "\"Users read own row\";", "\n```"])


@pytest.fixture
def make_client():
    def _make(openai_key="sk-test", provider=None):
        app = get_application(Settings(openai_key=openai_key))
        if provider is not None:
            app.dependency_overrides[get_chat_provider] = lambda: provider
        return TestClient(app)
    return _make


@pytest.fixture
def client(make_client, stub_provider):
    return make_client(provider=stub_provider)
