"""Shared fixtures for integration tests."""

from collections.abc import Callable, Iterator
from datetime import datetime

import pytest

from healthprod.activities.store import demo_activities
from healthprod.ai.gateway import AIGateway
from healthprod.ai.mock import MockAIClient
from healthprod.app import AppState, HealthProdApp
from healthprod.capabilities import Capabilities
from healthprod.config import HealthProdConfig
from healthprod.knowledge.cache import DailyCardCache
from healthprod.notify.notifier import MockNotifier
from healthprod.storage.kv import MemoryStore
from healthprod.tts.mock import MockSpeaker
from healthprod.voice.recognizer import MockRecognizer

NOW = datetime(2025, 10, 17, 20, 0)


@pytest.fixture
def backend() -> MockAIClient:
    return MockAIClient()


@pytest.fixture
def speaker() -> MockSpeaker:
    return MockSpeaker()


@pytest.fixture
def notifier() -> MockNotifier:
    return MockNotifier()


@pytest.fixture
def recognizer() -> MockRecognizer:
    return MockRecognizer(idle_timeout=0.01)


@pytest.fixture
def storage() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def make_app(
    backend: MockAIClient,
    speaker: MockSpeaker,
    notifier: MockNotifier,
    recognizer: MockRecognizer,
    storage: MemoryStore,
) -> Iterator[Callable[..., HealthProdApp]]:
    """Build an app on mocks with a fixed clock."""
    apps: list[HealthProdApp] = []

    def factory(
        online: bool = True,
        seed: bool = True,
        network_check: Callable[[], bool] | None = None,
    ) -> HealthProdApp:
        capabilities = Capabilities(
            speech_recognition=True,
            speech_synthesis=True,
            notifications=True,
            online=online,
        )
        state = AppState(activities=demo_activities(NOW) if seed else None, online=online)
        app = HealthProdApp(
            config=HealthProdConfig(),
            state=state,
            gateway=AIGateway(backend),
            speaker=speaker,
            notifier=notifier,
            recognizer=recognizer,
            capabilities=capabilities,
            card_cache=DailyCardCache(storage),
            clock=lambda: NOW,
            focus_auto_tick=False,
            network_check=network_check,
        )
        apps.append(app)
        return app

    yield factory
    for app in apps:
        app.stop()


@pytest.fixture
def app(make_app: Callable[..., HealthProdApp]) -> HealthProdApp:
    return make_app()
