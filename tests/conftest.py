"""
Shared fixtures for IaxsCore tests
"""

from typing import List, Tuple

import pytest

from iaxscore.controllers.events.iteration_event import IterationEvent
from iaxscore.entities.instance import Instance, InstanceCollection
from iaxscore.events.event_manager import EventManager
from iaxscore.infrastructure.configuration import set_config
from iaxscore.services.service_locator import ServiceLocator


class Article(Instance):
    """Instance used across the test suite"""
    title: str
    published: bool = False


class PhaseRecorder:
    """Records (phase, instance) for every iteration event triggered"""

    def __init__(self, event_manager: EventManager):
        self.calls: List[Tuple[str, object]] = []
        for phase in IterationEvent.PHASES:
            event_manager.attach(phase, self)

    def __call__(self, event: IterationEvent):
        self.calls.append((event.get_name(), event.instance))

    @property
    def phases(self) -> List[str]:
        return [phase for phase, _ in self.calls]


@pytest.fixture
def event_manager():
    return EventManager()


@pytest.fixture
def service_locator():
    return ServiceLocator()


@pytest.fixture
def recorder(event_manager):
    return PhaseRecorder(event_manager)


@pytest.fixture
def articles():
    return InstanceCollection([
        Article(id="a1", title="First"),
        Article(id="a2", title="Second"),
        Article(id="a3", title="Third"),
    ])


@pytest.fixture(autouse=True)
def reset_global_config():
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def article_cls():
    return Article
