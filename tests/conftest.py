"""Shared pytest fixtures and test doubles used across the test suite."""

import sys
import uuid
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from puremvc import Facade, Mediator, Proxy, SimpleCommand


class Recorder:
    """View component that remembers what reached it."""

    def __init__(self):
        self.notes = []
        self.counter = 0
        self.on_register_called = False
        self.on_remove_called = False


class DoubleInputCommand(SimpleCommand):
    """Writes ``input * 2`` into ``body['result']``."""

    def execute(self, notification):
        body = notification.body
        body["result"] = 2 * body["input"]


class AccumulateCommand(SimpleCommand):
    """Adds ``input * 2`` to whatever ``body['result']`` already holds."""

    def execute(self, notification):
        body = notification.body
        body["result"] = body.get("result", 0) + 2 * body["input"]


class RecordingMediator(Mediator):
    """Mediator whose interests are given at construction."""

    def __init__(self, name, interests, component=None):
        super().__init__(name, component if component is not None else Recorder())
        self._interests = list(interests)

    def list_notification_interests(self):
        return self._interests

    def handle_notification(self, notification):
        self.view_component.notes.append((notification.name, notification.body))

    def on_register(self):
        self.view_component.on_register_called = True

    def on_remove(self):
        self.view_component.on_remove_called = True


class SelfRemovingMediator(Mediator):
    """Removes itself through the facade while handling its only interest."""

    def __init__(self, name, interest, component):
        super().__init__(name, component)
        self._interest = interest

    def list_notification_interests(self):
        return [self._interest]

    def handle_notification(self, notification):
        self.view_component.counter += 1
        self.facade.remove_mediator(self.mediator_name)


class LifecycleProxy(Proxy):
    NAME = "LifecycleProxy"

    def __init__(self):
        super().__init__(self.NAME, "")

    def on_register(self):
        self.data = "on_register called"

    def on_remove(self):
        self.data = "on_remove called"


@pytest.fixture
def facade():
    """A Facade under a unique key, released after the test."""
    core = Facade(key=f"test-{uuid.uuid4().hex}")
    yield core
    core.dispose()


@pytest.fixture
def recorder():
    return Recorder()
