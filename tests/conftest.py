from datetime import UTC, datetime
from pathlib import Path

import pytest

from content_engine.adapters.clock import FixedClock
from content_engine.adapters.ids import SequentialIdGenerator
from content_engine.adapters.rules import RulesAdapter
from content_engine.components.blocks import BlockFactory
from content_engine.components.content import ContentService
from content_engine.rules.loader import load_rules
from content_engine.rules.models import Rules

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def rules() -> Rules:
    """Load the REAL rules file from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def rules_port(rules: Rules) -> RulesAdapter:
    return RulesAdapter(rules)


@pytest.fixture
def ids() -> SequentialIdGenerator:
    return SequentialIdGenerator("block")


@pytest.fixture
def now() -> datetime:
    """Fixed 'now' time for testing."""
    return datetime(2026, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(now: datetime) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def factory(ids: SequentialIdGenerator) -> BlockFactory:
    return BlockFactory(ids)


@pytest.fixture
def service(clock: FixedClock, ids: SequentialIdGenerator) -> ContentService:
    return ContentService(clock=clock, ids=ids)
