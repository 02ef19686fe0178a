"""Shared pytest fixtures"""
import pytest

from tests.fakes import BLUE, OLD_ALIAS, PROJECTS_ALIAS, RED, FakeResolver, FakeWorkspace, make_tiff


@pytest.fixture
def icon_tiff():
    return make_tiff((16, RED), (64, BLUE))


@pytest.fixture
def workspace(icon_tiff):
    return FakeWorkspace(icon_tiff)


@pytest.fixture
def resolver():
    return FakeResolver(
        {
            PROJECTS_ALIAS: "/Volumes/Work/Projects",
            OLD_ALIAS: "/Users/me/Documents/moved.txt",
        },
        stale=[OLD_ALIAS],
    )
