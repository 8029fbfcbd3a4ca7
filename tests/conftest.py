# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Module for test configurations shared by every test directory."""

import os
from logging import LogRecord
from typing import Callable, Iterator

import httpx
import pytest

# Select the testing settings before faviconurl.config is first read.
os.environ.setdefault("FAVICONURL_ENV", "testing")

from faviconurl.discovery.fetcher import RedirectFetcher  # noqa: E402
from tests.fakes import FakeSite, Route  # noqa: E402

FilterCaplogFixture = Callable[[list[LogRecord], str], list[LogRecord]]
FakeSiteFixture = Callable[..., tuple[FakeSite, RedirectFetcher]]


@pytest.fixture(scope="session", name="filter_caplog")
def fixture_filter_caplog() -> FilterCaplogFixture:
    """Return a function that will filter pytest captured log records for a given logger
    name
    """

    def filter_caplog(records: list[LogRecord], logger_name: str) -> list[LogRecord]:
        """Filter pytest captured log records for a given logger name"""
        return [record for record in records if record.name == logger_name]

    return filter_caplog


@pytest.fixture(name="fake_site")
def fixture_fake_site() -> Iterator[FakeSiteFixture]:
    """Return a factory building a RedirectFetcher backed by canned responses."""
    clients: list[httpx.Client] = []

    def _create(
        routes: dict[str, Route], max_redirects: int = 10
    ) -> tuple[FakeSite, RedirectFetcher]:
        site = FakeSite(routes)
        client = site.client()
        clients.append(client)
        return site, RedirectFetcher(client, max_redirects=max_redirects)

    yield _create

    for client in clients:
        client.close()
