"""Shared pytest fixtures for pathroute tests."""

import logging

import pytest
import structlog

from pathroute import Router


@pytest.fixture
def example_router():
    """Create the router used in the precedence examples.

    Returns:
        Router: Router with ``*``, ``/:param`` and ``/hello`` registered
    """
    router: Router[str] = Router()
    router.add("*", "wildcard")
    router.add("/:param", "param")
    router.add("/hello", "hello")
    return router


@pytest.fixture
def api_router():
    """Create a router with a realistic API route table.

    Returns:
        Router: Router with literal, parameter and wildcard routes
    """
    router: Router[str] = Router()
    for pattern in [
        "/",
        "/users",
        "/users/new",
        "/users/:id",
        "/users/:id/posts/:post_id",
        "/files/*",
        "/static/:file.:ext",
        "*",
    ]:
        router.add(pattern, pattern)
    return router


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset structlog and the package logger around each test.

    This prevents tests from interfering with each other's logging setup.
    """
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()
    package_logger = logging.getLogger("pathroute")
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.addHandler(logging.NullHandler())
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
