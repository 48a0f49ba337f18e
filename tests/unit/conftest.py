"""Unit test configuration - isolate tests from env files and BM25_* variables"""

import logging

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """
    Run every unit test in an empty working directory without BM25_* vars.

    load_settings() looks for .env.local / .env in the working directory,
    so a developer's local env file must not leak into test results.
    """
    monkeypatch.delenv("BM25_K", raising=False)
    monkeypatch.delenv("BM25_B", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() replaces root handlers - put the originals back"""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
