"""Publish-once access to the default suffix list."""

import threading
from importlib import resources
from typing import Callable, Optional

import structlog

from psl_common import setup_logging
from psl_common.constants import BUNDLED_LIST_PACKAGE, BUNDLED_LIST_RESOURCE
from psl_core.parser import load_suffix_list, parse_suffix_list
from psl_core.settings import load_settings
from psl_core.suffix_list import SuffixList

logger = structlog.get_logger()


class SuffixListGate:
    """Builds a SuffixList at most once and shares it.

    The first caller runs the factory while holding the lock; concurrent
    callers wait for it. A successful build is published and returned to
    every later caller. A failed build poisons the gate: the same exception
    is raised to every later caller and the factory never runs again.
    """

    def __init__(self, factory: Callable[[], SuffixList], name: str = "suffix_list"):
        self._factory = factory
        self._name = name
        self._lock = threading.Lock()
        self._value: Optional[SuffixList] = None
        self._error: Optional[BaseException] = None

    @property
    def is_published(self) -> bool:
        return self._value is not None

    @property
    def is_poisoned(self) -> bool:
        return self._error is not None

    def get(self) -> SuffixList:
        value = self._value
        if value is not None:
            return value

        with self._lock:
            if self._error is not None:
                raise self._error
            if self._value is None:
                try:
                    self._value = self._factory()
                except Exception as e:
                    self._error = e
                    logger.error(
                        "Suffix list build failed",
                        gate=self._name,
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                    raise
                logger.info("Suffix list published", gate=self._name, rules=len(self._value))
            return self._value


def bundled_suffix_list() -> SuffixList:
    """Parse the list snapshot shipped with the package."""
    resource = resources.files(BUNDLED_LIST_PACKAGE).joinpath(BUNDLED_LIST_RESOURCE)
    return parse_suffix_list(resource.read_bytes(), source_name=BUNDLED_LIST_RESOURCE)


def _build_default() -> SuffixList:
    settings = load_settings()
    setup_logging(settings.log_level, component="psl_core")

    if settings.list_path:
        logger.info("Loading suffix list", source=settings.list_path)
        return load_suffix_list(settings.list_path)
    logger.info("Loading bundled suffix list", source=BUNDLED_LIST_RESOURCE)
    return bundled_suffix_list()


_default_gate = SuffixListGate(_build_default, name="default")


def default_suffix_list() -> SuffixList:
    """
    Get the process-wide default SuffixList.

    Built on first use from ``PSL_LIST_PATH`` (or the settings file) when
    set, otherwise from the bundled snapshot.

    Raises:
        ConfigurationError: If the configured list file cannot be read
        MalformedListError: If the list cannot be parsed
    """
    return _default_gate.get()
