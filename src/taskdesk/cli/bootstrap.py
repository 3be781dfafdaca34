# src/taskdesk/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the store, the notifier and the editing controllers into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import Notifier
from ..core.state import AppState
from ..editing.creation_form import CreationForm
from ..editing.session import EditSessionController
from ..tasks.task_store import TaskStore
from ..tasks.view_filter import FilterMode

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, notifier: Notifier | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and notifier are injectable for tests; by default the global
    settings and the console notifier are used.
    """
    if settings is None:
        settings = get_settings()
    if notifier is None:
        from ..connectors.console_connector import ConsoleNotifier

        notifier = ConsoleNotifier()

    store = TaskStore()
    default_filter = str(getattr(settings, "default_filter", "all"))
    try:
        filter_mode = FilterMode(default_filter)
    except ValueError:
        logger.warning("Unknown default filter %r, using 'all'", default_filter)
        filter_mode = FilterMode.ALL

    return AppState(
        settings=settings,
        task_store=store,
        notifier=notifier,
        editor=EditSessionController(store, notifier),
        form=CreationForm(store, notifier),
        filter_mode=filter_mode,
    )
