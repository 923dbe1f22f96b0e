from __future__ import annotations

from dataclasses import dataclass

from flask import current_app

from .intake import UploadIntake, intake_from_config
from .notifier import FeedbackNotifier
from .passwords import PasswordPolicy
from .store import RecordStore

EXTENSION_KEY = "campus_tour"


@dataclass(frozen=True)
class Services:
    """Per-application collaborators handed to the API handlers."""

    store: RecordStore
    intake: UploadIntake
    notifier: FeedbackNotifier
    passwords: PasswordPolicy


def current_services() -> Services:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "Services",
    "current_services",
    "EXTENSION_KEY",
    "RecordStore",
    "UploadIntake",
    "intake_from_config",
    "FeedbackNotifier",
    "PasswordPolicy",
]
