from tests.helpers import ManualScheduler, RecordingHost, start_game

__all__ = [
    "ManualScheduler",
    "RecordingHost",
    "start_game",
]
