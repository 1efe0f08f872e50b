from datetime import datetime, timedelta, timezone


def utcnow() -> datetime:
    # Naive UTC, the form stored in the DateTime columns
    return datetime.now(timezone.utc).replace(tzinfo=None)


def seconds_ago(seconds: float) -> datetime:
    return utcnow() - timedelta(seconds=seconds)
