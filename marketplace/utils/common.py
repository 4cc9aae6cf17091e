from datetime import datetime

import cuid2
import pytz


_generate_cuid = cuid2.cuid_wrapper()


def new_id() -> str:
    """Generate a new collision-resistant record id."""
    return _generate_cuid()


def now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(pytz.UTC)
