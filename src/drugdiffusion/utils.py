MICROMETRES_PER_METRE = 1e6
SECONDS_PER_MINUTE = 60.0

def metres_to_micrometres(metres: float) -> float:
    """Convert metres to micrometres."""
    return metres * MICROMETRES_PER_METRE

def micrometres_to_metres(micrometres: float) -> float:
    """Convert micrometres to metres."""
    return micrometres / MICROMETRES_PER_METRE

def seconds_to_minutes(seconds: float) -> float:
    """Convert seconds to minutes."""
    return seconds / SECONDS_PER_MINUTE

def format_time(seconds: float) -> str:
    """Format simulated time as e.g. '150 s (2.5 min)'."""
    return f"{seconds:g} s ({seconds_to_minutes(seconds):.1f} min)"
