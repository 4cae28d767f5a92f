from __future__ import annotations
import math
from typing import List, Tuple
from pacecalc.io.models import Distance, Duration, Pace

# (label, km), in display order
RACE_DISTANCES: List[Tuple[str, float]] = [
    ('Marathon', 42.2),
    ('Half-Marathon', 21.1),
    ('10k', 10.0),
    ('5k', 5.0),
]

def pace_per_km(distance: Distance, duration: Duration) -> float:
    return duration.minutes / distance.km

def pace_per_mile(distance: Distance, duration: Duration) -> float:
    return duration.minutes / distance.miles

def seconds_per_km(distance: Distance, duration: Duration) -> float:
    return duration.minutes * 60 / distance.km

def seconds_per_mile(distance: Distance, duration: Duration) -> float:
    return duration.minutes * 60 / distance.miles

def split_pace(seconds: float) -> Tuple[int, int]:
    '''
    Split a pace in seconds into (whole minutes, seconds).
    Truncates, never rounds: 299.94 -> (4, 59).
    Work from seconds, not fractional minutes: (4.1 - 4) * 60 is 5.999...
    '''
    mins, secs = divmod(int(math.floor(seconds)), 60)
    return mins, secs

def project_race_times(pace: Pace) -> List[Tuple[str, float]]:
    '''
    Finish time in minutes for each standard race at the given pace
    '''
    return [(label, km * pace.minutes_per_km) for label, km in RACE_DISTANCES]
