from __future__ import annotations
from typing import List, Tuple

from pacecalc.io.models import Distance, Duration

USAGE = """pace has two modes: pace and distance.
DISTANCE MODE: `pace 10k 1h`
Usage: pace [distance] [time]
distance:
\tnumber followed by 'k' for kilometers, e.g. 10k
\tnumber followed by 'm' for miles, e.g. 26.2m
\tspecial word 'marathon' or 'half'
time:
\tnumber followed by 'h' for hours
\tnumber followed by 'm' for minutes
\tnumber followed by 's' for seconds
\tcombined, e.g. 1h05m or 1h05m10s
\tmm:ss or h:mm:ss, e.g. 45:00 or 3:30:00
PACE MODE: `pace 4:30k`
Usage: pace [pace]
pace:
\tmin:secs followed by 'k' for per kilometer, e.g. 5:30k
\tmins:secs followed by 'm' for per mile, e.g. 7:00m"""


def fmt_time(minutes: float) -> str:
    '''
    Under an hour: whole minutes only, e.g. 45m.
    Otherwise hours plus minutes, e.g. 2h, 1h05, 2h30. Seconds are dropped.
    '''
    if minutes < 60:
        return f'{int(minutes)}m'

    hours, rest = divmod(minutes, 60)
    out = f'{int(hours)}h'
    mins = int(rest)
    if mins == 0:
        return out
    if mins < 10:
        return out + f'0{mins}'
    return out + str(mins)


def fmt_pace(split: Tuple[int, int]) -> str:
    mins, secs = split
    return f'{mins}:{secs:02d}'


def render_summary(distance: Distance, duration: Duration,
                   split_k: Tuple[int, int], split_m: Tuple[int, int]) -> str:
    return (
        f'{distance.km:.1f} km / {distance.miles:.1f} miles in {duration.raw}:'
        f' {fmt_pace(split_k)}/km, {fmt_pace(split_m)}/mile'
    )


def render_projection(projection: List[Tuple[str, float]]) -> str:
    lines = ['At that pace:']
    for label, minutes in projection:
        # short labels need a second tab to line up with "Half-Marathon:"
        sep = '\t' if len(label) >= 7 else '\t\t'
        lines.append(f'\t{label}:{sep}{fmt_time(minutes)}')
    return '\n'.join(lines)
