from __future__ import annotations
import math
import re
from typing import List

from pacecalc.io.models import Distance, Duration, Pace

SPECIAL_DISTANCES = {
    'marathon': '42.2k',
    'half': '21.1k',
}

_COMPOUND_TIME = re.compile(r'^(?:([\d.]+)h)?(?:([\d.]+)m)?(?:([\d.]+)s)?$')


class ParseError(ValueError):
    '''A token could not be turned into a number.'''


class UnitError(ParseError):
    '''A token ended in a unit character we don't know.'''

    def __init__(self, message: str, unit: str):
        super().__init__(message)
        self.unit = unit


def _to_float(text: str, token: str, what: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise ParseError(f'Could not parse {what}: {token!r}') from None
    if not math.isfinite(value) or value <= 0:
        raise ParseError(f'Could not parse {what}: {token!r} (must be a positive number)')
    return value


def _last_char(token: str, what: str) -> str:
    if not token:
        raise ParseError(f'Could not parse {what}: empty value')
    return token[-1]


def parse_distance(token: str) -> Distance:
    '''
    Parse a distance token into a Distance

    Accepts:
        - <number>k, e.g. 10k
        - <number>m (miles), e.g. 26.2m
        - 'marathon' or 'half'
    '''
    raw = SPECIAL_DISTANCES.get(token, token)
    unit = _last_char(raw, 'distance')
    if unit not in ('k', 'm'):
        raise UnitError(f'Unknown distance unit: {unit}. Must be k or m', unit)
    return Distance(value=_to_float(raw[:-1], token, 'distance'), unit=unit)


def _clock_to_minutes(token: str) -> float:
    '''
    mm:ss or h:mm:ss, same reading as a watch display
    '''
    try:
        parts = [float(p) for p in token.split(':')]
    except ValueError:
        raise ParseError(f'Could not parse time: {token!r}') from None

    if len(parts) == 2:
        mm, ss = parts
        minutes = mm + ss / 60.0
    elif len(parts) == 3:
        hh, mm, ss = parts
        minutes = hh * 60.0 + mm + ss / 60.0
    else:
        raise ParseError(f'Unrecognized time format: {token!r}')

    if not math.isfinite(minutes) or minutes <= 0:
        raise ParseError(f'Could not parse time: {token!r} (must be a positive number)')
    return minutes


def parse_duration(token: str) -> Duration:
    '''
    Parse a time token into a Duration (total minutes)

    Accepts:
        - <number>h, <number>m or <number>s, e.g. 1h, 45m, 2700s
        - compound forms, e.g. 1h05m, 1h05m10s
        - clock forms mm:ss or h:mm:ss, e.g. 45:00, 3:30:00
    '''
    if ':' in token:
        return Duration(minutes=_clock_to_minutes(token), raw=token)

    unit = _last_char(token, 'time')
    if unit not in ('h', 'm', 's'):
        raise UnitError(f"Invalid time unit '{unit}'. Must be h, m or s", unit)

    match = _COMPOUND_TIME.match(token)
    if match is None:
        raise ParseError(f'Could not parse time: {token!r}')

    # single components may be zero (1h00m), the total may not
    parts: List[float] = []
    for text, part_unit in zip(match.groups(), 'hms'):
        if text is None:
            continue
        try:
            value = float(text)
        except ValueError:
            raise ParseError(f'Could not parse time: {token!r}') from None
        if part_unit == 'h':
            value *= 60.0
        elif part_unit == 's':
            value /= 60.0
        parts.append(value)

    total = sum(parts)
    if total <= 0:
        raise ParseError(f'Could not parse time: {token!r} (must be a positive number)')
    return Duration(minutes=total, raw=token)


def parse_pace(token: str) -> Pace:
    '''
    Parse a pace token, min:sec followed by 'k' (per km) or 'm' (per mile).
    The result is always normalised to minutes per km.
    '''
    unit = _last_char(token, 'pace')
    if unit not in ('k', 'm'):
        raise UnitError(f"Invalid pace unit '{unit}'. Must be 'k' or 'm'", unit)

    body = token[:-1]
    if ':' not in body:
        raise ParseError(f'Could not parse pace: {token!r} (expected e.g. 4:30k)')
    mins_raw, secs_raw = body.split(':', 1)

    try:
        minutes = float(mins_raw) + float(secs_raw) / 60.0
    except ValueError:
        raise ParseError(f'Could not parse pace: {token!r}') from None
    if not math.isfinite(minutes) or minutes <= 0:
        raise ParseError(f'Could not parse pace: {token!r} (must be a positive number)')

    if unit == 'm':
        return Pace.per_mile(minutes)
    return Pace(minutes)
