"""Plan extractor.

Turns the free-text plan an LLM writes into a fixed-length list of DailyPlan
values. Provides extract_plan(raw_text, num_days).

The text is scanned on two levels:
  - an outer cursor over "Day N:" markers; each marker owns the text up to the
    next marker. The number inside the marker only delimits sections, weekday
    labels come from the position of the day (Monday, Tuesday, ...).
  - an inner scan per day over the meal headers. Each header's content ends at
    the first header that may follow it (MEAL_BOUNDARIES), so one meal never
    swallows the next.

Meal headers are only recognized at the start of a line, optionally after
indentation, a bullet or list number, a markdown heading or bold markers
("**Lunch:**"). A trailing "Workout Plan" heading may omit the colon when it
stands alone on its line.
"Lunch:" in the middle of a sentence is plain text.

Nothing here raises on bad input: days and meals that cannot be read are
filled with the placeholders from default_day()/default_meal().
"""
import logging
import re
from typing import Dict, Iterator, Optional, Tuple

from fitplan.domain.DailyPlan import DailyPlan, WeeklyPlan, default_day, label_for_index
from fitplan.domain.MealEntry import MealEntry, default_meal
from fitplan.utilities.constants import (
    BREAKFAST,
    DINNER,
    LUNCH,
    NAME_SEPARATOR,
    SECTION_LABELS,
    SNACK_NAME,
    SNACKS,
    TRAILING_SECTION_LABELS,
)
from fitplan.utilities.images import image_url_for

logger = logging.getLogger(__name__)

DAY_MARKER = re.compile(r"\bday\s+\d+:", re.IGNORECASE)

_BULLET = re.compile(r"^\s*(?:[-*+•]|\d+[.)])\s+")


_HEADER_PREFIX = r"^[ \t]*(?:[-*+•][ \t]+|\d+[.)][ \t]+|#+[ \t]*)?(?:\*\*|__)?"
_HEADER_COLON = r"(?:\*\*|__)?[ \t]*:(?:\*\*|__)?[ \t]*"
# Trailing sections may also be a bare heading on its own line ("**Workout Plan**")
_HEADER_COLON_OR_EOL = r"(?:" + _HEADER_COLON + r"|(?:\*\*|__)?[ \t]*$)"


def _header_pattern(label: str, colon_optional: bool = False) -> "re.Pattern[str]":
    words = r"\s+".join(re.escape(w) for w in label.split())
    ending = _HEADER_COLON_OR_EOL if colon_optional else _HEADER_COLON
    return re.compile(_HEADER_PREFIX + words + ending, re.IGNORECASE | re.MULTILINE)


HEADER_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    **{label: _header_pattern(label) for label in SECTION_LABELS},
    **{label: _header_pattern(label, colon_optional=True) for label in TRAILING_SECTION_LABELS},
}

# Headers that end each section: every section header listed after it, then
# the trailing (non-food) sections. The list shrinks as the day goes on.
MEAL_BOUNDARIES: Dict[str, Tuple[str, ...]] = {
    label: SECTION_LABELS[i + 1:] + TRAILING_SECTION_LABELS
    for i, label in enumerate(SECTION_LABELS)
}


def _day_blocks(text: str) -> Iterator[str]:
    """Yield the content of each day section in order; text before the first marker is skipped."""
    previous = None
    for marker in DAY_MARKER.finditer(text):
        if previous is not None:
            yield text[previous.end():marker.start()]
        previous = marker
    if previous is not None:
        yield text[previous.end():]


def _capture(block: str, label: str) -> Optional[str]:
    """Text under ``label``'s header, up to the nearest boundary header. None if no header."""
    header = HEADER_PATTERNS[label].search(block)
    if header is None:
        return None
    end = len(block)
    for stop in MEAL_BOUNDARIES[label]:
        nxt = HEADER_PATTERNS[stop].search(block, header.end())
        if nxt is not None and nxt.start() < end:
            end = nxt.start()
    return block[header.end():end].strip()


def split_name(chunk: str, fallback_name: str) -> Tuple[str, str]:
    """Split "Name: description" on the first ': '.

    Without a usable separator the whole chunk is the description and the name
    falls back to ``fallback_name``.
    """
    chunk = chunk.strip()
    name, sep, description = chunk.partition(NAME_SEPARATOR)
    name, description = name.strip(), description.strip()
    if sep and name and description:
        return name, description
    return fallback_name, chunk


def _entry(chunk: str, fallback_name: str) -> MealEntry:
    name, description = split_name(chunk, fallback_name)
    return MealEntry(name=name, description=description, image_ref=image_url_for(name))


def _mentions_trailing_section(line: str) -> bool:
    lowered = line.lower()
    return any(label.lower() in lowered for label in TRAILING_SECTION_LABELS)


def extract_meal(block: str, label: str) -> MealEntry:
    chunk = _capture(block, label)
    if chunk:
        chunk = _BULLET.sub("", chunk, count=1).strip()
    if not chunk:
        return default_meal(label)
    return _entry(chunk, label)


def extract_snacks(block: str) -> Tuple[MealEntry, ...]:
    """Snack list in the order written, one snack per non-blank line."""
    chunk = _capture(block, SNACKS)
    if not chunk:
        return ()
    snacks = []
    for line in chunk.splitlines():
        if not line.strip() or _mentions_trailing_section(line):
            continue
        item = _BULLET.sub("", line, count=1).strip()
        if item:
            snacks.append(_entry(item, SNACK_NAME))
    return tuple(snacks)


def parse_day(block: str, index: int) -> DailyPlan:
    return DailyPlan(
        day_label=label_for_index(index),
        breakfast=extract_meal(block, BREAKFAST),
        lunch=extract_meal(block, LUNCH),
        dinner=extract_meal(block, DINNER),
        snacks=extract_snacks(block),
    )


def extract_plan(raw_text: str, num_days: int) -> WeeklyPlan:
    """Parse ``raw_text`` into exactly ``num_days`` daily plans.

    Extra day sections beyond ``num_days`` are never parsed; missing ones are
    padded with placeholder days continuing the weekday cycle.
    """
    days: WeeklyPlan = []
    for block in _day_blocks(raw_text or ""):
        if len(days) >= num_days:
            break
        days.append(parse_day(block, len(days)))

    recognized = len(days)
    while len(days) < num_days:
        days.append(default_day(len(days)))

    if recognized < num_days:
        logger.debug("Plan text had %d of %d day sections; padded the rest", recognized, num_days)
    return days
