"""
Property Fact Extraction

Pulls the property name, location, size, available space and asking rent
out of the plain text of an offering document's cover page.

Each field has an ordered list of rules. A rule is a regex plus an
acceptance check; the first rule whose first match is accepted fills the
field, otherwise the field keeps its placeholder. Numeric bounds reject
stray numbers such as phone numbers and years.
"""

import re
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from .models import PropertyFacts


class FieldRule(NamedTuple):
    """One extraction heuristic for a property field."""
    pattern: 're.Pattern'
    accept: Callable[[re.Match], bool]
    build: Callable[[re.Match], Dict[str, str]]


def _number(text: str) -> float:
    return float(text.replace(',', ''))


def _in_range(low: float, high: float, group: int = 1) -> Callable[[re.Match], bool]:
    def accept(match: re.Match) -> bool:
        return low <= _number(match.group(group)) <= high
    return accept


def _name_accept(match: re.Match) -> bool:
    return bool(match.group(1)) and len(match.group(1).strip()) > 5


def _location_accept(match: re.Match) -> bool:
    return bool(match.group(1)) and bool(match.group(2))


def _location_build(match: re.Match) -> Dict[str, str]:
    city, state = match.group(1), match.group(2)
    return {'city': city, 'state': state, 'location_label': f'{city}, {state}'}


THOUSANDS = r'(\d{1,3}(?:,\d{3})+)'
DOLLARS = r'(\d{1,3}(?:\.\d{2})?)'

NAME_RULES = [
    # All-caps title ahead of "OFFERING MEMORANDUM" or a street number
    FieldRule(
        re.compile(r'^([A-Z\s&]{10,60}?)(?=\s*(?:OFFERING|MEMORANDUM|\d{3,5}\s+[A-Z]))', re.I),
        _name_accept,
        lambda m: {'name': m.group(1).strip()},
    ),
    # Venue names like "Oak Ridge Shopping Center"
    FieldRule(
        re.compile(r"([A-Z][a-z\s&']+(?:Shopping Center|Plaza|Center|Square|Commons|Mall))", re.I),
        _name_accept,
        lambda m: {'name': m.group(1).strip()},
    ),
]

LOCATION_RULES = [
    FieldRule(
        re.compile(r'\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+){0,2}),\s*([A-Z]{2})\b'),
        _location_accept,
        _location_build,
    ),
    FieldRule(
        re.compile(r'([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*),\s*([A-Z]{2})\s+\d{5}'),
        _location_accept,
        _location_build,
    ),
]

SIZE_RULES = [
    FieldRule(
        re.compile(THOUSANDS + r'\s*(?:SF|Square Feet)', re.I),
        _in_range(1000, 1000000),
        lambda m: {'size_label': f'{m.group(1)} SF'},
    ),
    FieldRule(
        re.compile(r'(?:Building|Property|Total)[\s:]*' + THOUSANDS + r'\s*SF', re.I),
        _in_range(1000, 1000000),
        lambda m: {'size_label': f'{m.group(1)} SF'},
    ),
]

AVAILABLE_RULES = [
    FieldRule(
        re.compile(r'(?:Available|For Lease)[\s:]*' + THOUSANDS + r'\s*SF', re.I),
        _in_range(500, 1000000),
        lambda m: {'available_space_label': f'{m.group(1)} SF'},
    ),
]

RENT_RULES = [
    FieldRule(
        re.compile(r'\$\s*' + DOLLARS + r'\s*(?:/\s*SF|PSF)', re.I),
        _in_range(5, 200),
        lambda m: {'rent_label': f'${m.group(1)}/SF/YR'},
    ),
    FieldRule(
        re.compile(r'(?:Rent|Rate)[\s:]*\$\s*' + DOLLARS + r'\s*/\s*SF', re.I),
        _in_range(5, 200),
        lambda m: {'rent_label': f'${m.group(1)}/SF/YR'},
    ),
]

DEFAULT_FIELD_RULES: Dict[str, List[FieldRule]] = {
    'name': NAME_RULES,
    'location': LOCATION_RULES,
    'size': SIZE_RULES,
    'available_space': AVAILABLE_RULES,
    'rent': RENT_RULES,
}


def normalize_text(text: str) -> str:
    """Collapse all whitespace runs to single spaces."""
    return re.sub(r'\s+', ' ', text or '').strip()


def apply_rules(text: str, rules: List[FieldRule]) -> Dict[str, str]:
    """Return the updates of the first accepted rule, or {} if none match."""
    for rule in rules:
        match = rule.pattern.search(text)
        if match and rule.accept(match):
            return rule.build(match)
    return {}


def extract_property_facts(
    text: Optional[str],
    rules: Optional[Dict[str, List[FieldRule]]] = None
) -> PropertyFacts:
    """Extract property facts from cover page text.

    Never raises: fields without an accepted match keep their placeholder.

    Args:
        text: Plain text of the document's first page (may be empty)
        rules: Field name -> ordered rules; defaults to DEFAULT_FIELD_RULES

    Returns:
        Fully populated PropertyFacts
    """
    rules = DEFAULT_FIELD_RULES if rules is None else rules
    clean = normalize_text(text)
    if not clean:
        return PropertyFacts()

    values: Dict[str, Any] = {}
    for field_rules in rules.values():
        values.update(apply_rules(clean, field_rules))

    return PropertyFacts(**values)


# ============================================================
# ADDRESS HELPERS
# ============================================================

def city_from_address(address: str) -> str:
    """Second-to-last comma separated part of an address."""
    parts = (address or '').split(',')
    return parts[-2].strip() if len(parts) >= 2 else ''


def state_from_address(address: str) -> str:
    """Two-letter state code at the end of an address."""
    match = re.search(r',\s*([A-Z]{2})\s*\d{0,5}\s*$', address or '')
    return match.group(1) if match else ''
