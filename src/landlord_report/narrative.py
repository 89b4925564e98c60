"""
Market Narrative Sources

The market insights text comes from an external service that accepts
{city, state, address} and answers {report}. Any failure is replaced by a
fixed fallback message so report generation never stops on it.
"""

from typing import Optional, Protocol

import requests

from .config import NarrativeSettings
from .errors import NarrativeFetchError


class NarrativeSource(Protocol):
    """Anything that can produce market commentary for a location."""

    def fetch(self, city: str, state: str, address: str) -> str:
        ...


class HttpNarrativeSource:
    """Posts the property location to a narrative service."""

    def __init__(self, settings: NarrativeSettings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def fetch(self, city: str, state: str, address: str) -> str:
        if not self.settings.endpoint:
            raise NarrativeFetchError("No narrative endpoint configured", self.settings.failed_text)

        try:
            response = self.session.post(
                self.settings.endpoint,
                json={'city': city, 'state': state, 'address': address},
                timeout=self.settings.timeout,
            )
        except requests.RequestException as e:
            raise NarrativeFetchError(f"Narrative request failed: {e}", self.settings.failed_text) from e

        if not response.ok:
            raise NarrativeFetchError(
                f"Narrative service returned HTTP {response.status_code}",
                self.settings.unavailable_text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise NarrativeFetchError(f"Narrative response is not JSON: {e}", self.settings.failed_text) from e

        report = data.get('report') if isinstance(data, dict) else None
        if not isinstance(report, str) or not report.strip():
            raise NarrativeFetchError("Narrative response has no report", self.settings.unavailable_text)
        return report


class StaticNarrativeSource:
    """Returns the same text for every location."""

    def __init__(self, text: str):
        self.text = text

    def fetch(self, city: str, state: str, address: str) -> str:
        return self.text


def fetch_narrative(
    source: NarrativeSource,
    city: str,
    state: str,
    address: str,
    verbose: bool = False,
    failed_text: Optional[str] = None
) -> str:
    """Fetch market commentary, substituting fallback text on any failure.

    Args:
        source: Narrative provider
        city: Property city
        state: Two-letter state code
        address: Full property address
        verbose: Print a warning when the fallback is used
        failed_text: Text used when the source fails without naming its own
            fallback (default: NarrativeSettings().failed_text)
    """
    try:
        return source.fetch(city, state, address)
    except NarrativeFetchError as e:
        if verbose:
            print(f"  Warning: {e}. Using fallback market text.")
        return e.fallback
    except Exception as e:
        if verbose:
            print(f"  Warning: narrative source failed ({e}). Using fallback market text.")
        return failed_text if failed_text is not None else NarrativeSettings().failed_text
