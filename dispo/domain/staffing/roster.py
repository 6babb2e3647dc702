"""
Domain service: event roster rendering.

Joins an event's postulations with the croupier directory and renders
the semicolon-separated sheet used by the floor managers in Excel (FR).
Pure business logic, no IO.

Layout:
    "<event name>"
    NOM;PRENOM;MAIL;DEBUT;FIN;PRIORITE
    one row per postulation

Every line ends with CRLF.
"""

import re
from typing import Iterable, Optional

from dispo.domain.staffing.entities import Croupier, Event, Postulation, RosterExport

LINE_END = "\r\n"
DELIMITER = ";"
HEADER = ("NOM", "PRENOM", "MAIL", "DEBUT", "FIN", "PRIORITE")

_UNSAFE_CHARS = re.compile(r"[\r\n;]")
_LINE_BREAKS = re.compile(r"[\r\n]")


def sanitize_field(value: object) -> str:
    """Render a cell value, replacing CR, LF and ";" with a space.

    None and other falsy values render as an empty string.
    """
    if not value:
        return ""
    return _UNSAFE_CHARS.sub(" ", str(value))


def find_croupier(
    croupiers: Iterable[Croupier], email: Optional[str]
) -> Optional[Croupier]:
    """Return the first croupier whose email matches case-insensitively."""
    target = (email or "").lower()
    for croupier in croupiers:
        if croupier.email and croupier.email.lower() == target:
            return croupier
    return None


def roster_filename(event: Event) -> str:
    """Suggested download name: ``<event name>-dispo.csv``."""
    return f"{event.nom or ''}-dispo.csv"


def render_roster(
    event: Event,
    postulations: Iterable[Postulation],
    croupiers: list[Croupier],
) -> RosterExport:
    """Render the roster of an event.

    Args:
        event: The event the roster is for.
        postulations: Postulations already filtered to this event.
        croupiers: Full croupier directory used to resolve names.

    Returns:
        The rendered document with its suggested filename.
    """
    title = _LINE_BREAKS.sub(" ", event.nom or "")
    lines = [f'"{title}"', DELIMITER.join(HEADER)]

    for postulation in postulations:
        croupier = find_croupier(croupiers, postulation.email)
        nom = croupier.nom if croupier else ""
        prenom = croupier.prenom if croupier else ""
        priorite = croupier.priorite if croupier else ""
        row = (nom, prenom, postulation.email, postulation.debut, postulation.fin, priorite)
        lines.append(DELIMITER.join(sanitize_field(cell) for cell in row))

    content = "".join(line + LINE_END for line in lines)
    return RosterExport(filename=roster_filename(event), content=content)
