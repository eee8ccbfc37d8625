"""
League Lookup - Map team names to a sport and league.
"""

import re
from typing import Dict, Tuple


NBA_TEAMS: Tuple[str, ...] = (
    "Lakers", "Warriors", "Celtics", "Bulls", "Heat", "Knicks", "Nets", "Bucks",
    "Suns", "Mavericks", "Clippers", "Rockets", "Thunder", "Jazz", "Nuggets",
    "Trail Blazers", "Spurs", "Grizzlies", "Pelicans", "Kings", "Timberwolves",
    "Hornets", "Magic", "Pistons", "Cavaliers", "Pacers", "Hawks", "Wizards",
    "Raptors", "76ers",
)

NFL_TEAMS: Tuple[str, ...] = (
    "Chiefs", "Bills", "Patriots", "Dolphins", "Jets", "Steelers", "Ravens",
    "Bengals", "Browns", "Titans", "Colts", "Jaguars", "Texans", "Raiders",
    "Broncos", "Chargers", "Cowboys", "Eagles", "Giants", "Commanders",
    "Bears", "Lions", "Packers", "Vikings", "Buccaneers", "Falcons",
    "Panthers", "Saints", "Rams", "49ers", "Seahawks", "Cardinals",
)

MLB_TEAMS: Tuple[str, ...] = (
    "Yankees", "Red Sox", "Blue Jays", "Orioles", "Rays", "White Sox",
    "Guardians", "Tigers", "Twins", "Royals", "Astros", "Rangers", "Angels",
    "Athletics", "Mariners", "Braves", "Marlins", "Mets", "Phillies",
    "Nationals", "Cubs", "Reds", "Brewers", "Pirates", "Cardinals",
    "Dodgers", "Giants", "Padres", "Rockies", "Diamondbacks",
)

NBA_ABBREVIATIONS: Dict[str, str] = {
    "ATL": "Hawks", "BOS": "Celtics", "BKN": "Nets", "CHA": "Hornets",
    "CHI": "Bulls", "CLE": "Cavaliers", "DAL": "Mavericks", "DEN": "Nuggets",
    "DET": "Pistons", "GSW": "Warriors", "HOU": "Rockets", "IND": "Pacers",
    "LAC": "Clippers", "LAL": "Lakers", "MEM": "Grizzlies", "MIA": "Heat",
    "MIL": "Bucks", "MIN": "Timberwolves", "NOP": "Pelicans", "NYK": "Knicks",
    "OKC": "Thunder", "ORL": "Magic", "PHI": "76ers", "PHX": "Suns",
    "POR": "Trail Blazers", "SAC": "Kings", "SAS": "Spurs", "TOR": "Raptors",
    "UTA": "Jazz", "WAS": "Wizards",
}

# Checked in order; shared names (Giants, Cardinals) resolve to the first
LEAGUES: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    ("Basketball", "NBA", NBA_TEAMS),
    ("Football", "NFL", NFL_TEAMS),
    ("Baseball", "MLB", MLB_TEAMS),
)

UNKNOWN = "Unknown"

_ALL_TEAMS = tuple(dict.fromkeys(NBA_TEAMS + NFL_TEAMS + MLB_TEAMS))

# Longest first so "Hornets" is tried before "Nets"
_TEAM_PATTERNS = tuple(
    (team, re.compile(rf"\b{re.escape(team.lower())}\b"))
    for team in sorted(_ALL_TEAMS, key=len, reverse=True)
)


def resolve_team_name(text: str) -> str:
    """
    Resolve an OCR fragment to a canonical team name.

    Abbreviations ("LAL") expand to the nickname, known names are matched
    case-insensitively, and fragments that contain a nickname as whole
    words ("LA Lakers") resolve to it. Anything else is returned stripped
    but unchanged.
    """
    cleaned = text.strip()
    if not cleaned:
        return cleaned

    upper = cleaned.upper()
    if upper in NBA_ABBREVIATIONS:
        return NBA_ABBREVIATIONS[upper]

    lowered = cleaned.lower()
    for team in _ALL_TEAMS:
        if team.lower() == lowered:
            return team
    if len(cleaned) >= 3:
        for team, pattern in _TEAM_PATTERNS:
            if pattern.search(lowered):
                return team
    return cleaned


def determine_sport(team1: str, team2: str) -> str:
    """
    Determine the sport from either team.

    Returns:
        "Basketball", "Football", "Baseball" or "Unknown"
    """
    names = {resolve_team_name(t) for t in (team1, team2) if t}
    for sport, _league, teams in LEAGUES:
        if names.intersection(teams):
            return sport
    return UNKNOWN


def determine_league(sport: str) -> str:
    """
    Map a sport to its league.

    Returns:
        "NBA", "NFL", "MLB" or "Unknown"
    """
    for name, league, _teams in LEAGUES:
        if name == sport:
            return league
    return UNKNOWN
