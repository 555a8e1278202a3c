from src.team_builder.matchup_controller import MatchupController, MatchupReport
from src.team_builder.search import filter_by_name
from src.team_builder.team_roster import TeamRoster

__all__ = [
    "MatchupController",
    "MatchupReport",
    "TeamRoster",
    "filter_by_name",
]
