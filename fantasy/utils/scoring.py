from dataclasses import dataclass

from fantasy.models import EventType, Position


# Fixed point values, applied once per player per gameweek
GOAL_POINTS = 5
ASSIST_POINTS = 3
OWN_GOAL_POINTS = -2
YELLOW_CARD_POINTS = -1
RED_CARD_POINTS = -3

GOALKEEPER_BASE = 7  # keeper scores 7 - goals_conceded, no floor
OUTFIELD_DEFENSIVE_BONUS = 1
OUTFIELD_BONUS_MAX_CONCEDED = 3

CAPTAIN_MULTIPLIER = 2

# ScoreEvent.type -> PlayerTally counter
EVENT_COUNTERS = {
    EventType.GOAL: "goals",
    EventType.ASSIST: "assists",
    EventType.OWN_GOAL: "own_goals",
    EventType.YELLOW_CARD: "yellow_cards",
    EventType.RED_CARD: "red_cards",
}


@dataclass
class PlayerTally:
    """Raw gameweek counters for one player, summed over every settled fixture."""
    position: str
    goals: int = 0
    assists: int = 0
    own_goals: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    goals_conceded: int = 0

    def record(self, event_type) -> None:
        try:
            counter = EVENT_COUNTERS[EventType(event_type)]
        except ValueError:
            raise ValueError(f"Unknown score event type: {event_type!r}") from None
        setattr(self, counter, getattr(self, counter) + 1)

    def as_counters(self) -> dict:
        return {
            "goals": self.goals,
            "assists": self.assists,
            "own_goals": self.own_goals,
            "yellow_cards": self.yellow_cards,
            "red_cards": self.red_cards,
            "goals_conceded": self.goals_conceded,
        }


def card_points(yellow_cards: int, red_cards: int) -> int:
    # A red card replaces any yellows picked up in the same gameweek
    if red_cards > 0:
        return RED_CARD_POINTS
    return yellow_cards * YELLOW_CARD_POINTS


def defensive_points(position: str, goals_conceded: int) -> int:
    if position == Position.GOALKEEPER:
        return GOALKEEPER_BASE - goals_conceded
    if goals_conceded <= OUTFIELD_BONUS_MAX_CONCEDED:
        return OUTFIELD_DEFENSIVE_BONUS
    return 0


def calculate_player_points(tally: PlayerTally) -> int:
    """
    Fantasy points for a single player's gameweek tally.

    Goals, assists and own goals are linear; cards are capped by the
    red card rule; the conceded-goals term depends on position.
    """
    total = 0
    total += tally.goals * GOAL_POINTS
    total += tally.assists * ASSIST_POINTS
    total += tally.own_goals * OWN_GOAL_POINTS
    total += card_points(tally.yellow_cards, tally.red_cards)
    total += defensive_points(tally.position, tally.goals_conceded)
    return total


def apply_captain(base_total: int, captain_points: int) -> int:
    """Team total with the captain's own points counted CAPTAIN_MULTIPLIER times."""
    return base_total + captain_points * (CAPTAIN_MULTIPLIER - 1)
