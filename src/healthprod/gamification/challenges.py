"""Group challenges with friend leaderboards."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Friend:
    id: str
    name: str
    avatar: str


@dataclass(frozen=True)
class LeaderboardEntry:
    """One participant's progress in a challenge, in days."""

    friend_id: str
    name: str
    avatar: str
    progress: int


@dataclass
class Challenge:
    """A multi-day challenge shared with friends."""

    id: str
    title: str
    description: str
    duration: int
    leaderboard: list[LeaderboardEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.leaderboard = sorted(self.leaderboard, key=lambda e: e.progress, reverse=True)

    def progress_percent(self, entry: LeaderboardEntry) -> float:
        """Entry progress as a percentage of the challenge duration."""
        if self.duration <= 0:
            return 0.0
        return min(100.0, entry.progress / self.duration * 100)


def default_friends() -> list[Friend]:
    return [
        Friend(id="f1", name="Alex", avatar=" A "),
        Friend(id="f2", name="Ben", avatar=" B "),
        Friend(id="f3", name="Chloe", avatar=" C "),
        Friend(id="f4", name="You", avatar=" Y "),
    ]


def default_challenges() -> list[Challenge]:
    """The challenges shown on a fresh install."""
    return [
        Challenge(
            id="c1",
            title="7-Day Early Wake-up Challenge",
            description=(
                "Wake up before 7 AM for 7 days straight to build a healthy morning routine."
            ),
            duration=7,
            leaderboard=[
                LeaderboardEntry(friend_id="f4", name="You", avatar=" Y ", progress=5),
                LeaderboardEntry(friend_id="f1", name="Alex", avatar=" A ", progress=6),
                LeaderboardEntry(friend_id="f3", name="Chloe", avatar=" C ", progress=4),
                LeaderboardEntry(friend_id="f2", name="Ben", avatar=" B ", progress=3),
            ],
        )
    ]


__all__ = [
    "Challenge",
    "Friend",
    "LeaderboardEntry",
    "default_challenges",
    "default_friends",
]
