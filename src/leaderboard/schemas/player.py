from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Player(BaseModel):
    """Named, scored leaderboard entry.

    Instances are frozen; score updates produce a replacement value.
    """

    name: str = Field(min_length=1)
    score: StrictInt

    model_config = ConfigDict(extra="forbid", frozen=True)

    def with_score(self, score: int) -> "Player":
        return Player(name=self.name, score=score)

    def __str__(self) -> str:
        return f"{self.name}({self.score})"
