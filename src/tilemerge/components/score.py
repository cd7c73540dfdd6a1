from dataclasses import dataclass


@dataclass(slots=True)
class ScoreBoard:
    """Displayed score plus the best score seen since the window opened."""
    score: int = 0
    best_score: int = 0

    def sync(self, score: int) -> int:
        """Adopt ``score`` and return the change; raises best score when beaten."""
        delta = score - self.score
        self.score = score
        if self.score > self.best_score:
            self.best_score = self.score
        return delta
