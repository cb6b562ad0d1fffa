"""
Persistence slot for the best score, surviving across games.
"""

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class BestScoreStore:
    """
    Best score kept in memory and, optionally, in a JSON file.

    The file is read once at construction and written each time the best score improves.
    Storage failures are logged and never propagate: a missing or unreadable file counts as 0.
    """

    KEY = 'best'

    def __init__(self, path: str | Path | None = None):
        """
        Load the stored best score.

        Parameters
        ----------
        path : str | Path | None, optional
            JSON file backing the store. None keeps the best score in memory only.
        """
        self._path = Path(path) if path is not None else None
        self._best = self._load()

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def best(self) -> int:
        """Highest score recorded so far."""
        return self._best

    def update(self, score: int) -> bool:
        """
        Record a score if it beats the best one.

        Parameters
        ----------
        score : int
            Cumulative score of the current game.

        Returns
        -------
        bool
            True if the best score changed.
        """
        if score <= self._best:
            return False
        self._best = int(score)
        self._save()
        return True

    def reset(self) -> None:
        """Clear the best score and delete its file."""
        self._best = 0
        if self._path is None:
            return
        try:
            self._path.unlink(missing_ok=True)
        except OSError as error:
            logger.warning('Could not clear best score at %s: %s', self._path, error)

    def _load(self) -> int:
        if self._path is None or not self._path.exists():
            return 0
        try:
            data = json.loads(self._path.read_text(encoding='utf-8'))
            return max(int(data[self.KEY]), 0)
        except (OSError, ValueError, TypeError, KeyError, OverflowError) as error:
            logger.warning('Could not read best score from %s: %s', self._path, error)
            return 0

    def _save(self) -> None:
        if self._path is None:
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps({self.KEY: self._best}), encoding='utf-8')
        except OSError as error:
            logger.warning('Could not write best score to %s: %s', self._path, error)
