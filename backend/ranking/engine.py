"""
Ranking engine for people and their tasks.
Calculates urgency scores and orders people under a sort strategy.
"""

from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Union
import logging
import math

from config import Config, ScoringWeights
from .extractor import TaskExtractor, whole_days_between
from .models import Person, Task, TaskPriority
from .signals import PersonEvaluation
from .strategies import SORT_KEYS, Candidate, SortStrategy, get_strategy

logger = logging.getLogger(__name__)


class RankingEngine:
    """Calculates person scores and produces ranked person lists."""

    def __init__(self, config: Optional[Config] = None, extractor: Optional[TaskExtractor] = None):
        """
        Initialize ranking engine.

        Args:
            config: Configuration object with scoring weights (defaults apply if None)
            extractor: TaskExtractor instance for selecting open tasks
        """
        self.config = config or Config()
        self.extractor = extractor or TaskExtractor()

    @property
    def weights(self) -> ScoringWeights:
        return self.config.scoring_weights

    def compute_score(self, person: Person, tasks: Iterable[Task], now: datetime) -> float:
        """
        Calculate a person's urgency score from their open tasks.

        Args:
            person: Person to score
            tasks: Full task collection; tasks not assigned to the person are ignored
            now: Reference time for overdue and due-soon checks

        Returns:
            Non-negative score, 0 when the person has no open tasks
        """
        return self._score_open_tasks(self.extractor.open_tasks(person, tasks), now)

    def _score_open_tasks(self, open_tasks: Sequence[Task], now: datetime) -> float:
        if not open_tasks:
            return 0.0

        weights = self.weights
        score = 0.0
        overdue, not_overdue = self.extractor.split_overdue(open_tasks, now)

        # Any overdue task dominates the ranking
        if overdue:
            score += weights.overdue_base
            for task in overdue:
                days_overdue = abs(whole_days_between(task.due_date, now))
                score += weights.overdue_per_day * min(days_overdue, weights.overdue_day_cap)

        # High priority counts regardless of overdue status
        high_priority = [t for t in open_tasks if t.priority == TaskPriority.HIGH]
        score += weights.high_priority_bonus * len(high_priority)

        for task in not_overdue:
            priority_weight = weights.priority_weights[task.priority.value]
            days_until_due = whole_days_between(task.due_date, now)
            score += priority_weight * self._date_weight(days_until_due)

        # Diminishing returns on task count
        return score * (1 + math.log2(len(open_tasks) + 1) * weights.task_count_factor)

    def _date_weight(self, days_until_due: int) -> float:
        """
        Weight for a task by how soon it is due.

        Args:
            days_until_due: Whole days from now until the due date

        Returns:
            Weight of the first bracket containing the value, else the default
        """
        for max_days, weight in self.weights.date_weights:
            if days_until_due <= max_days:
                return weight
        return self.weights.date_weight_default

    def _candidates(
        self,
        persons: Sequence[Person],
        tasks: Sequence[Task],
        strategy: SortStrategy,
        now: datetime
    ) -> List[Candidate]:
        candidates = []
        for person in persons:
            open_tasks = tuple(self.extractor.open_tasks(person, tasks))
            score = None
            if strategy == SortStrategy.SMART:
                score = self._score_open_tasks(open_tasks, now)
            candidates.append(Candidate(person=person, open_tasks=open_tasks, score=score))
        return candidates

    def _sorted_candidates(
        self,
        persons: Iterable[Person],
        tasks: Iterable[Task],
        strategy: Union[SortStrategy, str, None],
        now: datetime
    ) -> List[Candidate]:
        # Fail on an unknown name before doing any work
        resolved = get_strategy(strategy if strategy is not None else self.config.default_strategy)
        persons = list(persons)
        tasks = list(tasks)

        candidates = self._candidates(persons, tasks, resolved, now)
        sort_key = SORT_KEYS[resolved]
        # list.sort is stable, so ties keep input order
        ordered = sorted(candidates, key=lambda c: sort_key(c, now))

        logger.debug(
            f"Ranked {len(persons)} persons over {len(tasks)} tasks "
            f"with strategy={resolved.value}"
        )
        return ordered

    def rank_persons(
        self,
        persons: Iterable[Person],
        tasks: Iterable[Task],
        strategy: Union[SortStrategy, str, None],
        now: datetime
    ) -> List[Person]:
        """
        Order people under a sort strategy.

        Args:
            persons: People to rank; never modified
            tasks: Full task collection
            strategy: SortStrategy or its name; None uses config.default_strategy
            now: Reference time for scoring

        Returns:
            New list of the same people in ranked order

        Raises:
            UnsupportedStrategyError: If strategy is not a registered name
        """
        return [c.person for c in self._sorted_candidates(persons, tasks, strategy, now)]

    def evaluate(
        self,
        persons: Iterable[Person],
        tasks: Iterable[Task],
        strategy: Union[SortStrategy, str, None],
        now: datetime
    ) -> List[PersonEvaluation]:
        """
        Rank people and attach each one's score and task stats.

        Same ordering as rank_persons(); the score is computed for every
        strategy, not only smart.
        """
        tasks = list(tasks)
        evaluations = []
        for candidate in self._sorted_candidates(persons, tasks, strategy, now):
            score = candidate.score
            if score is None:
                score = self._score_open_tasks(candidate.open_tasks, now)
            stats = self.extractor.person_stats(candidate.person, candidate.open_tasks, now)
            evaluations.append(PersonEvaluation(person=candidate.person, score=score, stats=stats))
        return evaluations


_default_engine = RankingEngine()


def compute_score(person: Person, tasks: Iterable[Task], now: datetime) -> float:
    """Score a person with the default weights."""
    return _default_engine.compute_score(person, tasks, now)


def rank_persons(
    persons: Iterable[Person],
    tasks: Iterable[Task],
    strategy: Union[SortStrategy, str],
    now: datetime
) -> List[Person]:
    """Rank people with the default weights. See RankingEngine.rank_persons."""
    return _default_engine.rank_persons(persons, tasks, strategy, now)
