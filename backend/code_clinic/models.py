from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional

from code_clinic.content import DEFAULT_ROUND1_QUESTIONS, DEFAULT_ROUND2_QUESTIONS


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Render a UTC instant the way browsers do (``toISOString``)."""
    if value is None:
        return None
    value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


@dataclass
class Question:
    title: str
    content: str

    def to_dict(self):
        return {
            'title': self.title,
            'content': self.content,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(title=data['title'], content=data['content'])


@dataclass
class Member:
    user_id: str
    user_name: str

    def to_dict(self):
        return {
            'userId': self.user_id,
            'userName': self.user_name,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(user_id=data['userId'], user_name=data['userName'])


@dataclass
class Team:
    id: str
    name: str
    members: List[Member] = field(default_factory=list)
    current_question_index: int = 0
    finished_members: List[str] = field(default_factory=list)
    round: int = 1
    # "q<index>" -> elapsed milliseconds when the whole team finished
    finish_times: Dict[str, int] = field(default_factory=dict)

    def has_member(self, user_id: str) -> bool:
        return any(m.user_id == user_id for m in self.members)

    def reset_progress(self) -> None:
        self.current_question_index = 0
        self.finished_members = []
        self.finish_times = {}

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'members': [m.to_dict() for m in self.members],
            'currentQuestionIndex': self.current_question_index,
            'finishedMembers': list(self.finished_members),
            'round': self.round,
            'finishTimes': dict(self.finish_times),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            name=data['name'],
            members=[Member.from_dict(m) for m in data.get('members', [])],
            current_question_index=int(data.get('currentQuestionIndex', 0)),
            finished_members=list(data.get('finishedMembers', [])),
            round=int(data.get('round', 1)),
            finish_times=dict(data.get('finishTimes', {})),
        )


@dataclass
class EventState:
    is_initialized: bool = False
    round: int = 1
    timer_running: bool = False
    start_time: Optional[datetime] = None
    pause_time: Optional[datetime] = None
    round1_questions: List[Question] = field(default_factory=list)
    round2_questions: List[Question] = field(default_factory=list)
    teams: Dict[str, Team] = field(default_factory=dict)

    @classmethod
    def default(cls):
        """State a freshly started server hands to its first client."""
        return cls(
            round1_questions=[Question.from_dict(q) for q in DEFAULT_ROUND1_QUESTIONS],
            round2_questions=[Question.from_dict(q) for q in DEFAULT_ROUND2_QUESTIONS],
        )

    def questions_for_round(self) -> List[Question]:
        return self.round1_questions if self.round == 1 else self.round2_questions

    def to_dict(self):
        return {
            'isInitialized': self.is_initialized,
            'round': self.round,
            'timerRunning': self.timer_running,
            'startTime': format_timestamp(self.start_time),
            'pauseTime': format_timestamp(self.pause_time),
            'round1Questions': [q.to_dict() for q in self.round1_questions],
            'round2Questions': [q.to_dict() for q in self.round2_questions],
            'teams': {team_id: team.to_dict() for team_id, team in self.teams.items()},
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            is_initialized=bool(data.get('isInitialized', False)),
            round=int(data.get('round', 1)),
            timer_running=bool(data.get('timerRunning', False)),
            start_time=parse_timestamp(data.get('startTime')),
            pause_time=parse_timestamp(data.get('pauseTime')),
            round1_questions=[Question.from_dict(q) for q in data.get('round1Questions', [])],
            round2_questions=[Question.from_dict(q) for q in data.get('round2Questions', [])],
            teams={team_id: Team.from_dict(t) for team_id, t in (data.get('teams') or {}).items()},
        )
