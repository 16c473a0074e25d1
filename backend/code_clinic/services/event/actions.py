"""Inbound actions and their decoding from the wire.

Clients send ``{"type": <action>, "payload": {...}}``. Each recognized
type decodes to its own frozen dataclass; anything else becomes an
``UnknownAction`` so the dispatcher can ignore it without treating it
as an error.
"""

import json
from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

from code_clinic.models import Question

TIMER_START = 'start'
TIMER_PAUSE = 'pause'
TIMER_RESET = 'reset'
TIMER_ACTIONS = (TIMER_START, TIMER_PAUSE, TIMER_RESET)


class ActionDecodeError(ValueError):
    """Raised when an inbound message cannot be turned into an action."""


@dataclass(frozen=True)
class InitializeEvent:
    pass


@dataclass(frozen=True)
class JoinOrCreateTeam:
    team_id: str
    team_name: str
    user_name: str
    user_id: str


@dataclass(frozen=True)
class FinishQuestion:
    team_id: str
    user_id: str


@dataclass(frozen=True)
class UpdateQuestions:
    round1_questions: Tuple[Question, ...] = ()
    round2_questions: Tuple[Question, ...] = ()


@dataclass(frozen=True)
class TimerControl:
    action: str


@dataclass(frozen=True)
class UnknownAction:
    action_type: str


Action = Union[InitializeEvent, JoinOrCreateTeam, FinishQuestion, UpdateQuestions, TimerControl, UnknownAction]


def _require_mapping(payload: Any, action_type: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        raise ActionDecodeError(f'{action_type}: payload must be an object')
    return payload


def _require_id(payload: Mapping[str, Any], key: str, action_type: str) -> str:
    value = payload.get(key)
    # bool is an int subclass but never a valid id
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ActionDecodeError(f'{action_type}: {key} is required')
    value = str(value)
    if not value:
        raise ActionDecodeError(f'{action_type}: {key} is required')
    return value


def _require_text(payload: Mapping[str, Any], key: str, action_type: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ActionDecodeError(f'{action_type}: {key} is required')
    return value


def _questions(payload: Mapping[str, Any], key: str) -> Tuple[Question, ...]:
    raw = payload.get(key)
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise ActionDecodeError(f'updateQuestions: {key} must be a list')
    questions = []
    for idx, item in enumerate(raw):
        if not isinstance(item, Mapping) or not isinstance(item.get('title'), str) \
                or not isinstance(item.get('content'), str):
            raise ActionDecodeError(f'updateQuestions: {key}[{idx}] needs a title and content')
        questions.append(Question(title=item['title'], content=item['content']))
    return tuple(questions)


def parse_action(action_type: Any, payload: Any = None) -> Action:
    """Validate ``payload`` for ``action_type`` and build the typed action."""
    if not isinstance(action_type, str):
        raise ActionDecodeError('message type must be a string')

    if action_type == 'initializeEvent':
        return InitializeEvent()

    if action_type == 'joinOrCreateTeam':
        data = _require_mapping(payload, action_type)
        return JoinOrCreateTeam(
            team_id=_require_id(data, 'teamId', action_type),
            team_name=_require_text(data, 'teamName', action_type),
            user_name=_require_text(data, 'userName', action_type),
            user_id=_require_id(data, 'userId', action_type),
        )

    if action_type == 'finishQuestion':
        data = _require_mapping(payload, action_type)
        return FinishQuestion(
            team_id=_require_id(data, 'teamId', action_type),
            user_id=_require_id(data, 'userId', action_type),
        )

    if action_type == 'updateQuestions':
        data = _require_mapping(payload, action_type)
        return UpdateQuestions(
            round1_questions=_questions(data, 'round1Questions'),
            round2_questions=_questions(data, 'round2Questions'),
        )

    if action_type == 'timerControl':
        data = _require_mapping(payload, action_type)
        action = data.get('action')
        if action not in TIMER_ACTIONS:
            raise ActionDecodeError(f'timerControl: unsupported action {action!r}')
        return TimerControl(action=action)

    return UnknownAction(action_type=action_type)


def decode_message(raw: Union[str, bytes, Mapping[str, Any]]) -> Action:
    """Decode one inbound wire message (JSON text or an already parsed object)."""
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise ActionDecodeError(f'message is not valid UTF-8: {exc}') from exc
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ActionDecodeError(f'message is not valid JSON: {exc}') from exc
    if not isinstance(raw, Mapping):
        raise ActionDecodeError('message must be a JSON object')
    return parse_action(raw.get('type'), raw.get('payload'))
